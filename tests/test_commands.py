"""Tests for the command registry and built-in commands."""

import re

import pytest

from botemu.commands.base import Command
from botemu.commands.builtins import ECHO_PROMPT, PONG_TEXT, WELCOME_TEXT, default_registry
from botemu.commands.registry import CommandRegistry
from botemu.emulator.types import Message
from tests.conftest import make_message


class ShoutCommand(Command):
    @property
    def name(self) -> str:
        return "shout"

    @property
    def description(self) -> str:
        return "Shout back"

    async def execute(self, message: Message) -> str:
        return self.arguments(message).upper()


class TestCommandRegistry:
    """Tests for CommandRegistry."""

    def test_register_and_get(self):
        registry = CommandRegistry()
        registry.register(ShoutCommand())

        assert registry.has("shout")
        assert "shout" in registry
        assert isinstance(registry.get("shout"), ShoutCommand)
        assert len(registry) == 1

    def test_lookup_is_case_sensitive(self):
        registry = CommandRegistry([ShoutCommand()])

        assert registry.get("Shout") is None
        assert registry.get("sho") is None

    def test_unregister(self):
        registry = CommandRegistry([ShoutCommand()])
        registry.unregister("shout")
        registry.unregister("missing")

        assert len(registry) == 0

    def test_definitions_keep_order(self):
        registry = default_registry()

        assert registry.names == ["start", "help", "ping", "echo", "time"]
        assert registry.definitions()[0] == {"command": "start", "description": "Start the bot"}

    def test_registries_are_independent(self):
        first = default_registry()
        second = default_registry()
        first.register(ShoutCommand())

        assert "shout" not in second


class TestBuiltinCommands:
    """Tests for the built-in command handlers."""

    @pytest.fixture
    def registry(self):
        return default_registry()

    @pytest.mark.asyncio
    async def test_start(self, registry):
        assert await registry.get("start").execute(make_message("/start")) == WELCOME_TEXT

    @pytest.mark.asyncio
    async def test_ping(self, registry):
        assert await registry.get("ping").execute(make_message("/ping")) == PONG_TEXT

    @pytest.mark.asyncio
    async def test_help_lists_every_command(self, registry):
        text = await registry.get("help").execute(make_message("/help"))

        assert text.startswith("Available commands:")
        for name in registry.names:
            assert f"/{name}" in text
        assert "/echo <text> - Echo back your message" in text

    @pytest.mark.asyncio
    async def test_help_includes_registered_commands(self, registry):
        registry.register(ShoutCommand())
        text = await registry.get("help").execute(make_message("/help"))

        assert "/shout - Shout back" in text

    @pytest.mark.asyncio
    async def test_echo_with_text(self, registry):
        reply = await registry.get("echo").execute(make_message("/echo   hello there  "))

        assert reply == "You said: hello there"

    @pytest.mark.asyncio
    async def test_echo_without_text(self, registry):
        assert await registry.get("echo").execute(make_message("/echo")) == ECHO_PROMPT
        assert await registry.get("echo").execute(make_message("/echo    ")) == ECHO_PROMPT

    @pytest.mark.asyncio
    async def test_time_is_iso8601(self, registry):
        reply = await registry.get("time").execute(make_message("/time"))

        assert re.fullmatch(r"Current time: \d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", reply)
