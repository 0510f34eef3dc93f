"""内置命令：start、help、ping、echo、time。"""

from botemu.commands.base import Command
from botemu.commands.registry import CommandRegistry
from botemu.emulator.types import Message
from botemu.utils.helpers import iso_now

WELCOME_TEXT = "Hello! Welcome to the Telegram Bot Emulator."
PONG_TEXT = "Pong! 🏓"
ECHO_PROMPT = "Please provide text to echo."


class StartCommand(Command):
    """类说明：StartCommand。"""

    @property
    def name(self) -> str:
        return "start"

    @property
    def description(self) -> str:
        return "Start the bot"

    async def execute(self, message: Message) -> str:
        return WELCOME_TEXT


class HelpCommand(Command):
    """列出注册表里的全部命令。"""

    def __init__(self, registry: CommandRegistry):
        self._registry = registry

    @property
    def name(self) -> str:
        return "help"

    @property
    def description(self) -> str:
        return "Show available commands"

    async def execute(self, message: Message) -> str:
        lines = ["Available commands:"]
        lines.extend(f"{cmd.usage} - {cmd.description}" for cmd in self._registry)
        return "\n".join(lines)


class PingCommand(Command):
    """类说明：PingCommand。"""

    @property
    def name(self) -> str:
        return "ping"

    @property
    def description(self) -> str:
        return "Check bot status"

    async def execute(self, message: Message) -> str:
        return PONG_TEXT


class EchoCommand(Command):
    """类说明：EchoCommand。"""

    @property
    def name(self) -> str:
        return "echo"

    @property
    def description(self) -> str:
        return "Echo back your message"

    @property
    def usage(self) -> str:
        return "/echo <text>"

    async def execute(self, message: Message) -> str:
        text = self.arguments(message)
        return f"You said: {text}" if text else ECHO_PROMPT


class TimeCommand(Command):
    """类说明：TimeCommand。"""

    @property
    def name(self) -> str:
        return "time"

    @property
    def description(self) -> str:
        return "Get current time"

    async def execute(self, message: Message) -> str:
        return f"Current time: {iso_now()}"


def default_registry() -> CommandRegistry:
    """每个会话一份新的注册表，互不影响。"""
    registry = CommandRegistry()
    for command in (
        StartCommand(),
        HelpCommand(registry),
        PingCommand(),
        EchoCommand(),
        TimeCommand(),
    ):
        registry.register(command)
    return registry
