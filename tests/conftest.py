import pytest

from botemu.commands.builtins import default_registry
from botemu.emulator.engine import BotEmulator
from botemu.emulator.types import Chat, Message, User
from botemu.session.manager import BotConfig, SessionManager

TOKEN = "123456789:ABCDEFabcdef1234567890ABCDEF123456789"


def make_message(text: str | None = "hello", message_id: int = 1, chat_id: int = 12345, with_user: bool = True) -> Message:
    """Build an inbound user message."""
    return Message(
        message_id=message_id,
        from_=User(id=42, is_bot=False, first_name="John", username="john_doe") if with_user else None,
        date=1640995200,
        chat=Chat(id=chat_id, type="private", first_name="John"),
        text=text,
    )


@pytest.fixture
def bot_config():
    return BotConfig(token=TOKEN, username="test_bot", commands=default_registry())


@pytest.fixture
def webhook_bot_config():
    return BotConfig(
        token=TOKEN,
        username="hook_bot",
        webhook_url="https://example.com/hook",
        commands=default_registry(),
    )


@pytest.fixture
def sessions():
    return SessionManager()


@pytest.fixture
def emulator(sessions):
    return BotEmulator(sessions)


@pytest.fixture
def session_id(sessions, bot_config):
    return sessions.create_session(bot_config)
