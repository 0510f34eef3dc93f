"""Tests for payload validation and serialization."""

import pytest
from pydantic import ValidationError

from botemu.emulator.types import ApiResponse, BotConfigPayload, Message, Update, User
from tests.conftest import TOKEN, make_message


class TestMessageValidation:
    """Tests for Message payloads."""

    def test_valid_message(self):
        message = Message.model_validate({
            "message_id": 1,
            "date": 1640995200,
            "chat": {"id": 12345, "type": "private", "first_name": "John"},
            "text": "Hello",
        })

        assert message.text == "Hello"
        assert message.chat.type == "private"

    def test_empty_payload_rejected(self):
        with pytest.raises(ValidationError):
            Message.model_validate({})

    def test_text_too_long_rejected(self):
        with pytest.raises(ValidationError):
            Message.model_validate({
                "message_id": 1,
                "date": 1640995200,
                "chat": {"id": 1, "type": "private"},
                "text": "a" * 4097,
            })

    def test_invalid_chat_type_rejected(self):
        with pytest.raises(ValidationError):
            Message.model_validate({
                "message_id": 1,
                "date": 1640995200,
                "chat": {"id": 1, "type": "forum"},
            })

    def test_from_alias(self):
        message = Message.model_validate({
            "message_id": 1,
            "date": 1640995200,
            "chat": {"id": 1, "type": "group", "title": "Team"},
            "from": {"id": 7, "is_bot": False, "first_name": "Ann"},
        })

        assert message.from_.id == 7
        assert message.to_dict()["from"]["first_name"] == "Ann"

    def test_reply_to_message_nested(self):
        message = Message.model_validate({
            "message_id": 2,
            "date": 1640995200,
            "chat": {"id": 1, "type": "private"},
            "reply_to_message": {
                "message_id": 1,
                "date": 1640995100,
                "chat": {"id": 1, "type": "private"},
                "text": "original",
            },
        })

        assert message.reply_to_message.text == "original"

    def test_to_dict_omits_empty_fields(self):
        data = make_message("hi", with_user=False).to_dict()

        assert "from" not in data
        assert "entities" not in data
        assert data["text"] == "hi"


class TestUserValidation:
    """Tests for User payloads."""

    def test_username_too_short(self):
        with pytest.raises(ValidationError):
            User(id=1, is_bot=False, first_name="A", username="abc")

    def test_non_positive_id(self):
        with pytest.raises(ValidationError):
            User(id=0, is_bot=False, first_name="A")


class TestBotConfigPayload:
    """Tests for bot configuration validation."""

    def test_valid_config(self):
        value = BotConfigPayload.model_validate({"token": TOKEN, "username": "test_bot"})

        assert value.username == "test_bot"
        assert value.webhook_url is None

    def test_invalid_token(self):
        with pytest.raises(ValidationError):
            BotConfigPayload.model_validate({"token": "invalid-token", "username": "test_bot"})

    def test_token_secret_too_short(self):
        with pytest.raises(ValidationError):
            BotConfigPayload.model_validate({"token": "123:abc", "username": "test_bot"})

    def test_invalid_username(self):
        with pytest.raises(ValidationError):
            BotConfigPayload.model_validate({"token": TOKEN, "username": "bad name!"})

    def test_webhook_must_be_uri(self):
        with pytest.raises(ValidationError):
            BotConfigPayload.model_validate({"token": TOKEN, "username": "test_bot", "webhook_url": "nope"})

    def test_webhook_uri_accepted(self):
        value = BotConfigPayload.model_validate({
            "token": TOKEN,
            "username": "test_bot",
            "webhook_url": "https://example.com/hook",
            "allowed_updates": ["message"],
        })

        assert value.webhook_url == "https://example.com/hook"
        assert value.allowed_updates == ["message"]


class TestEnvelopes:
    """Tests for Update and ApiResponse."""

    def test_update_to_dict(self):
        update = Update(update_id=5, message=make_message("hi"))
        data = update.to_dict()

        assert data["update_id"] == 5
        assert data["message"]["text"] == "hi"
        assert "edited_message" not in data

    def test_api_error_response(self):
        response = ApiResponse[Message](ok=False, error_code=404, description="Session not found")

        assert response.to_dict() == {"ok": False, "error_code": 404, "description": "Session not found"}
