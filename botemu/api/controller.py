"""与传输层无关的控制器。

HTTP 或 socket 层拿到原始请求体后调用这里的方法：
输入用 pydantic 模型校验，失败抛 InvalidRequestError；
会话不存在抛 SessionNotFoundError；成功时返回可直接序列化为 JSON 的 dict。
"""

import time
from typing import Any

from loguru import logger
from pydantic import BaseModel, ValidationError

from botemu.api.errors import InvalidRequestError, ProcessingError, SessionNotFoundError
from botemu.bus.hub import RealtimeHub
from botemu.commands.builtins import default_registry
from botemu.emulator.delivery import DeliveryNotifier
from botemu.emulator.engine import BotEmulator
from botemu.emulator.types import BotConfigPayload, Message
from botemu.session.manager import BotConfig, Session, SessionManager
from botemu.utils.helpers import iso_now

DEFAULT_HISTORY_LIMIT = 50
MAX_HISTORY_LIMIT = 100


def _validate(model: type[BaseModel], data: Any, error: str) -> Any:
    """函数说明：_validate。"""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        details = [f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}" for err in e.errors()]
        raise InvalidRequestError(error, details) from e


class BotController:
    """类说明：BotController。"""

    def __init__(
        self,
        sessions: SessionManager,
        emulator: BotEmulator,
        notifier: DeliveryNotifier,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        history_max: int = MAX_HISTORY_LIMIT,
        hub: RealtimeHub | None = None,
    ):
        self.sessions = sessions
        self.emulator = emulator
        self.notifier = notifier
        self.history_limit = history_limit
        self.history_max = history_max
        self.hub = hub
        self._started = time.monotonic()

    def _require(self, session_id: str) -> Session:
        if not session_id:
            raise InvalidRequestError("Session ID is required")
        session = self.sessions.get_session(session_id)
        if not session:
            raise SessionNotFoundError()
        return session

    @staticmethod
    def _bot_config_view(config: BotConfig) -> dict[str, Any]:
        return {
            "username": config.username,
            "webhook_url": config.webhook_url,
            "commands": config.commands.definitions(),
        }

    def create_bot(self, payload: Any) -> dict[str, Any]:
        """校验机器人配置并创建会话，附带默认命令集。"""
        value: BotConfigPayload = _validate(BotConfigPayload, payload, "Invalid bot configuration")

        bot_config = BotConfig(
            token=value.token,
            username=value.username,
            webhook_url=value.webhook_url,
            allowed_updates=value.allowed_updates,
            commands=default_registry(),
        )
        session_id = self.sessions.create_session(bot_config)

        return {"sessionId": session_id, "botConfig": self._bot_config_view(bot_config)}

    def get_bot_info(self, session_id: str) -> dict[str, Any]:
        """函数说明：get_bot_info。"""
        session = self._require(session_id)
        return {
            "sessionId": session.id,
            "botConfig": self._bot_config_view(session.bot_config),
            "stats": {
                **session.stats(),
                "createdAt": session.created_at.isoformat(),
                "lastActivity": session.last_activity.isoformat(),
            },
        }

    def list_bots(self) -> dict[str, Any]:
        """函数说明：list_bots。"""
        return {
            "bots": [
                {
                    "sessionId": session.id,
                    "username": session.bot_config.username,
                    "createdAt": session.created_at.isoformat(),
                    "lastActivity": session.last_activity.isoformat(),
                    "stats": session.stats(),
                }
                for session in self.sessions.list_sessions()
            ]
        }

    def delete_bot(self, session_id: str) -> dict[str, Any]:
        """函数说明：delete_bot。"""
        if not session_id:
            raise InvalidRequestError("Session ID is required")
        if not self.sessions.delete_session(session_id):
            raise SessionNotFoundError()
        if self.hub is not None:
            self.hub.close_session(session_id)
        return {"message": "Bot session deleted successfully"}

    async def send_message(self, session_id: str, payload: Any) -> dict[str, Any]:
        """用户向机器人发消息：登记用户与聊天，交给引擎处理，再投递更新。"""
        if not session_id:
            raise InvalidRequestError("Session ID is required")
        message: Message = _validate(Message, payload, "Invalid message format")
        self._require(session_id)

        if message.from_:
            self.sessions.add_user(session_id, message.from_)
        self.sessions.add_chat(session_id, message.chat)

        reply = await self.emulator.process_message(session_id, message)
        if reply is None:
            raise ProcessingError("Failed to process message")

        await self.notifier.deliver(session_id, reply)
        return {"ok": True, "result": reply.to_dict()}

    def bot_send_message(self, session_id: str, chat_id: int, text: str) -> dict[str, Any]:
        """机器人侧的 sendMessage，按 Bot API 风格返回 ok/error_code。"""
        return self.emulator.send_message(session_id, chat_id, text).to_dict()

    def get_chat_history(self, session_id: str, limit: int | None = None) -> dict[str, Any]:
        """返回最近的消息，limit 默认 50，裁剪到 1..100。"""
        session = self._require(session_id)
        limit = min(max(limit or self.history_limit, 1), self.history_max)

        messages = self.sessions.get_messages(session_id, limit)
        return {
            "messages": [m.to_dict() for m in messages],
            "total": len(session.messages),
        }

    def health(self) -> dict[str, Any]:
        """函数说明：health。"""
        uptime = time.monotonic() - self._started
        logger.debug(f"Health check: {len(self.sessions)} active session(s)")
        return {"status": "ok", "timestamp": iso_now(), "uptime": round(uptime, 3)}
