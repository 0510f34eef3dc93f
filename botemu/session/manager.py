"""模块说明：manager。"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable

from loguru import logger

from botemu.commands.registry import CommandRegistry
from botemu.emulator.types import Chat, Message, User

DEFAULT_MAX_MESSAGES = 1000
DEFAULT_RETENTION = timedelta(hours=24)


@dataclass
class BotConfig:
    """一个模拟机器人的身份与能力。"""
    token: str
    username: str
    webhook_url: str | None = None
    allowed_updates: list[str] | None = None
    commands: CommandRegistry = field(default_factory=CommandRegistry)


@dataclass
class Session:
    """类说明：Session。"""

    id: str
    bot_config: BotConfig
    users: dict[int, User] = field(default_factory=dict)
    chats: dict[int, Chat] = field(default_factory=dict)
    messages: list[Message] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    last_activity: datetime = field(default_factory=datetime.now)

    def stats(self) -> dict[str, int]:
        """函数说明：stats。"""
        return {
            "messagesCount": len(self.messages),
            "usersCount": len(self.users),
            "chatsCount": len(self.chats),
        }


class SessionManager:
    """会话存储：session_id → Session 的唯一持有者。

    所有方法都是同步的，在事件循环的一个回合内执行完毕，因此不需要加锁。
    每次通过 get_session 查找都视为一次活动，会刷新 last_activity。
    """

    def __init__(
        self,
        max_messages: int = DEFAULT_MAX_MESSAGES,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.max_messages = max_messages
        self._clock = clock
        self._sessions: dict[str, Session] = {}

    def create_session(self, bot_config: BotConfig) -> str:
        """函数说明：create_session。"""
        session_id = str(uuid.uuid4())
        now = self._clock()
        self._sessions[session_id] = Session(
            id=session_id,
            bot_config=bot_config,
            created_at=now,
            last_activity=now,
        )
        logger.info(f"Created new session: {session_id} for bot: {bot_config.username}")
        return session_id

    def get_session(self, session_id: str) -> Session | None:
        """查找会话并刷新活动时间；不存在时返回 None。"""
        session = self._sessions.get(session_id)
        if session:
            session.last_activity = self._clock()
        return session

    def delete_session(self, session_id: str) -> bool:
        """函数说明：delete_session。"""
        deleted = self._sessions.pop(session_id, None) is not None
        if deleted:
            logger.info(f"Deleted session: {session_id}")
        return deleted

    def list_sessions(self) -> list[Session]:
        """按创建顺序返回当前全部会话的快照。"""
        return list(self._sessions.values())

    def add_user(self, session_id: str, user: User) -> bool:
        """函数说明：add_user。"""
        session = self.get_session(session_id)
        if not session:
            return False

        session.users[user.id] = user
        return True

    def add_chat(self, session_id: str, chat: Chat) -> bool:
        """函数说明：add_chat。"""
        session = self.get_session(session_id)
        if not session:
            return False

        session.chats[chat.id] = chat
        return True

    def add_message(self, session_id: str, message: Message) -> bool:
        """追加消息，超过上限时从最旧的一端丢弃。"""
        session = self.get_session(session_id)
        if not session:
            return False

        session.messages.append(message)
        overflow = len(session.messages) - self.max_messages
        if overflow > 0:
            del session.messages[:overflow]
        return True

    def get_messages(self, session_id: str, limit: int = 50) -> list[Message]:
        """返回最近 limit 条消息；上限裁剪由调用方负责。"""
        session = self.get_session(session_id)
        if not session or limit <= 0:
            return []

        return session.messages[-limit:]

    def cleanup_old_sessions(
        self,
        now: datetime | None = None,
        retention: timedelta = DEFAULT_RETENTION,
    ) -> list[str]:
        """删除 last_activity 早于 now - retention 的会话，返回被删除的 id。"""
        cutoff = (now or self._clock()) - retention

        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if session.last_activity < cutoff
        ]
        for session_id in expired:
            self.delete_session(session_id)

        if expired:
            logger.info(f"Expired {len(expired)} inactive session(s)")
        return expired

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions
