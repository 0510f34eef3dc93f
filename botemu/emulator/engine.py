"""会话引擎。

BotEmulator 接收一条入站消息，判断是命令还是普通文本，生成机器人回复，
并把双方消息都写入会话日志。它本身不持有任何会话状态，
所有读写都通过 SessionManager 按 id 完成。
"""

import itertools
import re

from loguru import logger

from botemu.commands.base import CommandResult
from botemu.emulator.types import ApiResponse, Chat, Message, User
from botemu.session.manager import Session, SessionManager
from botemu.utils.helpers import MAX_TEXT_LENGTH, sanitize_text, truncate_string, unix_now

COMMAND_PREFIX = "/"
BOT_USER_ID = 123456789
ERROR_PREFIX = "❌ Error: "
COMMAND_FAILED_TEXT = "An error occurred processing your command."

_COMMAND_NAME_RE = re.compile(r"\S*")


class BotEmulator:
    """消息处理引擎，同时持有进程级的消息 id 与更新 id 计数器。"""

    def __init__(self, sessions: SessionManager, bot_user_id: int = BOT_USER_ID):
        self.sessions = sessions
        self.bot_user_id = bot_user_id
        self._message_ids = itertools.count(1)
        self._update_ids = itertools.count(1)

    def generate_message_id(self) -> int:
        """函数说明：generate_message_id。"""
        return next(self._message_ids)

    def generate_update_id(self) -> int:
        """函数说明：generate_update_id。"""
        return next(self._update_ids)

    async def process_message(self, session_id: str, message: Message) -> Message | None:
        """处理一条入站消息并返回机器人回复；会话不存在时返回 None。"""
        session = self.sessions.get_session(session_id)
        if not session:
            logger.error(f"Session not found: {session_id}")
            return None

        # 命令本身也原样入库
        self.sessions.add_message(session_id, message)

        text = message.text or ""
        logger.debug(f"Session {session_id} received: {truncate_string(text, 80)}")

        if text.startswith(COMMAND_PREFIX):
            reply = await self._process_command(session, message)
        else:
            echo = f"Echo: {sanitize_text(text)}"[:MAX_TEXT_LENGTH]
            reply = self._bot_message(session, message.chat, echo)

        self._store_reply(session_id, reply)
        return reply

    async def _process_command(self, session: Session, message: Message) -> Message:
        """函数说明：_process_command。"""
        name = _COMMAND_NAME_RE.match((message.text or "")[len(COMMAND_PREFIX):]).group()

        command = session.bot_config.commands.get(name)
        if not command:
            return self._error_message(session, message.chat, f"Unknown command: /{name}")

        try:
            result: CommandResult = await command.execute(message)
        except Exception:
            logger.exception(f"Error processing command /{name} in session {session.id}")
            return self._error_message(self._current(session), message.chat, COMMAND_FAILED_TEXT)

        # 处理函数挂起期间会话可能已变化，用最新的记录生成回复
        session = self._current(session)
        if isinstance(result, str):
            return self._bot_message(session, message.chat, sanitize_text(result))
        if not isinstance(result, Message):
            logger.error(f"Command /{name} returned {type(result).__name__}, expected str or Message")
            return self._error_message(session, message.chat, COMMAND_FAILED_TEXT)
        return result

    def _current(self, session: Session) -> Session:
        """重新读取会话；已被删除时退回到挂起前的记录。"""
        return self.sessions.get_session(session.id) or session

    def _store_reply(self, session_id: str, reply: Message) -> None:
        # 命令处理期间可能有其他请求插入，按 id 重新定位会话
        if not self.sessions.add_message(session_id, reply):
            logger.warning(f"Session {session_id} disappeared before reply {reply.message_id} was stored")

    def bot_user(self, session: Session) -> User:
        """函数说明：bot_user。"""
        username = session.bot_config.username
        return User(id=self.bot_user_id, is_bot=True, first_name=username, username=username)

    def _bot_message(self, session: Session, chat: Chat, text: str) -> Message:
        """函数说明：_bot_message。"""
        return Message(
            message_id=self.generate_message_id(),
            from_=self.bot_user(session),
            date=unix_now(),
            chat=chat,
            text=text,
        )

    def _error_message(self, session: Session, chat: Chat, reason: str) -> Message:
        return self._bot_message(session, chat, sanitize_text(f"{ERROR_PREFIX}{reason}"))

    def send_message(self, session_id: str, chat_id: int, text: str) -> ApiResponse[Message]:
        """模拟 Bot API 的 sendMessage：机器人主动向已知会话发消息。"""
        session = self.sessions.get_session(session_id)
        if not session:
            return ApiResponse[Message](ok=False, error_code=404, description="Session not found")

        chat = session.chats.get(chat_id)
        if not chat:
            return ApiResponse[Message](ok=False, error_code=400, description="Bad Request: chat not found")

        message = self._bot_message(session, chat, sanitize_text(text))
        self.sessions.add_message(session_id, message)
        return ApiResponse[Message](ok=True, result=message)
