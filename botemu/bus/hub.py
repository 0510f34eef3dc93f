"""模块说明：hub。"""

import asyncio
from typing import Awaitable, Callable

from loguru import logger

from botemu.bus.events import HubEvent, SocketMessage
from botemu.session.manager import SessionManager

Subscriber = Callable[[SocketMessage], Awaitable[None]]


class RealtimeHub:
    """按会话分组的实时推送中心。

    订阅方先 join 某个会话，之后该会话产生的每个事件都会推送给它。
    publish 只负责入队，真正的投递在 dispatch 循环里完成。
    """

    def __init__(self, sessions: SessionManager):
        self.sessions = sessions
        self.outbound: asyncio.Queue[HubEvent] = asyncio.Queue()
        self._rooms: dict[str, dict[str, Subscriber]] = {}
        self._running = False

    async def join(self, session_id: str, subscriber_id: str, callback: Subscriber) -> bool:
        """异步函数说明：join。"""
        session = self.sessions.get_session(session_id)
        if not session:
            await self._send(callback, SocketMessage("error", {"message": "Session not found"}))
            return False

        self._rooms.setdefault(session_id, {})[subscriber_id] = callback
        logger.info(f"Subscriber {subscriber_id} joined session: {session_id}")

        await self._send(callback, SocketMessage("status", {
            "event": "session-joined",
            "sessionId": session_id,
            "botUsername": session.bot_config.username,
        }))
        return True

    def leave(self, session_id: str, subscriber_id: str) -> None:
        """函数说明：leave。"""
        room = self._rooms.get(session_id)
        if room is None:
            return
        room.pop(subscriber_id, None)
        if not room:
            del self._rooms[session_id]
        logger.info(f"Subscriber {subscriber_id} left session: {session_id}")

    def disconnect(self, subscriber_id: str) -> None:
        """从所有会话中移除订阅方。"""
        for session_id in [sid for sid, room in self._rooms.items() if subscriber_id in room]:
            self.leave(session_id, subscriber_id)
        logger.info(f"Subscriber disconnected: {subscriber_id}")

    def subscribers(self, session_id: str) -> list[str]:
        """函数说明：subscribers。"""
        return list(self._rooms.get(session_id, {}))

    def close_session(self, session_id: str) -> None:
        """会话被删除或过期时移除其全部订阅方。"""
        room = self._rooms.pop(session_id, None)
        if room:
            logger.info(f"Closed session {session_id} for {len(room)} subscriber(s)")

    async def publish(self, session_id: str, message: SocketMessage) -> None:
        """没有订阅方的会话不入队。"""
        if not self._rooms.get(session_id):
            return
        await self.outbound.put(HubEvent(session_id=session_id, message=message))

    async def dispatch(self) -> None:
        """异步函数说明：dispatch。"""
        self._running = True
        while self._running:
            try:
                event = await asyncio.wait_for(self.outbound.get(), timeout=1.0)
            except asyncio.TimeoutError:
                continue
            for callback in list(self._rooms.get(event.session_id, {}).values()):
                await self._send(callback, event.message)

    def stop(self) -> None:
        """函数说明：stop。"""
        self._running = False

    async def _send(self, callback: Subscriber, message: SocketMessage) -> None:
        try:
            await callback(message)
        except Exception as e:
            logger.error(f"Error delivering {message.type} event: {e}")

    @property
    def pending(self) -> int:
        """函数说明：pending。"""
        return self.outbound.qsize()
