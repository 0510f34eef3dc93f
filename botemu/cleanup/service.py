"""模块说明：service。"""

import asyncio
from datetime import timedelta

from loguru import logger

from botemu.bus.hub import RealtimeHub
from botemu.session.manager import DEFAULT_RETENTION, SessionManager

# 每小时清理一次
DEFAULT_CLEANUP_INTERVAL_S = 60 * 60


class SessionSweeper:
    """定时删除长时间无活动的会话。

    与请求处理共用同一个事件循环，一次清理要么完全在某个请求之前，
    要么完全在其之后。
    """

    def __init__(
        self,
        sessions: SessionManager,
        interval_s: int = DEFAULT_CLEANUP_INTERVAL_S,
        retention: timedelta = DEFAULT_RETENTION,
        enabled: bool = True,
        hub: RealtimeHub | None = None,
    ):
        self.sessions = sessions
        self.hub = hub
        self.interval_s = interval_s
        self.retention = retention
        self.enabled = enabled
        self._running = False
        self._task: asyncio.Task | None = None

    async def start(self) -> None:
        """异步函数说明：start。"""
        if not self.enabled:
            logger.info("Session cleanup disabled")
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info(f"Session cleanup started (every {self.interval_s}s, retention {self.retention})")

    async def stop(self) -> None:
        """异步函数说明：stop。"""
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

    @property
    def is_running(self) -> bool:
        return self._running

    async def _run_loop(self) -> None:
        """异步函数说明：_run_loop。"""
        while self._running:
            try:
                await asyncio.sleep(self.interval_s)
                if self._running:
                    self._tick()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"Session cleanup error: {e}")

    def _tick(self) -> list[str]:
        expired = self.sessions.cleanup_old_sessions(retention=self.retention)
        if self.hub is not None:
            for session_id in expired:
                self.hub.close_session(session_id)
        if not expired:
            logger.debug("Session cleanup: nothing to expire")
        return expired

    async def trigger_now(self) -> list[str]:
        """立即执行一次清理，返回被删除的会话 id。"""
        return self._tick()
