"""应用装配。

EmulatorApp 是进程内唯一持有会话存储与计数器的对象，
其余组件都通过引用拿到它们，生命周期随 start/stop。
"""

import asyncio

from loguru import logger

from botemu.api.controller import BotController
from botemu.bus.hub import RealtimeHub
from botemu.cleanup.service import SessionSweeper
from botemu.config.schema import Config
from botemu.emulator.delivery import DeliveryNotifier
from botemu.emulator.engine import BotEmulator
from botemu.session.manager import SessionManager


class EmulatorApp:
    """类说明：EmulatorApp。"""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        sessions_cfg = self.config.sessions

        self.sessions = SessionManager(max_messages=sessions_cfg.max_messages)
        self.emulator = BotEmulator(self.sessions, bot_user_id=self.config.bot.user_id)
        self.hub = RealtimeHub(self.sessions)
        self.notifier = DeliveryNotifier(self.emulator, self.hub)
        self.sweeper = SessionSweeper(
            self.sessions,
            interval_s=sessions_cfg.cleanup_interval_s,
            retention=sessions_cfg.retention,
            enabled=sessions_cfg.cleanup_enabled,
            hub=self.hub,
        )
        self.controller = BotController(
            self.sessions,
            self.emulator,
            self.notifier,
            history_limit=sessions_cfg.history_limit,
            history_max=sessions_cfg.history_max,
            hub=self.hub,
        )
        self._dispatch_task: asyncio.Task | None = None

    async def start(self) -> None:
        """异步函数说明：start。"""
        await self.sweeper.start()
        self._dispatch_task = asyncio.create_task(self.hub.dispatch())
        logger.info("Bot emulator started")

    async def stop(self) -> None:
        """异步函数说明：stop。"""
        await self.sweeper.stop()
        self.hub.stop()
        if self._dispatch_task:
            self._dispatch_task.cancel()
            try:
                await self._dispatch_task
            except asyncio.CancelledError:
                pass
            self._dispatch_task = None
        logger.info("Bot emulator stopped")
