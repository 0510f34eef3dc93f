"""更新投递：webhook 模拟与实时广播。

这里不会发出任何真实的网络请求，只记录“本应投递”这一事实。
"""

from loguru import logger

from botemu.bus.events import SocketMessage
from botemu.bus.hub import RealtimeHub
from botemu.emulator.engine import BotEmulator
from botemu.emulator.types import Message, Update


class DeliveryNotifier:
    """类说明：DeliveryNotifier。"""

    def __init__(self, emulator: BotEmulator, hub: RealtimeHub | None = None):
        self.emulator = emulator
        self.sessions = emulator.sessions
        self.hub = hub

    def create_update(self, message: Message) -> Update:
        """用新的 update_id 包装消息。"""
        return Update(update_id=self.emulator.generate_update_id(), message=message)

    async def simulate_webhook(self, session_id: str, update: Update) -> bool:
        """未配置 webhook 时返回 False，这不是错误。"""
        session = self.sessions.get_session(session_id)
        if not session or not session.bot_config.webhook_url:
            logger.warning(f"No webhook URL configured for session: {session_id}")
            return False

        logger.info(
            f"Webhook simulation for {session.bot_config.webhook_url}: "
            f"session={session_id} update={update.to_dict()}"
        )
        return True

    async def broadcast(self, session_id: str, update: Update) -> None:
        """异步函数说明：broadcast。"""
        if self.hub is None:
            return
        await self.hub.publish(session_id, SocketMessage("update", update.to_dict()))

    async def deliver(self, session_id: str, message: Message) -> Update:
        """生成更新并走完 webhook 模拟与实时广播。"""
        update = self.create_update(message)
        await self.simulate_webhook(session_id, update)
        await self.broadcast(session_id, update)
        return update
