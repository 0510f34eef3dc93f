"""模块说明：__init__。"""

from botemu.bus.events import HubEvent, SocketMessage
from botemu.bus.hub import RealtimeHub

__all__ = ["RealtimeHub", "HubEvent", "SocketMessage"]
