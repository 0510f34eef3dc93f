"""模块说明：events。"""

import time
from dataclasses import dataclass, field
from typing import Any, Literal

SocketMessageType = Literal["message", "update", "error", "status"]


@dataclass
class SocketMessage:
    """推送给实时订阅方的事件。"""

    type: SocketMessageType
    payload: Any
    timestamp: int = field(default_factory=lambda: int(time.time() * 1000))  # 毫秒

    def to_dict(self) -> dict[str, Any]:
        """函数说明：to_dict。"""
        return {"type": self.type, "payload": self.payload, "timestamp": self.timestamp}


@dataclass
class HubEvent:
    """类说明：HubEvent。"""

    session_id: str
    message: SocketMessage
