"""模块说明：api。"""

from botemu.api.controller import BotController
from botemu.api.errors import EmulatorError, InvalidRequestError, ProcessingError, SessionNotFoundError

__all__ = [
    "BotController",
    "EmulatorError",
    "InvalidRequestError",
    "ProcessingError",
    "SessionNotFoundError",
]
