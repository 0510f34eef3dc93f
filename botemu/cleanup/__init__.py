"""模块说明：cleanup。"""

from botemu.cleanup.service import SessionSweeper

__all__ = ["SessionSweeper"]
