"""模块说明：session。"""

from botemu.session.manager import BotConfig, Session, SessionManager

__all__ = ["BotConfig", "Session", "SessionManager"]
