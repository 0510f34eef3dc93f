"""模块说明：emulator。"""

from botemu.emulator.types import ApiResponse, Chat, Message, MessageEntity, Update, User

__all__ = ["ApiResponse", "Chat", "Message", "MessageEntity", "Update", "User"]
