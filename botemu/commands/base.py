"""斜杠命令抽象基类。

每个命令需要提供：
- name: 命令名（不含 "/" 前缀，大小写敏感）
- description: 展示在 /help 中的说明
- execute: 根据触发消息生成回复
"""

from abc import ABC, abstractmethod

from botemu.emulator.types import Message

# 处理函数可以只返回文本，也可以返回一条完整的消息
CommandResult = str | Message


class Command(ABC):
    """命令统一接口。"""

    @property
    @abstractmethod
    def name(self) -> str:
        """命令名，注册表内唯一。"""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """函数说明：description。"""
        pass

    @property
    def usage(self) -> str:
        """帮助文本中展示的用法，默认就是 /name。"""
        return f"/{self.name}"

    @abstractmethod
    async def execute(self, message: Message) -> CommandResult:
        """执行命令。

        返回 str 时由会话引擎包装成机器人消息并清洗；返回 Message 时原样存储。
        """
        pass

    @staticmethod
    def arguments(message: Message) -> str:
        """命令名之后的参数部分（已去首尾空白）。"""
        parts = (message.text or "").split(maxsplit=1)
        return parts[1].strip() if len(parts) > 1 else ""

    def to_definition(self) -> dict[str, str]:
        """函数说明：to_definition。"""
        return {"command": self.name, "description": self.description}
