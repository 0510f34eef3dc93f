"""命令注册表。

CommandRegistry 是“命令名 → 命令对象”的有序表，会话引擎只负责查找和调用，
不关心具体命令的实现。查找为精确匹配，没有别名或前缀匹配。
"""

from typing import Iterator

from botemu.commands.base import Command


class CommandRegistry:
    """命令容器。"""

    def __init__(self, commands: list[Command] | None = None):
        self._commands: dict[str, Command] = {}
        for command in commands or []:
            self.register(command)

    def register(self, command: Command) -> None:
        """注册命令；同名命令会被后注册者覆盖。"""
        self._commands[command.name] = command

    def unregister(self, name: str) -> None:
        """注销命令；不存在时静默忽略。"""
        self._commands.pop(name, None)

    def get(self, name: str) -> Command | None:
        """按名称获取命令。"""
        return self._commands.get(name)

    def has(self, name: str) -> bool:
        return name in self._commands

    def definitions(self) -> list[dict[str, str]]:
        """导出 {"command", "description"} 列表，保持注册顺序。"""
        return [command.to_definition() for command in self._commands.values()]

    @property
    def names(self) -> list[str]:
        return list(self._commands.keys())

    def __iter__(self) -> Iterator[Command]:
        return iter(list(self._commands.values()))

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: str) -> bool:
        return name in self._commands
