"""模块说明：commands。"""

from botemu.commands.base import Command, CommandResult
from botemu.commands.registry import CommandRegistry
from botemu.commands.builtins import default_registry

__all__ = ["Command", "CommandResult", "CommandRegistry", "default_registry"]
