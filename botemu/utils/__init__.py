"""模块说明：utils。"""

from botemu.utils.helpers import sanitize_text, truncate_string, unix_now

__all__ = ["sanitize_text", "truncate_string", "unix_now"]
