"""模块说明：helpers。"""

import re
import time
from pathlib import Path
from datetime import datetime, timezone

# Telegram 单条消息文本上限
MAX_TEXT_LENGTH = 4096

_TAG_RE = re.compile(r"<[^>]*>")
_JS_PROTOCOL_RE = re.compile(r"javascript:", re.IGNORECASE)


def ensure_dir(path: Path) -> Path:
    """函数说明：ensure_dir。"""
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_path() -> Path:
    """函数说明：get_data_path。"""
    return Path.home() / ".botemu"


def sanitize_text(text: str) -> str:
    """清洗要回显或生成的文本。

    顺序固定：去掉尖括号标签 → 去掉 javascript: 协议 → 去首尾空白 → 截断到 4096。
    """
    text = _TAG_RE.sub("", text)
    text = _JS_PROTOCOL_RE.sub("", text)
    return text.strip()[:MAX_TEXT_LENGTH]


def unix_now() -> int:
    """当前 unix 时间戳（秒）。"""
    return int(time.time())


def iso_now() -> str:
    """函数说明：iso_now。"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def truncate_string(s: str, max_len: int = 100, suffix: str = "...") -> str:
    """函数说明：truncate_string。"""
    if len(s) <= max_len:
        return s
    return s[: max_len - len(suffix)] + suffix
