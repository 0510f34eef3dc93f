"""模块说明：logging。"""

import sys
from pathlib import Path

from loguru import logger

from botemu.config.schema import LoggingConfig
from botemu.utils.helpers import ensure_dir

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> [<level>{level}</level>]: {message}"


def setup_logging(config: LoggingConfig) -> None:
    """替换 loguru 默认输出：控制台 + 可选的 error.log / combined.log。"""
    logger.remove()
    logger.add(sys.stderr, level=config.level, format=CONSOLE_FORMAT)

    if config.directory:
        log_dir = ensure_dir(Path(config.directory).expanduser())
        logger.add(log_dir / "error.log", level="ERROR", serialize=True)
        logger.add(log_dir / "combined.log", level=config.level, serialize=True)
