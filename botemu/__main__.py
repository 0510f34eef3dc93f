"""python -m botemu：加载配置并运行模拟器（清理定时器与实时分发）。"""

import asyncio

from loguru import logger

from botemu.app import EmulatorApp
from botemu.config.loader import load_config
from botemu.utils.logging import setup_logging


async def _serve() -> None:
    config = load_config()
    setup_logging(config.logging)

    app = EmulatorApp(config)
    await app.start()
    try:
        await asyncio.Event().wait()
    finally:
        await app.stop()


def main() -> None:
    """函数说明：main。"""
    try:
        asyncio.run(_serve())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    main()
