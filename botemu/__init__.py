"""botemu：Telegram 风格机器人平台的内存模拟器。"""

__version__ = "0.1.0"
