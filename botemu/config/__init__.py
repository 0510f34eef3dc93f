"""模块说明：config。"""

from botemu.config.loader import get_config_path, load_config, save_config
from botemu.config.schema import Config

__all__ = ["Config", "get_config_path", "load_config", "save_config"]
