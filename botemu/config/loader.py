"""模块说明：loader。"""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from botemu.config.schema import Config
from botemu.utils.helpers import get_data_path


def get_config_path() -> Path:
    """函数说明：get_config_path。"""
    return get_data_path() / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """读取 camelCase 的 JSON 配置；文件缺失或无效时使用默认值。"""
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            return Config.model_validate(convert_keys(data))
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning(f"Failed to load config from {path}: {e}. Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """函数说明：save_config。"""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = convert_to_camel(config.model_dump())

    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def convert_keys(data: Any) -> Any:
    """函数说明：convert_keys。"""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """函数说明：convert_to_camel。"""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """函数说明：camel_to_snake。"""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """函数说明：snake_to_camel。"""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
