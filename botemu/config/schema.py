"""模块说明：schema。"""

from datetime import timedelta

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """类说明：LoggingConfig。"""
    level: str = "INFO"
    directory: str | None = None  # error.log / combined.log 所在目录，为空则只输出到控制台


class SessionsConfig(BaseModel):
    """类说明：SessionsConfig。"""
    max_messages: int = Field(default=1000, gt=0)
    retention_hours: float = Field(default=24, gt=0)
    cleanup_interval_s: int = Field(default=60 * 60, gt=0)
    cleanup_enabled: bool = True
    history_limit: int = Field(default=50, gt=0)
    history_max: int = Field(default=100, gt=0)

    @property
    def retention(self) -> timedelta:
        """函数说明：retention。"""
        return timedelta(hours=self.retention_hours)


class BotDefaults(BaseModel):
    """类说明：BotDefaults。"""
    user_id: int = 123456789  # 机器人回复使用的固定发送者 id


class Config(BaseSettings):
    """类说明：Config。"""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    sessions: SessionsConfig = Field(default_factory=SessionsConfig)
    bot: BotDefaults = Field(default_factory=BotDefaults)

    model_config = SettingsConfigDict(env_prefix="BOTEMU_", env_nested_delimiter="__")
