"""
Logging Configuration.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    FATAL = "FATAL"
    ERROR = "ERROR"
    INFO = "INFO"
    DEBUG = "DEBUG"


class LoggingSettings(BaseSettings):
    """Logger configuration read from ``SLIMLOG_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SLIMLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default=LogLevel.ERROR, description="Minimum level to log")
    time: bool = Field(default=True, description="Prefix lines with a local timestamp")
    file_path: str | None = Field(default=None, description="Append to this file instead of stderr")
