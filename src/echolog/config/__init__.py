"""
echolog Configuration Module.

Nested settings: each concern is its own BaseSettings with its own
environment variable prefix.

Usage:
    from echolog.config import settings

    settings.output.encoding   # "utf-8"
    settings.logging.level     # LogLevel.WARNING
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import LogFormat, LoggingSettings, LogLevel
from .output import OutputSettings


class Settings(BaseSettings):
    """Composite settings aggregating the output and logging domains."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def output(self) -> OutputSettings:
        return OutputSettings()

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()

    def reload(self) -> None:
        """Drop cached sub-settings so the next access re-reads the environment."""
        for name in ("output", "logging"):
            self.__dict__.pop(name, None)


settings = Settings()

__all__ = [
    "LogFormat",
    "LogLevel",
    "LoggingSettings",
    "OutputSettings",
    "Settings",
    "settings",
]
