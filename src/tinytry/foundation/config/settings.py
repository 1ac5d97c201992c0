"""Environment-based configuration using pydantic-settings.

Example:
    >>> from tinytry.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.attempt.swallow_level
    'DEBUG'

    # Or with environment variables:
    # TINYTRY_LOG_LEVEL=DEBUG
    # TINYTRY_ATTEMPT_LOG_FAULTS=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TINYTRY_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: LevelName = "INFO"
    format: Literal["console", "json", "none"] = "console"
    include_timestamps: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class AttemptSettings(BaseSettings):
    """Behaviour of the attempt construct's diagnostics."""

    model_config = SettingsConfigDict(
        env_prefix="TINYTRY_ATTEMPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_faults: bool = Field(default=True, description="Log captured faults")
    swallow_level: LevelName = Field(
        default="DEBUG",
        description="Level for faults discarded because no handler was given",
    )

    @field_validator("swallow_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class TinytrySettings(BaseSettings):
    """Root settings for tinytry.

    Example environment variables:
        TINYTRY_DEBUG=true
        TINYTRY_LOG_FORMAT=json
        TINYTRY_ATTEMPT_SWALLOW_LEVEL=WARNING
    """

    model_config = SettingsConfigDict(
        env_prefix="TINYTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    attempt: AttemptSettings = Field(default_factory=AttemptSettings)

    @computed_field
    @property
    def effective_level(self) -> LevelName:
        """Log level after applying the debug flag."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> TinytrySettings:
    """Get the global settings instance (cached)."""
    return TinytrySettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
