"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    AttemptSettings,
    LoggingSettings,
    TinytrySettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "AttemptSettings",
    "LoggingSettings",
    "TinytrySettings",
    "clear_settings_cache",
    "get_settings",
]
