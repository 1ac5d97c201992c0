"""Observability: logging for the tinytry namespace."""

from .logging import (
    ROOT_LOGGER,
    ConsoleFormatter,
    JsonFormatter,
    configure_from_settings,
    configure_logging,
    get_logger,
)

__all__ = [
    "ROOT_LOGGER",
    "ConsoleFormatter",
    "JsonFormatter",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
]
