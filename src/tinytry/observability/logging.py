"""Logging setup for the tinytry namespace.

Modules log through stdlib loggers named ``tinytry.<module>`` and pass
structured fields via ``extra={"fields": {...}}``. ``configure_logging``
installs a single handler rendering those fields as console text or JSON
lines.

Quick Start:
    >>> from tinytry.observability import configure_logging
    >>> configure_logging(format="console", level="DEBUG")
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

import orjson

if TYPE_CHECKING:
    from tinytry.foundation.config import TinytrySettings
    from tinytry.foundation.errors import JsonDict

ROOT_LOGGER = "tinytry"

_HANDLER_FLAG = "_tinytry_handler"


# ─────────────────────────────────────────────────────────────────────────────
# Formatters
# ─────────────────────────────────────────────────────────────────────────────


def _fields(record: logging.LogRecord) -> JsonDict:
    return getattr(record, "fields", None) or {}


class ConsoleFormatter(logging.Formatter):
    """Human-readable output. Format: timestamp [level] event key=value ..."""

    def __init__(self, show_timestamp: bool = True) -> None:
        super().__init__()
        self.show_timestamp = show_timestamp

    def format(self, record: logging.LogRecord) -> str:
        parts = ([datetime.fromtimestamp(record.created, tz=UTC).strftime("%H:%M:%S.%f")[:-3]]
                 if self.show_timestamp else [])
        parts += [f"[{record.levelname.lower()}]", record.getMessage()]
        parts += [f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in sorted(_fields(record).items())]
        if record.exc_info:
            parts.append("\n" + self.formatException(record.exc_info))
        return " ".join(parts)


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            **_fields(record),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(entry, default=repr, option=orjson.OPT_NON_STR_KEYS).decode()


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


def configure_logging(
    format: str = "console",  # noqa: A002 - shadows builtin but matches stdlib
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    show_timestamp: bool = True,
) -> logging.Handler | None:
    """Configure the tinytry logger. Format: "console" (human), "json" (machine), "none".

    Replaces any handler a previous call installed; handlers added by the
    application are left alone.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for existing in [h for h in root.handlers if getattr(h, _HANDLER_FLAG, False)]:
        root.removeHandler(existing)

    match format:
        case "console": formatter: logging.Formatter = ConsoleFormatter(show_timestamp)
        case "json": formatter = JsonFormatter()
        case "none":
            handler: logging.Handler = logging.NullHandler()
            setattr(handler, _HANDLER_FLAG, True)
            root.addHandler(handler)
            return handler
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")

    handler = logging.StreamHandler(output or sys.stderr)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_FLAG, True)
    root.addHandler(handler)
    return handler


def configure_from_settings(settings: TinytrySettings | None = None) -> logging.Handler | None:
    """Apply TINYTRY_LOG_* settings via configure_logging."""
    if settings is None:
        from tinytry.foundation.config import get_settings
        settings = get_settings()
    return configure_logging(
        settings.logging.format,
        settings.effective_level,
        show_timestamp=settings.logging.include_timestamps,
    )


def get_logger(name: str) -> logging.Logger:
    """Logger under the tinytry namespace, e.g. get_logger("attempt") -> tinytry.attempt."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
