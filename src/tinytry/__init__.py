"""tinytry - minimal try/catch that leaves the caller's error state alone.

Two primitives, used together:

    >>> from tinytry import attempt, catch, die
    >>>
    >>> # handle errors with a handler
    >>> attempt(lambda: die("foo"), catch(lambda e: f"caught error: {e}"))
    'caught error: foo'
    >>>
    >>> # just silence errors
    >>> attempt(lambda: die("foo")) is None
    True

Handlers read naturally as decorated functions:

    >>> @catch
    ... def report(fault):
    ...     return f"failed: {type(fault).__name__}"
    >>> attempt(lambda: int("x"), report)
    'failed: ValueError'

Several return values come back as a list when asked for:

    >>> from tinytry import Want
    >>> attempt(lambda: ("foo", "bar", "gorch"), want=Want.LIST)
    ['foo', 'bar', 'gorch']
    >>> attempt(lambda: ("foo", "bar", "gorch"))
    'gorch'

The Result-returning primitive underneath:

    >>> from tinytry import protect
    >>> protect(lambda: die("")).is_failure()
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core
from .core import attempt, catch, mark_as_handler, protect, topic, wanted

# Configuration
from .foundation.config import TinytrySettings, clear_settings_cache, get_settings

# Faults & outcomes
from .foundation.errors import Failure, Fault, NoTopicError, Outcome, Success, Want, die, fault_value

# Observability
from .observability import configure_logging

__all__ = [
    "__version__",
    # Core
    "attempt",
    "catch",
    "mark_as_handler",
    "protect",
    "topic",
    "wanted",
    # Faults & outcomes
    "Fault",
    "NoTopicError",
    "die",
    "fault_value",
    "Outcome",
    "Success",
    "Failure",
    "Want",
    # Configuration
    "TinytrySettings",
    "get_settings",
    "clear_settings_cache",
    # Observability
    "configure_logging",
]
