"""The attempt construct: try/catch as two plain function calls.

``attempt`` evaluates a computation, captures any fault it raises and hands
that fault to an optional handler. It differs from a bare ``try``/``except``
in three ways:

- the caller's own "exception being handled" (``sys.exc_info()``) is never
  disturbed, because the handler runs after the protected block has exited
- failure is detected by a success marker that only the normal exit path
  produces, so falsy fault values (``""``, ``0``, objects with a false
  ``__bool__``) are still failures
- the handler receives the fault captured at the interception point, so
  finalizers that run their own protected evaluations while the fault
  unwinds cannot replace it

Each attempt adds its own frames to the call stack; code that inspects
stack depth has to account for them.

Example:
    >>> from tinytry import attempt, catch, die
    >>> attempt(lambda: 42)
    42
    >>> attempt(lambda: die("foo"), catch(lambda e: f"caught {e}"))
    'caught foo'
    >>> attempt(lambda: die("foo")) is None
    True
"""

from __future__ import annotations

import logging
import reprlib
from contextvars import ContextVar
from typing import Any, Callable, TypeVar

from pydantic import ValidationError

from tinytry.foundation.config import AttemptSettings, get_settings
from tinytry.foundation.errors import (
    Failure,
    NoTopicError,
    Outcome,
    Want,
    describe_fault,
    ensure_callable,
    fault_value,
    shape,
    values_of,
)
from tinytry.observability import get_logger

logger = get_logger("attempt")

H = TypeVar("H", bound=Callable[..., Any])

# Only the normal exit of _evaluate produces this object
_COMPLETED = object()
_NO_TOPIC = object()

_topic: ContextVar[object] = ContextVar("tinytry_topic", default=_NO_TOPIC)
_want: ContextVar[Want | None] = ContextVar("tinytry_want", default=None)

# Used when TINYTRY_* settings fail validation; built without reading the environment
_DEFAULT_ATTEMPT_SETTINGS = AttemptSettings.model_construct()

_fault_repr = reprlib.Repr()
_fault_repr.maxstring = 120


# ═══════════════════════════════════════════════════════════════════════════════
# Protected Evaluation
# ═══════════════════════════════════════════════════════════════════════════════


def _evaluate(computation: Callable[[], object]) -> tuple[object, object]:
    produced = computation()
    return _COMPLETED, produced


def _protect(computation: Callable[[], object]) -> Outcome:
    marker: object = None
    try:
        marker, captured = _evaluate(computation)
    except Exception as exc:
        captured = fault_value(exc)

    if marker is _COMPLETED:
        return Outcome.of(captured)
    _log_captured(captured)
    return Failure(captured)


def protect(computation: Callable[[], object]) -> Outcome:
    """Evaluate computation and return Success(values) or Failure(fault).

    Never raises for Exception subclasses; BaseException-only signals such
    as KeyboardInterrupt propagate.
    """
    ensure_callable(computation, "computation")
    return _protect(computation)


# ═══════════════════════════════════════════════════════════════════════════════
# Attempt / Catch
# ═══════════════════════════════════════════════════════════════════════════════


def attempt(
    computation: Callable[[], object],
    handler: Callable[[Any], object] | None = None,
    *,
    want: Want | str = Want.SCALAR,
) -> Any:
    """Evaluate computation; on a fault, return handler(fault) instead.

    Args:
        computation: Zero-argument callable. A returned tuple counts as
            several values, None as no value.
        handler: Optional one-argument callable receiving the captured fault.
            Without one, the fault is swallowed.
        want: Evaluation context. SCALAR returns the last value, LIST a list
            of all values, VOID nothing. Applies to the handler's return too.

    Faults raised by the handler propagate to the caller unchanged.
    """
    ensure_callable(computation, "computation")
    if handler is not None:
        ensure_callable(handler, "handler")
    want = Want(want)

    token = _want.set(want)
    try:
        outcome = _protect(computation)
        if outcome._is_ok:
            return outcome.shaped(want)
        if handler is None:
            _log_swallowed(outcome._value)
            return shape((), want)
        return shape(values_of(_dispatch(handler, outcome._value)), want)
    finally:
        _want.reset(token)


def mark_as_handler(handler: H) -> H:
    """Return handler unchanged. Lets a handler read as ``catch(...)`` or ``@catch``."""
    ensure_callable(handler, "handler")
    return handler


catch = mark_as_handler


def _dispatch(handler: Callable[[Any], object], fault: object) -> object:
    token = _topic.set(fault)
    try:
        return handler(fault)
    finally:
        _topic.reset(token)


# ═══════════════════════════════════════════════════════════════════════════════
# Topic & Context Accessors
# ═══════════════════════════════════════════════════════════════════════════════


def topic() -> object:
    """Fault handled by the innermost running handler.

    Convenience alias for the handler's argument; prefer the argument.
    Raises NoTopicError outside a handler.
    """
    if (fault := _topic.get()) is _NO_TOPIC:
        raise NoTopicError("topic() called outside a running handler")
    return fault


def wanted() -> Want | None:
    """Evaluation context of the innermost running attempt, None outside one."""
    return _want.get()


# ═══════════════════════════════════════════════════════════════════════════════
# Diagnostics
# ═══════════════════════════════════════════════════════════════════════════════


def _attempt_settings() -> AttemptSettings:
    """Diagnostics settings; invalid configuration falls back to defaults instead of raising."""
    try:
        return get_settings().attempt
    except ValidationError:
        return _DEFAULT_ATTEMPT_SETTINGS


def _log_captured(fault: object) -> None:
    if logger.isEnabledFor(logging.DEBUG) and _attempt_settings().log_faults:
        logger.debug("fault captured", extra={"fields": {"fault_type": describe_fault(fault)}})


def _log_swallowed(fault: object) -> None:
    settings = _attempt_settings()
    level = getattr(logging, settings.swallow_level, logging.DEBUG)
    if settings.log_faults and logger.isEnabledFor(level):
        logger.log(level, "fault swallowed", extra={"fields": {
            "fault_type": describe_fault(fault),
            "fault": _fault_repr.repr(fault),
        }})
