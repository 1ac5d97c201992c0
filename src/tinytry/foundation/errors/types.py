"""Evaluation context and value shaping for attempts."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, TypeAlias

# ═══════════════════════════════════════════════════════════════════════════════
# Type Aliases
# ═══════════════════════════════════════════════════════════════════════════════

Values: TypeAlias = tuple[Any, ...]
JsonDict = dict[str, Any]

_NO_VALUES: Values = ()


# ═══════════════════════════════════════════════════════════════════════════════
# Evaluation Context
# ═══════════════════════════════════════════════════════════════════════════════


class Want(StrEnum):
    """How many results the caller of an attempt expects back.

    VOID discards results, SCALAR yields the last (or only) value,
    LIST yields every value as a list.
    """
    VOID = "void"
    SCALAR = "scalar"
    LIST = "list"


def values_of(produced: object) -> Values:
    """Normalize a raw return value: tuple -> its items, None -> nothing, else one value."""
    if produced is None:
        return _NO_VALUES
    if isinstance(produced, tuple):
        return produced
    return (produced,)


def shape(values: Values, want: Want) -> Any:
    """Render values in the form the evaluation context asks for."""
    match want:
        case Want.LIST: return list(values)
        case Want.SCALAR: return values[-1] if values else None
        case Want.VOID: return None
        case _: raise ValueError(f"Unknown evaluation context: {want!r}")
