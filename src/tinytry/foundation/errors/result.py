"""Outcome of a protected evaluation: Success(values) or Failure(fault).

A discriminated union in the style of Rust's Result:
- Success carries the ordered values a computation produced
- Failure carries the captured fault value, whatever its type or truthiness

Performance notes:
- Uses __slots__ for minimal memory footprint
- Direct attribute access in hot paths
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, NoReturn, TypeVar

from .errors import Fault
from .types import Values, Want, shape, values_of

if TYPE_CHECKING:
    from collections.abc import Iterator

U = TypeVar("U")

# Sentinels for faster Success/Failure construction
_OK = True
_ERR = False


class Outcome:
    """Tagged result of one protected evaluation.

    Examples:
        >>> Success("foo", "bar").as_list()
        ['foo', 'bar']
        >>> Success("foo", "bar").scalar()
        'bar'
        >>> Failure("").is_failure()
        True
        >>> Failure("boom").recover(lambda e: f"saw {e}").scalar()
        'saw boom'
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: Values | object, is_ok: bool) -> None:
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_ok", is_ok)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"Outcome is immutable: cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Outcome is immutable: cannot delete {name!r}")

    @classmethod
    def of(cls, produced: object) -> Outcome:
        """Success built from a raw return value (tuple -> many values, None -> none)."""
        return cls(values_of(produced), _OK)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_success(self) -> bool:
        """Check if Outcome is the Success variant."""
        return self._is_ok

    def is_failure(self) -> bool:
        """Check if Outcome is the Failure variant."""
        return not self._is_ok

    # ─── Value Extraction ────────────────────────────────────────────

    @property
    def values(self) -> Values:
        """Values produced on success; empty on failure."""
        return self._value if self._is_ok else ()  # type: ignore[return-value]

    @property
    def fault(self) -> object:
        """Captured fault value. Raises LookupError on Success."""
        if not self._is_ok:
            return self._value
        raise LookupError(f"fault of Success: {self._value!r}")

    def scalar(self) -> Any:
        """Last value produced, or None."""
        return shape(self.values, Want.SCALAR)

    def as_list(self) -> list[Any]:
        """All values produced, as a list."""
        return list(self.values)

    def shaped(self, want: Want) -> Any:
        """Values rendered for the given evaluation context."""
        return shape(self.values, want)

    def unwrap(self) -> Any:
        """Scalar value on Success, re-raise the fault on Failure."""
        if self._is_ok:
            return self.scalar()
        self.reraise()

    def reraise(self) -> NoReturn:
        """Raise the captured fault: the original exception, or Fault(value)."""
        if self._is_ok:
            raise RuntimeError(f"reraise() on Success: {self._value!r}")
        raise Fault.wrap(self._value)

    # ─── Transformations ─────────────────────────────────────────────

    def map(self, f: Callable[[Values], object]) -> Outcome:
        """Apply f to the values of a Success; its return is normalized into new values."""
        return Outcome(values_of(f(self._value)), _OK) if self._is_ok else self  # type: ignore[arg-type]

    def recover(self, handler: Callable[[object], object]) -> Outcome:
        """Turn a Failure into a Success holding handler(fault). Success passes through."""
        return self if self._is_ok else Outcome(values_of(handler(self._value)), _OK)

    def match(self, *, success: Callable[[Values], U], failure: Callable[[object], U]) -> U:
        """Exhaustive case analysis over both variants."""
        return success(self._value) if self._is_ok else failure(self._value)  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __repr__ = lambda self: (  # noqa: E731
        f"Success{self._value!r}" if self._is_ok else f"Failure({self._value!r})"
    )
    __str__ = __repr__

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Outcome) else NotImplemented

    def __iter__(self) -> Iterator[Any]:
        """Iterate: yields each value if Success, nothing if Failure."""
        yield from self.values


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Success(*values: object) -> Outcome:  # noqa: N802 - constructor-style API
    """Create Success holding the given values in order."""
    return Outcome(values, _OK)


def Failure(fault: object) -> Outcome:  # noqa: N802 - constructor-style API
    """Create Failure holding the captured fault value."""
    return Outcome(fault, _ERR)
