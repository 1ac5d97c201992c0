"""Tests for Outcome and fault helpers."""

from __future__ import annotations

import pytest

from tinytry import Failure, Fault, Outcome, Success, Want, die, fault_value
from tinytry.foundation.errors import shape, values_of


# ═════════════════════════════════════════════════════════════════════════════
# Construction & Accessors
# ═════════════════════════════════════════════════════════════════════════════


def test_success_construction() -> None:
    outcome = Success("foo", "bar")

    assert outcome.is_success()
    assert not outcome.is_failure()
    assert outcome
    assert outcome.values == ("foo", "bar")
    assert outcome.as_list() == ["foo", "bar"]
    assert outcome.scalar() == "bar"


def test_failure_construction() -> None:
    outcome = Failure("boom")

    assert outcome.is_failure()
    assert not outcome
    assert outcome.fault == "boom"
    assert outcome.values == ()
    assert outcome.scalar() is None


def test_falsy_fault_is_still_failure() -> None:
    assert Failure("").is_failure()
    assert Failure(0).is_failure()
    assert Failure(None).fault is None


def test_fault_of_success_raises() -> None:
    with pytest.raises(LookupError):
        _ = Success(1).fault


def test_of_normalizes_return_values() -> None:
    assert Outcome.of((1, 2)).values == (1, 2)
    assert Outcome.of(None).values == ()
    assert Outcome.of([1, 2]).values == ([1, 2],)
    assert Outcome.of(0).values == (0,)


def test_shaped() -> None:
    outcome = Success("foo", "bar", "gorch")
    assert outcome.shaped(Want.LIST) == ["foo", "bar", "gorch"]
    assert outcome.shaped(Want.SCALAR) == "gorch"
    assert outcome.shaped(Want.VOID) is None
    assert Success().shaped(Want.SCALAR) is None


def test_iteration() -> None:
    assert list(Success(1, 2)) == [1, 2]
    assert list(Failure("x")) == []


def test_equality_and_hash() -> None:
    assert Success(1, 2) == Success(1, 2)
    assert Success(1) != Failure(1)
    assert Failure("x") == Failure("x")
    assert len({Success(1), Success(1), Failure(1)}) == 2


def test_repr() -> None:
    assert repr(Success(1, 2)) == "Success(1, 2)"
    assert repr(Failure("x")) == "Failure('x')"


# ═════════════════════════════════════════════════════════════════════════════
# Transformations
# ═════════════════════════════════════════════════════════════════════════════


def test_map_success() -> None:
    assert Success(1, 2).map(lambda vs: tuple(v * 10 for v in vs)) == Success(10, 20)


def test_map_failure_passes_through() -> None:
    failure = Failure("x")
    assert failure.map(lambda vs: vs) is failure


def test_recover() -> None:
    assert Failure("x").recover(lambda e: f"recovered {e}") == Success("recovered x")
    assert Success(1).recover(lambda e: 2) == Success(1)


def test_match() -> None:
    assert Success(1, 2).match(success=len, failure=str) == 2
    assert Failure("x").match(success=len, failure=lambda e: f"err {e}") == "err x"


# ═════════════════════════════════════════════════════════════════════════════
# Unwrap / Reraise
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap_success() -> None:
    assert Success("a", "b").unwrap() == "b"


def test_unwrap_failure_reraises_value() -> None:
    with pytest.raises(Fault) as excinfo:
        Failure("boom").unwrap()
    assert excinfo.value.value == "boom"


def test_reraise_keeps_exception() -> None:
    err = ValueError("bad")
    with pytest.raises(ValueError) as excinfo:
        Failure(err).reraise()
    assert excinfo.value is err


def test_reraise_on_success_raises_runtime_error() -> None:
    with pytest.raises(RuntimeError):
        Success(1).reraise()


# ═════════════════════════════════════════════════════════════════════════════
# Fault Helpers
# ═════════════════════════════════════════════════════════════════════════════


def test_die_wraps_plain_values() -> None:
    with pytest.raises(Fault) as excinfo:
        die({"code": 42})
    assert excinfo.value.value == {"code": 42}
    assert fault_value(excinfo.value) == {"code": 42}


def test_die_raises_exceptions_directly() -> None:
    with pytest.raises(ZeroDivisionError):
        die(ZeroDivisionError("div"))


def test_fault_value_of_native_exception() -> None:
    err = OSError("disk")
    assert fault_value(err) is err


def test_fault_str_renders_value() -> None:
    assert str(Fault("foo")) == "foo"
    assert str(Fault(0)) == "0"


def test_values_of_and_shape() -> None:
    assert values_of(("a",)) == ("a",)
    assert shape(("a", "b"), Want.LIST) == ["a", "b"]
    assert shape((), Want.LIST) == []


def test_outcome_is_immutable() -> None:
    outcome = Success(1)
    with pytest.raises(AttributeError):
        outcome._value = (2,)  # type: ignore[misc]
    with pytest.raises(AttributeError):
        outcome._is_ok = False  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del outcome._value
    assert outcome == Success(1)
