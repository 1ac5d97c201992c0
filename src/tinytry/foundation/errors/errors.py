"""Fault values and the exceptions that carry them.

Python only raises exception objects, so arbitrary fault values (strings,
numbers, falsy objects) travel inside ``Fault`` and are unwrapped again
when an attempt captures them.
"""

from __future__ import annotations

from typing import NoReturn


class Fault(Exception):
    """Exception carrying an arbitrary fault value."""

    __slots__ = ("value",)

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def wrap(cls, value: object) -> BaseException:
        """Exception to raise for value: exceptions pass through, anything else is wrapped."""
        return value if isinstance(value, BaseException) else cls(value)


class NoTopicError(LookupError):
    """Raised when the topic is read outside a running handler."""


def die(value: object) -> NoReturn:
    """Raise value as a fault. Exception instances are raised as-is."""
    raise Fault.wrap(value)


def fault_value(exc: BaseException) -> object:
    """Value a handler sees for exc: the payload of a Fault, else the exception itself."""
    return exc.value if isinstance(exc, Fault) else exc


def describe_fault(fault: object) -> str:
    """Short type label for logging, e.g. 'ValueError' or 'str'."""
    return type(fault).__name__


def ensure_callable(obj: object, role: str) -> None:
    """Reject non-callables with TypeError naming the role they were passed as."""
    if not callable(obj):
        raise TypeError(f"{role} must be callable, got {type(obj).__name__}")

