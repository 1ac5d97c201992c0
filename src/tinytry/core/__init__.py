"""Core primitives: attempt (try), catch (handler wrapper) and protect."""

from .attempt import attempt, catch, mark_as_handler, protect, topic, wanted

__all__ = ["attempt", "catch", "mark_as_handler", "protect", "topic", "wanted"]
