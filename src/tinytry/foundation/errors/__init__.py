"""Fault values and outcomes for tinytry.

- Fault/die/fault_value: raising and unwrapping arbitrary fault values
- Outcome/Success/Failure: tagged result of a protected evaluation
- Want: evaluation context (no result, single result, multiple results)
"""

from .errors import Fault, NoTopicError, describe_fault, die, ensure_callable, fault_value
from .result import Failure, Outcome, Success
from .types import JsonDict, Values, Want, shape, values_of

__all__ = [
    # Faults
    "Fault", "NoTopicError", "die", "fault_value", "describe_fault", "ensure_callable",
    # Outcome
    "Outcome", "Success", "Failure",
    # Evaluation context
    "Want", "Values", "JsonDict", "shape", "values_of",
]
