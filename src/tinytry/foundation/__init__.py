"""Foundation: fault types, outcomes and configuration."""

from .config import AttemptSettings, LoggingSettings, TinytrySettings, clear_settings_cache, get_settings
from .errors import Failure, Fault, NoTopicError, Outcome, Success, Want, die, fault_value

__all__ = [
    "AttemptSettings", "LoggingSettings", "TinytrySettings", "clear_settings_cache", "get_settings",
    "Failure", "Fault", "NoTopicError", "Outcome", "Success", "Want", "die", "fault_value",
]
