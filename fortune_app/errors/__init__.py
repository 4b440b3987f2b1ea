"""
Error classification for the fortune engine.

Input quality errors describe user-supplied values that cannot be read and are
degraded to "no result" by the engine. System failures describe broken
configuration or storage and are propagated to the caller.
"""

from .input_quality import (
    InputQualityError,
    MissingInputError,
    MalformedDateError,
    InvalidPeriodError,
)
from .system_failures import (
    SystemFailureError,
    PersistenceError,
    ConfigurationError,
)

__all__ = [
    # Input Quality Errors
    "InputQualityError",
    "MissingInputError",
    "MalformedDateError",
    "InvalidPeriodError",
    # System Failures
    "SystemFailureError",
    "PersistenceError",
    "ConfigurationError",
]
