"""
Input quality error classifications for fortune inputs.

These exceptions categorize problems with the name, birth date and period
values handed to the engine.
"""

from typing import Optional, Dict, Any


class InputQualityError(Exception):
    """Base class for input issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingInputError(InputQualityError):
    """A required input is empty."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class MalformedDateError(InputQualityError):
    """Birth date exists but is not a valid YYYY-MM-DD calendar date."""

    def __init__(self, message: str, raw_value: Optional[str] = None,
                 expected_format: Optional[str] = "YYYY-MM-DD", **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value
        self.expected_format = expected_format


class InvalidPeriodError(InputQualityError, ValueError):
    """Period is not one of the supported values."""

    def __init__(self, message: str, value: Optional[Any] = None,
                 allowed: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
        self.allowed = allowed or []
        self.recoverable = False
