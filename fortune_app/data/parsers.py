"""
Parsers for raw fortune inputs.

Converts the name, birth date and form date parts supplied by a
presentation layer into validated values, raising input quality errors
for anything that cannot be read.
"""

import re
from datetime import date
from typing import Union

from ..errors import MalformedDateError, MissingInputError

BIRTH_DATE_FORMAT = "YYYY-MM-DD"

_BIRTH_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def normalize_name(name: str) -> str:
    """
    Trim a display name.

    Raises:
        MissingInputError: If nothing but whitespace remains
    """
    trimmed = name.strip()
    if not trimmed:
        raise MissingInputError("Name is empty", field="name")
    return trimmed


def parse_birth_date(birth_date: str) -> date:
    """
    Parse a YYYY-MM-DD birth date into a calendar date.

    Raises:
        MissingInputError: If the string is empty
        MalformedDateError: If the string is not a real YYYY-MM-DD date
    """
    if not birth_date:
        raise MissingInputError("Birth date is empty", field="birth_date")

    match = _BIRTH_DATE_PATTERN.fullmatch(birth_date)
    if not match:
        raise MalformedDateError(
            f"Birth date does not match {BIRTH_DATE_FORMAT}",
            raw_value=birth_date,
            expected_format=BIRTH_DATE_FORMAT
        )

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise MalformedDateError(
            f"Birth date is out of range: {e}",
            raw_value=birth_date,
            expected_format=BIRTH_DATE_FORMAT
        ) from e


def format_birth_date(
    year: Union[int, str, None],
    month: Union[int, str, None],
    day: Union[int, str, None]
) -> str:
    """
    Build the YYYY-MM-DD string from separate form fields.

    Month and day are zero-padded. Any empty part yields an empty string,
    the engine's representation of a missing birth date.
    """
    if year in (None, "") or month in (None, "") or day in (None, ""):
        return ""
    return f"{year}-{str(month).zfill(2)}-{str(day).zfill(2)}"
