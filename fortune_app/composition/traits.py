"""Numerology trait lookup with a fixed fallback entry."""

from collections.abc import Mapping
from typing import Optional

from ..models.fortune import NumberTrait


def lookup_trait(
    table: Mapping[int, NumberTrait],
    number: Optional[int],
    fallback_key: int = 5
) -> NumberTrait:
    """
    Look up the trait for a numerology number.

    An absent number, 0 or a key missing from the table resolves to the
    fallback entry (key 5 by default).
    """
    if number and number in table:
        return table[number]
    return table[fallback_key]
