"""Life-path number derived from a birth date string."""

import re
from typing import Optional

from .reduction import digit_root

_NON_DIGITS = re.compile(r"[^0-9]")


def life_path_number(birth_date: str) -> Optional[int]:
    """
    Compute the life-path number from a birth date.

    Every non-digit character is dropped and the remaining digits are summed
    and reduced. The date is not validated here: any string with at least one
    ASCII digit produces a number.

    Example - 1990-05-01:
        1+9+9+0+0+5+0+1 = 25 -> 2+5 = 7

    Returns:
        Number in 1-9, or None if the string is empty or has no digits
    """
    if not birth_date:
        return None

    digits = _NON_DIGITS.sub("", birth_date)
    if not digits:
        return None

    return digit_root(sum(int(ch) for ch in digits))
