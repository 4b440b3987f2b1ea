"""
Name-energy number derived from a display name.

This is a stylized value built from character codes, not a kanji
stroke count.
"""

from typing import Optional

from .reduction import digit_root


def name_energy_number(name: str) -> Optional[int]:
    """
    Compute the name-energy number of a name.

    Surrounding whitespace is trimmed, then the code point of every remaining
    character is summed and reduced.

    Returns:
        Number in 1-9, or None if the trimmed name is empty
    """
    trimmed = name.strip()
    if not trimmed:
        return None

    return digit_root(sum(ord(ch) for ch in trimmed))
