"""
Date-to-zodiac mapping.

Signs are assigned from fixed month/day cut-offs that are the same every
year; nothing is computed astronomically.
"""

from typing import Optional

import structlog

from ..config.tables import ZODIAC_RANGES
from ..data.parsers import parse_birth_date
from ..errors import InputQualityError
from ..models.fortune import ZodiacSign

logger = structlog.get_logger(__name__)


def zodiac_from_month_day(month: int, day: int) -> Optional[ZodiacSign]:
    """
    Map a month and day of month to a zodiac sign.

    Returns:
        The sign whose inclusive range contains the day, None when the
        month/day pair falls outside every range (e.g. month 13)
    """
    for sign, (start_month, start_day), (end_month, end_day) in ZODIAC_RANGES:
        if (month == start_month and day >= start_day) or \
           (month == end_month and day <= end_day):
            return sign

    return None


def zodiac_from_birth_date(birth_date: str) -> Optional[ZodiacSign]:
    """
    Map a YYYY-MM-DD birth date to a zodiac sign.

    Returns:
        Zodiac sign, or None if the date is empty, malformed or not a real
        calendar date
    """
    try:
        parsed = parse_birth_date(birth_date)
    except InputQualityError as e:
        logger.debug("Birth date not mappable to zodiac", reason=str(e))
        return None

    return zodiac_from_month_day(parsed.month, parsed.day)
