"""
Wall-clock helpers for the seasonal adjustment.

The engine accepts the current month as an explicit argument; these helpers
supply the real value when the caller does not.
"""

from datetime import datetime
from typing import Callable, Optional

Clock = Callable[[], datetime]


def get_wall_clock_time() -> datetime:
    """Get the current local (naive) wall-clock time."""
    return datetime.now()


def get_current_month(clock_ts: Optional[datetime] = None) -> int:
    """
    Get the calendar month (1-12) to evaluate the seasonal adjustment in.

    Args:
        clock_ts: Optional timestamp to read the month from

    Returns:
        Month of clock_ts, falling back to the current wall-clock month
    """
    if clock_ts is not None:
        return clock_ts.month

    return get_wall_clock_time().month


def resolve_current_month(current_month: Optional[int], clock: Optional[Clock] = None) -> int:
    """
    Resolve the month used for a single computation.

    Args:
        current_month: Month supplied by the caller, preferred when given
        clock: Optional clock callable consulted when no month is supplied

    Returns:
        Month in 1-12

    Raises:
        ValueError: If the supplied month is outside 1-12
    """
    if current_month is not None:
        if not 1 <= current_month <= 12:
            raise ValueError(f"current_month must be between 1 and 12, got {current_month}")
        return current_month

    if clock is not None:
        return get_current_month(clock())

    return get_current_month()
