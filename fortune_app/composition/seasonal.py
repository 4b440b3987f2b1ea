"""
Seasonal adjustment for yearly readings.

A "thisYear" reading requested during the early months of the calendar year
is read more cautiously: the two best levels are demoted one notch each.
"""

from typing import Optional

from ..config.defaults import SeasonalParams
from ..config.tables import SEASONAL_DEMOTIONS
from ..models.fortune import FortuneLevel, Period


def is_early_year(
    period: Period,
    current_month: int,
    params: Optional[SeasonalParams] = None
) -> bool:
    """Whether the early-year caution applies to this period and month."""
    params = params or SeasonalParams()
    if not params.enabled:
        return False
    return (
        period is Period.THIS_YEAR
        and params.early_year_start_month <= current_month <= params.early_year_end_month
    )


def adjust_level(level: FortuneLevel, early_year: bool) -> FortuneLevel:
    """Demote 大吉 to 中吉 and 吉 to 小吉 when early_year is set."""
    if not early_year:
        return level
    return SEASONAL_DEMOTIONS.get(level, level)
