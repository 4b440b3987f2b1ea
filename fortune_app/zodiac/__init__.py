"""
Zodiac sign derivation from calendar dates.
"""
from .mapper import zodiac_from_birth_date, zodiac_from_month_day

__all__ = ["zodiac_from_birth_date", "zodiac_from_month_day"]
