"""
Fortune data models.

This module defines the enumerations and immutable records that flow through
the fortune pipeline: the requested period, fortune levels, zodiac signs,
the static trait records and the composed result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from ..errors import InvalidPeriodError


class Period(str, Enum):
    """Time period a reading is requested for."""
    TODAY = "today"
    TOMORROW = "tomorrow"
    THIS_YEAR = "thisYear"
    NEXT_YEAR = "nextYear"

    @classmethod
    def parse(cls, value: Union["Period", str]) -> "Period":
        """
        Coerce a raw period value into a Period.

        Args:
            value: Period member or its string value (e.g. "thisYear")

        Returns:
            Matching Period member

        Raises:
            InvalidPeriodError: If the value is not one of the four periods
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidPeriodError(
                f"Unknown period: {value!r}",
                value=value,
                allowed=[p.value for p in cls]
            ) from None


class FortuneLevel(str, Enum):
    """Fortune levels ordered from most to least fortunate."""
    DAIKICHI = "大吉"
    KICHI = "吉"
    CHUKICHI = "中吉"
    SHOKICHI = "小吉"
    KYO = "凶"


class Element(str, Enum):
    """Classical element of a zodiac sign."""
    FIRE = "火"
    EARTH = "地"
    AIR = "風"
    WATER = "水"


class ZodiacSign(str, Enum):
    """Western tropical zodiac signs."""
    ARIES = "牡羊座"
    TAURUS = "牡牛座"
    GEMINI = "双子座"
    CANCER = "蟹座"
    LEO = "獅子座"
    VIRGO = "乙女座"
    LIBRA = "天秤座"
    SCORPIO = "蠍座"
    SAGITTARIUS = "射手座"
    CAPRICORN = "山羊座"
    AQUARIUS = "水瓶座"
    PISCES = "魚座"


@dataclass(frozen=True)
class ZodiacTrait:
    """Static attributes of a zodiac sign."""
    element: Element
    keyword: str


@dataclass(frozen=True)
class NumberTrait:
    """Keyword and message attached to a numerology number (1-9)."""
    keyword: str
    message: str


@dataclass(frozen=True)
class BaseFortune:
    """One of the five base fortunes selected by seed."""
    level: FortuneLevel
    keyword: str
    color: str
    message: str


@dataclass(frozen=True)
class FortuneResult:
    """Composed fortune reading returned to the caller."""
    level: FortuneLevel
    message: str
    color: str
    keyword: str
    zodiac: ZodiacSign
    zodiac_keyword: str
    period_label: str
    life_path_number: Optional[int]
    life_path_keyword: str
    name_energy_number: Optional[int]
    name_energy_keyword: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase field names used by presentation layers."""
        return {
            "level": self.level.value,
            "message": self.message,
            "color": self.color,
            "keyword": self.keyword,
            "zodiac": self.zodiac.value,
            "zodiacKeyword": self.zodiac_keyword,
            "periodLabel": self.period_label,
            "lifePathNumber": self.life_path_number,
            "lifePathKeyword": self.life_path_keyword,
            "nameEnergyNumber": self.name_energy_number,
            "nameEnergyKeyword": self.name_energy_keyword,
        }
