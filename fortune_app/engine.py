"""
Fortune composition engine.

Orchestrates the fortune pipeline: input checks, zodiac and numerology
derivation, seed-based base fortune selection, seasonal adjustment and
message assembly.
"""

from pathlib import Path
from typing import Optional, Union

import structlog

from .composition.message import build_combined_keyword, build_message
from .composition.seasonal import adjust_level, is_early_year
from .composition.seed import create_seed, select_base_fortune
from .composition.traits import lookup_trait
from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.tables import (
    FORTUNE_TABLE,
    LIFE_PATH_TRAITS,
    NAME_ENERGY_TRAITS,
    PERIOD_LABELS,
    ZODIAC_TRAITS,
)
from .data.parsers import normalize_name, parse_birth_date
from .errors import InputQualityError
from .logging.config import get_composer_logger, log_level_adjustment
from .models.fortune import FortuneResult, Period
from .numerology import life_path_number, name_energy_number
from .utils.time import Clock, resolve_current_month
from .zodiac.mapper import zodiac_from_month_day

logger = structlog.get_logger(__name__)
composer_logger = get_composer_logger(__name__)


class FortuneEngine:
    """
    Computes fortune readings.

    Pipeline:
    Raw inputs → Zodiac / Numerology → Seed selection → Seasonal adjustment → Result

    The engine holds only frozen settings and a clock, so a single instance
    can serve any number of callers.
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        clock: Optional[Clock] = None,
        config_dir: Optional[Union[str, Path]] = None
    ) -> None:
        """
        Initialize the fortune engine.

        Args:
            config: Settings to use; loaded from config_dir when omitted
            clock: Callable returning the current datetime, used when a
                computation is not given an explicit month
            config_dir: Directory holding fortune.yaml overrides
        """
        self.logger = logger
        self.composer_logger = composer_logger

        if config is None:
            config = ConfigLoader.create(config_dir).load()
        self.config = config
        self.clock = clock

    def compute(
        self,
        name: str,
        birth_date: str,
        period: Union[Period, str],
        current_month: Optional[int] = None
    ) -> Optional[FortuneResult]:
        """
        Compute the fortune reading for one set of inputs.

        Args:
            name: Display name
            birth_date: Birth date as YYYY-MM-DD, or empty
            period: Requested period (Period member or its value)
            current_month: Month (1-12) for the seasonal adjustment; the
                engine's clock is read when omitted

        Returns:
            FortuneResult, or None when the name or birth date is missing or
            the birth date is not a valid date

        Raises:
            InvalidPeriodError: If period is not one of the four periods
        """
        period = Period.parse(period)

        try:
            normalize_name(name)
            parsed_date = parse_birth_date(birth_date)
        except InputQualityError as e:
            self.logger.debug(
                "Fortune inputs incomplete, no result",
                period=period.value,
                reason=str(e),
                error_type=type(e).__name__
            )
            return None

        zodiac = zodiac_from_month_day(parsed_date.month, parsed_date.day)
        if zodiac is None:
            return None

        seed = create_seed(name, birth_date, period, self.config.seed)
        base = select_base_fortune(seed)

        zodiac_trait = ZODIAC_TRAITS[zodiac]
        period_label = PERIOD_LABELS[period]

        lp_number = life_path_number(birth_date)
        ne_number = name_energy_number(name)

        fallback_key = self.config.traits.fallback_key
        life_trait = lookup_trait(LIFE_PATH_TRAITS, lp_number, fallback_key)
        name_trait = lookup_trait(NAME_ENERGY_TRAITS, ne_number, fallback_key)

        keyword = build_combined_keyword(base, zodiac_trait, life_trait)

        month = resolve_current_month(current_month, self.clock)
        early_year = is_early_year(period, month, self.config.seasonal)
        level = adjust_level(base.level, early_year)

        if early_year:
            log_level_adjustment(
                self.composer_logger,
                period=period.value,
                from_level=base.level.value,
                to_level=level.value,
                current_month=month
            )

        message = build_message(
            period_label=period_label,
            zodiac=zodiac,
            zodiac_trait=zodiac_trait,
            life_path_number=lp_number,
            life_trait=life_trait,
            name_energy_number=ne_number,
            name_trait=name_trait,
            early_year=early_year,
            base=base,
            params=self.config.message,
        )

        self.composer_logger.debug(
            "Fortune computed",
            period=period.value,
            zodiac=zodiac.value,
            fortune_index=seed % len(FORTUNE_TABLE),
            level=level.value,
            life_path_number=lp_number,
            name_energy_number=ne_number
        )

        return FortuneResult(
            level=level,
            message=message,
            color=base.color,
            keyword=keyword,
            zodiac=zodiac,
            zodiac_keyword=zodiac_trait.keyword,
            period_label=period_label,
            life_path_number=lp_number,
            life_path_keyword=life_trait.keyword,
            name_energy_number=ne_number,
            name_energy_keyword=name_trait.keyword,
        )


_default_engine: Optional[FortuneEngine] = None


def get_default_engine() -> FortuneEngine:
    """Return the process-wide engine built from the default configuration."""
    global _default_engine
    if _default_engine is None:
        _default_engine = FortuneEngine()
    return _default_engine


def compute(
    name: str,
    birth_date: str,
    period: Union[Period, str],
    current_month: Optional[int] = None
) -> Optional[FortuneResult]:
    """Compute a fortune reading with the default engine. See FortuneEngine.compute."""
    return get_default_engine().compute(name, birth_date, period, current_month)
