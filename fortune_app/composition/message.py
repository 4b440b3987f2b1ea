"""Keyword and narrative message assembly."""

from typing import Optional

from ..config.defaults import MessageParams
from ..config.tables import (
    EARLY_YEAR_MESSAGE,
    LIFE_PATH_SENTENCE,
    NAME_ENERGY_SENTENCE,
    ZODIAC_SENTENCE,
)
from ..models.fortune import BaseFortune, NumberTrait, ZodiacSign, ZodiacTrait

KEYWORD_JOINER = " × "


def build_combined_keyword(
    base: BaseFortune,
    zodiac_trait: ZodiacTrait,
    life_trait: NumberTrait
) -> str:
    """Join base, zodiac and life-path keywords. The name-energy keyword is not part of it."""
    return KEYWORD_JOINER.join([base.keyword, zodiac_trait.keyword, life_trait.keyword])


def build_message(
    *,
    period_label: str,
    zodiac: ZodiacSign,
    zodiac_trait: ZodiacTrait,
    life_path_number: Optional[int],
    life_trait: NumberTrait,
    name_energy_number: Optional[int],
    name_trait: NumberTrait,
    early_year: bool,
    base: BaseFortune,
    params: Optional[MessageParams] = None
) -> str:
    """
    Assemble the narrative message.

    Fragments, in order: zodiac sentence, life-path sentence, name-energy
    sentence, early-year paragraph (empty outside the early year) and the
    base fortune message. The empty early-year fragment is kept in the join,
    leaving a double separator, unless collapse_empty_fragments is set.
    """
    params = params or MessageParams()

    def _number(value: Optional[int]) -> str:
        return params.absent_placeholder if value is None else str(value)

    fragments = [
        ZODIAC_SENTENCE.format(
            period_label=period_label,
            zodiac=zodiac.value,
            zodiac_keyword=zodiac_trait.keyword,
        ),
        LIFE_PATH_SENTENCE.format(number=_number(life_path_number), message=life_trait.message),
        NAME_ENERGY_SENTENCE.format(number=_number(name_energy_number), message=name_trait.message),
        EARLY_YEAR_MESSAGE if early_year else "",
        base.message,
    ]

    if params.collapse_empty_fragments:
        fragments = [fragment for fragment in fragments if fragment]

    return params.separator.join(fragments)
