"""
Deterministic seed generation and base fortune selection.

The seed is a 31-multiplier rolling hash over the code points of
"{name}|{birth_date}|{period}", reduced modulo 2**32 after every step so the
value is identical on every platform and run.
"""

from typing import Iterator, Optional, Union

from ..config.defaults import SeedParams
from ..config.tables import FORTUNE_TABLE
from ..models.fortune import BaseFortune, Period


def seed_source(name: str, birth_date: str, period: Union[Period, str]) -> str:
    """Build the string that is hashed into the seed."""
    period_value = Period.parse(period).value
    return f"{name.strip()}|{birth_date}|{period_value}"


def _hash_units(text: str, utf16_code_units: bool) -> Iterator[int]:
    if not utf16_code_units:
        for ch in text:
            yield ord(ch)
        return

    encoded = text.encode("utf-16-le")
    for i in range(0, len(encoded), 2):
        yield int.from_bytes(encoded[i:i + 2], "little")


def rolling_hash(text: str, params: Optional[SeedParams] = None) -> int:
    """
    Rolling hash of text.

    By default the hash runs over code points and stays unsigned. With
    params.signed the final value is read as a two's-complement integer of
    modulus_bits width, and with params.utf16_code_units characters outside
    the BMP contribute both surrogates. Both set together reproduce a
    JavaScript `(h * 31 + charCodeAt(i)) | 0` loop.
    """
    params = params or SeedParams()
    modulus = 1 << params.modulus_bits

    value = 0
    for unit in _hash_units(text, params.utf16_code_units):
        value = (value * params.multiplier + unit) % modulus

    if params.signed and value >= modulus >> 1:
        value -= modulus
    return value


def create_seed(
    name: str,
    birth_date: str,
    period: Union[Period, str],
    params: Optional[SeedParams] = None
) -> int:
    """
    Combine name, birth date and period into a non-negative integer seed.

    Example:
        create_seed("Hanako", "1990-05-01", "today") == 3606316620
    """
    return abs(rolling_hash(seed_source(name, birth_date, period), params))


def select_base_fortune(seed: int) -> BaseFortune:
    """Select the base fortune at seed modulo the table size."""
    return FORTUNE_TABLE[seed % len(FORTUNE_TABLE)]
