"""
Domain models for fortune readings.
"""
from .fortune import (
    BaseFortune,
    Element,
    FortuneLevel,
    FortuneResult,
    NumberTrait,
    Period,
    ZodiacSign,
    ZodiacTrait,
)

__all__ = [
    "BaseFortune",
    "Element",
    "FortuneLevel",
    "FortuneResult",
    "NumberTrait",
    "Period",
    "ZodiacSign",
    "ZodiacTrait",
]
