"""
Numerology calculations.

Provides the digit-root reducer and the two numbers derived from user
input: the life-path number (birth date) and the name-energy number (name).
"""

from .life_path import life_path_number
from .name_energy import name_energy_number
from .reduction import digit_root

__all__ = [
    "digit_root",
    "life_path_number",
    "name_energy_number",
]
