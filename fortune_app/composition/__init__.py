"""
Fortune composition steps: seed selection, trait lookup, seasonal
adjustment and message assembly.
"""
from .message import build_combined_keyword, build_message
from .seasonal import adjust_level, is_early_year
from .seed import create_seed, select_base_fortune
from .traits import lookup_trait

__all__ = [
    "adjust_level",
    "build_combined_keyword",
    "build_message",
    "create_seed",
    "is_early_year",
    "lookup_trait",
    "select_base_fortune",
]
