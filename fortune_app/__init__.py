"""
Fortune App - Deterministic Fortune Reading Engine

Computes a reproducible fortune reading from a display name, a birth date
and a requested period. Derives a zodiac sign and two numerology numbers,
selects a base fortune by hash and composes the final reading.
"""

__version__ = "0.1.0"
__author__ = "Fortune Team"
