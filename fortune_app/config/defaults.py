"""Default configuration parameters for the fortune engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SeasonalParams:
    """Early-year caution applied to "thisYear" readings."""
    enabled: bool = True
    early_year_start_month: int = 1                  # Inclusive
    early_year_end_month: int = 5                    # Inclusive


@dataclass(frozen=True)
class MessageParams:
    """Narrative message assembly parameters."""
    separator: str = " "
    absent_placeholder: str = "―"                    # Shown for a missing number
    collapse_empty_fragments: bool = False           # Drop "" before joining


@dataclass(frozen=True)
class TraitParams:
    """Numerology trait lookup parameters."""
    fallback_key: int = 5


@dataclass(frozen=True)
class SeedParams:
    """Rolling hash parameters."""
    multiplier: int = 31
    modulus_bits: int = 32
    signed: bool = False                             # Two's-complement wrap before abs()
    utf16_code_units: bool = False                   # Hash surrogate pairs as two units


@dataclass(frozen=True)
class OutputParams:
    """Rendering parameters for the stdout delivery."""
    format: str = "pretty"                           # "pretty" or "json"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    seasonal: SeasonalParams
    message: MessageParams
    traits: TraitParams
    seed: SeedParams
    output: OutputParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        seasonal=SeasonalParams(),
        message=MessageParams(),
        traits=TraitParams(),
        seed=SeedParams(),
        output=OutputParams(),
    )
