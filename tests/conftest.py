"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime

from fortune_app.config.defaults import DefaultConfig, get_default_config
from fortune_app.engine import FortuneEngine


@pytest.fixture
def default_config() -> DefaultConfig:
    """Built-in defaults, independent of any fortune.yaml on disk."""
    return get_default_config()


@pytest.fixture
def engine(default_config: DefaultConfig) -> FortuneEngine:
    """Engine whose clock is pinned to July, outside the early-year window."""
    return FortuneEngine(config=default_config, clock=lambda: datetime(2024, 7, 15, 12, 0, 0))


@pytest.fixture
def early_year_engine(default_config: DefaultConfig) -> FortuneEngine:
    """Engine whose clock is pinned to March, inside the early-year window."""
    return FortuneEngine(config=default_config, clock=lambda: datetime(2024, 3, 10, 9, 0, 0))


@pytest.fixture
def sample_inputs() -> dict:
    """Name / birth date / period used across tests (birth date falls in 牡牛座)."""
    return {
        "name": "山田 花子",
        "birth_date": "1990-05-01",
        "period": "today",
    }
