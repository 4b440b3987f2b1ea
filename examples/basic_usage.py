#!/usr/bin/env python3
"""
Basic Usage Example - Fortune Engine

This script demonstrates the basic usage of the fortune engine. It shows how to:
- Initialize the engine with a pinned clock
- Compute readings for each period
- Compare a thisYear reading inside and outside the early-year window
- Render a reading as a card and as JSON

Run: python examples/basic_usage.py
"""

from datetime import datetime

from fortune_app.delivery.stdout_delivery import StdoutFortuneDelivery, format_fortune_json
from fortune_app.engine import FortuneEngine
from fortune_app.logging.config import configure_logging
from fortune_app.models.fortune import Period


def demo_all_periods(engine: FortuneEngine, name: str, birth_date: str) -> None:
    """Print one reading per period."""
    print("\n📅 Readings per period")
    print("-" * 40)
    for period in Period:
        result = engine.compute(name, birth_date, period)
        print(f"{result.period_label:>4}  {result.level.value:<3}  {result.keyword}")


def demo_early_year(name: str, birth_date: str) -> None:
    """Show the seasonal demotion of a thisYear reading."""
    print("\n🌱 Early-year adjustment (thisYear)")
    print("-" * 40)
    for month in (3, 9):
        engine = FortuneEngine(clock=lambda m=month: datetime(2024, m, 1))
        result = engine.compute(name, birth_date, Period.THIS_YEAR)
        print(f"month {month:>2}: {result.level.value}")


def demo_missing_inputs(engine: FortuneEngine) -> None:
    """Incomplete or invalid inputs give no reading."""
    print("\n🔍 Incomplete inputs")
    print("-" * 40)
    for name, birth_date in [("", "1990-05-01"), ("山田 花子", ""), ("山田 花子", "1990-02-30")]:
        result = engine.compute(name, birth_date, Period.TODAY)
        print(f"name={name!r:<12} birth_date={birth_date!r:<14} -> {result}")


def main() -> None:
    """Run the basic usage demonstration."""
    configure_logging(level="WARNING", include_timestamp=False)

    name = "山田 花子"
    birth_date = "1990-05-01"

    print("🔮 Fortune Engine - Basic Usage Example")
    print("=" * 50)

    engine = FortuneEngine(clock=lambda: datetime(2024, 7, 15))
    result = engine.compute(name, birth_date, Period.TODAY)

    print("\n🃏 Card")
    print("-" * 40)
    StdoutFortuneDelivery().deliver(name, result)

    print("\n🧾 JSON")
    print("-" * 40)
    print(format_fortune_json(name, result))

    demo_all_periods(engine, name, birth_date)
    demo_early_year(name, birth_date)
    demo_missing_inputs(engine)

    print("\n✅ Basic usage example completed!")


if __name__ == "__main__":
    main()
