"""
Command-line entry point for fortune readings.

Usage:
    fortune --name "山田 花子" --birth-date 1990-05-01 --period today
    fortune --name Hanako --year 1990 --month 5 --day 1 --period thisYear --json
    fortune --store inputs.db            # reuse the last inputs saved in inputs.db

With --store, arguments that are not given are restored from the store and
the inputs used are written back.
"""
import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from .config.loader import ConfigLoader
from .config.tables import PERIOD_LABELS, PERIOD_SUBTITLES
from .data.parsers import parse_birth_date
from .delivery.stdout_delivery import StdoutFortuneDelivery
from .engine import FortuneEngine
from .errors import InputQualityError, SystemFailureError
from .logging.config import configure_logging, get_logger
from .models.fortune import Period
from .persistence.input_store import InputStore, SavedInputs, SqliteKeyValueStore

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fortune",
        description="Deterministic fortune reading from a name, a birth date and a period"
    )
    parser.add_argument("--name", type=str, default=None, help="Display name")
    parser.add_argument("--birth-date", type=str, default=None, help="Birth date as YYYY-MM-DD")
    parser.add_argument("--year", type=str, default=None, help="Birth year (alternative to --birth-date)")
    parser.add_argument("--month", type=str, default=None, help="Birth month")
    parser.add_argument("--day", type=str, default=None, help="Birth day")
    parser.add_argument(
        "--period",
        choices=[p.value for p in Period],
        default=None,
        help="Period to read (default: today, or the stored period): " + ", ".join(
            f"{p.value} = {PERIOD_LABELS[p]}（{PERIOD_SUBTITLES[p]}）" for p in Period
        )
    )
    parser.add_argument(
        "--current-month",
        type=int,
        choices=range(1, 13),
        metavar="{1..12}",
        default=None,
        help="Month used for the seasonal adjustment (default: current month)"
    )
    parser.add_argument("--json", action="store_true", help="Print the reading as JSON")
    parser.add_argument("--store", type=str, default=None, help="SQLite file for the last-entered inputs")
    parser.add_argument("--config-dir", type=str, default=None, help="Directory containing fortune.yaml")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default="WARNING",
        help="Logging level (default: WARNING)"
    )
    return parser


def _split_birth_date(birth_date: str) -> Optional[tuple[str, str, str]]:
    """Split a YYYY-MM-DD argument into the stored year/month/day parts."""
    try:
        parsed = parse_birth_date(birth_date)
    except InputQualityError:
        return None
    return str(parsed.year), str(parsed.month), str(parsed.day)


def resolve_inputs(args: argparse.Namespace, saved: SavedInputs) -> SavedInputs:
    """Overlay command-line arguments on previously saved inputs."""
    inputs = saved

    if args.name is not None:
        inputs = replace(inputs, name=args.name)

    if args.birth_date is not None:
        parts = _split_birth_date(args.birth_date)
        if parts is not None:
            year, month, day = parts
            inputs = replace(inputs, birth_year=year, birth_month=month, birth_day=day)
    else:
        if args.year is not None:
            inputs = replace(inputs, birth_year=args.year)
        if args.month is not None:
            inputs = replace(inputs, birth_month=args.month)
        if args.day is not None:
            inputs = replace(inputs, birth_day=args.day)

    if args.period is not None:
        inputs = replace(inputs, period=Period(args.period))

    return replace(inputs, touched=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, include_timestamp=False)
    logger = get_logger(__name__)

    if args.birth_date is not None and any(v is not None for v in (args.year, args.month, args.day)):
        parser.error("--birth-date cannot be combined with --year/--month/--day")

    try:
        config = ConfigLoader.create(Path(args.config_dir) if args.config_dir else None).load()
    except SystemFailureError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if args.json:
        config = replace(config, output=replace(config.output, format="json"))

    try:
        store = InputStore(SqliteKeyValueStore(args.store)) if args.store else None
        saved = store.load() if store else SavedInputs()
        inputs = resolve_inputs(args, saved)
        # An unreadable --birth-date is passed through as-is and yields "no result"
        birth_date = args.birth_date if args.birth_date is not None else inputs.birth_date

        logger.debug("Fortune requested", period=inputs.period.value, store=args.store)
        engine = FortuneEngine(config=config)
        result = engine.compute(inputs.name, birth_date, inputs.period, args.current_month)

        if store:
            store.save(inputs)
    except SystemFailureError as e:
        print(f"Input store error: {e}", file=sys.stderr)
        return 1

    delivery = StdoutFortuneDelivery(
        config=config.output,
        absent_placeholder=config.message.absent_placeholder
    )
    delivery.deliver(inputs.name, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
