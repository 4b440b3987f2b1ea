"""Last-entered input persistence for presentation layers."""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional, Protocol

from ..data.parsers import format_birth_date
from ..errors import PersistenceError
from ..models.fortune import Period

NAME_KEY = "fortune-name"
BIRTH_YEAR_KEY = "fortune-birthYear"
BIRTH_MONTH_KEY = "fortune-birthMonth"
BIRTH_DAY_KEY = "fortune-birthDay"
PERIOD_KEY = "fortune-period"
TOUCHED_KEY = "fortune-touched"


class KeyValueStore(Protocol):
    """Minimal string key-value store."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class InMemoryKeyValueStore:
    """Dictionary-backed store, for tests and single-run callers."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class SqliteKeyValueStore:
    """SQLite-based key-value store."""

    def __init__(self, db_path: str = "fortune_inputs.db"):
        self.db_path = Path(db_path)
        self.logger = logging.getLogger("fortune.store")
        self._lock = threading.Lock()

        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

    @contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        """Get database connection, wrapping sqlite failures."""
        try:
            conn = sqlite3.connect(str(self.db_path))
        except sqlite3.Error as e:
            raise PersistenceError(
                f"Failed to open input store: {e}",
                operation="connect",
                target=str(self.db_path)
            ) from e

        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            self.logger.error(f"Input store operation failed: {e}")
            raise PersistenceError(
                f"Input store operation failed: {e}",
                operation="execute",
                target=str(self.db_path)
            ) from e
        finally:
            conn.close()

    def get(self, key: str) -> Optional[str]:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            with self._get_connection() as conn:
                conn.execute(
                    "INSERT OR REPLACE INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)",
                    (key, value, datetime.now(timezone.utc).isoformat())
                )
        self.logger.debug(f"Stored key {key}")

    def remove(self, key: str) -> None:
        with self._lock:
            with self._get_connection() as conn:
                conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))


@dataclass(frozen=True)
class SavedInputs:
    """Form inputs as last entered by the user."""
    name: str = ""
    birth_year: str = ""
    birth_month: str = ""
    birth_day: str = ""
    period: Period = Period.TODAY
    touched: bool = False

    @property
    def birth_date(self) -> str:
        """Zero-padded YYYY-MM-DD, or "" while any part is missing."""
        return format_birth_date(self.birth_year, self.birth_month, self.birth_day)


class InputStore:
    """Maps SavedInputs onto a KeyValueStore."""

    _TEXT_FIELDS = (
        ("name", NAME_KEY),
        ("birth_year", BIRTH_YEAR_KEY),
        ("birth_month", BIRTH_MONTH_KEY),
        ("birth_day", BIRTH_DAY_KEY),
    )

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load(self) -> SavedInputs:
        """Restore the last inputs; missing keys fall back to empty defaults."""
        values = {field: self.store.get(key) or "" for field, key in self._TEXT_FIELDS}

        saved_period = self.store.get(PERIOD_KEY)
        try:
            period = Period(saved_period) if saved_period else Period.TODAY
        except ValueError:
            period = Period.TODAY

        touched = self.store.get(TOUCHED_KEY) == "true"

        return SavedInputs(period=period, touched=touched, **values)

    def save(self, inputs: SavedInputs) -> None:
        """Persist inputs; empty text fields are removed rather than stored."""
        for field, key in self._TEXT_FIELDS:
            value = str(getattr(inputs, field))
            if value:
                self.store.set(key, value)
            else:
                self.store.remove(key)

        self.store.set(PERIOD_KEY, Period.parse(inputs.period).value)
        self.store.set(TOUCHED_KEY, "true" if inputs.touched else "false")
