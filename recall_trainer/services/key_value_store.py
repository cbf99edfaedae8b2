"""SQLite-backed keyed store for persisted state."""

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)


class SQLiteKeyValueStore:
    """Durable key/value store kept in a single SQLite table.

    Implements KeyValueStore protocol.
    """

    def __init__(self, db_path: Path):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file
        """
        self._db_path = db_path

    def initialize(self) -> None:
        """Create the database and table if they don't exist."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self._db_path)
        try:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS kv_store ("
                "key TEXT PRIMARY KEY, "
                "value TEXT NOT NULL, "
                "updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP"
                ")"
            )
            conn.commit()
        finally:
            conn.close()

    def get(self, key: str) -> str | None:
        """Return the value stored under a key.

        Args:
            key: Key to look up

        Returns:
            Stored string, or None if the key is absent
        """
        conn = sqlite3.connect(self._db_path)
        try:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        return None if row is None else row[0]

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing the previous one.

        Args:
            key: Key to write
            value: String value
        """
        conn = sqlite3.connect(self._db_path)
        try:
            conn.execute(
                "INSERT INTO kv_store (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value, "
                "updated_at = CURRENT_TIMESTAMP",
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()
        logger.debug("Stored %d bytes under key %r", len(value), key)
