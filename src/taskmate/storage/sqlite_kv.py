# src/taskmate/storage/sqlite_kv.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

from ..core.errors import StorageError

logger = logging.getLogger(__name__)


class SQLiteStorage:
    """
    SQLite key-value storage.

    Schema: kv(key TEXT PRIMARY KEY, value TEXT NOT NULL, updated_at REAL NOT NULL)

    Each method opens its own short-lived connection; nothing to close.
    The file and schema are created on first use, so an unusable path
    surfaces as StorageError from load()/save() rather than from the constructor.
    """

    def __init__(self, db_path: str | Path = "storage.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._schema_ready = False

    @property
    def path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _connect(self) -> sqlite3.Connection:
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Failed to open {self._db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _get_conn(self) -> sqlite3.Connection:
        if not self._schema_ready:
            self._ensure_schema()
            self._schema_ready = True
            logger.info("SQLiteStorage ready db=%s", self._db_path)
        return self._connect()

    def _ensure_schema(self) -> None:
        conn = self._connect()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to create schema in {self._db_path}: {e}") from e
        finally:
            conn.close()

    # ---- public API ----

    def count_keys(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM kv").fetchone()
            return int(n)
        except sqlite3.Error as e:
            raise StorageError(f"Failed to count keys in {self._db_path}: {e}") from e
        finally:
            conn.close()

    def load(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            return str(row["value"]) if row else None
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read key {key!r} from {self._db_path}: {e}") from e
        finally:
            conn.close()

    def save(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value, time.time()),
            )
            conn.commit()
            logger.debug("Saved key=%s bytes=%d", key, len(value))
        except sqlite3.Error as e:
            raise StorageError(f"Failed to write key {key!r} to {self._db_path}: {e}") from e
        finally:
            conn.close()

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return
