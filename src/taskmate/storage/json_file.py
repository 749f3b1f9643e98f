# src/taskmate/storage/json_file.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from ..core.errors import StorageError

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    File-backed storage: a single JSON object mapping key -> string value.

    Behaves like browser localStorage for one origin:
    - the file is read on first access, then kept in memory
    - each save rewrites the whole file (temp file + os.replace)
    - a missing file means "no keys"; a corrupt one is logged and treated
      the same way; an unreadable one raises StorageError from load()/save()
    """

    def __init__(self, path: str | Path = "storage.json") -> None:
        self._path = Path(path)
        self._data: dict[str, str] | None = None

    def _ensure_data(self) -> dict[str, str]:
        """Read the file on first use. A failed read raises StorageError and is retried next time."""
        if self._data is None:
            self._data = self._read_file()
            logger.info("JsonFileStorage ready path=%s keys=%d", self._path, len(self._data))
        return self._data

    @property
    def path(self) -> Path:
        return self._path

    def _read_file(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text("utf-8")
        except OSError as e:
            raise StorageError(f"Failed to read {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Storage file %s is not valid JSON; ignoring its contents.", self._path)
            return {}

        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a JSON object; ignoring its contents.", self._path)
            return {}

        out: dict[str, str] = {}
        for key, value in data.items():
            if isinstance(key, str) and isinstance(value, str):
                out[key] = value
            else:
                logger.warning("Skipping non-string entry %r in %s", key, self._path)
        return out

    def _write_file(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageError(f"Failed to write {self._path}: {e}") from e
        with contextlib.suppress(OSError):
            # Task names may be personal; keep the file private on disk.
            os.chmod(self._path, 0o600)

    def load(self, key: str) -> str | None:
        return self._ensure_data().get(key)

    def save(self, key: str, value: str) -> None:
        data = self._ensure_data()
        data[key] = value
        self._write_file(data)
        logger.debug("Saved key=%s bytes=%d to %s", key, len(value), self._path)

    def close(self) -> None:
        """Compatibility hook for shutdown (every save is already flushed)."""
        return
