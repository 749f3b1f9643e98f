# src/taskmate/storage/memory.py

from __future__ import annotations


class MemoryStorage:
    """Process-local storage. Nothing survives a restart."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value

    def close(self) -> None:
        return
