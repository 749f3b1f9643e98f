# src/taskmate/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskStore depends on these Protocols instead of concrete backends, so the
persistence layer is swappable and tests can use an in-memory fake.
"""

from datetime import datetime
from typing import Callable, Protocol

Clock = Callable[[], datetime]
# Zero-argument callable returning the current local moment.


class KeyValueStorage(Protocol):
    """
    Synchronous string key-value storage (the browser localStorage contract).

    - load() returns None when the key was never written
    - save() replaces the whole value for the key
    """

    def load(self, key: str) -> str | None: ...
    def save(self, key: str, value: str) -> None: ...
