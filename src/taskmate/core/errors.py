# src/taskmate/core/errors.py

from __future__ import annotations


class TaskmateError(Exception):
    """Base class for all errors raised by taskmate."""


class TaskNotFoundError(TaskmateError, LookupError):
    """An operation referenced a task id that is not in the list."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found: id={task_id}")
        self.task_id = task_id


class MalformedStorageError(TaskmateError, ValueError):
    """A stored value is not valid JSON or does not have the expected shape."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Malformed value under key {key!r}: {reason}")
        self.key = key
        self.reason = reason


class StorageError(TaskmateError, OSError):
    """A storage backend failed to read or write."""
