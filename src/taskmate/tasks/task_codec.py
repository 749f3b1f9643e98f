# src/taskmate/tasks/task_codec.py

"""
JSON codec for the two stored values.

Wire format (compatible with the browser build's localStorage):
- "tasklist": [{"id": 1697551509000, "name": "Buy milk", "time": "..."}]
- "theme":    "medium"   (a JSON-encoded string, quotes included)
"""

from __future__ import annotations

import json
from typing import Any

from ..core.errors import MalformedStorageError
from .task_models import TASKLIST_KEY, THEME_KEY, Task, TaskList

_COMPACT = (",", ":")


def encode_tasks(tasks: TaskList) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, separators=_COMPACT)


def _parse(key: str, raw: str) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedStorageError(key, f"invalid JSON ({e})") from e


def _task_id(value: Any, index: int) -> int:
    # bool is a subclass of int; true/false are not valid ids.
    if isinstance(value, bool):
        raise MalformedStorageError(TASKLIST_KEY, f"entry {index}: id is not a number")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise MalformedStorageError(TASKLIST_KEY, f"entry {index}: id is not an integer")


def _task_from_obj(obj: Any, index: int) -> Task:
    if not isinstance(obj, dict):
        raise MalformedStorageError(TASKLIST_KEY, f"entry {index} is not an object")

    missing = [f for f in ("id", "name", "time") if f not in obj]
    if missing:
        raise MalformedStorageError(
            TASKLIST_KEY, f"entry {index} is missing {', '.join(missing)}"
        )

    name = obj["name"]
    time_s = obj["time"]
    if not isinstance(name, str) or not isinstance(time_s, str):
        raise MalformedStorageError(TASKLIST_KEY, f"entry {index}: name/time must be strings")

    return Task(id=_task_id(obj["id"], index), name=name, time=time_s)


def decode_tasks(raw: str) -> TaskList:
    """
    Parse a stored task list.

    JSON null decodes to an empty list. Anything else that is not an array of
    well-formed task objects with distinct ids raises MalformedStorageError.
    """
    data = _parse(TASKLIST_KEY, raw)
    if data is None:
        return ()
    if not isinstance(data, list):
        raise MalformedStorageError(TASKLIST_KEY, f"expected an array, got {type(data).__name__}")

    tasks = tuple(_task_from_obj(obj, i) for i, obj in enumerate(data))

    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise MalformedStorageError(TASKLIST_KEY, f"duplicate id {t.id}")
        seen.add(t.id)
    return tasks


def encode_theme(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def decode_theme(raw: str, default: str) -> str:
    """Parse a stored theme. null and "" fall back to `default`."""
    data = _parse(THEME_KEY, raw)
    if data is None or data == "":
        return default
    if not isinstance(data, str):
        raise MalformedStorageError(THEME_KEY, f"expected a string, got {type(data).__name__}")
    return data
