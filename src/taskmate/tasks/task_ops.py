# src/taskmate/tasks/task_ops.py

"""
Pure task list transformations.

Every function takes a TaskList and returns a new one; inputs are never
mutated. The current moment is passed in explicitly so callers (and tests)
control the clock.
"""

from __future__ import annotations

from datetime import datetime

from ..core.errors import TaskNotFoundError
from .task_models import Task, TaskList


def format_timestamp(moment: datetime) -> str:
    """Locale time-of-day, a space, then locale date (e.g. "14:05:09 10/17/26")."""
    return f"{moment.strftime('%X')} {moment.strftime('%x')}"


def timestamp_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def next_task_id(tasks: TaskList, moment: datetime) -> int:
    """
    Id for a task created at `moment`.

    Normally the millisecond timestamp. If that id is already taken (two adds
    within the same millisecond, or the clock stepped back), use max + 1.
    """
    candidate = timestamp_ms(moment)
    taken = {t.id for t in tasks}
    if candidate not in taken:
        return candidate
    return max(taken) + 1


def find_task(tasks: TaskList, task_id: int) -> Task | None:
    for t in tasks:
        if t.id == task_id:
            return t
    return None


def append_task(tasks: TaskList, name: str, moment: datetime) -> TaskList:
    task = Task(id=next_task_id(tasks, moment), name=name, time=format_timestamp(moment))
    return (*tasks, task)


def rename_task(tasks: TaskList, task_id: int, name: str, moment: datetime) -> TaskList:
    """Replace name and time of one task in place; order and id are kept."""
    if find_task(tasks, task_id) is None:
        raise TaskNotFoundError(task_id)

    stamp = format_timestamp(moment)
    return tuple(
        Task(id=t.id, name=name, time=stamp) if t.id == task_id else t for t in tasks
    )


def remove_task(tasks: TaskList, task_id: int) -> TaskList:
    return tuple(t for t in tasks if t.id != task_id)
