# tests/test_task_ops.py

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from taskmate.core.errors import TaskNotFoundError
from taskmate.tasks.task_models import Task
from taskmate.tasks.task_ops import (
    append_task,
    find_task,
    format_timestamp,
    next_task_id,
    remove_task,
    rename_task,
    timestamp_ms,
)

T0 = datetime(2026, 10, 17, 9, 5, 3)


def test_format_timestamp_is_time_then_date() -> None:
    # Tests run under the default "C" LC_TIME.
    assert format_timestamp(T0) == "09:05:03 10/17/26"


def test_append_uses_millisecond_id_and_keeps_input_untouched() -> None:
    tasks: tuple[Task, ...] = ()
    out = append_task(tasks, "Buy milk", T0)

    assert tasks == ()
    assert len(out) == 1
    assert out[0].id == timestamp_ms(T0)
    assert out[0].name == "Buy milk"
    assert out[0].time == format_timestamp(T0)


def test_next_task_id_never_collides() -> None:
    tasks = append_task((), "a", T0)
    # Same millisecond again.
    assert next_task_id(tasks, T0) == timestamp_ms(T0) + 1

    # Clock stepped backwards onto an existing id.
    later = append_task(tasks, "b", T0 + timedelta(seconds=5))
    assert next_task_id(later, T0) == timestamp_ms(T0 + timedelta(seconds=5)) + 1


def test_many_adds_with_frozen_clock_have_distinct_ids() -> None:
    tasks: tuple[Task, ...] = ()
    for i in range(50):
        tasks = append_task(tasks, f"task {i}", T0)

    assert len(tasks) == 50
    assert len({t.id for t in tasks}) == 50
    assert [t.name for t in tasks] == [f"task {i}" for i in range(50)]


def test_rename_replaces_in_place() -> None:
    tasks = append_task((), "a", T0)
    tasks = append_task(tasks, "b", T0 + timedelta(seconds=1))
    tasks = append_task(tasks, "c", T0 + timedelta(seconds=2))
    later = T0 + timedelta(minutes=3)

    out = rename_task(tasks, tasks[1].id, "B", later)

    assert [t.id for t in out] == [t.id for t in tasks]
    assert out[1] == Task(id=tasks[1].id, name="B", time=format_timestamp(later))
    assert out[0] is tasks[0]
    assert out[2] is tasks[2]


def test_rename_missing_raises() -> None:
    tasks = append_task((), "a", T0)
    with pytest.raises(TaskNotFoundError) as exc:
        rename_task(tasks, 42, "x", T0)
    assert exc.value.task_id == 42


def test_remove_and_find() -> None:
    tasks = append_task((), "a", T0)
    tasks = append_task(tasks, "b", T0 + timedelta(seconds=1))
    tasks = append_task(tasks, "c", T0 + timedelta(seconds=2))

    assert find_task(tasks, tasks[2].id) == tasks[2]
    assert find_task(tasks, 1) is None

    out = remove_task(tasks, tasks[1].id)
    assert [t.name for t in out] == ["a", "c"]
    assert remove_task(tasks, 1) == tasks
