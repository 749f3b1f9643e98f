# tests/test_task_codec.py

from __future__ import annotations

import json

import pytest

from taskmate.core.errors import MalformedStorageError
from taskmate.tasks.task_codec import decode_tasks, decode_theme, encode_tasks, encode_theme
from taskmate.tasks.task_models import Task


def test_encode_matches_browser_format() -> None:
    tasks = (Task(id=1697551509000, name="Buy milk", time="9:05:03 AM 10/17/2023"),)
    assert encode_tasks(tasks) == (
        '[{"id":1697551509000,"name":"Buy milk","time":"9:05:03 AM 10/17/2023"}]'
    )
    assert encode_tasks(()) == "[]"


def test_decode_round_trip_keeps_order_and_unicode() -> None:
    tasks = (
        Task(id=2, name="Купить молоко", time="t1"),
        Task(id=1, name="", time="t2"),
    )
    assert decode_tasks(encode_tasks(tasks)) == tasks


def test_decode_accepts_browser_payload_and_null() -> None:
    raw = json.dumps([{"id": 1697551509000.0, "name": "a", "time": "t"}])
    assert decode_tasks(raw) == (Task(id=1697551509000, name="a", time="t"),)
    assert decode_tasks("null") == ()


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "",
        '{"id": 1}',
        "[1, 2]",
        '[{"id": 1, "name": "a"}]',
        '[{"id": true, "name": "a", "time": "t"}]',
        '[{"id": "1", "name": "a", "time": "t"}]',
        '[{"id": 1.5, "name": "a", "time": "t"}]',
        '[{"id": 1, "name": 5, "time": "t"}]',
        '[{"id": 1, "name": "a", "time": "t"}, {"id": 1, "name": "b", "time": "t"}]',
    ],
)
def test_decode_rejects_malformed(raw: str) -> None:
    with pytest.raises(MalformedStorageError) as exc:
        decode_tasks(raw)
    assert exc.value.key == "tasklist"


def test_theme_is_a_quoted_json_string() -> None:
    assert encode_theme("dark") == '"dark"'
    assert decode_theme('"dark"', "medium") == "dark"


def test_theme_defaults_and_errors() -> None:
    assert decode_theme("null", "medium") == "medium"
    assert decode_theme('""', "medium") == "medium"

    with pytest.raises(MalformedStorageError):
        decode_theme("dark", "medium")
    with pytest.raises(MalformedStorageError):
        decode_theme("42", "medium")
