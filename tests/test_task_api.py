# tests/test_task_api.py

from __future__ import annotations

import uuid
from datetime import datetime

import pytest

from todo_console.tasks.task_api import format_task, parse_due_date, parse_task_id
from todo_console.tasks.task_models import Task


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2024-01-02", datetime(2024, 1, 2)),
        ("  2024-01-02  ", datetime(2024, 1, 2)),
        ("2024-01-02 09:30", datetime(2024, 1, 2, 9, 30)),
        ("2024-01-02T09:30:15", datetime(2024, 1, 2, 9, 30, 15)),
    ],
)
def test_parse_due_date_accepts_iso_forms(raw: str, expected: datetime) -> None:
    assert parse_due_date(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "next friday", "2024-02-30", "01/02/2024"])
def test_parse_due_date_rejects_garbage(raw) -> None:
    assert parse_due_date(raw) is None


def test_parse_due_date_drops_offset() -> None:
    value = parse_due_date("2024-01-02T09:30+00:00")
    assert value is not None
    assert value.tzinfo is None


def test_parse_task_id() -> None:
    task_id = uuid.uuid4()
    assert parse_task_id(str(task_id)) == task_id
    assert parse_task_id(f" {task_id} ") == task_id
    assert parse_task_id("not-a-guid") is None
    assert parse_task_id("") is None
    assert parse_task_id(None) is None


def test_format_task_with_custom_date_format() -> None:
    task = Task(
        id=uuid.UUID("12345678-1234-5678-1234-567812345678"),
        title="Pay rent",
        description="Transfer",
        due_date=datetime(2024, 7, 1),
        completed=True,
    )

    assert format_task(task, date_format="%d/%m/%Y") == (
        "ID: 12345678-1234-5678-1234-567812345678, Title: Pay rent, Description: Transfer, "
        "Due Date: 01/07/2024, Completed: True"
    )
    assert format_task(task, with_description=False) == (
        "ID: 12345678-1234-5678-1234-567812345678, Title: Pay rent, Due Date: 2024-07-01, Completed: True"
    )
