# src/todo_console/tasks/task_api.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from datetime import datetime

from .task_models import Task, naive_local

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%Y-%m-%d"
EMPTY_LIST_MESSAGE = "No to-do items were found."


def format_task(task: Task, *, date_format: str = DEFAULT_DATE_FORMAT, with_description: bool = True) -> str:
    """
    One display line per task.

    Filter views leave the description out to keep the lines short.
    """
    due = task.due_date.strftime(date_format)
    if with_description:
        return (
            f"ID: {task.id}, Title: {task.title}, Description: {task.description}, "
            f"Due Date: {due}, Completed: {task.completed}"
        )
    return f"ID: {task.id}, Title: {task.title}, Due Date: {due}, Completed: {task.completed}"


def render_tasks(
    tasks: Iterable[Task],
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
    with_description: bool = True,
) -> list[str]:
    return [format_task(t, date_format=date_format, with_description=with_description) for t in tasks]


def parse_due_date(raw: str | None) -> datetime | None:
    """
    Parse free-text due date input.

    Accepts "YYYY-MM-DD" and ISO date-times ("2024-01-02 09:30", "2024-01-02T09:30").
    Offsets are converted to local time and dropped so every stored date is naive.
    Returns None when the text is not a date.
    """
    text = (raw or "").strip()
    if not text:
        return None
    try:
        value = datetime.fromisoformat(text)
    except ValueError:
        return None
    return naive_local(value)


def parse_task_id(raw: str | None) -> uuid.UUID | None:
    """Parse a task id in GUID text form; None when malformed."""
    text = (raw or "").strip()
    if not text:
        return None
    try:
        return uuid.UUID(text)
    except ValueError:
        logger.debug("Rejected malformed task id %r", text)
        return None
