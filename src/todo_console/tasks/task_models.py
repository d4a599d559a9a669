# src/todo_console/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class Outcome(StrEnum):
    """
    Result of a store operation that is not an error.

    Notes:
    - "not_found" is a normal answer for an unknown id, never raised.
    - "empty" is only produced by list_all().
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    EMPTY = "empty"


class ValidationError(ValueError):
    """Raised when a task field violates its contract (blank title/description)."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(message)
        self.field_name = field_name


@dataclass(slots=True)
class Task:
    id: uuid.UUID
    title: str
    description: str
    due_date: datetime
    completed: bool = False


@dataclass(frozen=True, slots=True)
class TaskListing:
    outcome: Outcome
    tasks: list[Task] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.outcome is Outcome.EMPTY


def naive_local(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
