# src/todo_console/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the menu layer.

The menu depends on Protocols instead of concrete implementations.
This keeps the console swappable and makes testing easier (no real terminal).
"""

import uuid
from datetime import datetime
from typing import Protocol

from ..tasks.task_models import Outcome, Task, TaskListing


class ConsoleIO(Protocol):
    """
    Line-based console capability.

    read_line() raises EOFError when input is exhausted.
    """

    def read_line(self, prompt: str = "") -> str: ...
    def write_line(self, message: str = "") -> None: ...


class TaskRepo(Protocol):
    # Mutations
    def add_task(self, title: str | None, description: str | None, due_date: datetime) -> uuid.UUID: ...
    def update_task(
            self,
            task_id: uuid.UUID,
            new_title: str | None,
            new_description: str | None,
            new_due_date: datetime,
    ) -> Outcome: ...
    def delete_task(self, task_id: uuid.UUID) -> Outcome: ...
    def mark_completed(self, task_id: uuid.UUID) -> Outcome: ...

    # Queries (never reorder the store)
    def get_task(self, task_id: uuid.UUID) -> Task | None: ...
    def count_tasks(self) -> int: ...
    def list_all(self) -> TaskListing: ...
    def sort_by_due_date(self) -> list[Task]: ...
    def sort_by_title(self) -> list[Task]: ...
    def filter_completed(self) -> list[Task]: ...
    def filter_not_completed(self) -> list[Task]: ...
