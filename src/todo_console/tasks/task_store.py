# src/todo_console/tasks/task_store.py

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from .task_models import Outcome, Task, TaskListing, ValidationError, naive_local

logger = logging.getLogger(__name__)


def _require_text(field_name: str, value: str | None) -> None:
    if not value or not value.strip():
        raise ValidationError(field_name, f"The To-Do Item {field_name} cannot be null or empty.")


class TaskStore:
    """
    In-memory task store.

    The store is a plain list kept in insertion order:
    - ids are random UUIDs assigned on add
    - lookups by id scan linearly
    - query methods return fresh lists and never reorder the store

    Thread-safety:
    - none; one instance is owned by the app state for the whole run
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        logger.info("TaskStore ready (in-memory).")

    # ---- low-level helpers ----

    def _find(self, task_id: uuid.UUID) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _new_id(self) -> uuid.UUID:
        while True:
            task_id = uuid.uuid4()
            if self._find(task_id) is None:
                return task_id

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, task_id: uuid.UUID) -> Task | None:
        return self._find(task_id)

    def add_task(self, title: str | None, description: str | None, due_date: datetime) -> uuid.UUID:
        _require_text("title", title)
        _require_text("description", description)

        task = Task(
            id=self._new_id(),
            title=title,
            description=description,
            due_date=naive_local(due_date),
            completed=False,
        )
        self._tasks.append(task)
        logger.debug("Task added id=%s due_date=%s total=%s", task.id, task.due_date, len(self._tasks))
        return task.id

    def update_task(
        self,
        task_id: uuid.UUID,
        new_title: str | None,
        new_description: str | None,
        new_due_date: datetime,
    ) -> Outcome:
        """
        Overwrite title, description and due date of an existing task.

        Both texts are validated before the lookup, so a bad call raises
        ValidationError even for an unknown id.
        """
        _require_text("title", new_title)
        _require_text("description", new_description)

        task = self._find(task_id)
        if task is None:
            logger.debug("Task update skipped, id=%s not found", task_id)
            return Outcome.NOT_FOUND

        task.title = new_title
        task.description = new_description
        task.due_date = naive_local(new_due_date)
        logger.debug("Task updated id=%s", task_id)
        return Outcome.SUCCESS

    def delete_task(self, task_id: uuid.UUID) -> Outcome:
        task = self._find(task_id)
        if task is None:
            logger.debug("Task delete skipped, id=%s not found", task_id)
            return Outcome.NOT_FOUND

        self._tasks.remove(task)
        logger.debug("Task deleted id=%s total=%s", task_id, len(self._tasks))
        return Outcome.SUCCESS

    def mark_completed(self, task_id: uuid.UUID) -> Outcome:
        task = self._find(task_id)
        if task is None:
            logger.debug("Task completion skipped, id=%s not found", task_id)
            return Outcome.NOT_FOUND

        task.completed = True
        logger.debug("Task marked completed id=%s", task_id)
        return Outcome.SUCCESS

    def list_all(self) -> TaskListing:
        if not self._tasks:
            return TaskListing(outcome=Outcome.EMPTY)
        return TaskListing(outcome=Outcome.SUCCESS, tasks=list(self._tasks))

    def sort_by_due_date(self) -> list[Task]:
        # sorted() is stable: equal due dates keep insertion order.
        return sorted(self._tasks, key=lambda t: t.due_date)

    def sort_by_title(self) -> list[Task]:
        return sorted(self._tasks, key=lambda t: t.title)

    def filter_completed(self) -> list[Task]:
        return [t for t in self._tasks if t.completed]

    def filter_not_completed(self) -> list[Task]:
        return [t for t in self._tasks if not t.completed]
