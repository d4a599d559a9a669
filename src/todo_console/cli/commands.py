# src/todo_console/cli/commands.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime

from ..core.ports import ConsoleIO
from ..core.state import AppState
from ..tasks.task_api import (
    DEFAULT_DATE_FORMAT,
    EMPTY_LIST_MESSAGE,
    parse_due_date,
    parse_task_id,
    render_tasks,
)
from ..tasks.task_models import Outcome, Task

MenuHandler = Callable[[AppState], None]

logger = logging.getLogger(__name__)


class MenuRegistry:
    """Numbered menu registry used by the console connector (1 = add, 2 = display, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[int, MenuHandler] = {}
        self._labels: dict[int, str] = {}

    def register(self, number: int, handler: MenuHandler, label: str) -> None:
        self._handlers[number] = handler
        self._labels[number] = label

    def numbers(self) -> list[int]:
        return sorted(self._handlers)

    def invalid_selection_message(self) -> str:
        nums = self.numbers()
        if not nums:
            return "No menu options are registered."
        return f"Please enter a valid number between {nums[0]} and {nums[-1]}."

    def build_menu(self, title: str) -> str:
        lines = [title, "=" * len(title)]
        for number in self.numbers():
            lines.append(f"{number}. {self._labels[number]}")
        return "\n".join(lines)

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a raw menu selection like "3".
        Returns a message for an invalid selection, or None once the handler ran.
        """
        try:
            number = int(line.strip())
        except ValueError:
            return self.invalid_selection_message()

        handler = self._handlers.get(number)
        if handler is None:
            return self.invalid_selection_message()

        logger.debug("Menu selection %s (%s)", number, self._labels[number])
        handler(state)
        return None


registry = MenuRegistry()


# ---- prompt helpers ----


def _date_format(state: AppState) -> str:
    return str(getattr(state.settings, "date_format", DEFAULT_DATE_FORMAT))


def prompt_text(console: ConsoleIO, prompt: str, field_name: str) -> str:
    while True:
        value = console.read_line(prompt)
        if value and value.strip():
            return value
        console.write_line(f"The To-Do Item {field_name} cannot be empty. Please try again.")


def prompt_due_date(console: ConsoleIO, prompt: str) -> datetime:
    while True:
        value = parse_due_date(console.read_line(prompt))
        if value is not None:
            return value
        console.write_line("Invalid date format. Please enter the date in YYYY-MM-DD format.")


def prompt_task_id(console: ConsoleIO, prompt: str) -> uuid.UUID:
    while True:
        value = parse_task_id(console.read_line(prompt))
        if value is not None:
            return value
        console.write_line("Invalid To-Do Item ID, it should be in GUID format.")


def _pause(state: AppState) -> None:
    if getattr(state.settings, "pause_after_listing", True):
        state.console.read_line("Press Enter to continue...")


def _write_tasks(state: AppState, tasks: list[Task], *, with_description: bool = True) -> None:
    if not tasks:
        state.console.write_line(EMPTY_LIST_MESSAGE)
        return
    for line in render_tasks(tasks, date_format=_date_format(state), with_description=with_description):
        state.console.write_line(line)


# ---- menu handlers ----


def cmd_add(state: AppState) -> None:
    console = state.console
    title = prompt_text(console, "Enter The To-Do Item Title: ", "title")
    description = prompt_text(console, "Enter The To-Do Item Description: ", "description")
    due_date = prompt_due_date(console, "Enter The To-Do Item Due Date (YYYY-MM-DD): ")

    task_id = state.task_store.add_task(title, description, due_date)
    console.write_line("The To-Do Item has been added successfully!")
    console.write_line(f"ID: {task_id}")


def cmd_display(state: AppState) -> None:
    listing = state.task_store.list_all()
    if listing.is_empty:
        state.console.write_line(EMPTY_LIST_MESSAGE)
    else:
        _write_tasks(state, listing.tasks)
    _pause(state)


def cmd_update(state: AppState) -> None:
    console = state.console
    task_id = prompt_task_id(console, "Enter To-Do Item ID to be updated: ")
    title = prompt_text(console, "Enter The New To-Do Item Title: ", "title")
    description = prompt_text(console, "Enter The New To-Do Item Description: ", "description")
    due_date = prompt_due_date(console, "Enter The New To-Do Item Due Date (YYYY-MM-DD): ")

    outcome = state.task_store.update_task(task_id, title, description, due_date)
    if outcome is Outcome.SUCCESS:
        console.write_line("The To-Do Item has been updated successfully!")
    else:
        console.write_line("The To-Do Item was not found.")


def cmd_delete(state: AppState) -> None:
    task_id = prompt_task_id(state.console, "Enter The To-Do Item ID to be deleted: ")
    outcome = state.task_store.delete_task(task_id)
    if outcome is Outcome.SUCCESS:
        state.console.write_line("The To-Do item has been deleted successfully!")
    else:
        state.console.write_line("The To-Do item was not found.")


def cmd_complete(state: AppState) -> None:
    task_id = prompt_task_id(state.console, "Enter The To-Do Item ID to be marked as completed: ")
    outcome = state.task_store.mark_completed(task_id)
    if outcome is Outcome.SUCCESS:
        state.console.write_line("The To-Do item has been marked as completed!")
    else:
        state.console.write_line("The To-Do item was not found.")


def cmd_sort_due(state: AppState) -> None:
    state.console.write_line("The To-Do Items have been sorted by due date:")
    _write_tasks(state, state.task_store.sort_by_due_date())
    _pause(state)


def cmd_sort_title(state: AppState) -> None:
    state.console.write_line("The To-Do Items have been sorted by title:")
    _write_tasks(state, state.task_store.sort_by_title())
    _pause(state)


def cmd_filter_completed(state: AppState) -> None:
    state.console.write_line("The To-Do items have been filtered by completed:")
    _write_tasks(state, state.task_store.filter_completed(), with_description=False)
    _pause(state)


def cmd_filter_not_completed(state: AppState) -> None:
    state.console.write_line("The To-Do items have been filtered by not completed:")
    _write_tasks(state, state.task_store.filter_not_completed(), with_description=False)
    _pause(state)


def cmd_exit(state: AppState) -> None:
    logger.info("Exit selected from menu.")
    state.running = False


registry.register(1, cmd_add, "Add New To-Do Item")
registry.register(2, cmd_display, "Display The To-Do List")
registry.register(3, cmd_update, "Update One To-Do Item")
registry.register(4, cmd_delete, "Delete One To-Do Item")
registry.register(5, cmd_complete, "Mark One To-Do Item as Completed")
registry.register(6, cmd_sort_due, "Sort To-Do Items By Due Date")
registry.register(7, cmd_sort_title, "Sort To-Do Items By Title")
registry.register(8, cmd_filter_completed, "Filter To-Do Items By Completed")
registry.register(9, cmd_filter_not_completed, "Filter To-Do Items By Not Completed")
registry.register(10, cmd_exit, "Exit The To-Do Application")
