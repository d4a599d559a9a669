# src/todo_console/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import ConsoleIO, TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in menu handlers.
    settings: object

    console: ConsoleIO
    task_store: TaskRepo

    running: bool = True
