# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_console.cli.bootstrap import create_initial_state
from todo_console.core.state import AppState
from todo_console.tasks.task_store import TaskStore

from fakes import FakeConsole


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and menu handlers.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="To-Do List Application",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "todo",
        date_format="%Y-%m-%d",
        pause_after_listing=False,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def console() -> FakeConsole:
    return FakeConsole()


@pytest.fixture()
def state(settings: SimpleNamespace, console: FakeConsole) -> AppState:
    """AppState wired through the real composition root with a fake console."""
    return create_initial_state(settings=settings, console=console)
