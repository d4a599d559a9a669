# src/todo_console/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the console and the single TaskStore instance into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import StdioConsole
from ..core.ports import ConsoleIO
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, console: ConsoleIO | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and console injectable makes the app easier to test and avoids hidden globals.
    If settings is None, falls back to get_settings(); if console is None, uses stdin/stdout.
    """
    if settings is None:
        settings = get_settings()

    state = AppState(
        settings=settings,
        console=console if console is not None else StdioConsole(),
        task_store=TaskStore(),
    )
    logger.debug("AppState created (console=%s).", type(state.console).__name__)
    return state
