# src/todo_console/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.ports import ConsoleIO
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def console_log_level(level_name: str) -> int:
    """Map settings.log_level to a logging level; unknown names mean WARNING."""
    level = getattr(logging, str(level_name).upper(), logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING


def main(console: ConsoleIO | None = None) -> None:
    settings = get_settings()
    console_level = console_log_level(settings.log_level)

    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings, console=console)
    try:
        run_console_loop(state)
    finally:
        logger.info("Bye. tasks_in_memory=%s", state.task_store.count_tasks())


if __name__ == "__main__":
    main()
