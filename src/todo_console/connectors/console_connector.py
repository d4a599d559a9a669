# src/todo_console/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from ..cli.commands import MenuRegistry
from ..cli.commands import registry as menu_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


class StdioConsole:
    """ConsoleIO backed by stdin/stdout."""

    def read_line(self, prompt: str = "") -> str:
        # input() raises EOFError on closed stdin; the loop treats that as exit.
        return input(prompt)

    def write_line(self, message: str = "") -> None:
        print(message, file=sys.stdout, flush=True)


def run_console_loop(state: AppState, menu: MenuRegistry | None = None) -> None:
    menu = menu or menu_registry
    console = state.console
    app_name = str(getattr(state.settings, "app_name", "To-Do List Application"))

    logger.info("Console connector started.")

    while state.running:
        console.write_line()
        console.write_line(menu.build_menu(app_name))

        try:
            selection = console.read_line("Enter a selection: ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            console.write_line()
            break

        try:
            message = menu.handle(state, selection)
        except EOFError:
            logger.info("Console EOF received inside a menu action, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt inside a menu action, exiting.")
            console.write_line()
            break
        except Exception as e:
            logger.exception("Menu handler crashed.")
            console.write_line(f"An unexpected error has occurred: {e}")
            continue

        if message is not None:
            console.write_line(message)

    logger.info("Console connector finished.")
