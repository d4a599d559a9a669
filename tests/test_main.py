# tests/test_main.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_console.cli import main as cli_main
from todo_console.config import Settings

from fakes import FakeConsole


@pytest.fixture()
def restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        ("bogus", logging.WARNING),
        ("BASIC_FORMAT", logging.WARNING),
        ("", logging.WARNING),
    ],
)
def test_console_log_level(name: str, expected: int) -> None:
    assert cli_main.console_log_level(name) == expected


def _stderr_handler(root: logging.Logger) -> logging.Handler:
    return next(
        h for h in root.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    )


def test_main_runs_menu_with_bogus_log_level(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, restore_root_logging
) -> None:
    monkeypatch.setenv("TODO_PAUSE_AFTER_LISTING", "false")
    monkeypatch.setenv("TODO_LOG_LEVEL", "bogus")
    monkeypatch.setenv("TODO_LOG_TO_FILE", "false")
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setattr(cli_main, "get_settings", Settings.from_env)

    console = FakeConsole(["1", "Pay rent", "Transfer", "2024-07-01", "2", "10"])
    cli_main.main(console=console)

    assert _stderr_handler(restore_root_logging).level == logging.WARNING
    assert not any(isinstance(h, logging.FileHandler) for h in restore_root_logging.handlers)
    assert not (tmp_path / "data").exists()
    assert "The To-Do Item has been added successfully!" in console.output
    assert any("Title: Pay rent" in line for line in console.output)


def test_main_writes_log_file_when_enabled(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, restore_root_logging
) -> None:
    monkeypatch.delenv("TODO_APP_NAME", raising=False)
    monkeypatch.setenv("TODO_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("TODO_LOG_TO_FILE", "true")
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.setattr(cli_main, "get_settings", Settings.from_env)

    cli_main.main(console=FakeConsole(["10"]))

    assert _stderr_handler(restore_root_logging).level == logging.ERROR
    for h in restore_root_logging.handlers:
        h.flush()
    assert "Starting To-Do List Application..." in (tmp_path / "todo.log").read_text("utf-8")
