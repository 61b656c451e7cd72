# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from gauntlet.core.state import AppState
from gauntlet.tasks.task_store import TaskStore

from .fakes import FakeConsole


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """main() reconfigures the root logger; put pytest's handlers back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the user's environment and data dir.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="gauntlet",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_db_path=data_dir / "tasks.db",
        log_file=data_dir / "gauntlet.log",
        score_max_attempts=3,
    )


@pytest.fixture()
def store(tmp_path: Path) -> Iterator[TaskStore]:
    s = TaskStore(tmp_path / "tasks.db")
    yield s
    s.close()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with a real SQLite store and a scripted console.

    Tests that need input replace state.console with their own FakeConsole.
    """
    return AppState(settings=settings, task_store=store, console=FakeConsole())
