# src/gauntlet/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures the data directory exists,
- opens the one TaskStore connection for this run,
- wires store + console into AppState.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator

from ..connectors.console_connector import StreamConsole
from ..core.ports import Console
from ..core.state import AppState
from ..paths import setup_data_directory
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    setup_data_directory(settings.data_dir)
    if settings.tasks_db_path.parent != settings.data_dir:
        setup_data_directory(settings.tasks_db_path.parent)


@contextlib.contextmanager
def open_state(settings, *, console: Console | None = None) -> Iterator[AppState]:
    """
    Yield an AppState whose store is closed exactly once on the way out,
    whether the command succeeded or raised.
    """
    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_db_path)
    try:
        yield AppState(
            settings=settings,
            task_store=store,
            console=console if console is not None else StreamConsole(),
        )
    finally:
        store.close()
