# src/gauntlet/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import Console, TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so workflows never read global config.
    settings: object

    task_store: TaskRepo
    console: Console
