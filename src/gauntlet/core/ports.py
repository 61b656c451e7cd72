# src/gauntlet/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the workflows.

Workflows depend on Protocols instead of concrete implementations, so tests can
drive them with in-memory consoles and fake repositories.
"""

from contextlib import AbstractContextManager
from typing import Any, Protocol


class Console(Protocol):
    """Line-oriented user I/O."""

    def emit(self, text: str) -> None: ...

    def read_token(self) -> str:
        """Next whitespace-delimited token; raises EOFError when input ends."""
        ...


class TaskRepo(Protocol):
    def add_task(self, name: str, description: str) -> int: ...
    def list_unscored(self) -> list[Any]: ...
    def update_score(self, task_id: int, score: int) -> int: ...
    def top_by_score(self) -> Any: ...
    def delete_task(self, task_id: int) -> int: ...
    def transaction(self) -> AbstractContextManager[Any]: ...
