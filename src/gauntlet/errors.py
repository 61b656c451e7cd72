# src/gauntlet/errors.py

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """What went wrong, coarse enough for the CLI to report and exit on."""

    FILESYSTEM = "filesystem"  # data dir setup
    DATABASE = "database"  # connect / schema
    QUERY = "query"  # statement execution
    EMPTY = "empty"  # no rows where one was required
    INPUT = "input"  # console answers / ids


class GauntletError(Exception):
    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"
