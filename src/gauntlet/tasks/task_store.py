# src/gauntlet/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..errors import ErrorKind, GauntletError
from .task_models import UNSCORED, Task

logger = logging.getLogger(__name__)

DB_FILENAME = "tasks.db"

# SQLite INTEGER is a signed 64-bit value.
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def _is_row_id(value: int) -> bool:
    return SQLITE_INT_MIN <= value <= SQLITE_INT_MAX


class TaskStore:
    """
    SQLite task store over a single `tasks` table.

    Connection lifecycle:
    - one connection, opened in __init__ and released by close()
    - close() is idempotent; the store is also a context manager

    The connection runs in autocommit mode. Multi-statement work goes through
    transaction(), which issues BEGIN/COMMIT/ROLLBACK explicitly.
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        self._conn: sqlite3.Connection | None = None

        try:
            conn = sqlite3.connect(str(self._db_path), isolation_level=None)
        except sqlite3.Error as exc:
            raise GauntletError(
                ErrorKind.DATABASE, f"cannot open database {self._db_path}: {exc}"
            ) from exc

        conn.row_factory = sqlite3.Row
        self._conn = conn

        try:
            self._ensure_schema()
        except sqlite3.Error as exc:
            self.close()
            raise GauntletError(
                ErrorKind.DATABASE, f"cannot create schema in {self._db_path}: {exc}"
            ) from exc

        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    @classmethod
    def open(cls, data_dir: str | Path) -> TaskStore:
        """Open (creating if needed) <data_dir>/tasks.db."""
        return cls(Path(data_dir) / DB_FILENAME)

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def closed(self) -> bool:
        return self._conn is None

    def close(self) -> None:
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        conn.close()
        logger.debug("TaskStore closed db=%s", self._db_path)

    def __enter__(self) -> TaskStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise GauntletError(ErrorKind.DATABASE, "task store is closed")
        return self._conn

    def _ensure_schema(self) -> None:
        self._get_conn().execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
                name TEXT,
                description TEXT,
                score INTEGER
            )
            """
        )

    def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        try:
            return self._get_conn().execute(sql, params)
        except (sqlite3.Error, OverflowError) as exc:
            raise GauntletError(ErrorKind.QUERY, f"{exc}: {' '.join(sql.split())}") from exc

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            name=str(row["name"] or ""),
            description=str(row["description"] or ""),
            score=int(row["score"] or UNSCORED),
        )

    @contextlib.contextmanager
    def transaction(self) -> Iterator[TaskStore]:
        """
        Run a block atomically.

        COMMIT on normal exit; ROLLBACK and re-raise on any exception.
        """
        self._execute("BEGIN")
        try:
            yield self
        except BaseException:
            conn = self._conn
            if conn is not None and conn.in_transaction:
                conn.rollback()
                logger.info("Transaction rolled back db=%s", self._db_path)
            raise
        self._execute("COMMIT")

    # ---- public API ----

    def count_tasks(self) -> int:
        (n,) = self._execute("SELECT COUNT(*) FROM tasks").fetchone()
        return int(n)

    def add_task(self, name: str, description: str) -> int:
        cur = self._execute(
            "INSERT INTO tasks(name, description, score) VALUES(?, ?, ?)",
            (name, description, UNSCORED),
        )
        rowid = cur.lastrowid
        if rowid is None:
            raise GauntletError(ErrorKind.QUERY, "SQLite did not return lastrowid for tasks insert")
        task_id = int(rowid)
        logger.debug("Task added id=%s name=%r", task_id, name)
        return task_id

    def get_task(self, task_id: int) -> Task | None:
        if not _is_row_id(int(task_id)):
            return None
        row = self._execute(
            "SELECT id, name, description, score FROM tasks WHERE id = ?",
            (int(task_id),),
        ).fetchone()
        return self._row_to_task(row) if row else None

    def list_unscored(self) -> list[Task]:
        """Tasks still at the default score, in insertion order."""
        rows = self._execute(
            "SELECT id, name, description, score FROM tasks WHERE score = ? ORDER BY id ASC",
            (UNSCORED,),
        ).fetchall()
        return [self._row_to_task(r) for r in rows]

    def update_score(self, task_id: int, score: int) -> int:
        """Set the score; returns rows affected (0 for an unknown id)."""
        if not _is_row_id(int(task_id)):
            return 0
        cur = self._execute(
            "UPDATE tasks SET score = ? WHERE id = ?",
            (int(score), int(task_id)),
        )
        logger.debug("Task scored id=%s score=%s rows=%s", task_id, score, cur.rowcount)
        return cur.rowcount

    def top_by_score(self) -> Task:
        """
        Highest-scored task. Ties go to the lowest id.

        Raises GauntletError(EMPTY) when there are no tasks at all.
        """
        row = self._execute(
            """
            SELECT id, name, description, score
            FROM tasks
            ORDER BY score DESC, id ASC
                LIMIT 1
            """
        ).fetchone()
        if row is None:
            raise GauntletError(ErrorKind.EMPTY, "no tasks to recommend")
        return self._row_to_task(row)

    def delete_task(self, task_id: int) -> int:
        """Delete by id; returns rows affected (0 for an unknown id)."""
        if not _is_row_id(int(task_id)):
            return 0
        cur = self._execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
        logger.debug("Task deleted id=%s rows=%s", task_id, cur.rowcount)
        return cur.rowcount
