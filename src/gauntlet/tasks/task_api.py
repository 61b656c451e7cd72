# src/gauntlet/tasks/task_api.py

"""
Task workflows: what each CLI command actually does.

All of them talk to the user through state.console and to the database
through state.task_store; none of them exit the process.
"""

from __future__ import annotations

import logging

from ..core.state import AppState
from ..errors import ErrorKind, GauntletError
from ..scoring.questionnaire import calculate_score
from .task_models import Task

logger = logging.getLogger(__name__)


def add_task(state: AppState, name: str, description: str) -> int:
    task_id = state.task_store.add_task(name, description)
    logger.info("Added task id=%s", task_id)
    state.console.emit("Task added!")
    return task_id


def score_pending_tasks(state: AppState) -> int:
    """
    Run the questionnaire for every unscored task and store the results.

    The read and all updates share one transaction: either every pending task
    gets its score, or (on any error) none of them do.

    Returns the number of tasks scored.
    """
    max_attempts = int(getattr(state.settings, "score_max_attempts", 3))
    scored = 0

    with state.task_store.transaction():
        pending = state.task_store.list_unscored()
        logger.info("Scoring %d pending task(s)", len(pending))

        for task in pending:
            state.console.emit(f"Scoring task: {task.name}-{task.score}")
            score = calculate_score(state.console, max_attempts=max_attempts)
            state.console.emit(f"score:  {score}")

            rows = state.task_store.update_score(task.id, score)
            state.console.emit(f"Task scored! Rows affected: {rows}")
            scored += 1

    if not scored:
        state.console.emit("No tasks waiting to be scored.")
    return scored


def recommend_task(state: AppState) -> Task:
    task = state.task_store.top_by_score()
    logger.info("Recommending task id=%s score=%s", task.id, task.score)
    if not task.is_scored:
        logger.info("Recommended task id=%s has not been scored yet", task.id)
    state.console.emit(f"Next task to work on: {task.name} - {task.description} - {task.id}")
    return task


def parse_task_id(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise GauntletError(ErrorKind.INPUT, f"task id must be an integer, got {raw!r}") from None


def complete_task(state: AppState, raw_id: str | None = None) -> int:
    """
    Remove a finished task. Prompts for the id when none was given.

    An unknown id (including one too large to be a row id) is not an error;
    returns rows affected.
    """
    if raw_id is None:
        state.console.emit("Enter the task ID to mark as done:")
        try:
            raw_id = state.console.read_token()
        except EOFError:
            raise GauntletError(ErrorKind.INPUT, "no task id given") from None

    task_id = parse_task_id(raw_id)
    task = state.task_store.get_task(task_id)
    if task is None:
        logger.info("complete_task: no task with id=%s", task_id)
        rows = 0
    else:
        rows = state.task_store.delete_task(task_id)
        logger.info("Completed task id=%s name=%r score=%s", task.id, task.name, task.score)
    state.console.emit("Task completed and removed!")
    return rows
