# src/gauntlet/scoring/questionnaire.py

"""
Priority questionnaire.

Eight fixed questions, each answered 1 (low) to 3 (high). A task's score is
the plain sum of the answers, so scored tasks land in 8..24.
"""

from __future__ import annotations

import logging

from ..core.ports import Console
from ..errors import ErrorKind, GauntletError

logger = logging.getLogger(__name__)

QUESTIONS: tuple[str, ...] = (
    "How urgent is this task? (1: Low, 2: Moderate, 3: High)",
    "Who will be affected by the completion of this task? (1: Small, 2: Team, 3: Organization)",
    "How long-lasting are the benefits of this task? (1: Low, 2: Moderate, 3: High)",
    "How much risk does this task mitigate? (1: Low, 2: Moderate, 3: High)",
    "How closely does this task align with key goals? (1: Low, 2: Moderate, 3: High)",
    "What opportunities are lost if this task is delayed? (1: Low, 2: Moderate, 3: High)",
    "How much effort vs reward for this task? (1: Low, 2: Moderate, 3: High)",
    "Does this task unblock other tasks? (1: Low, 2: Moderate, 3: High)",
)

MIN_ANSWER = 1
MAX_ANSWER = 3


def parse_answer(raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise GauntletError(ErrorKind.INPUT, f"not a number: {raw!r}") from None
    if not MIN_ANSWER <= value <= MAX_ANSWER:
        raise GauntletError(
            ErrorKind.INPUT, f"answer must be between {MIN_ANSWER} and {MAX_ANSWER}, got {value}"
        )
    return value


def _ask(console: Console, question: str, max_attempts: int) -> int:
    console.emit(question)
    for attempt in range(1, max_attempts + 1):
        try:
            raw = console.read_token()
        except EOFError:
            raise GauntletError(
                ErrorKind.INPUT, "input ended before the questionnaire was complete"
            ) from None

        try:
            return parse_answer(raw)
        except GauntletError as exc:
            logger.debug("Invalid answer attempt=%s/%s: %s", attempt, max_attempts, exc.message)
            if attempt == max_attempts:
                raise GauntletError(
                    ErrorKind.INPUT,
                    f"{exc.message} (giving up after {max_attempts} attempts)",
                ) from exc
            console.emit("Please answer 1, 2 or 3.")

    # max_attempts < 1
    raise GauntletError(ErrorKind.INPUT, "no attempts allowed")


def calculate_score(console: Console, *, max_attempts: int = 3) -> int:
    """Ask every question in order and return the sum of the answers."""
    total = 0
    for question in QUESTIONS:
        total += _ask(console, question, max_attempts)
    return total
