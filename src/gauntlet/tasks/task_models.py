# src/gauntlet/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

UNSCORED = 0


@dataclass(slots=True)
class Task:
    id: int
    name: str
    description: str
    score: int = UNSCORED

    @property
    def is_scored(self) -> bool:
        return self.score != UNSCORED
