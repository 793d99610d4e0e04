"""Workout phase state owned by the engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class WorkoutPhase(str, Enum):
    READY = "ready"
    COUNTDOWN = "countdown"
    EXERCISE = "exercise"
    BLOCK_REST = "block_rest"
    COMPLETE = "complete"


@dataclass(frozen=True)
class WorkoutState:
    phase: WorkoutPhase = WorkoutPhase.READY
    current_exercise_index: int = -1
    total_elapsed_seconds: int = 0
    exercise_elapsed_seconds: int = 0
    block_rest_remaining: int = 0
    running: bool = False
    paused: bool = False

    @property
    def ticking(self) -> bool:
        return self.running and not self.paused

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["phase"] = self.phase.value
        return data


@dataclass(frozen=True)
class ExerciseStarted:
    index: int


@dataclass(frozen=True)
class UpNext:
    next_index: int


@dataclass(frozen=True)
class BlockRestStarted:
    remaining: int


@dataclass(frozen=True)
class CountdownTicked:
    remaining: int


@dataclass(frozen=True)
class WorkoutCompleted:
    pass


WorkoutEvent = ExerciseStarted | UpNext | BlockRestStarted | CountdownTicked | WorkoutCompleted
