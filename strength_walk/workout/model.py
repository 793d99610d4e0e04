"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExerciseSpec:
    n: int
    id: str
    block: str
    work_s: int
    setup_s: int = 0


@dataclass(frozen=True)
class ExerciseText:
    name: str
    description: str
    setup_hint: str


@dataclass(frozen=True)
class ExerciseTexts:
    icon: str
    by_locale: dict[str, ExerciseText]


@dataclass(frozen=True)
class WorkoutTexts:
    languages: tuple[str, ...]
    ui: dict[str, dict[str, str]]
    blocks: dict[str, dict[str, str]]
    exercises: dict[str, ExerciseTexts]


@dataclass(frozen=True)
class TimingSettings:
    countdown_s: int = 3
    up_next_notice_s: int = 5
    block_rest_s: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class WorkoutTiming:
    settings: TimingSettings
    sequence: tuple[str, ...]
    exercises: tuple[ExerciseSpec, ...]


@dataclass(frozen=True)
class WorkoutConfig:
    timing: WorkoutTiming
    texts: WorkoutTexts
    is_external: bool = False


@dataclass(frozen=True)
class TimedExercise:
    n: int
    id: str
    block: str
    setup_s: int
    work_s: int
    setup_start: int
    work_start: int
    end: int
    name: str
    description: str
    setup_hint: str
    icon: str
    block_name: str

    @property
    def total_duration(self) -> int:
        return self.setup_s + self.work_s


@dataclass(frozen=True)
class Timeline:
    exercises: tuple[TimedExercise, ...]
    total_seconds: int
    locale: str

    def __len__(self) -> int:
        return len(self.exercises)

    def get(self, index: int) -> TimedExercise | None:
        if 0 <= index < len(self.exercises):
            return self.exercises[index]
        return None
