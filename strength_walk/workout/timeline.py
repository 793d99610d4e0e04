"""Flatten the block/exercise schedule into absolute offsets."""

from __future__ import annotations

from typing import Iterable, Mapping

from strength_walk.workout.model import ExerciseSpec, TimedExercise, Timeline, WorkoutTexts


class MissingLocalizationError(ValueError):
    """Raised when an exercise has no text for the requested locale."""


def build_timeline(
    exercises: Iterable[ExerciseSpec],
    block_rest_s: Mapping[str, int],
    texts: WorkoutTexts,
    locale: str,
) -> Timeline:
    """Compute setup/work/end offsets for every exercise, in input order.

    Rest from ``block_rest_s`` is inserted only when the block changes, and
    never after the last exercise. Blocks are not reordered.
    """
    clock = 0
    prev_block: str | None = None
    out: list[TimedExercise] = []

    for exercise in exercises:
        if prev_block is not None and prev_block != exercise.block:
            clock += max(0, block_rest_s.get(prev_block, 0))

        setup_start = clock
        work_start = setup_start + exercise.setup_s
        end = work_start + exercise.work_s

        entry = texts.exercises.get(exercise.id)
        text = entry.by_locale.get(locale) if entry is not None else None
        if entry is None or text is None:
            raise MissingLocalizationError(
                f"Exercise '{exercise.id}' has no text for locale '{locale}'"
            )

        out.append(
            TimedExercise(
                n=exercise.n,
                id=exercise.id,
                block=exercise.block,
                setup_s=exercise.setup_s,
                work_s=exercise.work_s,
                setup_start=setup_start,
                work_start=work_start,
                end=end,
                name=text.name,
                description=text.description,
                setup_hint=text.setup_hint,
                icon=entry.icon,
                block_name=texts.blocks.get(locale, {}).get(exercise.block, exercise.block),
            )
        )
        clock = end
        prev_block = exercise.block

    return Timeline(exercises=tuple(out), total_seconds=clock, locale=locale)
