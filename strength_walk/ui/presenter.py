"""Display text and progress values derived from the engine state."""

from __future__ import annotations

from dataclasses import dataclass

from strength_walk.core.state import WorkoutPhase, WorkoutState
from strength_walk.workout.i18n import ui_text
from strength_walk.workout.model import Timeline, TimingSettings, WorkoutTexts


@dataclass(frozen=True)
class ExerciseView:
    title: str
    block: str
    icon: str
    description: str
    in_setup: bool = False


@dataclass(frozen=True)
class ScheduleRow:
    index: int
    block: str
    window: str
    block_name: str
    name: str
    duration: str


def fmt_clock(total_seconds: int) -> str:
    minutes, seconds = divmod(max(0, total_seconds), 60)
    return f"{minutes:d}:{seconds:02d}"


def workout_elapsed(state: WorkoutState, settings: TimingSettings) -> int:
    """Seconds on the workout timeline, i.e. not counting the start countdown."""
    return max(0, state.total_elapsed_seconds - settings.countdown_s)


def clock_line(state: WorkoutState, timeline: Timeline, settings: TimingSettings) -> str:
    elapsed = workout_elapsed(state, settings)
    if state.phase is WorkoutPhase.COMPLETE:
        elapsed = timeline.total_seconds
    return f"{fmt_clock(elapsed)} / {fmt_clock(timeline.total_seconds)}"


def total_progress_pct(state: WorkoutState, timeline: Timeline, settings: TimingSettings) -> float:
    if state.phase is WorkoutPhase.COMPLETE:
        return 100.0
    if timeline.total_seconds <= 0:
        return 0.0
    return min(100.0, workout_elapsed(state, settings) / timeline.total_seconds * 100.0)


def exercise_progress_pct(state: WorkoutState, timeline: Timeline) -> float | None:
    """Work-phase share of the current exercise; ``None`` when no exercise is active.

    Setup seconds are not counted, so progress stays at 0 until work begins.
    """
    if state.phase is not WorkoutPhase.EXERCISE:
        return None
    current = timeline.get(state.current_exercise_index)
    if current is None:
        return None
    time_in_work = state.exercise_elapsed_seconds - current.setup_s
    if time_in_work <= 0:
        return 0.0
    return min(100.0, time_in_work / current.work_s * 100.0)


def exercise_view(
    state: WorkoutState,
    timeline: Timeline,
    texts: WorkoutTexts,
    settings: TimingSettings,
) -> ExerciseView:
    locale = timeline.locale
    if state.phase is WorkoutPhase.READY:
        return ExerciseView(
            title=ui_text(texts, locale, "readyMessage"),
            block="",
            icon="",
            description=ui_text(texts, locale, "readyDescription"),
        )
    if state.phase is WorkoutPhase.COMPLETE:
        return ExerciseView(
            title=ui_text(texts, locale, "congratsTitle"),
            block="",
            icon="🎉",
            description=ui_text(texts, locale, "congratsSubtitle"),
        )
    if state.phase is WorkoutPhase.COUNTDOWN:
        remaining = max(0, settings.countdown_s - state.total_elapsed_seconds)
        return ExerciseView(
            title=f"{ui_text(texts, locale, 'countdown')} {remaining}",
            block="",
            icon="⏱️",
            description=ui_text(texts, locale, "readyDescription"),
        )

    current = timeline.get(state.current_exercise_index)
    if state.phase is WorkoutPhase.BLOCK_REST:
        return ExerciseView(
            title=f"{ui_text(texts, locale, 'blockRest')}: {state.block_rest_remaining}s",
            block=current.block_name if current is not None else "",
            icon="⏸️",
            description=ui_text(texts, locale, "blockRestHint"),
        )
    if current is None:
        return ExerciseView(title="", block="", icon="", description="")

    in_setup = state.exercise_elapsed_seconds < current.setup_s
    description = current.description
    if in_setup:
        description = f"{ui_text(texts, locale, 'setupExercise')} {current.setup_hint}"
    return ExerciseView(
        title=current.name,
        block=current.block_name,
        icon=current.icon,
        description=description,
        in_setup=in_setup,
    )


def countdown_overlay(
    state: WorkoutState, settings: TimingSettings, go_text: str, show_go: bool = False
) -> str | None:
    """Text for the start overlay, or None when it should be hidden.

    The countdown tick that reaches zero also enters the first exercise, so the
    go text is shown only on request from the caller, after ``CountdownTicked(0)``.
    """
    if state.phase is WorkoutPhase.COUNTDOWN:
        return str(settings.countdown_s - state.total_elapsed_seconds)
    if show_go and state.phase is WorkoutPhase.EXERCISE:
        return go_text
    return None


def up_next_text(timeline: Timeline, texts: WorkoutTexts, next_index: int) -> str | None:
    upcoming = timeline.get(next_index)
    if upcoming is None:
        return None
    return f"{ui_text(texts, timeline.locale, 'upNext')} {upcoming.name}"


def schedule_rows(timeline: Timeline) -> list[ScheduleRow]:
    """One row per exercise showing only the work window, not the setup."""
    return [
        ScheduleRow(
            index=index,
            block=exercise.block,
            window=f"{fmt_clock(exercise.work_start)}–{fmt_clock(exercise.end)}",
            block_name=exercise.block_name,
            name=exercise.name,
            duration=f"{exercise.work_s} s",
        )
        for index, exercise in enumerate(timeline.exercises)
    ]
