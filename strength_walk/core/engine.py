"""Phase state machine advanced by a one-per-second tick."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from strength_walk.core.state import (
    BlockRestStarted,
    CountdownTicked,
    ExerciseStarted,
    UpNext,
    WorkoutCompleted,
    WorkoutEvent,
    WorkoutPhase,
    WorkoutState,
)
from strength_walk.workout.model import TimedExercise, Timeline, TimingSettings

EventListener = Callable[[WorkoutEvent], None]
Transition = tuple[WorkoutState, tuple[WorkoutEvent, ...]]


def advance(state: WorkoutState, timeline: Timeline, settings: TimingSettings) -> Transition:
    """Apply one tick to ``state`` and return the new state plus emitted events.

    Ticks received while not running, while paused, or in ``ready`` /
    ``complete`` are ignored.
    """
    if not state.ticking:
        return state, ()

    if state.phase is WorkoutPhase.COUNTDOWN:
        total = state.total_elapsed_seconds + 1
        remaining = max(0, settings.countdown_s - total)
        state = replace(state, total_elapsed_seconds=total)
        if remaining > 0:
            return state, (CountdownTicked(remaining),)
        state, events = _enter_exercise(state, timeline, 0)
        return state, (CountdownTicked(0), *events)

    if state.phase is WorkoutPhase.EXERCISE:
        current = timeline.get(state.current_exercise_index)
        if current is None:
            return _complete(state, len(timeline))

        elapsed = state.exercise_elapsed_seconds + 1
        state = replace(
            state,
            total_elapsed_seconds=state.total_elapsed_seconds + 1,
            exercise_elapsed_seconds=elapsed,
        )

        events: tuple[WorkoutEvent, ...] = ()
        time_in_work = elapsed - current.setup_s
        time_until_end = current.work_s - time_in_work
        next_index = state.current_exercise_index + 1
        # Exact match only, so at most once per exercise; a notice longer than
        # setup_s + work_s - 1 never fires.
        if time_until_end == settings.up_next_notice_s and next_index < len(timeline):
            events = (UpNext(next_index),)

        if elapsed >= current.total_duration:
            state, finished = _finish_exercise(state, timeline, settings, current)
            events = (*events, *finished)
        return state, events

    if state.phase is WorkoutPhase.BLOCK_REST:
        remaining = state.block_rest_remaining - 1
        state = replace(
            state,
            total_elapsed_seconds=state.total_elapsed_seconds + 1,
            block_rest_remaining=max(0, remaining),
        )
        if remaining > 0:
            return state, ()
        return _enter_exercise(state, timeline, state.current_exercise_index)

    return state, ()


def _enter_exercise(state: WorkoutState, timeline: Timeline, index: int) -> Transition:
    if index >= len(timeline):
        return _complete(state, len(timeline))
    state = replace(
        state,
        phase=WorkoutPhase.EXERCISE,
        current_exercise_index=index,
        exercise_elapsed_seconds=0,
        block_rest_remaining=0,
    )
    return state, (ExerciseStarted(index),)


def _finish_exercise(
    state: WorkoutState,
    timeline: Timeline,
    settings: TimingSettings,
    finished: TimedExercise,
) -> Transition:
    next_index = state.current_exercise_index + 1
    state = replace(state, current_exercise_index=next_index, exercise_elapsed_seconds=0)
    upcoming = timeline.get(next_index)
    if upcoming is None:
        return _complete(state, len(timeline))

    if upcoming.block != finished.block:
        rest = settings.block_rest_s.get(finished.block, 0)
        if rest > 0:
            state = replace(state, phase=WorkoutPhase.BLOCK_REST, block_rest_remaining=rest)
            return state, (BlockRestStarted(rest),)

    return _enter_exercise(state, timeline, next_index)


def _complete(state: WorkoutState, length: int) -> Transition:
    state = replace(
        state,
        phase=WorkoutPhase.COMPLETE,
        current_exercise_index=length,
        exercise_elapsed_seconds=0,
        block_rest_remaining=0,
        running=False,
        paused=False,
    )
    return state, (WorkoutCompleted(),)


class WorkoutEngine:
    """Owns the current ``WorkoutState`` and publishes transition events.

    An empty timeline completes instantly on ``start()``.
    """

    def __init__(self, timeline: Timeline, settings: TimingSettings) -> None:
        self._timeline = timeline
        self._settings = settings
        self._state = WorkoutState()
        self._listeners: list[EventListener] = []

    @property
    def state(self) -> WorkoutState:
        return self._state

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def settings(self) -> TimingSettings:
        return self._settings

    @property
    def phase(self) -> WorkoutPhase:
        return self._state.phase

    @property
    def current_exercise_index(self) -> int:
        return self._state.current_exercise_index

    @property
    def total_elapsed_seconds(self) -> int:
        return self._state.total_elapsed_seconds

    @property
    def exercise_elapsed_seconds(self) -> int:
        return self._state.exercise_elapsed_seconds

    @property
    def block_rest_remaining(self) -> int:
        return self._state.block_rest_remaining

    @property
    def total_seconds(self) -> int:
        return self._timeline.total_seconds

    @property
    def current_exercise(self) -> TimedExercise | None:
        return self._timeline.get(self._state.current_exercise_index)

    @property
    def in_setup(self) -> bool:
        current = self.current_exercise
        return (
            self._state.phase is WorkoutPhase.EXERCISE
            and current is not None
            and self._state.exercise_elapsed_seconds < current.setup_s
        )

    def set_timeline(self, timeline: Timeline) -> None:
        """Swap in a rebuilt timeline (e.g. after a locale change)."""
        self._timeline = timeline

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def start(self) -> tuple[WorkoutEvent, ...]:
        if self._state.running and not self._state.paused:
            return ()
        if self._state.running and self._state.paused:
            self._state = replace(self._state, paused=False)
            return ()

        fresh = WorkoutState(phase=WorkoutPhase.COUNTDOWN, running=True)
        if len(self._timeline) == 0:
            return self._apply(_complete(fresh, 0))
        if self._settings.countdown_s <= 0:
            return self._apply(_enter_exercise(fresh, self._timeline, 0))
        self._state = fresh
        return ()

    def pause(self) -> None:
        if not self._state.running or self._state.paused:
            return
        self._state = replace(self._state, paused=True)

    def reset(self) -> None:
        self._state = WorkoutState()

    def tick(self) -> tuple[WorkoutEvent, ...]:
        return self._apply(advance(self._state, self._timeline, self._settings))

    def _apply(self, transition: Transition) -> tuple[WorkoutEvent, ...]:
        self._state, events = transition
        for event in events:
            for listener in list(self._listeners):
                listener(event)
        return events
