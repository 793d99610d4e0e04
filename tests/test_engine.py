from __future__ import annotations

from strength_walk.core.engine import WorkoutEngine, advance
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
from strength_walk.workout.model import (
    ExerciseSpec,
    ExerciseText,
    ExerciseTexts,
    Timeline,
    TimingSettings,
    WorkoutTexts,
)
from strength_walk.workout.timeline import build_timeline


def _timeline(exercises: list[ExerciseSpec], rest: dict[str, int]) -> Timeline:
    texts = WorkoutTexts(
        languages=("en",),
        ui={"en": {}},
        blocks={"en": {}},
        exercises={
            ex.id: ExerciseTexts(icon="", by_locale={"en": ExerciseText(ex.id, "", "")})
            for ex in exercises
        },
    )
    return build_timeline(exercises, rest, texts, "en")


def _scenario_engine(notice: int = 5) -> tuple[WorkoutEngine, list[WorkoutEvent]]:
    rest = {"A": 5}
    timeline = _timeline(
        [
            ExerciseSpec(n=1, id="a", block="A", work_s=2, setup_s=0),
            ExerciseSpec(n=2, id="b", block="B", work_s=3, setup_s=1),
        ],
        rest,
    )
    engine = WorkoutEngine(
        timeline, TimingSettings(countdown_s=3, up_next_notice_s=notice, block_rest_s=rest)
    )
    events: list[WorkoutEvent] = []
    engine.subscribe(events.append)
    return engine, events


def _drive_to_completion(engine: WorkoutEngine, limit: int = 10_000) -> int:
    ticks = 0
    while engine.phase is not WorkoutPhase.COMPLETE and ticks < limit:
        engine.tick()
        ticks += 1
    return ticks


def test_two_block_scenario_phase_sequence() -> None:
    engine, events = _scenario_engine()
    engine.start()
    assert engine.phase is WorkoutPhase.COUNTDOWN

    phases = []
    for _ in range(14):
        engine.tick()
        phases.append(engine.phase)

    assert phases[:2] == [WorkoutPhase.COUNTDOWN] * 2
    assert phases[2:4] == [WorkoutPhase.EXERCISE] * 2
    assert phases[4:9] == [WorkoutPhase.BLOCK_REST] * 5
    assert phases[9:13] == [WorkoutPhase.EXERCISE] * 4
    assert phases[13] is WorkoutPhase.COMPLETE
    assert engine.total_seconds == 11
    assert engine.current_exercise_index == 2
    assert engine.state.running is False

    assert [e for e in events if not isinstance(e, CountdownTicked)] == [
        ExerciseStarted(0),
        BlockRestStarted(5),
        ExerciseStarted(1),
        WorkoutCompleted(),
    ]
    assert [e for e in events if isinstance(e, CountdownTicked)] == [
        CountdownTicked(2),
        CountdownTicked(1),
        CountdownTicked(0),
    ]


def test_terminal_convergence_and_ticks_after_complete_are_ignored() -> None:
    rest = {"warm": 4, "main": 6}
    timeline = _timeline(
        [
            ExerciseSpec(n=1, id="w1", block="warm", work_s=7, setup_s=2),
            ExerciseSpec(n=2, id="w2", block="warm", work_s=5),
            ExerciseSpec(n=3, id="m1", block="main", work_s=9, setup_s=3),
            ExerciseSpec(n=4, id="s1", block="stretch", work_s=4, setup_s=1),
        ],
        rest,
    )
    engine = WorkoutEngine(timeline, TimingSettings(countdown_s=3, block_rest_s=rest))
    engine.start()

    ticks = _drive_to_completion(engine)

    assert ticks == 3 + timeline.total_seconds
    assert engine.total_elapsed_seconds == 3 + timeline.total_seconds
    frozen = engine.state
    for _ in range(5):
        assert engine.tick() == ()
    assert engine.state == frozen


def test_up_next_fires_exactly_once_at_threshold() -> None:
    timeline = _timeline(
        [
            ExerciseSpec(n=1, id="a", block="A", work_s=10, setup_s=2),
            ExerciseSpec(n=2, id="b", block="A", work_s=10),
        ],
        {},
    )
    engine = WorkoutEngine(timeline, TimingSettings(countdown_s=1, up_next_notice_s=5))
    engine.start()
    engine.tick()

    fired_at: list[int] = []
    for _ in range(12):
        events = engine.tick()
        if UpNext(1) in events:
            fired_at.append(engine.exercise_elapsed_seconds)

    # setup 2 + (work 10 - notice 5)
    assert fired_at == [7]


def test_up_next_never_fires_when_notice_exceeds_exercise() -> None:
    timeline = _timeline(
        [
            ExerciseSpec(n=1, id="a", block="A", work_s=3),
            ExerciseSpec(n=2, id="b", block="A", work_s=3),
        ],
        {},
    )
    engine = WorkoutEngine(timeline, TimingSettings(countdown_s=0, up_next_notice_s=5))
    events: list[WorkoutEvent] = []
    engine.subscribe(events.append)
    engine.start()
    _drive_to_completion(engine)

    assert not any(isinstance(e, UpNext) for e in events)


def test_no_up_next_for_last_exercise() -> None:
    engine, events = _scenario_engine(notice=1)
    engine.start()
    _drive_to_completion(engine)

    assert [e for e in events if isinstance(e, UpNext)] == [UpNext(1)]


def test_setup_phase_is_derived_from_elapsed() -> None:
    engine, _ = _scenario_engine()
    engine.start()
    for _ in range(3 + 2 + 5):
        engine.tick()

    assert engine.current_exercise_index == 1
    assert engine.in_setup is True
    engine.tick()
    assert engine.in_setup is False


def test_pause_freezes_counters_and_resume_keeps_them() -> None:
    engine, _ = _scenario_engine()
    engine.start()
    for _ in range(4):
        engine.tick()
    before = engine.state

    engine.pause()
    for _ in range(10):
        assert engine.tick() == ()
    assert engine.state.paused is True
    engine.start()

    after = engine.state
    assert after.paused is False
    assert after.total_elapsed_seconds == before.total_elapsed_seconds
    assert after.exercise_elapsed_seconds == before.exercise_elapsed_seconds
    assert after.current_exercise_index == before.current_exercise_index
    assert after.phase is before.phase


def test_start_and_pause_in_invalid_states_are_noops() -> None:
    engine, events = _scenario_engine()
    engine.pause()
    assert engine.state == WorkoutState()

    engine.start()
    engine.tick()
    running = engine.state
    engine.start()
    assert engine.state == running

    engine.pause()
    paused = engine.state
    engine.pause()
    assert engine.state == paused
    assert all(isinstance(e, CountdownTicked) for e in events)


def test_reset_returns_to_ready_from_any_phase() -> None:
    engine, _ = _scenario_engine()
    engine.start()
    for _ in range(6):
        engine.tick()
    assert engine.phase is WorkoutPhase.BLOCK_REST

    engine.reset()

    assert engine.state == WorkoutState()
    assert engine.phase is WorkoutPhase.READY
    assert engine.current_exercise_index == -1
    assert engine.tick() == ()


def test_fresh_start_after_complete_restarts_counters() -> None:
    engine, _ = _scenario_engine()
    engine.start()
    _drive_to_completion(engine)

    engine.start()

    assert engine.phase is WorkoutPhase.COUNTDOWN
    assert engine.total_elapsed_seconds == 0
    assert engine.current_exercise_index == -1


def test_total_elapsed_is_monotonic_while_running() -> None:
    engine, _ = _scenario_engine()
    engine.start()
    seen = [engine.total_elapsed_seconds]
    while engine.phase is not WorkoutPhase.COMPLETE:
        engine.tick()
        seen.append(engine.total_elapsed_seconds)

    assert seen == sorted(seen)
    assert seen[-1] == 14


def test_block_rest_counts_down_to_zero() -> None:
    engine, _ = _scenario_engine()
    engine.start()
    for _ in range(5):
        engine.tick()

    remaining = []
    while engine.phase is WorkoutPhase.BLOCK_REST:
        remaining.append(engine.block_rest_remaining)
        engine.tick()

    assert remaining == [5, 4, 3, 2, 1]
    assert engine.phase is WorkoutPhase.EXERCISE
    assert engine.exercise_elapsed_seconds == 0


def test_empty_timeline_completes_instantly_on_start() -> None:
    engine = WorkoutEngine(_timeline([], {}), TimingSettings())
    events: list[WorkoutEvent] = []
    engine.subscribe(events.append)

    engine.start()

    assert events == [WorkoutCompleted()]
    assert engine.phase is WorkoutPhase.COMPLETE
    assert engine.current_exercise_index == 0
    assert engine.state.running is False
    assert engine.tick() == ()


def test_zero_countdown_starts_first_exercise_immediately() -> None:
    timeline = _timeline([ExerciseSpec(n=1, id="a", block="A", work_s=2)], {})
    engine = WorkoutEngine(timeline, TimingSettings(countdown_s=0))

    assert engine.start() == (ExerciseStarted(0),)
    assert engine.phase is WorkoutPhase.EXERCISE
    assert _drive_to_completion(engine) == 2


def test_advance_is_pure() -> None:
    engine, _ = _scenario_engine()
    engine.start()
    state = engine.state

    first = advance(state, engine.timeline, engine.settings)
    second = advance(state, engine.timeline, engine.settings)

    assert first == second
    assert state.total_elapsed_seconds == 0


def test_unsubscribe_stops_delivery() -> None:
    engine, _ = _scenario_engine()
    seen: list[WorkoutEvent] = []
    unsubscribe = engine.subscribe(seen.append)
    engine.start()
    engine.tick()
    unsubscribe()
    engine.tick()

    assert seen == [CountdownTicked(2)]


def test_state_snapshot_serializes_phase_value() -> None:
    engine, _ = _scenario_engine()
    engine.start()

    data = engine.state.to_dict()

    assert data["phase"] == "countdown"
    assert data["running"] is True
    assert data["current_exercise_index"] == -1
