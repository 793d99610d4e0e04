from __future__ import annotations

import asyncio

import pytest

from strength_walk.core.state import (
    ExerciseStarted,
    WorkoutCompleted,
    WorkoutEvent,
    WorkoutPhase,
)
from strength_walk.ui.controller import WorkoutController
from strength_walk.workout.library import embedded_config
from strength_walk.workout.model import (
    ExerciseSpec,
    ExerciseText,
    ExerciseTexts,
    TimingSettings,
    WorkoutConfig,
    WorkoutTexts,
    WorkoutTiming,
)
from strength_walk.workout.timeline import MissingLocalizationError

TICK = 0.01


def _config(exercises: tuple[ExerciseSpec, ...]) -> WorkoutConfig:
    return WorkoutConfig(
        timing=WorkoutTiming(
            settings=TimingSettings(countdown_s=2, up_next_notice_s=1, block_rest_s={"A": 2}),
            sequence=("A", "B"),
            exercises=exercises,
        ),
        texts=WorkoutTexts(
            languages=("it", "en"),
            ui={"it": {}, "en": {}},
            blocks={"it": {"A": "Uno", "B": "Due"}, "en": {"A": "One", "B": "Two"}},
            exercises={
                ex.id: ExerciseTexts(
                    icon="",
                    by_locale={
                        "it": ExerciseText(f"{ex.id} it", "", ""),
                        "en": ExerciseText(f"{ex.id} en", "", ""),
                    },
                )
                for ex in exercises
            },
        ),
    )


SMALL = _config(
    (
        ExerciseSpec(n=1, id="a", block="A", work_s=2),
        ExerciseSpec(n=2, id="b", block="B", work_s=2, setup_s=1),
    )
)


def test_controller_runs_workout_to_completion() -> None:
    async def _run() -> None:
        controller = WorkoutController(SMALL, locale="en", tick_interval_sec=TICK)
        events: list[WorkoutEvent] = []
        finished = asyncio.Event()

        def on_event(event: WorkoutEvent) -> None:
            events.append(event)
            if isinstance(event, WorkoutCompleted):
                finished.set()

        controller.subscribe(on_event)
        await controller.start()
        assert controller.ticking

        await asyncio.wait_for(finished.wait(), timeout=5.0)
        await asyncio.sleep(TICK * 3)

        assert controller.state.phase is WorkoutPhase.COMPLETE
        assert controller.state.total_elapsed_seconds == 2 + controller.timeline.total_seconds
        assert not controller.ticking
        assert [e.index for e in events if isinstance(e, ExerciseStarted)] == [0, 1]

    asyncio.run(_run())


def test_controller_pause_stops_ticks_and_resume_continues() -> None:
    async def _run() -> None:
        controller = WorkoutController(SMALL, tick_interval_sec=TICK)
        await controller.start()
        await asyncio.sleep(TICK * 3.5)

        await controller.pause()
        frozen = controller.state
        assert not controller.ticking
        await asyncio.sleep(TICK * 10)
        assert controller.state == frozen

        await controller.toggle()
        assert controller.ticking
        assert controller.state.paused is False
        assert controller.state.total_elapsed_seconds == frozen.total_elapsed_seconds

        await controller.reset()
        assert not controller.ticking
        assert controller.state.phase is WorkoutPhase.READY

    asyncio.run(_run())


def test_toggle_from_ready_starts_countdown() -> None:
    async def _run() -> None:
        controller = WorkoutController(SMALL, tick_interval_sec=10.0)
        await controller.toggle()
        assert controller.state.phase is WorkoutPhase.COUNTDOWN
        await controller.toggle()
        assert controller.state.paused is True
        await controller.reset()

    asyncio.run(_run())


def test_set_locale_rebuilds_text_and_keeps_state() -> None:
    async def _run() -> None:
        controller = WorkoutController(SMALL, locale="it", tick_interval_sec=10.0)
        await controller.start()
        before = controller.state
        offsets = [ex.setup_start for ex in controller.timeline.exercises]

        assert controller.set_locale("en") == "en"
        assert controller.timeline.exercises[0].name == "a en"
        assert controller.timeline.exercises[1].block_name == "Two"
        assert [ex.setup_start for ex in controller.timeline.exercises] == offsets
        assert controller.state == before

        assert controller.set_locale("xx") == "it"
        await controller.reset()

    asyncio.run(_run())


def test_english_only_texts_fall_back_to_first_language() -> None:
    texts = SMALL.texts
    english = WorkoutConfig(
        timing=SMALL.timing,
        texts=WorkoutTexts(
            languages=("en",),
            ui={"en": {}},
            blocks={"en": texts.blocks["en"]},
            exercises={
                ex_id: ExerciseTexts(icon="", by_locale={"en": entry.by_locale["en"]})
                for ex_id, entry in texts.exercises.items()
            },
        ),
        is_external=True,
    )

    controller = WorkoutController(english)

    assert controller.locale == "en"
    assert controller.timeline.locale == "en"
    assert controller.timeline.exercises[0].name == "a en"
    assert controller.set_locale("it") == "en"


def test_failed_locale_switch_keeps_previous_language() -> None:
    texts = SMALL.texts
    exercises = dict(texts.exercises)
    exercises["b"] = ExerciseTexts(icon="", by_locale={"it": texts.exercises["b"].by_locale["it"]})
    partial = WorkoutConfig(
        timing=SMALL.timing,
        texts=WorkoutTexts(
            languages=texts.languages,
            ui=texts.ui,
            blocks=texts.blocks,
            exercises=exercises,
        ),
    )
    controller = WorkoutController(partial, locale="it")
    before = controller.timeline

    with pytest.raises(MissingLocalizationError):
        controller.set_locale("en")

    assert controller.locale == "it"
    assert controller.timeline is before
    assert controller.timeline.locale == controller.locale


def test_listener_failure_pauses_workout_and_resume_works(
    capsys: pytest.CaptureFixture[str],
) -> None:
    async def _run() -> None:
        controller = WorkoutController(SMALL, tick_interval_sec=TICK)
        failed_once: list[bool] = []

        def fragile(event: WorkoutEvent) -> None:
            if isinstance(event, ExerciseStarted) and not failed_once:
                failed_once.append(True)
                raise RuntimeError("render failed")

        controller.subscribe(fragile)
        await controller.start()
        await asyncio.sleep(TICK * 20)

        assert not controller.ticking
        assert controller.state.running is True
        assert controller.state.paused is True
        assert controller.state.phase is WorkoutPhase.EXERCISE

        await controller.start()
        assert controller.ticking
        await controller.reset()

    asyncio.run(_run())
    assert "[TIMER] tick failed" in capsys.readouterr().out


def test_empty_workout_completes_without_ticking() -> None:
    async def _run() -> None:
        controller = WorkoutController(_config(()), tick_interval_sec=TICK)
        events: list[WorkoutEvent] = []
        controller.subscribe(events.append)

        await controller.start()

        assert events == [WorkoutCompleted()]
        assert not controller.ticking

    asyncio.run(_run())


def test_embedded_workout_defaults_to_italian() -> None:
    controller = WorkoutController(embedded_config())

    assert controller.locale == "it"
    assert controller.timeline.exercises[0].name == "Rotazioni + inclinazioni collo"
