from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from strength_walk.cli.main import (
    build_parser,
    format_schedule,
    resolve_config_paths,
    run_terminal,
)
from strength_walk.ui.presenter import fmt_clock
from strength_walk.workout.library import embedded_config
from strength_walk.workout.model import WorkoutConfig, WorkoutTiming
from strength_walk.workout.parser import DEFAULT_TEXTS_FILE, DEFAULT_TIMING_FILE
from strength_walk.workout.timeline import build_timeline


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.timing is None
    assert args.lang is None
    assert args.web_port == 8090
    assert not args.run


def test_resolve_config_paths_prefers_explicit(tmp_path: Path) -> None:
    timing, texts = resolve_config_paths("t.json", "x.json", cwd=tmp_path)

    assert timing == Path("t.json")
    assert texts == Path("x.json")


def test_resolve_config_paths_uses_conventional_files(tmp_path: Path) -> None:
    assert resolve_config_paths(None, None, cwd=tmp_path) == (None, None)

    (tmp_path / DEFAULT_TIMING_FILE).write_text("{}", encoding="utf-8")
    (tmp_path / DEFAULT_TEXTS_FILE).write_text("{}", encoding="utf-8")

    assert resolve_config_paths(None, None, cwd=tmp_path) == (
        tmp_path / DEFAULT_TIMING_FILE,
        tmp_path / DEFAULT_TEXTS_FILE,
    )


def test_format_schedule_ends_with_total() -> None:
    config = embedded_config()
    timeline = build_timeline(
        config.timing.exercises, config.timing.settings.block_rest_s, config.texts, "en"
    )

    lines = format_schedule(timeline)

    assert len(lines) == 41
    assert lines[0].startswith("0:00–0:30")
    assert "Neck rotations + tilts" in lines[0]
    assert lines[-1] == f"Total: {fmt_clock(timeline.total_seconds)} (40 exercises)"


def test_run_terminal_with_empty_workout_returns(capsys: pytest.CaptureFixture[str]) -> None:
    config = embedded_config()
    empty = WorkoutConfig(
        timing=WorkoutTiming(
            settings=config.timing.settings, sequence=config.timing.sequence, exercises=()
        ),
        texts=config.texts,
    )

    assert asyncio.run(run_terminal(empty, "en", mute=True)) == 0
    assert "workout complete" in capsys.readouterr().out
