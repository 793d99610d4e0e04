"""Workout file parser (timing + localized text JSON)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from strength_walk.workout.model import (
    ExerciseSpec,
    ExerciseText,
    ExerciseTexts,
    TimingSettings,
    WorkoutConfig,
    WorkoutTexts,
    WorkoutTiming,
)

TIMING_SCHEMA = "timed-v1"
TEXTS_SCHEMA = "i18n-v1"
DEFAULT_TIMING_FILE = "workout_exercise_sequence_and_time.json"
DEFAULT_TEXTS_FILE = "workout_exercise_text_and_i18n.json"


class WorkoutParseError(ValueError):
    """Raised when a workout file is invalid."""


class EmptySequenceError(WorkoutParseError):
    """Raised when a timing file lists no exercises."""


def load_config(
    timing_path: str | Path | None = None,
    texts_path: str | Path | None = None,
) -> WorkoutConfig:
    """Load external timing/text files, or the embedded workout when absent.

    Both files must be present for the external pair to be used. Files that
    exist but fail validation raise ``WorkoutParseError``.
    """
    from strength_walk.workout.library import embedded_config

    if timing_path is None and texts_path is None:
        print("[CONFIG] using embedded workout")
        return embedded_config()
    if timing_path is None or texts_path is None:
        raise WorkoutParseError("Both --timing and --texts files are required together")

    timing_file = Path(timing_path)
    texts_file = Path(texts_path)
    if not timing_file.exists() or not texts_file.exists():
        print("[CONFIG] external workout files not found, using embedded workout")
        return embedded_config()

    timing = load_timing(timing_file)
    texts = load_texts(texts_file)
    validate_config(timing, texts)
    print(f"[CONFIG] loaded {len(timing.exercises)} exercises from {timing_file.name}")
    return WorkoutConfig(timing=timing, texts=texts, is_external=True)


def load_timing(path: str | Path) -> WorkoutTiming:
    return parse_timing(_read_json(Path(path)))


def load_texts(path: str | Path) -> WorkoutTexts:
    return parse_texts(_read_json(Path(path)))


def _read_json(path: Path) -> dict[str, Any]:
    if path.suffix.lower() != ".json":
        raise WorkoutParseError(f"Unsupported workout format '{path.suffix}'. Use .json")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise WorkoutParseError(f"Invalid JSON in {path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise WorkoutParseError(f"{path.name}: top level must be an object")
    return data


def parse_timing(data: dict[str, Any]) -> WorkoutTiming:
    version = data.get("schema_version")
    if version != TIMING_SCHEMA:
        raise WorkoutParseError(
            f"Timing schema version should be '{TIMING_SCHEMA}', found: {version}"
        )

    config_obj = data.get("config", {})
    if not isinstance(config_obj, dict):
        raise WorkoutParseError("Timing field 'config' must be an object")

    rest_obj = config_obj.get("block_rest_s", {})
    if not isinstance(rest_obj, dict):
        raise WorkoutParseError("Timing field 'config.block_rest_s' must be an object")
    block_rest_s: dict[str, int] = {}
    for block, raw in rest_obj.items():
        rest = _parse_int(raw, f"block_rest_s.{block}")
        if rest < 0:
            raise WorkoutParseError(f"block_rest_s.{block} must be >= 0")
        block_rest_s[str(block)] = rest

    countdown_s = _parse_int(config_obj.get("countdown_s", 3), "countdown_s")
    notice_s = _parse_int(config_obj.get("up_next_notice_s", 5), "up_next_notice_s")
    if countdown_s < 0:
        raise WorkoutParseError("countdown_s must be >= 0")
    if notice_s < 0:
        raise WorkoutParseError("up_next_notice_s must be >= 0")

    sequence_obj = data.get("sequence", [])
    if not isinstance(sequence_obj, list):
        raise WorkoutParseError("Timing field 'sequence' must be an array")

    exercises_obj = data.get("exercises")
    if not isinstance(exercises_obj, list):
        raise WorkoutParseError("Timing field 'exercises' must be an array")
    if not exercises_obj:
        raise EmptySequenceError("Workout must contain at least one exercise")

    exercises = tuple(_build_exercise(raw, i) for i, raw in enumerate(exercises_obj))
    _check_exercise_order(exercises)

    return WorkoutTiming(
        settings=TimingSettings(
            countdown_s=countdown_s,
            up_next_notice_s=notice_s,
            block_rest_s=block_rest_s,
        ),
        sequence=tuple(str(block) for block in sequence_obj),
        exercises=exercises,
    )


def _build_exercise(raw: object, index: int) -> ExerciseSpec:
    if not isinstance(raw, dict):
        raise WorkoutParseError(f"Exercise {index + 1}: must be an object")

    exercise_id = raw.get("id")
    block = raw.get("block")
    if not isinstance(exercise_id, str) or not exercise_id.strip():
        raise WorkoutParseError(f"Exercise {index + 1}: invalid id")
    if not isinstance(block, str) or not block.strip():
        raise WorkoutParseError(f"Exercise {index + 1}: invalid block")

    work_s = _parse_int(raw.get("work_s"), "work_s", index)
    setup_s = _parse_int(raw.get("setup_s", 0), "setup_s", index)
    if work_s <= 0:
        raise WorkoutParseError(f"Exercise {index + 1}: work_s must be > 0")
    if setup_s < 0:
        raise WorkoutParseError(f"Exercise {index + 1}: setup_s must be >= 0")

    return ExerciseSpec(
        n=_parse_int(raw.get("n", index + 1), "n", index),
        id=exercise_id.strip(),
        block=block.strip(),
        work_s=work_s,
        setup_s=setup_s,
    )


def _check_exercise_order(exercises: tuple[ExerciseSpec, ...]) -> None:
    seen_ids: set[str] = set()
    closed_blocks: set[str] = set()
    prev_block: str | None = None
    for exercise in exercises:
        if exercise.id in seen_ids:
            raise WorkoutParseError(f"Duplicate exercise id '{exercise.id}'")
        seen_ids.add(exercise.id)
        if exercise.block != prev_block:
            if exercise.block in closed_blocks:
                raise WorkoutParseError(
                    f"Exercises of block '{exercise.block}' must be contiguous"
                )
            if prev_block is not None:
                closed_blocks.add(prev_block)
        prev_block = exercise.block


def parse_texts(data: dict[str, Any]) -> WorkoutTexts:
    version = data.get("schema_version")
    if version != TEXTS_SCHEMA:
        raise WorkoutParseError(
            f"I18n schema version should be '{TEXTS_SCHEMA}', found: {version}"
        )

    languages_obj = data.get("languages")
    if not isinstance(languages_obj, list) or not languages_obj:
        raise WorkoutParseError("I18n field 'languages' must be a non-empty array")
    languages = tuple(str(lang) for lang in languages_obj)

    ui = _parse_string_tables(data.get("ui", {}), "ui")
    blocks = _parse_string_tables(data.get("blocks", {}), "blocks")

    exercises_obj = data.get("exercises", {})
    if not isinstance(exercises_obj, dict):
        raise WorkoutParseError("I18n field 'exercises' must be an object")

    exercises: dict[str, ExerciseTexts] = {}
    for exercise_id, raw in exercises_obj.items():
        if not isinstance(raw, dict):
            raise WorkoutParseError(f"Exercise text '{exercise_id}': must be an object")
        by_locale: dict[str, ExerciseText] = {}
        for lang in languages:
            entry = raw.get(lang)
            if entry is None:
                continue
            if not isinstance(entry, dict):
                raise WorkoutParseError(f"Exercise text '{exercise_id}.{lang}': must be an object")
            by_locale[lang] = ExerciseText(
                name=str(entry.get("name", exercise_id)),
                description=str(entry.get("description", "")),
                setup_hint=str(entry.get("setup_hint", "")),
            )
        exercises[str(exercise_id)] = ExerciseTexts(
            icon=str(raw.get("icon", "")),
            by_locale=by_locale,
        )

    return WorkoutTexts(languages=languages, ui=ui, blocks=blocks, exercises=exercises)


def _parse_string_tables(raw: object, field_name: str) -> dict[str, dict[str, str]]:
    if not isinstance(raw, dict):
        raise WorkoutParseError(f"I18n field '{field_name}' must be an object")
    out: dict[str, dict[str, str]] = {}
    for lang, table in raw.items():
        if not isinstance(table, dict):
            raise WorkoutParseError(f"I18n field '{field_name}.{lang}' must be an object")
        out[str(lang)] = {str(k): str(v) for k, v in table.items() if not isinstance(v, dict)}
    return out


def validate_config(timing: WorkoutTiming, texts: WorkoutTexts) -> None:
    """Cross-check the timing table against the text table.

    All problems are collected and reported in one ``WorkoutParseError``.
    """
    errors: list[str] = []

    for exercise in timing.exercises:
        entry = texts.exercises.get(exercise.id)
        if entry is None:
            errors.append(
                f"Exercise ID '{exercise.id}' found in timing file but missing in i18n file"
            )
            continue
        for lang in texts.languages:
            if lang not in entry.by_locale:
                errors.append(f"Exercise ID '{exercise.id}' has no '{lang}' text")

    default_blocks = texts.blocks.get(texts.languages[0], {})
    block_ids = list(dict.fromkeys([*timing.sequence, *(ex.block for ex in timing.exercises)]))
    for block_id in block_ids:
        if block_id not in default_blocks:
            errors.append(
                f"Block ID '{block_id}' found in timing file but missing in i18n blocks"
            )

    if errors:
        raise WorkoutParseError("\n".join(errors))


def _parse_int(raw: object, field_name: str, index: int | None = None) -> int:
    prefix = f"Exercise {index + 1}: " if index is not None else ""
    if raw is None or isinstance(raw, bool):
        raise WorkoutParseError(f"{prefix}invalid {field_name}")
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise WorkoutParseError(f"{prefix}invalid {field_name}") from exc
