"""Terminal CLI entrypoint for the Strength Walk timer."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from strength_walk.core.state import (
    BlockRestStarted,
    ExerciseStarted,
    UpNext,
    WorkoutCompleted,
    WorkoutEvent,
)
from strength_walk.ui.audio import CuePlayer, terminal_bell
from strength_walk.ui.controller import WorkoutController
from strength_walk.ui.presenter import clock_line, exercise_view, fmt_clock, schedule_rows
from strength_walk.workout.i18n import resolve_locale
from strength_walk.workout.model import Timeline, WorkoutConfig
from strength_walk.workout.parser import (
    DEFAULT_TEXTS_FILE,
    DEFAULT_TIMING_FILE,
    WorkoutParseError,
    load_config,
)
from strength_walk.workout.timeline import build_timeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Strength Walk guided workout timer")
    parser.add_argument(
        "--timing",
        default=None,
        help=f"Timing JSON file (default: ./{DEFAULT_TIMING_FILE} when present)",
    )
    parser.add_argument(
        "--texts",
        default=None,
        help=f"Text/i18n JSON file (default: ./{DEFAULT_TEXTS_FILE} when present)",
    )
    parser.add_argument("--lang", default=None, help="Display language (e.g. it, en)")
    parser.add_argument(
        "--schedule",
        action="store_true",
        help="Print the exercise schedule and total duration",
    )
    parser.add_argument("--run", action="store_true", help="Run the workout in the terminal")
    parser.add_argument("--mute", action="store_true", help="Disable terminal bell cues")
    parser.add_argument(
        "--ui-web",
        action="store_true",
        help="Launch web UI (NiceGUI)",
    )
    parser.add_argument("--web-host", default="127.0.0.1", help="Host bind for --ui-web")
    parser.add_argument("--web-port", type=int, default=8090, help="Port for --ui-web")
    return parser


def resolve_config_paths(
    timing: str | None, texts: str | None, cwd: Path | None = None
) -> tuple[Path | None, Path | None]:
    """Fall back to the conventional file names in the working directory."""
    if timing is not None or texts is not None:
        return (
            Path(timing) if timing is not None else None,
            Path(texts) if texts is not None else None,
        )
    root = cwd or Path.cwd()
    timing_file = root / DEFAULT_TIMING_FILE
    texts_file = root / DEFAULT_TEXTS_FILE
    if timing_file.exists() and texts_file.exists():
        return timing_file, texts_file
    return None, None


def format_schedule(timeline: Timeline) -> list[str]:
    lines = [
        f"{row.window:<13} {row.block_name:<20} {row.name:<40} {row.duration:>5}"
        for row in schedule_rows(timeline)
    ]
    lines.append(f"Total: {fmt_clock(timeline.total_seconds)} ({len(timeline)} exercises)")
    return lines


def print_schedule(config: WorkoutConfig, locale: str | None) -> int:
    lang = resolve_locale(locale, config.texts.languages)
    timeline = build_timeline(
        config.timing.exercises,
        config.timing.settings.block_rest_s,
        config.texts,
        lang,
    )
    for line in format_schedule(timeline):
        print(line)
    return 0


async def run_terminal(config: WorkoutConfig, locale: str | None, mute: bool) -> int:
    controller = WorkoutController(config, locale=locale)
    done = asyncio.Event()
    cues = CuePlayer(None if mute else terminal_bell)

    def on_event(event: WorkoutEvent) -> None:
        timeline = controller.timeline
        if isinstance(event, ExerciseStarted):
            exercise = timeline.exercises[event.index]
            print(f"[TIMER] #{exercise.n} {exercise.name} ({exercise.block_name})")
        elif isinstance(event, UpNext):
            print(f"[TIMER] up next: {timeline.exercises[event.next_index].name}")
        elif isinstance(event, BlockRestStarted):
            print(f"[TIMER] block rest {event.remaining}s")
        elif isinstance(event, WorkoutCompleted):
            print("[TIMER] workout complete")
            done.set()

    controller.subscribe(on_event)
    controller.subscribe(cues)

    async def print_status() -> None:
        while not done.is_set():
            view = exercise_view(
                controller.state, controller.timeline, config.texts, controller.settings
            )
            line = clock_line(controller.state, controller.timeline, controller.settings)
            print(f"{line} | {view.title} | {view.description}")
            await asyncio.sleep(1.0)

    await controller.start()
    status_task = asyncio.create_task(print_status())
    try:
        await done.wait()
    finally:
        status_task.cancel()
        await controller.reset()
    return 0


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    timing_path, texts_path = resolve_config_paths(args.timing, args.texts)
    try:
        config = load_config(timing_path, texts_path)
    except WorkoutParseError as exc:
        print(f"[CONFIG] invalid workout files:\n{exc}")
        return 2

    if args.ui_web:
        from strength_walk.ui.web_app import run_web_ui

        return run_web_ui(config, locale=args.lang, host=args.web_host, port=args.web_port)

    if args.schedule:
        return print_schedule(config, args.lang)

    if args.run:
        try:
            return asyncio.run(run_terminal(config, args.lang, args.mute))
        except KeyboardInterrupt:
            return 130

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
