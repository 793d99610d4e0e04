"""NiceGUI web UI for the Strength Walk timer."""

from __future__ import annotations

from dataclasses import dataclass, field

from nicegui import core, ui
from nicegui.events import KeyEventArguments

from strength_walk.core.state import (
    BlockRestStarted,
    CountdownTicked,
    ExerciseStarted,
    UpNext,
    WorkoutCompleted,
    WorkoutEvent,
)
from strength_walk.ui.audio import BEEP_JS, CueKind, CuePlayer, victory_js
from strength_walk.ui.controller import WorkoutController
from strength_walk.ui.presenter import (
    clock_line,
    countdown_overlay,
    exercise_progress_pct,
    exercise_view,
    schedule_rows,
    total_progress_pct,
    up_next_text,
)
from strength_walk.workout.i18n import ui_text
from strength_walk.workout.library import BLOCK_COLORS
from strength_walk.workout.model import WorkoutConfig
from strength_walk.workout.timeline import MissingLocalizationError

REFRESH_SEC = 0.25
GO_REFRESHES = 4


@dataclass
class WebState:
    up_next: str | None = None
    pending_cues: list[CueKind] = field(default_factory=list)
    last_row: int | None = None
    go_refreshes: int = 0


def run_web_ui(
    config: WorkoutConfig,
    *,
    locale: str | None = None,
    host: str = "127.0.0.1",
    port: int = 8090,
) -> int:
    controller = WorkoutController(config, locale=locale)
    state = WebState()
    ui.add_head_html(
        """
        <style>
          body {
            background: radial-gradient(circle at top, #17223f 0%, #0b1220 58%);
            color: #e5e7eb;
            font-family: Arial, "Segoe UI", sans-serif;
          }
          .sw-card {
            background: linear-gradient(180deg, #0f1b35 0%, #132449 100%);
            border: 1px solid rgba(148, 163, 184, 0.22);
            border-radius: 14px;
          }
          .sw-clock { font-size: 2.2rem; font-weight: 700; color: #f8fafc; }
          .sw-setup { color: #ff6b35; font-weight: 700; }
          .sw-countdown { font-size: 6rem; font-weight: 800; color: #38bdf8; }
        </style>
        """
    )

    def t(key: str) -> str:
        return ui_text(config.texts, controller.locale, key)

    cues = CuePlayer(
        lambda kind: state.pending_cues.append(kind),
        enabled=True,
    )

    def on_event(event: WorkoutEvent) -> None:
        if isinstance(event, UpNext):
            state.up_next = up_next_text(controller.timeline, config.texts, event.next_index)
        elif isinstance(event, (ExerciseStarted, BlockRestStarted, WorkoutCompleted)):
            state.up_next = None
        if isinstance(event, CountdownTicked) and event.remaining == 0:
            state.go_refreshes = GO_REFRESHES
        cues(event)

    controller.subscribe(on_event)

    with ui.column().classes("w-full items-center gap-1"):
        title_label = ui.label().classes("text-2xl font-semibold")
        subtitle_label = ui.label().classes("text-sm text-slate-300")
        with ui.row().classes("gap-2"):
            lang_buttons = {
                lang: ui.button(lang.upper(), on_click=lambda _, lang=lang: on_language(lang))
                .props("outline size=sm")
                for lang in config.texts.languages
            }

    with ui.card().classes("w-full sw-card"):
        clock_label = ui.label().classes("sw-clock")
        total_caption = ui.label().classes("text-xs text-slate-300")
        total_bar = ui.linear_progress(value=0, show_value=False).classes("w-full")
        total_pct = ui.label("0%").classes("text-xs")

    with ui.card().classes("w-full sw-card"):
        with ui.row().classes("items-center gap-3"):
            icon_label = ui.label().classes("text-4xl")
            with ui.column().classes("gap-0"):
                name_label = ui.label().classes("text-xl font-semibold")
                block_label = ui.label().classes("text-sm text-slate-300")
        description_label = ui.label().classes("text-base")
        with ui.column().classes("w-full gap-0") as exercise_progress_box:
            exercise_caption = ui.label().classes("text-xs text-slate-300")
            exercise_bar = ui.linear_progress(value=0, show_value=False).classes("w-full")
            exercise_pct = ui.label("0%").classes("text-xs")
        up_next_label = ui.label().classes("text-sm")

    with ui.row().classes("gap-2"):
        start_btn = ui.button(on_click=lambda: on_start())
        pause_btn = ui.button(on_click=lambda: on_pause())
        reset_btn = ui.button(on_click=lambda: on_reset()).props("color=negative")
        sound_toggle = ui.switch("🔊", value=True)

    schedule = ui.table(
        columns=[
            {"name": "time", "label": "", "field": "time", "align": "left"},
            {"name": "block", "label": "", "field": "block", "align": "left"},
            {"name": "exercise", "label": "", "field": "exercise", "align": "left"},
            {"name": "duration", "label": "", "field": "duration", "align": "right"},
        ],
        rows=[],
        row_key="idx",
        selection="single",
    ).classes("w-full")
    schedule.add_slot(
        "body-cell-block",
        '<q-td :props="props" :style="{ color: props.row.color }">{{ props.value }}</q-td>',
    )

    with ui.dialog() as countdown_dialog, ui.card().classes("items-center"):
        countdown_label = ui.label().classes("sw-countdown")

    def refresh_static() -> None:
        title_label.text = t("title")
        subtitle_label.text = t("subtitle")
        total_caption.text = t("totalProgress")
        exercise_caption.text = t("currentExercise")
        pause_btn.text = t("pauseBtn")
        reset_btn.text = t("resetBtn")
        headers = ("timeHeader", "blockHeader", "exerciseHeader", "durationHeader")
        for column, key in zip(schedule.columns, headers):
            column["label"] = t(key)
        schedule.rows = [
            {
                "idx": row.index,
                "time": row.window,
                "block": row.block_name,
                "exercise": row.name,
                "duration": row.duration,
                "color": BLOCK_COLORS.get(row.block, "#e5e7eb"),
            }
            for row in schedule_rows(controller.timeline)
        ]
        schedule.update()
        for lang, button in lang_buttons.items():
            if lang == controller.locale:
                button.props(remove="outline")
            else:
                button.props("outline")
        state.last_row = None

    def play_pending_cues() -> None:
        if core.loop is None:
            return
        while state.pending_cues:
            kind = state.pending_cues.pop(0)
            ui.run_javascript(BEEP_JS if kind == "beep" else victory_js())

    def refresh_ui() -> None:
        snapshot = controller.state
        timeline = controller.timeline
        settings = controller.settings

        clock_label.text = clock_line(snapshot, timeline, settings)
        pct = total_progress_pct(snapshot, timeline, settings)
        total_bar.value = pct / 100.0
        total_pct.text = f"{round(pct)}%"

        view = exercise_view(snapshot, timeline, config.texts, settings)
        icon_label.text = view.icon
        name_label.text = view.title
        block_label.text = view.block
        description_label.text = view.description
        if view.in_setup:
            description_label.classes(add="sw-setup")
        else:
            description_label.classes(remove="sw-setup")

        ex_pct = exercise_progress_pct(snapshot, timeline)
        exercise_progress_box.set_visibility(ex_pct is not None and snapshot.running)
        if ex_pct is not None:
            exercise_bar.value = ex_pct / 100.0
            exercise_pct.text = f"{round(ex_pct)}%"

        up_next_label.text = state.up_next or ""
        up_next_label.set_visibility(state.up_next is not None)

        start_btn.text = t("resumeBtn") if snapshot.paused else t("startBtn")
        start_btn.set_visibility(not snapshot.running or snapshot.paused)
        pause_btn.set_visibility(snapshot.ticking)

        overlay = countdown_overlay(
            snapshot, settings, t("goText"), show_go=state.go_refreshes > 0
        )
        state.go_refreshes = max(0, state.go_refreshes - 1)
        if overlay is not None:
            countdown_label.text = overlay
            countdown_dialog.open()
        else:
            countdown_dialog.close()

        current_row = snapshot.current_exercise_index
        if current_row != state.last_row:
            state.last_row = current_row
            schedule.selected = [row for row in schedule.rows if row["idx"] == current_row]
            schedule.update()

        play_pending_cues()

    async def on_start() -> None:
        await controller.start()
        refresh_ui()

    async def on_pause() -> None:
        await controller.pause()
        refresh_ui()

    async def on_reset() -> None:
        await controller.reset()
        state.up_next = None
        state.go_refreshes = 0
        refresh_ui()

    def on_sound_toggle() -> None:
        cues.enabled = bool(sound_toggle.value)

    def on_language(lang: str) -> None:
        try:
            controller.set_locale(lang)
        except MissingLocalizationError as exc:
            print(f"[I18N] {exc}")
            ui.notify(str(exc), color="negative")
            return
        refresh_static()
        refresh_ui()

    async def on_key(event: KeyEventArguments) -> None:
        if not event.action.keydown or event.action.repeat:
            return
        if event.key.code == "Space":
            await controller.toggle()
            refresh_ui()
        elif event.key.code == "KeyR":
            await on_reset()

    sound_toggle.on_value_change(lambda _: on_sound_toggle())
    ui.keyboard(on_key=on_key)
    refresh_static()
    refresh_ui()
    ui.timer(REFRESH_SEC, refresh_ui)
    ui.run(host=host, port=port, reload=False, title="Strength Walk Timer")
    return 0
