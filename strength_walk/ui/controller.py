"""Async controller shared by the web UI and the terminal runner."""

from __future__ import annotations

from typing import Callable

from strength_walk.core.driver import TickDriver
from strength_walk.core.engine import EventListener, WorkoutEngine
from strength_walk.core.state import WorkoutState
from strength_walk.workout.i18n import resolve_locale
from strength_walk.workout.model import Timeline, TimingSettings, WorkoutConfig
from strength_walk.workout.timeline import build_timeline


class WorkoutController:
    def __init__(
        self,
        config: WorkoutConfig,
        locale: str | None = None,
        tick_interval_sec: float = 1.0,
    ) -> None:
        self._config = config
        self._locale = resolve_locale(locale, config.texts.languages)
        self._engine = WorkoutEngine(self._build_timeline(self._locale), config.timing.settings)
        self._driver = TickDriver(
            self._on_tick,
            interval_sec=tick_interval_sec,
            on_error=self._on_tick_error,
        )

    def _build_timeline(self, locale: str) -> Timeline:
        return build_timeline(
            self._config.timing.exercises,
            self._config.timing.settings.block_rest_s,
            self._config.texts,
            locale,
        )

    @property
    def config(self) -> WorkoutConfig:
        return self._config

    @property
    def settings(self) -> TimingSettings:
        return self._config.timing.settings

    @property
    def engine(self) -> WorkoutEngine:
        return self._engine

    @property
    def state(self) -> WorkoutState:
        return self._engine.state

    @property
    def timeline(self) -> Timeline:
        return self._engine.timeline

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def ticking(self) -> bool:
        return self._driver.is_running

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        return self._engine.subscribe(listener)

    def set_locale(self, locale: str) -> str:
        """Switch language; the timeline is rebuilt, the workout state is kept.

        A failed rebuild leaves both the locale and the timeline unchanged.
        """
        resolved = resolve_locale(locale, self._config.texts.languages)
        timeline = self._build_timeline(resolved)
        self._engine.set_timeline(timeline)
        self._locale = resolved
        return self._locale

    async def start(self) -> None:
        self._engine.start()
        if self._engine.state.ticking:
            self._driver.start()

    async def pause(self) -> None:
        self._engine.pause()
        await self._driver.stop()

    async def toggle(self) -> None:
        state = self._engine.state
        if not state.running or state.paused:
            await self.start()
        else:
            await self.pause()

    async def reset(self) -> None:
        await self._driver.stop()
        self._engine.reset()

    def _on_tick(self) -> None:
        self._engine.tick()
        if not self._engine.state.ticking:
            self._driver.request_stop()

    def _on_tick_error(self, exc: Exception) -> None:
        # No more ticks will arrive: show the workout as paused so it can be resumed.
        self._engine.pause()
