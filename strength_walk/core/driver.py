"""Asyncio driver delivering one tick per second to the engine."""

from __future__ import annotations

import asyncio
import contextlib
from typing import Callable, Optional

TickCallback = Callable[[], None]
ErrorCallback = Callable[[Exception], None]


class TickDriver:
    def __init__(
        self,
        on_tick: TickCallback,
        interval_sec: float = 1.0,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        self._on_tick = on_tick
        self._on_error = on_error
        self._interval_sec = interval_sec
        self._task: Optional[asyncio.Task[None]] = None
        self._stop_event = asyncio.Event()
        self._last_error: Optional[Exception] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def last_error(self) -> Optional[Exception]:
        return self._last_error

    def start(self) -> None:
        """Schedule ticks on the running loop; a no-op when already ticking."""
        if self.is_running:
            return
        self._stop_event = asyncio.Event()
        self._last_error = None
        self._task = asyncio.get_running_loop().create_task(self._run())

    def request_stop(self) -> None:
        """Stop after the current tick; safe to call from inside the tick callback."""
        self._stop_event.set()

    async def stop(self) -> None:
        if not self.is_running:
            self._task = None
            return

        self._stop_event.set()
        assert self._task is not None
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None

    async def _run(self) -> None:
        try:
            while not self._stop_event.is_set():
                await asyncio.sleep(self._interval_sec)
                if self._stop_event.is_set():
                    return
                self._on_tick()
        except Exception as exc:
            # The loop ends here; the owner decides how to surface the failure.
            self._last_error = exc
            print(f"[TIMER] tick failed, timer stopped: {exc!r}")
            if self._on_error is not None:
                self._on_error(exc)
        finally:
            self._stop_event.set()
