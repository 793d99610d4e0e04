"""Audio cues for engine events."""

from __future__ import annotations

import sys
from typing import Callable, Literal

from strength_walk.core.state import (
    CountdownTicked,
    ExerciseStarted,
    WorkoutCompleted,
    WorkoutEvent,
)

CueKind = Literal["beep", "victory"]
CueBackend = Callable[[CueKind], None]

BEEP_JS = """
(() => {
  const ctx = new (window.AudioContext || window.webkitAudioContext)();
  const osc = ctx.createOscillator();
  const gain = ctx.createGain();
  osc.type = 'sine';
  osc.frequency.value = 800;
  gain.gain.setValueAtTime(0.3, ctx.currentTime);
  gain.gain.exponentialRampToValueAtTime(0.01, ctx.currentTime + 0.3);
  osc.connect(gain);
  gain.connect(ctx.destination);
  osc.start(ctx.currentTime);
  osc.stop(ctx.currentTime + 0.3);
  setTimeout(() => ctx.close(), 500);
})();
"""

# C5 D5 E5 F5 E5 D5 C5
VICTORY_NOTES: tuple[tuple[float, float], ...] = (
    (523.25, 0.4),
    (587.33, 0.4),
    (659.25, 0.4),
    (698.46, 0.6),
    (659.25, 0.3),
    (587.33, 0.3),
    (523.25, 0.8),
)


def victory_js() -> str:
    notes = ",".join(f"[{freq},{dur}]" for freq, dur in VICTORY_NOTES)
    return f"""
(() => {{
  const ctx = new (window.AudioContext || window.webkitAudioContext)();
  let t = ctx.currentTime;
  for (const [freq, dur] of [{notes}]) {{
    const osc = ctx.createOscillator();
    const gain = ctx.createGain();
    osc.type = 'triangle';
    osc.frequency.value = freq;
    gain.gain.setValueAtTime(0.3, t);
    gain.gain.exponentialRampToValueAtTime(0.01, t + dur);
    osc.connect(gain);
    gain.connect(ctx.destination);
    osc.start(t);
    osc.stop(t + dur);
    t += dur;
  }}
}})();
"""


def terminal_bell(kind: CueKind) -> None:
    sys.stdout.write("\a\a" if kind == "victory" else "\a")
    sys.stdout.flush()


def cue_for_event(event: WorkoutEvent) -> CueKind | None:
    if isinstance(event, (CountdownTicked, ExerciseStarted)):
        return "beep"
    if isinstance(event, WorkoutCompleted):
        return "victory"
    return None


class CuePlayer:
    """Turn engine events into sounds; a failing backend only disables itself."""

    def __init__(self, backend: CueBackend | None, enabled: bool = True) -> None:
        self._backend = backend
        self.enabled = enabled

    @property
    def available(self) -> bool:
        return self._backend is not None

    def __call__(self, event: WorkoutEvent) -> None:
        kind = cue_for_event(event)
        if kind is not None:
            self.play(kind)

    def play(self, kind: CueKind) -> None:
        if not self.enabled or self._backend is None:
            return
        try:
            self._backend(kind)
        except Exception as exc:  # pragma: no cover - audio runtime variability
            print(f"[AUDIO] cue '{kind}' unavailable ({exc}), sound disabled")
            self._backend = None
