"""
stepper.py — Step-by-Step Playback Cursor
==========================================
A run is computed in full before playback starts, so the Stepper is a
pure cursor over a finished list: it never re-runs anything, it only
moves an index forward, backward, or to an arbitrary position, and
fires `on_step` whenever the displayed step changes.

State machine:
    IDLE  →  load()  →  PAUSED
    PAUSED  →  play()   →  PLAYING
    PLAYING →  pause()  →  PAUSED
    PLAYING →  (last step reached) → FINISHED
    any     →  reset()  →  IDLE

Thread safety:
  Not thread-safe.  One Stepper per viewer; drive it from one thread.
"""

import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.5,    # teaching mode
    "medium": 0.8,
    "fast":   0.3,
    "turbo":  0.1,
}


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The complete step list of one run.
        current_idx : 0-based index into `steps` currently displayed.
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(Step) fired every time the current step changes.
    """

    def __init__(
        self,
        steps: Optional[Sequence[Step]] = None,
        on_step: Optional[Callable[[Step], None]] = None,
        speed: str = "medium",
    ):
        self.steps:       List[Step]   = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = SPEED_PRESETS.get(speed, SPEED_PRESETS["medium"])
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        # for auto-play timing
        self._last_tick:  float = 0.0

        if steps:
            self.load(steps)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: Sequence[Step]) -> None:
        """Attach a finished run and show its first step."""
        if not steps:
            raise ValueError("Cannot play back an empty run")
        self.steps = list(steps)
        self.state = StepperState.PAUSED
        self._goto(0)

    def reset(self) -> None:
        """Back to IDLE: caller must load() again."""
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at the end."""
        if self.current_idx + 1 >= len(self.steps):
            if self.steps:
                self.state = StepperState.FINISHED
            return False
        self._goto(self.current_idx + 1)
        if self.current_idx == len(self.steps) - 1 and self.state == StepperState.PLAYING:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary 0-based index."""
        if not (0 <= idx < len(self.steps)):
            return False
        self._goto(idx)
        if self.state == StepperState.FINISHED and idx < len(self.steps) - 1:
            self.state = StepperState.PAUSED
        return True

    def rewind(self) -> None:
        """Jump back to step 0."""
        if self.goto_step(0) and self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def jump_to_end(self) -> None:
        if self.steps:
            self._goto(len(self.steps) - 1)
            self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.IDLE, StepperState.FINISHED):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 50 ms).  If playing and enough
        time has elapsed, advances one step.  Returns True if a step
        was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick >= self.speed:
            self._last_tick = now
            return self.next_step()
        return False

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(0.02, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def progress(self) -> float:
        """0.0 at the first step, 1.0 at the last."""
        if len(self.steps) <= 1:
            return 1.0 if self.steps else 0.0
        return self.current_idx / (len(self.steps) - 1)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])
