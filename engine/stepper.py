"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the single-trace cursor a viewer drives.  It holds one
immutable trace and exposes a play/pause/next/prev/seek/reset API.

State machine:
    IDLE     →  load()   →  READY     (cursor = 0)
    READY    →  play()   →  PLAYING
    PLAYING  →  pause()  →  PAUSED
    PAUSED   →  play()   →  PLAYING
    PLAYING  →  (final index reached) → FINISHED
    any      →  reset()  →  READY     (same trace, cursor = 0)
    any      →  unload() →  IDLE

Out-of-range navigation is clamped or ignored, never raised.

Thread safety:
  This class is NOT thread-safe.  Drive it from one event loop; the
  Ticker in engine.clock is the usual driver.
"""

import logging
import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

from algorithms.step import Step

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    READY    = "ready"
    PLAYING  = "playing"
    PAUSED   = "paused"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   2.0,    # teaching mode
    "medium": 1.0,
    "fast":   0.5,
    "turbo":  0.1,
}

MIN_SPEED = 0.05


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The loaded trace (read-only for everyone else).
        current_idx : Index into `steps` that is currently displayed.
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(Step) fired every time the current step changes.
    """

    def __init__(
        self,
        on_step: Optional[Callable[[Step], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.steps:       List[Step]    = []
        self.current_idx: int          = 0
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = SPEED_PRESETS["medium"]
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        self._clock = clock
        self._last_tick: float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: Sequence[Step]) -> None:
        """Attach a fresh trace and show its first step."""
        self.steps = list(steps)
        self.current_idx = 0
        if not self.steps:
            self.state = StepperState.IDLE
            return
        self.state = StepperState.READY
        self._notify()

    def unload(self) -> None:
        """Drop the trace — used when the algorithm changes or input is invalid."""
        self.steps = []
        self.current_idx = 0
        self.state = StepperState.IDLE

    def reset(self) -> None:
        """Back to READY at step 0, keeping the trace."""
        if self.state == StepperState.IDLE:
            return
        self.state = StepperState.READY
        self._goto(0)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step.  Returns False (and stays put) at the end."""
        if not self.steps or self.current_idx >= self.last_index:
            return False
        self._goto(self.current_idx + 1)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if not self.steps or self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def seek(self, idx: int) -> bool:
        """Jump to `idx`; out-of-range requests are ignored."""
        if not (0 <= idx < len(self.steps)):
            return False
        self._goto(idx)
        return True

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state == StepperState.IDLE or self.at_end:
            return
        self.state = StepperState.PLAYING
        self._last_tick = self._clock()

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
        If playing and `speed` seconds have elapsed since the last
        advance, step forward once.  Returns True if a step was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = self._clock() if now is None else now
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        return self.next_step()

    @property
    def is_active(self) -> bool:
        return self.is_playing

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_SPEED, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def last_index(self) -> int:
        return len(self.steps) - 1

    @property
    def at_end(self) -> bool:
        return bool(self.steps) and self.current_idx >= self.last_index

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
        if self.at_end and self.state == StepperState.PLAYING:
            self.state = StepperState.FINISHED
            logger.debug("playback finished at step %d", idx)
        elif not self.at_end and self.state == StepperState.FINISHED:
            # stepping back out of the end leaves a paused cursor
            self.state = StepperState.PAUSED
        self._notify()

    def _notify(self) -> None:
        step = self.current_step
        if self.on_step and step is not None:
            self.on_step(step)
