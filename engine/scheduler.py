"""
scheduler.py — Dual-Lane Scheduler
===================================
One shared clock advances two independent lane cursors.

Every tick adds the elapsed time to a single accumulator.  Once the
accumulator reaches max(interval_ms, min_interval_ms) it resets and
each playing lane tries to advance exactly one timeline event:

    • a lane with events left moves its cursor forward
    • a lane already on its last event stamps `playback_end` (once) and
      stops; the other lane carries on

The scheduler is active until both lanes have stopped.  Both lanes read
the same `now`, so they cannot drift apart the way two timers would.

Timestamps are milliseconds from the injected clock.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from algorithms.step import Step
from engine.config import DEFAULT_CONFIG, ComparisonConfig
from engine.work import WorkEstimate

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    return time.monotonic() * 1000


# ---------------------------------------------------------------------------
# Lane — one side of a comparison
# ---------------------------------------------------------------------------
@dataclass
class Lane:
    algorithm:      str
    steps:          List[Step]    = field(default_factory=list)
    timeline:       List[int]     = field(default_factory=list)
    work:           WorkEstimate  = field(default_factory=WorkEstimate)
    generation_ms:  float         = 0.0
    cursor:         int           = 0
    is_playing:     bool          = False
    playback_start: Optional[float] = None
    playback_end:   Optional[float] = None

    @property
    def has_trace(self) -> bool:
        return bool(self.steps)

    @property
    def at_end(self) -> bool:
        return self.cursor >= max(0, len(self.timeline) - 1)

    @property
    def current_index(self) -> Optional[int]:
        """Raw trace index under the cursor."""
        if 0 <= self.cursor < len(self.timeline):
            return self.timeline[self.cursor]
        return None

    @property
    def current_step(self) -> Optional[Step]:
        idx = self.current_index
        return self.steps[idx] if idx is not None else None

    def advance(self, now: float) -> None:
        """One scheduler beat for this lane."""
        if not self.is_playing or not self.has_trace:
            return
        if self.at_end:
            if self.playback_end is None:
                self.playback_end = now
                logger.debug("lane %s finished at %.1fms", self.algorithm, now)
            self.is_playing = False
            return
        self.cursor += 1

    def next(self) -> bool:
        if not self.has_trace or self.at_end:
            return False
        self.cursor += 1
        return True

    def prev(self) -> bool:
        if self.cursor <= 0:
            return False
        self.cursor -= 1
        return True

    def rewind(self) -> None:
        self.cursor = 0
        self.is_playing = False
        self.playback_start = None
        self.playback_end = None


# ---------------------------------------------------------------------------
# Scheduler
# ---------------------------------------------------------------------------
class DualLaneScheduler:
    """
    Attributes:
        left, right : The two lanes ("A" and "B").
        interval_ms : Requested shared step interval.
        step_every  : Effective interval after the floor is applied.
    """

    def __init__(
        self,
        left: Lane,
        right: Lane,
        interval_ms: Optional[float] = None,
        config: ComparisonConfig = DEFAULT_CONFIG,
        clock: Callable[[], float] = monotonic_ms,
    ):
        self.left = left
        self.right = right
        self.config = config
        self._clock = clock
        self._acc: float = 0.0
        self._last_ts: Optional[float] = None
        self.interval_ms = config.default_interval_ms
        self.set_interval(config.default_interval_ms if interval_ms is None else interval_ms)

    @property
    def lanes(self):
        return (self.left, self.right)

    @property
    def step_every(self) -> float:
        return max(self.interval_ms, self.config.min_interval_ms)

    @property
    def is_active(self) -> bool:
        return self.left.is_playing or self.right.is_playing

    def set_interval(self, interval_ms: float) -> None:
        if interval_ms < 0:
            raise ValueError("interval_ms must not be negative")
        self.interval_ms = interval_ms

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------
    def play(self, now: Optional[float] = None) -> None:
        """Start (or resume) both lanes from one shared start stamp."""
        now = self._clock() if now is None else now
        start = self.left.playback_start
        if start is None:
            start = self.right.playback_start
        if start is None:
            start = now
        for lane in self.lanes:
            lane.is_playing = lane.has_trace and lane.playback_end is None
            lane.playback_start = start
        self._acc = 0.0
        self._last_ts = now
        logger.debug("scheduler play at %.1fms (every %.0fms)", now, self.step_every)

    def pause(self) -> None:
        """Stop both lanes; pending progress toward the next beat is dropped."""
        for lane in self.lanes:
            lane.is_playing = False
        self._acc = 0.0
        self._last_ts = None

    def reset(self) -> None:
        for lane in self.lanes:
            lane.rewind()
        self._acc = 0.0
        self._last_ts = None

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Feed one clock reading.  Returns True if this tick was a beat
        (both lanes were asked to advance).
        """
        if not self.is_active:
            return False
        now = self._clock() if now is None else now
        if self._last_ts is None:
            self._last_ts = now
        self._acc += now - self._last_ts
        self._last_ts = now

        if self._acc < self.step_every:
            return False

        self._acc = 0.0
        for lane in self.lanes:
            lane.advance(now)
        if not self.is_active:
            logger.debug("scheduler done: both lanes stopped")
        return True

    def simulate(self, frame_ms: float = 1000 / 60, start: float = 0.0, max_frames: int = 1_000_000) -> None:
        """
        Run play() and tick() to completion on a virtual clock that moves
        `frame_ms` per frame.  Deterministic; used where no real event
        loop is available.
        """
        if frame_ms <= 0:
            raise ValueError("frame_ms must be positive")
        self.play(now=start)
        now = start
        frames = 0
        while self.is_active and frames < max_frames:
            now += frame_ms
            self.tick(now)
            frames += 1
