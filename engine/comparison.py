"""
comparison.py — Comparison Session
===================================
Runs two algorithms on the SAME input and holds everything a
side-by-side view needs:

    session = Comparison("bubble-sort", "selection-sort")
    session.generate([23, 1, 10, 5, 2, 7, 15])
    session.scheduler.simulate()          # or drive it with a Ticker
    session.speed_verdict()               # SpeedVerdict
    session.work_winner()                 # "A" / "B" / "Tie" / "—"

Each lane keeps its full trace, its filtered timeline and the work
estimate over that timeline.  Traces are never mutated after generation.
"""

import logging
import time
from typing import Any, Dict, List, Optional, Sequence

from algorithms import get_algorithm, instrument
from engine.config import DEFAULT_CONFIG, ComparisonConfig
from engine.resolver import SpeedVerdict, resolve_speed
from engine.scheduler import DualLaneScheduler, Lane, monotonic_ms
from engine.timeline import build_comparison_timeline, describe_action
from engine.work import WorkEstimate, estimate_work, work_winner

logger = logging.getLogger(__name__)


class Comparison:
    """
    Attributes:
        left, right : Lanes "A" and "B".
        scheduler   : The shared-clock DualLaneScheduler over both lanes.
        array       : Input the lanes were generated from (None before generate()).
        target      : Search target passed to both instrumenters.
    """

    def __init__(
        self,
        left_algo: str,
        right_algo: str,
        interval_ms: Optional[float] = None,
        config: ComparisonConfig = DEFAULT_CONFIG,
        clock=monotonic_ms,
    ):
        for key in (left_algo, right_algo):
            if get_algorithm(key) is None:
                raise ValueError(f"Unknown algorithm: {key}")
        self.config = config
        self.left = Lane(algorithm=left_algo)
        self.right = Lane(algorithm=right_algo)
        self.scheduler = DualLaneScheduler(self.left, self.right, interval_ms, config, clock)
        self.array: Optional[List[int]] = None
        self.target: Optional[int] = None

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self, array: Sequence[int], target: Optional[int] = None) -> bool:
        """
        Build both lanes from one input.  An empty array clears both lanes
        and returns False.
        """
        self.scheduler.pause()
        if not array:
            for lane in self.scheduler.lanes:
                self._clear(lane)
            self.array = None
            self.target = None
            return False

        self.array = list(array)
        self.target = target
        for lane in self.scheduler.lanes:
            self._fill(lane)
        logger.debug(
            "comparison %s vs %s: timelines %d / %d",
            self.left.algorithm, self.right.algorithm,
            len(self.left.timeline), len(self.right.timeline),
        )
        return True

    def _fill(self, lane: Lane) -> None:
        started = time.perf_counter()
        steps = instrument(lane.algorithm, self.array, self.target)
        lane.generation_ms = round((time.perf_counter() - started) * 1000, 3)
        lane.steps = steps
        lane.timeline = build_comparison_timeline(steps)
        lane.work = estimate_work(steps, lane.timeline, config=self.config)
        lane.rewind()

    @staticmethod
    def _clear(lane: Lane) -> None:
        lane.steps = []
        lane.timeline = []
        lane.work = WorkEstimate()
        lane.generation_ms = 0.0
        lane.rewind()

    @property
    def ready(self) -> bool:
        return self.left.has_trace and self.right.has_trace

    # ------------------------------------------------------------------
    # Verdicts
    # ------------------------------------------------------------------
    def work_winner(self) -> str:
        return work_winner(
            self.left.work if self.left.has_trace else None,
            self.right.work if self.right.has_trace else None,
        )

    def speed_verdict(self) -> SpeedVerdict:
        return resolve_speed(
            self.left.playback_start, self.left.playback_end,
            self.right.playback_start, self.right.playback_end,
            self.config,
        )

    def progress(self, lane: Lane) -> WorkEstimate:
        """Work tallied up to the lane's current cursor."""
        return estimate_work(lane.steps, lane.timeline, upto=lane.cursor, config=self.config)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def lane_dict(self, lane: Lane) -> Dict[str, Any]:
        info = get_algorithm(lane.algorithm)
        step = lane.current_step
        action = describe_action(step)
        return {
            "algorithm": lane.algorithm,
            "label": info.label if info else lane.algorithm,
            "total_steps": len(lane.steps),
            "timeline": list(lane.timeline),
            "cursor": lane.cursor,
            "current_index": lane.current_index,
            "current_step": step.to_dict() if step else None,
            "action": action.__dict__ if action else None,
            "work": lane.work.to_dict(),
            "progress": self.progress(lane).to_dict(),
            "generation_ms": lane.generation_ms,
            "is_playing": lane.is_playing,
            "playback_start": lane.playback_start,
            "playback_end": lane.playback_end,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "array": self.array,
            "target": self.target,
            "interval_ms": self.scheduler.interval_ms,
            "step_every_ms": self.scheduler.step_every,
            "left": self.lane_dict(self.left),
            "right": self.lane_dict(self.right),
            "work_winner": self.work_winner(),
            "speed": self.speed_verdict().to_dict(),
        }
