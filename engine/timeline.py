"""
timeline.py — Comparison Timeline
==================================
Instrumenters differ in how many narration-only steps they emit.  For a
head-to-head run each trace is filtered down to the steps that matter:

  • index 0 and the last index, always
  • any step classified as a compare or swap event
  • any step carrying a pivot / key / found / sorted / eliminated marker

Classification trusts move arrows first.  A `swap` highlight on its own
is display-only and never counts as data movement.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from algorithms.step import ArrowKind, Step


class EventType(Enum):
    COMPARE = "compare"
    SWAP    = "swap"
    OTHER   = "other"


MILESTONE_MARKERS = ("pivot", "key", "found", "sorted", "eliminated")


def classify_event(step: Step) -> EventType:
    if any(a.moves_data for a in step.move_arrows):
        return EventType.SWAP
    if any(a.kind == ArrowKind.COMPARE for a in step.move_arrows) or step.highlights.has("compare"):
        return EventType.COMPARE
    return EventType.OTHER


def is_milestone(step: Step) -> bool:
    return any(step.highlights.has(marker) for marker in MILESTONE_MARKERS)


def build_comparison_timeline(steps: Sequence[Step]) -> List[int]:
    """Ascending, duplicate-free trace indices for comparison playback."""
    if not steps:
        return []
    last = len(steps) - 1
    timeline = [0]
    for i in range(1, last):
        step = steps[i]
        if classify_event(step) != EventType.OTHER or is_milestone(step):
            timeline.append(i)
    if last > 0:
        timeline.append(last)
    return timeline


# ---------------------------------------------------------------------------
# Action badge for a lane's current step
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StepAction:
    kind:   str     # "sorted" | "swap" | "compare" | "other"
    label:  str
    detail: str


def _ordered(a: int, b: int):
    return (a, b) if a < b else (b, a)


def _swap_pair(step: Step):
    for arrow in step.move_arrows:
        if arrow.moves_data:
            return _ordered(arrow.from_index, arrow.to_index)
    return None


def _compare_pair(step: Step):
    for arrow in step.move_arrows:
        if arrow.kind == ArrowKind.COMPARE:
            return _ordered(arrow.from_index, arrow.to_index)
    indices = step.highlights.after.compare or step.highlights.before.compare
    if len(indices) >= 2:
        return _ordered(indices[0], indices[1])
    return None


def describe_action(step: Optional[Step]) -> Optional[StepAction]:
    if step is None:
        return None
    fully_sorted = bool(step.after) and len(step.highlights.after.sorted) == len(step.after)
    if fully_sorted or step.label == "Sorted!":
        return StepAction("sorted", "Sorted", "Array is sorted")

    event = classify_event(step)
    if event == EventType.SWAP:
        pair = _swap_pair(step)
        return StepAction("swap", "Swap", f"Swap {pair[0]} ↔ {pair[1]}" if pair else "Swap")
    if event == EventType.COMPARE:
        pair = _compare_pair(step)
        return StepAction("compare", "Compare", f"Compare {pair[0]} vs {pair[1]}" if pair else "Compare")
    return StepAction("other", "Step", "Progress")
