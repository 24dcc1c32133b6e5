"""
work.py — Work Estimator
=========================
Assigns a cost to a lane's filtered timeline (never the raw trace):

    work = compare_events * COMPARE_COST + swap_events * SWAP_COST

Counting events rather than reading step metrics keeps the score
independent of how each instrumenter narrates.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Optional, Sequence

from algorithms.step import Step
from engine.config import DEFAULT_CONFIG, ComparisonConfig
from engine.timeline import EventType, classify_event


TIE  = "Tie"
NONE = "—"


@dataclass(frozen=True)
class WorkEstimate:
    comparisons:   int           = 0
    swaps:         int           = 0
    passes:        int           = 0
    total_steps:   int           = 0
    estimated:     int           = 0
    pointer_moves: int           = 0
    found_index:   Optional[int] = None

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def _pointer_changes(prev: Dict[str, Optional[int]], cur: Dict[str, Optional[int]]) -> int:
    return sum(1 for key in set(prev) | set(cur) if prev.get(key) != cur.get(key))


def estimate_work(
    steps: Sequence[Step],
    timeline: Sequence[int],
    upto: Optional[int] = None,
    config: ComparisonConfig = DEFAULT_CONFIG,
) -> WorkEstimate:
    """
    Tally the timeline.  `upto` limits the tally to timeline positions
    0..upto inclusive (a lane's progress so far).
    """
    positions = timeline if upto is None else timeline[: max(upto + 1, 0)]

    comparisons = swaps = passes = pointer_moves = 0
    found_index: Optional[int] = None
    prev_pointers: Optional[Dict[str, Optional[int]]] = None

    for idx in positions:
        step = steps[idx]
        event = classify_event(step)
        if event == EventType.COMPARE:
            comparisons += 1
        elif event == EventType.SWAP:
            swaps += 1
        passes = max(passes, step.metrics.passes)

        if prev_pointers is not None:
            pointer_moves += _pointer_changes(prev_pointers, step.pointers)
        prev_pointers = step.pointers

        if found_index is None:
            found = step.highlights.after.found or step.highlights.before.found
            if found:
                found_index = found[0]

    return WorkEstimate(
        comparisons=comparisons,
        swaps=swaps,
        passes=passes,
        total_steps=len(positions),
        estimated=comparisons * config.compare_cost + swaps * config.swap_cost,
        pointer_moves=pointer_moves,
        found_index=found_index,
    )


def work_winner(left: Optional[WorkEstimate], right: Optional[WorkEstimate]) -> str:
    """'A' / 'B' for the cheaper lane, 'Tie' on equal work, '—' if a lane has no trace."""
    if left is None or right is None:
        return NONE
    if left.estimated < right.estimated:
        return "A"
    if right.estimated < left.estimated:
        return "B"
    return TIE
