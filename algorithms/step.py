"""
step.py — Algorithm Step Snapshot
==================================
Every instrumenter returns a list of Step objects.
A Step is a frozen-in-time picture of everything a viewer needs to
render one frame of a sorting / searching run:

    • The full working array before and after the operation
    • Which indices are being compared / swapped / shifted / eliminated …
    • Where the named pointers (i, j, low, high, pivot …) sit
    • Move arrows describing the data movement that really happened
    • Which line of pseudocode is executing right now
    • A plain-English explanation of *why* this step happened
    • Running metrics (comparisons, swaps, passes)

Design decisions:
  - Step is a frozen dataclass; arrays and index sets are tuples.
    The instrumenter is the only writer, everything downstream is a reader.
  - `before` / `after` are full snapshots, not diffs, so any consumer can
    render either state without replaying history.
  - Move arrows, not highlight sets, are the evidence that data moved.
    Highlights may be used loosely for visual effect.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple


# ---------------------------------------------------------------------------
# Highlight categories & resolution
# ---------------------------------------------------------------------------
class HighlightState(Enum):
    FOUND      = "found"
    SWAP       = "swap"
    COMPARE    = "compare"
    PIVOT      = "pivot"
    KEY        = "key"
    SORTED     = "sorted"
    SHIFT      = "shift"
    ELIMINATED = "eliminated"
    NONE       = "none"


# highest priority first
HIGHLIGHT_PRIORITY: Tuple[HighlightState, ...] = (
    HighlightState.FOUND,
    HighlightState.SWAP,
    HighlightState.COMPARE,
    HighlightState.PIVOT,
    HighlightState.KEY,
    HighlightState.SORTED,
    HighlightState.SHIFT,
    HighlightState.ELIMINATED,
)

HIGHLIGHT_CATEGORIES: Tuple[str, ...] = tuple(s.value for s in HIGHLIGHT_PRIORITY)


def _index_tuple(values: Iterable[int]) -> Tuple[int, ...]:
    return tuple(sorted(set(values)))


@dataclass(frozen=True)
class Highlights:
    """
    Eight index sets.  Membership is not exclusive: an index may be both
    `pivot` and `key`.  Use resolve_highlight() to pick one visual state.
    """

    compare:    Tuple[int, ...] = ()
    swap:       Tuple[int, ...] = ()
    key:        Tuple[int, ...] = ()
    sorted:     Tuple[int, ...] = ()
    found:      Tuple[int, ...] = ()
    shift:      Tuple[int, ...] = ()
    pivot:      Tuple[int, ...] = ()
    eliminated: Tuple[int, ...] = ()

    def __post_init__(self):
        # accept any iterable (list, range, set) and normalise to a sorted tuple
        for f in fields(self):
            object.__setattr__(self, f.name, _index_tuple(getattr(self, f.name)))

    def has(self, category: str) -> bool:
        return len(getattr(self, category)) > 0

    def to_dict(self) -> Dict[str, List[int]]:
        return {name: list(getattr(self, name)) for name in HIGHLIGHT_CATEGORIES}


def resolve_highlight(highlights: Highlights, index: int) -> HighlightState:
    """Return the single visual state of `index` using HIGHLIGHT_PRIORITY."""
    for state in HIGHLIGHT_PRIORITY:
        if index in getattr(highlights, state.value):
            return state
    return HighlightState.NONE


@dataclass(frozen=True)
class StepHighlights:
    before: Highlights = field(default_factory=Highlights)
    after:  Highlights = field(default_factory=Highlights)

    def has(self, category: str) -> bool:
        """True if either side carries a non-empty `category` set."""
        return self.before.has(category) or self.after.has(category)

    def to_dict(self) -> Dict[str, Any]:
        return {"before": self.before.to_dict(), "after": self.after.to_dict()}


# ---------------------------------------------------------------------------
# Move arrows
# ---------------------------------------------------------------------------
class ArrowKind(Enum):
    SWAP    = "swap"
    SHIFT   = "shift"
    COMPARE = "compare"


@dataclass(frozen=True)
class MoveArrow:
    from_index: int
    to_index:   int
    kind:       ArrowKind

    @property
    def moves_data(self) -> bool:
        return self.kind in (ArrowKind.SWAP, ArrowKind.SHIFT)

    def to_dict(self) -> Dict[str, Any]:
        return {"from_index": self.from_index, "to_index": self.to_index, "kind": self.kind.value}


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Metrics:
    comparisons: int = 0
    swaps:       int = 0
    passes:      int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"comparisons": self.comparisons, "swaps": self.swaps, "passes": self.passes}


# ---------------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Step:
    """
    Attributes:
        label       : Short title, e.g. "Pass 2: Swap".
        before      : Working array at the start of the operation.
        after       : Working array at the end of the operation.
        highlights  : Highlight sets for the before and after views.
        pointers    : {name: index or None}, e.g. {"low": 0, "high": 6}.
        move_arrows : Directed annotations for compares / swaps / shifts.
        code_line   : 0-based pseudocode line, -1 when not tied to a line.
        explanation : Human-readable "why" text.
        metrics     : Running totals up to and including this step.
    """

    label:       str                          = ""
    before:      Tuple[int, ...]              = ()
    after:       Tuple[int, ...]              = ()
    highlights:  StepHighlights               = field(default_factory=StepHighlights)
    pointers:    Dict[str, Optional[int]]     = field(default_factory=dict)
    move_arrows: Tuple[MoveArrow, ...]        = ()
    code_line:   int                          = 0
    explanation: str                          = ""
    metrics:     Metrics                      = field(default_factory=Metrics)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label":       self.label,
            "before":      list(self.before),
            "after":       list(self.after),
            "highlights":  self.highlights.to_dict(),
            "pointers":    dict(self.pointers),
            "move_arrows": [a.to_dict() for a in self.move_arrows],
            "code_line":   self.code_line,
            "explanation": self.explanation,
            "metrics":     self.metrics.to_dict(),
        }


def default_target(array: Sequence[int], target: Optional[int]) -> Optional[int]:
    """Searches fall back to the first element when no target is given."""
    if target is not None:
        return target
    return array[0] if len(array) else None


# ---------------------------------------------------------------------------
# Builder shared by every instrumenter
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that instrumenters use to record a trace.

    The builder owns the working array and the running counters.  emit()
    snapshots the array as the step's `after`, and uses the previous
    step's `after` as its `before`, so continuity holds by construction.

    Usage inside an instrumenter:
        sb = StepBuilder(array)
        sb.emit("Initial Array", "Starting …", code_line=0)
        sb.comparisons += 1
        sb.swap(j, j + 1)
        sb.emit("Pass 1: Swap", "…", hl=Highlights(swap=[j, j + 1]),
                arrows=[MoveArrow(j, j + 1, ArrowKind.SWAP)])
        return sb.steps
    """

    def __init__(self, array: Sequence[int]):
        self.arr:         List[int]  = list(array)
        self.steps:       List[Step] = []
        self.comparisons: int        = 0
        self.swaps:       int        = 0
        self.passes:      int        = 0
        self._last:       Tuple[int, ...] = tuple(self.arr)

    # -- helpers --
    def swap(self, i: int, j: int) -> None:
        self.arr[i], self.arr[j] = self.arr[j], self.arr[i]

    def all_indices(self) -> range:
        return range(len(self.arr))

    @property
    def metrics(self) -> Metrics:
        return Metrics(self.comparisons, self.swaps, self.passes)

    def emit(
        self,
        label: str,
        explanation: str,
        *,
        hl: Optional[Highlights] = None,
        hl_after: Optional[Highlights] = None,
        pointers: Optional[Dict[str, Optional[int]]] = None,
        arrows: Sequence[MoveArrow] = (),
        code_line: int = 0,
    ) -> Step:
        """
        Record one step.  `hl_after` defaults to `hl` (most steps show the
        same highlights on both sides).
        """
        before = hl if hl is not None else Highlights()
        after  = hl_after if hl_after is not None else before
        snapshot = tuple(self.arr)
        step = Step(
            label=label,
            before=self._last,
            after=snapshot,
            highlights=StepHighlights(before=before, after=after),
            pointers=dict(pointers or {}),
            move_arrows=tuple(arrows),
            code_line=code_line,
            explanation=explanation,
            metrics=self.metrics,
        )
        self.steps.append(step)
        self._last = snapshot
        return step
