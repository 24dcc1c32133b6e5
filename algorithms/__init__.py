"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the debugger knows about.

    from algorithms import REGISTRY, get_algorithm, instrument

REGISTRY is a dict:
    {
        "bubble-sort": AlgoInfo(key, label, fn, pseudocode, category, …),
        …
    }

The set of keys is closed: 6 sorting + 4 searching algorithms.  Adding an
algorithm means writing the instrumenter and adding one entry here.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from algorithms.step import Step
from algorithms.bubble_sort          import bubble_sort          as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection_sort       import selection_sort       as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion_sort       import insertion_sort       as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.merge_sort           import merge_sort           as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick_sort           import quick_sort           as _quick,     PSEUDOCODE as _quick_pc
from algorithms.heap_sort            import heap_sort            as _heap,      PSEUDOCODE as _heap_pc
from algorithms.linear_search        import linear_search        as _linear,    PSEUDOCODE as _linear_pc
from algorithms.binary_search        import binary_search        as _binary,    PSEUDOCODE as _binary_pc
from algorithms.jump_search          import jump_search          as _jump,      PSEUDOCODE as _jump_pc
from algorithms.interpolation_search import interpolation_search as _interp,    PSEUDOCODE as _interp_pc

logger = logging.getLogger(__name__)

SORTING   = "sorting"
SEARCHING = "searching"

Instrumenter = Callable[[Sequence[int], Optional[int]], List[Step]]


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:              str            # registry key, e.g. "bubble-sort"
    label:            str            # human label, e.g. "Bubble Sort"
    fn:               Instrumenter   # the instrumenter
    pseudocode:       List[str]      # lines for the side-panel
    category:         str            # SORTING or SEARCHING
    time_best:        str = ""
    time_average:     str = ""
    time_worst:       str = ""
    space:            str = ""
    description:      str = ""

    @property
    def needs_target(self) -> bool:
        return self.category == SEARCHING

    def to_dict(self) -> Dict[str, object]:
        return {
            "key": self.key,
            "label": self.label,
            "category": self.category,
            "time_complexity": {
                "best": self.time_best,
                "average": self.time_average,
                "worst": self.time_worst,
            },
            "space_complexity": self.space,
            "description": self.description,
            "pseudocode": list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble-sort": AlgoInfo(
        key="bubble-sort", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        category=SORTING,
        time_best="O(n)", time_average="O(n²)", time_worst="O(n²)", space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs. Stops early once a pass makes no swap.",
    ),

    "selection-sort": AlgoInfo(
        key="selection-sort", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        category=SORTING,
        time_best="O(n²)", time_average="O(n²)", time_worst="O(n²)", space="O(1)",
        description="Finds the minimum of the unsorted part and swaps it to the front. At most n-1 swaps.",
    ),

    "insertion-sort": AlgoInfo(
        key="insertion-sort", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        category=SORTING,
        time_best="O(n)", time_average="O(n²)", time_worst="O(n²)", space="O(1)",
        description="Builds the sorted array one element at a time by shifting larger elements right.",
    ),

    "merge-sort": AlgoInfo(
        key="merge-sort", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        category=SORTING,
        time_best="O(n log n)", time_average="O(n log n)", time_worst="O(n log n)", space="O(n)",
        description="Divides the array in half, sorts each half recursively, then merges them.",
    ),

    "quick-sort": AlgoInfo(
        key="quick-sort", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        category=SORTING,
        time_best="O(n log n)", time_average="O(n log n)", time_worst="O(n²)", space="O(log n)",
        description="Partitions around the last element (Lomuto), then sorts both sides recursively.",
    ),

    "heap-sort": AlgoInfo(
        key="heap-sort", label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
        category=SORTING,
        time_best="O(n log n)", time_average="O(n log n)", time_worst="O(n log n)", space="O(1)",
        description="Builds a max-heap, then repeatedly moves the root into the sorted suffix.",
    ),

    "linear-search": AlgoInfo(
        key="linear-search", label="Linear Search", fn=_linear, pseudocode=_linear_pc,
        category=SEARCHING,
        time_best="O(1)", time_average="O(n)", time_worst="O(n)", space="O(1)",
        description="Checks every element from left to right. Works on unsorted input.",
    ),

    "binary-search": AlgoInfo(
        key="binary-search", label="Binary Search", fn=_binary, pseudocode=_binary_pc,
        category=SEARCHING,
        time_best="O(1)", time_average="O(log n)", time_worst="O(log n)", space="O(1)",
        description="Halves the sorted search space on every comparison.",
    ),

    "jump-search": AlgoInfo(
        key="jump-search", label="Jump Search", fn=_jump, pseudocode=_jump_pc,
        category=SEARCHING,
        time_best="O(1)", time_average="O(√n)", time_worst="O(√n)", space="O(1)",
        description="Jumps ahead in √n blocks, then scans the block that can hold the target.",
    ),

    "interpolation-search": AlgoInfo(
        key="interpolation-search", label="Interpolation Search", fn=_interp, pseudocode=_interp_pc,
        category=SEARCHING,
        time_best="O(1)", time_average="O(log log n)", time_worst="O(n)", space="O(1)",
        description="Estimates where the target should be if values were evenly spread.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_category(category: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.category == category]


def instrument(key: str, array: Sequence[int], target: Optional[int] = None) -> List[Step]:
    """Run the named instrumenter.  Raises ValueError for an unknown key."""
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")
    steps = info.fn(array, target)
    logger.debug("instrumented %s on %d values: %d steps", key, len(array), len(steps))
    return steps


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "SORTING",
    "SEARCHING",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_category",
    "instrument",
]
