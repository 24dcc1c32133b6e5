"""
bubble_sort.py — Bubble Sort
=============================
Emits a Step at every meaningful event:
  1. Compare two adjacent elements
  2. Swap them when they are out of order
  3. Pass complete  →  the largest unsorted element has bubbled to the end
  4. Final step  →  whole array sorted

Stops early when a full pass performs no swap.
"""

from typing import List, Optional, Sequence

from algorithms.step import ArrowKind, Highlights, MoveArrow, Step, StepBuilder


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = code_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "for i in range(n - 1):",                         # 0
    "    for j in range(n - i - 1):",                 # 1
    "        if arr[j] > arr[j + 1]:",                # 2
    "            arr[j], arr[j + 1] = arr[j + 1], arr[j]",  # 3
    "    if not swapped: break",                      # 4
    "return arr",                                     # 5
]


def bubble_sort(array: Sequence[int], target: Optional[int] = None) -> List[Step]:
    """Replay bubble sort on a copy of `array`.  `target` is ignored."""
    sb = StepBuilder(array)
    arr = sb.arr
    n = len(arr)

    sb.emit(
        "Initial Array",
        "Starting with the original unsorted array. We will compare adjacent "
        "elements and swap them if they are in the wrong order.",
        pointers={"i": 0, "j": None},
        code_line=0,
    )

    for i in range(n - 1):
        sb.passes += 1
        swapped = False
        settled = [n - 1 - k for k in range(i)]

        for j in range(n - i - 1):
            sb.comparisons += 1
            needs_swap = arr[j] > arr[j + 1]
            sb.emit(
                f"Pass {sb.passes}: Compare",
                f"Compare arr[{j}]={arr[j]} with arr[{j + 1}]={arr[j + 1]}. "
                + ("Swap needed!" if needs_swap else "No swap needed."),
                hl=Highlights(compare=[j, j + 1], sorted=settled),
                pointers={"i": n - i - 1, "j": j},
                arrows=[MoveArrow(j, j + 1, ArrowKind.COMPARE)],
                code_line=2,
            )

            if needs_swap:
                left, right = arr[j], arr[j + 1]
                sb.swap(j, j + 1)
                sb.swaps += 1
                swapped = True
                sb.emit(
                    f"Pass {sb.passes}: Swap",
                    f"Swapped {left} and {right} because {left} > {right}.",
                    hl=Highlights(swap=[j, j + 1], sorted=settled),
                    pointers={"i": n - i - 1, "j": j},
                    arrows=[MoveArrow(j, j + 1, ArrowKind.SWAP)],
                    code_line=3,
                )

        sb.emit(
            f"Pass {sb.passes}: Complete",
            f"Pass {sb.passes} complete. Element {arr[n - i - 1]} is now in its final position."
            + ("" if swapped else " No swaps happened, so the array is already sorted."),
            hl=Highlights(sorted=[n - 1 - k for k in range(i + 1)]),
            code_line=4,
        )

        if not swapped:
            break

    sb.emit(
        "Sorted!",
        f"Array is now fully sorted! Total: {sb.comparisons} comparisons, {sb.swaps} swaps.",
        hl=Highlights(sorted=sb.all_indices()),
        code_line=5,
    )
    return sb.steps
