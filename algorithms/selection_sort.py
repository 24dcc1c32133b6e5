"""
selection_sort.py — Selection Sort
===================================
Each pass scans the unsorted suffix for its minimum and swaps it into
place.  Emits: pass start, every compare, every new-minimum update and
the end-of-pass swap (or "No Swap" when the minimum is already home).
"""

from typing import List, Optional, Sequence

from algorithms.step import ArrowKind, Highlights, MoveArrow, Step, StepBuilder


PSEUDOCODE: List[str] = [
    "for i in range(n - 1):",                          # 0
    "    min_idx = i",                                 # 1
    "    for j in range(i + 1, n):",                   # 2
    "        if arr[j] < arr[min_idx]:",               # 3
    "            min_idx = j",                         # 4
    "    arr[i], arr[min_idx] = arr[min_idx], arr[i]", # 5
    "return arr",                                      # 6
]


def selection_sort(array: Sequence[int], target: Optional[int] = None) -> List[Step]:
    sb = StepBuilder(array)
    arr = sb.arr
    n = len(arr)

    sb.emit(
        "Initial Array",
        "Starting with the original array. We will find the minimum element "
        "and place it at the beginning.",
        pointers={"i": 0},
        code_line=0,
    )

    for i in range(n - 1):
        sb.passes += 1
        min_idx = i
        settled = list(range(i))

        sb.emit(
            f"Pass {sb.passes}: Find Minimum",
            f"Start pass {sb.passes}. Looking for the minimum in the unsorted portion [{i}...{n - 1}].",
            hl=Highlights(key=[i], sorted=settled),
            pointers={"i": i, "min_idx": i},
            code_line=1,
        )

        for j in range(i + 1, n):
            sb.comparisons += 1
            smaller = arr[j] < arr[min_idx]
            sb.emit(
                f"Pass {sb.passes}: Compare",
                f"Compare arr[{j}]={arr[j]} with current minimum arr[{min_idx}]={arr[min_idx]}. "
                + ("New minimum found!" if smaller else "Not smaller."),
                hl=Highlights(compare=[j], key=[min_idx], sorted=settled),
                pointers={"i": i, "j": j, "min_idx": min_idx},
                arrows=[MoveArrow(min_idx, j, ArrowKind.COMPARE)],
                code_line=3,
            )

            if smaller:
                min_idx = j
                sb.emit(
                    f"Pass {sb.passes}: Update Min",
                    f"Updated minimum index to {min_idx} (value: {arr[min_idx]}).",
                    hl=Highlights(key=[min_idx], sorted=settled),
                    pointers={"i": i, "j": j, "min_idx": min_idx},
                    code_line=4,
                )

        if min_idx != i:
            first, smallest = arr[i], arr[min_idx]
            sb.swap(i, min_idx)
            sb.swaps += 1
            sb.emit(
                f"Pass {sb.passes}: Swap",
                f"Swap arr[{i}]={first} with minimum arr[{min_idx}]={smallest}.",
                hl=Highlights(swap=[i, min_idx], sorted=settled),
                hl_after=Highlights(swap=[i, min_idx], sorted=settled + [i]),
                pointers={"i": i, "min_idx": min_idx},
                arrows=[MoveArrow(min_idx, i, ArrowKind.SWAP)],
                code_line=5,
            )
        else:
            sb.emit(
                f"Pass {sb.passes}: No Swap",
                f"Element at position {i} is already the minimum. No swap needed.",
                hl=Highlights(sorted=settled + [i]),
                pointers={"i": i},
                code_line=5,
            )

    sb.emit(
        "Sorted!",
        f"Array is now fully sorted! Total: {sb.comparisons} comparisons, {sb.swaps} swaps.",
        hl=Highlights(sorted=sb.all_indices()),
        code_line=6,
    )
    return sb.steps
