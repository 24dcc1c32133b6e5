"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Pivot is always the last element of the active range [low, high].

Visual rules carried by the highlights:
  - Everything outside the active range is `eliminated` (frozen), except
    pivots already fixed in place.
  - Fixed pivots accumulate in `sorted` and persist across recursive calls.
  - Pivot placement is two-phase: "Pivot Placement Decided" (display only,
    no data movement) then "Pivot Placement" (the real swap).
  - The left recursion runs to completion before the right one starts.
"""

from typing import List, Optional, Sequence, Set

from algorithms.step import ArrowKind, Highlights, MoveArrow, Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def partition(arr, low, high):",                          # 0
    "    pivot = arr[high]",                                   # 1
    "    i = low - 1",                                         # 2
    "",                                                        # 3
    "    for j in range(low, high):",                          # 4
    "        if arr[j] <= pivot:",                             # 5
    "            i += 1",                                      # 6
    "            arr[i], arr[j] = arr[j], arr[i]",             # 7
    "",                                                        # 8
    "    arr[i + 1], arr[high] = arr[high], arr[i + 1]",       # 9
    "    return i + 1",                                        # 10
    "",                                                        # 11
    "",                                                        # 12
    "def quick_sort(arr, low, high):",                         # 13
    "    if low < high:",                                      # 14
    "        pivot_index = partition(arr, low, high)",         # 15
    "        quick_sort(arr, low, pivot_index - 1)",           # 16
    "        quick_sort(arr, pivot_index + 1, high)",          # 17
]

PIVOT_ASSIGN = 1
IF_CMP       = 5
SWAP_IJ      = 7
PIVOT_SWAP   = 9
RECURSE_LEFT = 16
RECURSE_RIGHT = 17


def quick_sort(array: Sequence[int], target: Optional[int] = None) -> List[Step]:
    sb = StepBuilder(array)
    arr = sb.arr
    n = len(arr)
    fixed: Set[int] = set()

    def frozen(low: int, high: int) -> List[int]:
        """Indices outside [low, high] that are not fixed pivots."""
        return [k for k in range(n) if (k < low or k > high) and k not in fixed]

    sb.emit(
        "Initial Array",
        "Starting Quick Sort. We pick a pivot, partition the array around it, "
        "then sort the sub-arrays recursively.",
        code_line=-1,
    )

    def partition(low: int, high: int) -> int:
        pivot = arr[high]
        i = low - 1
        eliminated = frozen(low, high)

        sb.emit(
            "Partition Setup",
            f"Entering partition(arr, low={low}, high={high}). Set pivot = arr[high] = {pivot} "
            f"and i = low - 1 = {i}. Only this subarray is active.",
            hl=Highlights(pivot=[high], sorted=fixed, eliminated=eliminated),
            pointers={"low": low, "high": high, "pivot": high, "i": i},
            code_line=PIVOT_ASSIGN,
        )

        for j in range(low, high):
            sb.comparisons += 1
            take = arr[j] <= pivot
            sb.emit(
                "Compare with Pivot",
                f"Compare arr[{j}] = {arr[j]} with pivot (arr[{high}]) = {pivot}. "
                + ("Condition is TRUE (<=), so we increment i and swap."
                   if take else
                   "Condition is FALSE (>), so we do not swap; only j moves forward."),
                hl=Highlights(compare=[j], pivot=[high], sorted=fixed, eliminated=eliminated),
                pointers={"low": low, "high": high, "pivot": high, "i": i, "j": j},
                arrows=[MoveArrow(j, high, ArrowKind.COMPARE)],
                code_line=IF_CMP,
            )

            if take:
                prev_i = i
                i += 1
                # the swap statement executes even when i == j
                sb.swap(i, j)
                sb.swaps += 1
                if i == j:
                    detail = f"This swaps index {i} with itself (no visible change)."
                    arrows = []
                else:
                    detail = f"Swapped indices {i} and {j} to move the element into the left partition."
                    arrows = [MoveArrow(i, j, ArrowKind.SWAP)]
                sb.emit(
                    "Swap",
                    f"i moved from {prev_i} to {i}, then arr[i], arr[j] = arr[j], arr[i]. {detail}",
                    hl=Highlights(swap=[i, j], pivot=[high], sorted=fixed, eliminated=eliminated),
                    pointers={"low": low, "high": high, "pivot": high, "i": i, "j": j},
                    arrows=arrows,
                    code_line=SWAP_IJ,
                )
            else:
                sb.emit(
                    "No Swap / Skip",
                    f"arr[{j}] > pivot, so i stays at {i}. j advances to the next index.",
                    hl=Highlights(compare=[j], pivot=[high], sorted=fixed, eliminated=eliminated),
                    pointers={"low": low, "high": high, "pivot": high, "i": i, "j": j},
                    code_line=IF_CMP,
                )

        final = i + 1

        # phase 1: the destination is known, nothing has moved yet
        sb.emit(
            "Pivot Placement Decided",
            f"The loop is finished. Pivot ({pivot}) belongs at index {final} = i + 1.",
            hl=Highlights(swap=[final, high], pivot=[high], sorted=fixed, eliminated=eliminated),
            pointers={"low": low, "high": high, "pivot": high, "i": i, "j": None},
            code_line=PIVOT_SWAP,
        )

        # phase 2: execute the swap and fix the index
        sb.swap(final, high)
        sb.swaps += 1
        settled_before = sorted(fixed)
        fixed.add(final)
        sb.emit(
            "Pivot Placement",
            f"Pivot placement swap executed. Index {final} is now fixed (correct position "
            f"for pivot {pivot}). The subarrays on either side may still be unsorted.",
            hl=Highlights(swap=[final, high], pivot=[high], sorted=settled_before, eliminated=eliminated),
            hl_after=Highlights(sorted=fixed, eliminated=eliminated),
            pointers={"low": low, "high": high, "pivot": final, "i": i, "j": None},
            arrows=[MoveArrow(high, final, ArrowKind.SWAP)] if final != high else [],
            code_line=PIVOT_SWAP,
        )
        return final

    def sort_range(low: int, high: int) -> None:
        if low >= high:
            return
        p = partition(low, high)

        sb.emit(
            "Recursive Call (Left)",
            f"Executing quick_sort(arr, low, pivot_index - 1). Active subarray is [{low}..{p - 1}].",
            hl=Highlights(sorted=fixed, eliminated=frozen(low, p - 1)),
            pointers={"low": low, "high": p - 1, "i": None, "j": None, "pivot": None},
            code_line=RECURSE_LEFT,
        )
        sort_range(low, p - 1)

        sb.emit(
            "Recursive Call (Right)",
            f"Executing quick_sort(arr, pivot_index + 1, high). Active subarray is [{p + 1}..{high}].",
            hl=Highlights(sorted=fixed, eliminated=frozen(p + 1, high)),
            pointers={"low": p + 1, "high": high, "i": None, "j": None, "pivot": None},
            code_line=RECURSE_RIGHT,
        )
        sort_range(p + 1, high)

    sort_range(0, n - 1)

    sb.emit(
        "Sorted!",
        f"Array is now fully sorted! Total: {sb.comparisons} comparisons, {sb.swaps} swaps.",
        hl=Highlights(sorted=sb.all_indices()),
        code_line=-1,
    )
    return sb.steps
