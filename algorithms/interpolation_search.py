"""
interpolation_search.py — Interpolation Search
===============================================
Sorts a working copy, then estimates the position where the target would
sit if values were evenly spread:

    pos = low + floor((target - arr[low]) * (high - low) / (arr[high] - arr[low]))

The estimate is clamped into [low, high].  When arr[high] == arr[low] the
slope is undefined and arr[low] is checked directly.
"""

from typing import List, Optional, Sequence

from algorithms.step import Highlights, Step, StepBuilder, default_target


PSEUDOCODE: List[str] = [
    "while low <= high and arr[low] <= target <= arr[high]:",                  # 0
    "    pos = low + (target - arr[low]) * (high - low) // (arr[high] - arr[low])",  # 1
    "    if arr[pos] == target: return pos",                                   # 2
    "    if arr[pos] < target: low = pos + 1",                                 # 3
    "    else: high = pos - 1",                                                # 4
    "return -1",                                                               # 5
]


def estimate_position(arr: Sequence[int], low: int, high: int, target: int) -> int:
    """Interpolated index, clamped into [low, high]."""
    if arr[high] == arr[low]:
        return low
    pos = low + (target - arr[low]) * (high - low) // (arr[high] - arr[low])
    return min(max(pos, low), high)


def interpolation_search(array: Sequence[int], target: Optional[int] = None) -> List[Step]:
    target = default_target(array, target)
    sb = StepBuilder(array)
    arr = sb.arr
    arr.sort()
    n = len(arr)
    low, high = 0, n - 1

    sb.emit(
        "Start Search",
        f"Sorted a working copy of the array. Searching for {target} using Interpolation "
        f"Search, which estimates the position from the values at both ends.",
        pointers={"low": low, "high": high},
        code_line=0,
    )

    while low <= high and arr[low] <= target <= arr[high]:
        sb.passes += 1
        outside = [k for k in range(n) if k < low or k > high]
        pos = estimate_position(arr, low, high, target)

        if arr[high] == arr[low]:
            how = f"arr[low] == arr[high] = {arr[low]}, so there is no slope; check arr[low] directly."
        else:
            how = "Formula: low + ((target - arr[low]) * (high - low)) // (arr[high] - arr[low])."
        sb.emit(
            "Calculate Position",
            f"Estimated position = {pos}. {how}",
            hl=Highlights(key=[pos], eliminated=outside),
            pointers={"low": low, "high": high, "pos": pos},
            code_line=1,
        )

        sb.comparisons += 1
        sb.emit(
            f"Compare at {pos}",
            f"Compare arr[{pos}]={arr[pos]} with target={target}. "
            + ("Match!" if arr[pos] == target
               else "Less, search right." if arr[pos] < target
               else "Greater, search left."),
            hl=Highlights(compare=[pos], eliminated=outside),
            pointers={"low": low, "high": high, "pos": pos},
            code_line=2,
        )

        if arr[pos] == target:
            sb.emit(
                "Found!",
                f"Target {target} found at index {pos} after {sb.comparisons} comparisons.",
                hl=Highlights(found=[pos]),
                pointers={"result": pos},
                code_line=2,
            )
            return sb.steps

        if arr[pos] < target:
            low = pos + 1
            sb.emit(
                "Narrow Right",
                f"arr[{pos}]={arr[pos]} < {target}. Update low = {low}. Search in [{low}...{high}].",
                hl=Highlights(eliminated=[k for k in range(n) if k < low or k > high]),
                pointers={"low": low, "high": high},
                code_line=3,
            )
        else:
            high = pos - 1
            sb.emit(
                "Narrow Left",
                f"arr[{pos}]={arr[pos]} > {target}. Update high = {high}. Search in [{low}...{high}].",
                hl=Highlights(eliminated=[k for k in range(n) if k < low or k > high]),
                pointers={"low": low, "high": high},
                code_line=4,
            )

    sb.emit(
        "Not Found",
        f"Interpolation search complete. Target {target} not found after {sb.comparisons} comparisons.",
        hl=Highlights(eliminated=sb.all_indices()),
        pointers={"result": None},
        code_line=5,
    )
    return sb.steps
