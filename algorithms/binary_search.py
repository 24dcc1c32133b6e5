"""
binary_search.py — Binary Search
=================================
Sorts a working copy first (the caller's order is not trusted), then
halves the search space each pass.  Terminates "Not Found" once
low > high.

The "Start Search" step carries the sort: its `before` is the caller's
array and its `after` the sorted working copy.
"""

from typing import List, Optional, Sequence

from algorithms.step import Highlights, Step, StepBuilder, default_target


PSEUDOCODE: List[str] = [
    "low = 0",                          # 0
    "high = len(arr) - 1",              # 1
    "while low <= high:",               # 2
    "    mid = (low + high) // 2",      # 3
    "    if arr[mid] == target:",       # 4
    "        return mid",               # 5
    "    elif arr[mid] < target:",      # 6
    "        low = mid + 1",            # 7
    "    else:",                        # 8
    "        high = mid - 1",           # 9
    "return -1",                        # 10
]


def binary_search(array: Sequence[int], target: Optional[int] = None) -> List[Step]:
    target = default_target(array, target)
    sb = StepBuilder(array)
    arr = sb.arr
    arr.sort()
    n = len(arr)
    low, high = 0, n - 1

    sb.emit(
        "Start Search",
        f"Sorted a working copy of the array. Searching for {target}; "
        f"search space is indices 0 to {n - 1}.",
        pointers={"low": low, "high": high, "mid": None},
        code_line=1,
    )

    while low <= high:
        sb.passes += 1
        mid = (low + high) // 2
        outside = [k for k in range(n) if k < low or k > high]

        sb.emit(
            f"Pass {sb.passes}: Calculate Mid",
            f"mid = ({low} + {high}) // 2 = {mid}. arr[{mid}] = {arr[mid]}.",
            hl=Highlights(key=[mid], eliminated=outside),
            pointers={"low": low, "high": high, "mid": mid},
            code_line=3,
        )

        sb.comparisons += 1
        if arr[mid] == target:
            sb.emit(
                "Found!",
                f"arr[{mid}] = {arr[mid]} equals target {target}. Found at index {mid} "
                f"in {sb.comparisons} comparisons.",
                hl=Highlights(found=[mid]),
                pointers={"low": low, "high": high, "mid": mid, "result": mid},
                code_line=5,
            )
            return sb.steps

        if arr[mid] < target:
            sb.emit(
                f"Pass {sb.passes}: Compare",
                f"arr[{mid}] = {arr[mid]} < {target}. Target is in the right half.",
                hl=Highlights(compare=[mid], eliminated=outside),
                pointers={"low": low, "high": high, "mid": mid},
                code_line=6,
            )
            low = mid + 1
            sb.emit(
                f"Pass {sb.passes}: Narrow Right",
                f"Update low = {low}. New search space: indices {low} to {high}.",
                hl=Highlights(eliminated=[k for k in range(n) if k < low or k > high]),
                pointers={"low": low, "high": high, "mid": None},
                code_line=7,
            )
        else:
            sb.emit(
                f"Pass {sb.passes}: Compare",
                f"arr[{mid}] = {arr[mid]} > {target}. Target is in the left half.",
                hl=Highlights(compare=[mid], eliminated=outside),
                pointers={"low": low, "high": high, "mid": mid},
                code_line=8,
            )
            high = mid - 1
            sb.emit(
                f"Pass {sb.passes}: Narrow Left",
                f"Update high = {high}. New search space: indices {low} to {high}.",
                hl=Highlights(eliminated=[k for k in range(n) if k < low or k > high]),
                pointers={"low": low, "high": high, "mid": None},
                code_line=9,
            )

    sb.emit(
        "Not Found",
        f"Search space exhausted (low > high). Target {target} not found "
        f"after {sb.comparisons} comparisons.",
        hl=Highlights(eliminated=sb.all_indices()),
        pointers={"low": low, "high": high, "mid": None, "result": None},
        code_line=10,
    )
    return sb.steps
