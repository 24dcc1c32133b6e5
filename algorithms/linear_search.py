"""
linear_search.py — Linear Search
=================================
Checks every element left to right.  Works on the array as given (no
sorting), so the trace's last `after` is the input itself.
"""

from typing import List, Optional, Sequence

from algorithms.step import Highlights, Step, StepBuilder, default_target


PSEUDOCODE: List[str] = [
    "def linear_search(arr, target):",   # 0
    "    for i in range(len(arr)):",     # 1
    "        if arr[i] == target:",      # 2
    "            return i",              # 3
    "    return -1  # not found",        # 4
]


def linear_search(array: Sequence[int], target: Optional[int] = None) -> List[Step]:
    target = default_target(array, target)
    sb = StepBuilder(array)
    arr = sb.arr
    n = len(arr)

    sb.emit(
        "Start Search",
        f"Searching for {target} in the array. We will check each element from left to right.",
        pointers={"i": 0},
        code_line=0,
    )

    for i in range(n):
        sb.passes += 1
        sb.comparisons += 1
        match = arr[i] == target
        sb.emit(
            f"Check Index {i}",
            f"Compare arr[{i}]={arr[i]} with target={target}. "
            + ("Match found!" if match else "Not a match, continue."),
            hl=Highlights(compare=[i], eliminated=range(i)),
            pointers={"i": i},
            code_line=2,
        )
        if match:
            sb.emit(
                "Found!",
                f"Target {target} found at index {i} after {sb.comparisons} comparisons.",
                hl=Highlights(found=[i]),
                pointers={"result": i},
                code_line=3,
            )
            return sb.steps

    sb.emit(
        "Not Found",
        f"Searched the entire array. Target {target} not found after {sb.comparisons} comparisons.",
        hl=Highlights(eliminated=sb.all_indices()),
        pointers={"result": None},
        code_line=4,
    )
    return sb.steps
