"""
jump_search.py — Jump Search
=============================
Sorts a working copy, then jumps ahead in blocks of floor(sqrt(n)),
checking the last element of each block.  Once a block end is >= target
the block is scanned linearly.
"""

import math
from typing import List, Optional, Sequence

from algorithms.step import Highlights, Step, StepBuilder, default_target


PSEUDOCODE: List[str] = [
    "step = int(math.sqrt(n))",                                     # 0
    "prev, curr = 0, step",                                         # 1
    "while arr[min(curr, n) - 1] < target:",                        # 2
    "    prev, curr = curr, curr + step",                           # 3
    "    if prev >= n: return -1",                                  # 4
    "for i in range(prev, min(curr, n)):",                          # 5
    "    if arr[i] == target: return i",                            # 6
    "return -1",                                                    # 7
]


def jump_search(array: Sequence[int], target: Optional[int] = None) -> List[Step]:
    target = default_target(array, target)
    sb = StepBuilder(array)
    arr = sb.arr
    arr.sort()
    n = len(arr)
    jump = math.isqrt(n)

    sb.emit(
        "Start Search",
        f"Sorted a working copy of the array. Searching for {target} using Jump Search "
        f"with jump size floor(sqrt({n})) = {jump}.",
        pointers={"prev": 0, "curr": jump},
        code_line=0,
    )

    prev, curr = 0, jump
    block_found = False

    # --- jump phase ---
    while n and prev < n:
        sb.passes += 1
        sb.comparisons += 1
        check = min(curr, n) - 1
        if arr[check] < target:
            sb.emit(
                f"Jump past {check}",
                f"arr[{check}]={arr[check]} < {target}. The target cannot be in this block; jump forward.",
                hl=Highlights(compare=[check], eliminated=range(prev)),
                pointers={"prev": prev, "curr": check},
                code_line=2,
            )
            prev, curr = curr, curr + jump
            continue

        sb.emit(
            f"Block End {check}",
            f"arr[{check}]={arr[check]} >= {target}. The target, if present, lies in [{prev}...{check}].",
            hl=Highlights(compare=[check], key=range(prev, check + 1), eliminated=range(prev)),
            pointers={"prev": prev, "curr": check},
            code_line=2,
        )
        block_found = True
        break

    # --- linear phase ---
    if block_found:
        end = min(curr, n)
        sb.emit(
            "Linear Search Phase",
            f"Scan the block [{prev}...{end - 1}] one element at a time.",
            hl=Highlights(key=range(prev, end), eliminated=[k for k in range(n) if k < prev or k >= end]),
            pointers={"start": prev, "end": end - 1},
            code_line=5,
        )
        for i in range(prev, end):
            sb.passes += 1
            sb.comparisons += 1
            sb.emit(
                f"Check Index {i}",
                f"Compare arr[{i}]={arr[i]} with target={target}. "
                + ("Match found!" if arr[i] == target
                   else "Greater than target, stop." if arr[i] > target
                   else "Continue searching."),
                hl=Highlights(compare=[i], eliminated=[k for k in range(n) if k < i or k >= end]),
                pointers={"i": i},
                code_line=6,
            )
            if arr[i] == target:
                sb.emit(
                    "Found!",
                    f"Target {target} found at index {i} after {sb.comparisons} comparisons.",
                    hl=Highlights(found=[i]),
                    pointers={"result": i},
                    code_line=6,
                )
                return sb.steps
            if arr[i] > target:
                break

    sb.emit(
        "Not Found",
        f"Jump search complete. Target {target} not found after {sb.comparisons} comparisons.",
        hl=Highlights(eliminated=sb.all_indices()),
        pointers={"result": None},
        code_line=7,
    )
    return sb.steps
