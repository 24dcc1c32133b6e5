"""
merge_sort.py — Merge Sort
===========================
Top-down recursive merge sort.  Steps appear in depth-first
divide-then-merge order:

    Divide [0-6] → Divide [0-3] → Divide [0-1] → Merge [0-1] → Merged [0-1] → …

Each merge emits an announce step ("Merge") and a result step ("Merged")
whose shift arrows record every element that landed on a different
index.  `swaps` counts those element moves; `passes` stays 0 because
divide-and-conquer has no discrete passes.
"""

from typing import List, Optional, Sequence

from algorithms.step import ArrowKind, Highlights, MoveArrow, Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def merge_sort(arr):",                  # 0
    "    if len(arr) <= 1:",                 # 1
    "        return arr",                    # 2
    "    mid = len(arr) // 2",               # 3
    "    left = merge_sort(arr[:mid])",      # 4
    "    right = merge_sort(arr[mid:])",     # 5
    "    return merge(left, right)",         # 6
]


def merge_sort(array: Sequence[int], target: Optional[int] = None) -> List[Step]:
    sb = StepBuilder(array)
    arr = sb.arr
    n = len(arr)

    sb.emit(
        "Initial Array",
        "Starting Merge Sort. We will divide the array, sort each half, then merge them back together.",
        code_line=0,
    )

    def sort_range(left: int, right: int) -> None:
        if left >= right:
            return
        mid = (left + right) // 2
        sb.emit(
            f"Divide [{left}-{right}]",
            f"Divide array[{left}...{right}] into two halves: [{left}...{mid}] and [{mid + 1}...{right}].",
            hl=Highlights(key=range(left, mid + 1), shift=range(mid + 1, right + 1)),
            pointers={"left": left, "mid": mid, "right": right},
            code_line=3,
        )
        sort_range(left, mid)
        sort_range(mid + 1, right)
        merge(left, mid, right)

    def merge(left: int, mid: int, right: int) -> None:
        # (value, source index) pairs so moves can be reported as arrows
        left_run  = [(arr[k], k) for k in range(left, mid + 1)]
        right_run = [(arr[k], k) for k in range(mid + 1, right + 1)]

        sb.emit(
            f"Merge [{left}-{right}]",
            f"Merging subarrays {[v for v, _ in left_run]} and {[v for v, _ in right_run]}.",
            hl=Highlights(key=range(left, mid + 1), shift=range(mid + 1, right + 1)),
            pointers={"left": left, "mid": mid, "right": right},
            code_line=6,
        )

        merged = []
        i = j = 0
        while i < len(left_run) and j < len(right_run):
            sb.comparisons += 1
            if left_run[i][0] <= right_run[j][0]:
                merged.append(left_run[i])
                i += 1
            else:
                merged.append(right_run[j])
                j += 1
        merged.extend(left_run[i:])
        merged.extend(right_run[j:])

        arrows = []
        for k, (value, source) in enumerate(merged, start=left):
            arr[k] = value
            if source != k:
                arrows.append(MoveArrow(source, k, ArrowKind.SHIFT))
        sb.swaps += len(arrows)

        span = range(left, right + 1)
        sb.emit(
            f"Merged [{left}-{right}]",
            f"Merged result: {arr[left:right + 1]}. Elements are now sorted in this range.",
            hl=Highlights(compare=span),
            hl_after=Highlights(sorted=span),
            pointers={"left": left, "right": right},
            arrows=arrows,
            code_line=6,
        )

    sort_range(0, n - 1)

    sb.emit(
        "Sorted!",
        f"Array is now fully sorted! Total: {sb.comparisons} comparisons, {sb.swaps} element moves.",
        hl=Highlights(sorted=sb.all_indices()),
        code_line=-1,
    )
    return sb.steps
