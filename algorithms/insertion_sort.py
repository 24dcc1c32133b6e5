"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix one element at a time.  The key is lifted out,
larger prefix elements shift right one slot each, and the key drops into
the gap.  Every shift counts towards `swaps`.
"""

from typing import List, Optional, Sequence

from algorithms.step import ArrowKind, Highlights, MoveArrow, Step, StepBuilder


PSEUDOCODE: List[str] = [
    "for i in range(1, n):",                      # 0
    "    key = arr[i]",                           # 1
    "    j = i - 1",                              # 2
    "    while j >= 0 and arr[j] > key:",         # 3
    "        arr[j + 1] = arr[j]  # shift",       # 4
    "        j -= 1",                             # 5
    "    arr[j + 1] = key",                       # 6
    "return arr",                                 # 7
]


def insertion_sort(array: Sequence[int], target: Optional[int] = None) -> List[Step]:
    sb = StepBuilder(array)
    arr = sb.arr
    n = len(arr)

    sb.emit(
        "Initial Array",
        "Starting with the original array. The first element is considered sorted.",
        hl=Highlights(sorted=range(min(n, 1))),
        pointers={"i": 1, "j": None, "key": None},
        code_line=0,
    )

    for i in range(1, n):
        sb.passes += 1
        key = arr[i]
        j = i - 1
        prefix = list(range(i))

        sb.emit(
            f"Pass {sb.passes}: Pick Key",
            f"Pick element at index {i} (value: {key}) as the key to insert.",
            hl=Highlights(key=[i], sorted=prefix),
            pointers={"i": i, "j": None, "key": i},
            code_line=1,
        )

        while j >= 0 and arr[j] > key:
            sb.comparisons += 1
            others = [x for x in prefix if x != j]
            sb.emit(
                f"Pass {sb.passes}: Compare",
                f"Compare arr[{j}]={arr[j]} with key={key}. Since {arr[j]} > {key}, we need to shift.",
                hl=Highlights(compare=[j], key=[i], sorted=others),
                pointers={"i": i, "j": j, "key": i},
                arrows=[MoveArrow(j, i, ArrowKind.COMPARE)],
                code_line=3,
            )

            moved = arr[j]
            arr[j + 1] = arr[j]
            sb.swaps += 1
            sb.emit(
                f"Pass {sb.passes}: Shift",
                f"Shift arr[{j}]={moved} to position {j + 1}.",
                hl=Highlights(shift=[j], key=[i], sorted=others),
                hl_after=Highlights(shift=[j + 1], key=[i], sorted=[x for x in others if x != j + 1]),
                pointers={"i": i, "j": j, "key": i},
                arrows=[MoveArrow(j, j + 1, ArrowKind.SHIFT)],
                code_line=4,
            )
            j -= 1

        # the comparison that ends the while loop
        if j >= 0:
            sb.comparisons += 1
            sb.emit(
                f"Pass {sb.passes}: Compare",
                f"Compare arr[{j}]={arr[j]} with key={key}. Since {arr[j]} <= {key}, stop shifting.",
                hl=Highlights(compare=[j], sorted=prefix),
                pointers={"i": i, "j": j, "key": i},
                code_line=3,
            )

        arr[j + 1] = key
        # a key that never moved is not a data movement
        arrows = [MoveArrow(i, j + 1, ArrowKind.SHIFT)] if j + 1 != i else []
        sb.emit(
            f"Pass {sb.passes}: Insert Key",
            f"Insert key={key} at position {j + 1}.",
            hl=Highlights(key=[j + 1], sorted=prefix),
            hl_after=Highlights(key=[j + 1], sorted=range(i + 1)),
            pointers={"i": i, "j": j + 1, "key": j + 1},
            arrows=arrows,
            code_line=6,
        )

    sb.emit(
        "Sorted!",
        f"Array is now fully sorted! Total: {sb.comparisons} comparisons, {sb.swaps} shifts.",
        hl=Highlights(sorted=sb.all_indices()),
        code_line=7,
    )
    return sb.steps
