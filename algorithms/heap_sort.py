"""
heap_sort.py — Heap Sort
=========================
Phase 1 builds a max-heap bottom-up; phase 2 repeatedly swaps the root
into the sorted suffix and sifts the new root down.

Child comparisons inside heapify are counted in the metrics but only the
resulting swaps are emitted as steps, which keeps the trace readable.
Pass 1 is the heap build; each extraction is one further pass.
"""

from typing import List, Optional, Sequence

from algorithms.step import ArrowKind, Highlights, MoveArrow, Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def heap_sort(arr):",                     # 0
    "    build_max_heap(arr)",                 # 1
    "    for i in range(n - 1, 0, -1):",       # 2
    "        arr[0], arr[i] = arr[i], arr[0]", # 3
    "        heapify(arr, i, 0)",              # 4
    "    return arr",                          # 5
]


def heap_sort(array: Sequence[int], target: Optional[int] = None) -> List[Step]:
    sb = StepBuilder(array)
    arr = sb.arr
    n = len(arr)

    sb.emit(
        "Initial Array",
        "Starting Heap Sort. First we build a max-heap, then extract elements one by one.",
        code_line=0,
    )

    def heapify(heap_size: int, root: int) -> None:
        # iterative sift-down; the sorted suffix starts at heap_size
        settled = range(heap_size, n)
        while True:
            largest = root
            left, right = 2 * root + 1, 2 * root + 2

            if left < heap_size:
                sb.comparisons += 1
                if arr[left] > arr[largest]:
                    largest = left
            if right < heap_size:
                sb.comparisons += 1
                if arr[right] > arr[largest]:
                    largest = right

            if largest == root:
                return

            parent_val, child_val = arr[root], arr[largest]
            sb.swap(root, largest)
            sb.swaps += 1
            sb.emit(
                "Heapify: Swap",
                f"Swap arr[{root}]={parent_val} with larger child arr[{largest}]={child_val} "
                f"to maintain the heap property.",
                hl=Highlights(swap=[root, largest], sorted=settled),
                pointers={"parent": root, "child": largest},
                arrows=[MoveArrow(root, largest, ArrowKind.SWAP)],
                code_line=4,
            )
            root = largest

    # --- phase 1: build ---
    sb.passes += 1
    sb.emit(
        "Build Max Heap",
        "Building a max-heap from the array. Parent nodes will be greater than their children.",
        code_line=1,
    )
    for i in range(n // 2 - 1, -1, -1):
        heapify(n, i)

    if n:
        sb.emit(
            "Max Heap Built",
            f"Max heap built! Root element {arr[0]} is the maximum. Now extract elements one by one.",
            hl=Highlights(key=[0]),
            pointers={"max": 0},
            code_line=1,
        )

    # --- phase 2: extract ---
    for i in range(n - 1, 0, -1):
        sb.passes += 1
        settled = list(range(i + 1, n))
        top = arr[0]
        sb.swap(0, i)
        sb.swaps += 1
        sb.emit(
            "Extract Max",
            f"Extract max {top} to position {i}. Element is now sorted!",
            hl=Highlights(swap=[0, i], sorted=settled),
            hl_after=Highlights(sorted=settled + [i]),
            pointers={"max": 0, "end": i},
            arrows=[MoveArrow(0, i, ArrowKind.SWAP)],
            code_line=3,
        )
        heapify(i, 0)

    sb.emit(
        "Sorted!",
        f"Array is now fully sorted! Total: {sb.comparisons} comparisons, {sb.swaps} swaps.",
        hl=Highlights(sorted=sb.all_indices()),
        code_line=5,
    )
    return sb.steps
