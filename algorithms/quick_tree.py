"""
quick_tree.py — Quick Sort Partition Tree
==========================================
Builds the recursion tree that quick_sort walks: every partition node
records its subarray, the pivot it picked and the two sides it produced.

Partitioning is the same Lomuto scheme the instrumenter uses (pivot =
last element, `arr[j] <= pivot` goes left), so node pivots line up with
the trace's "Pivot Placement" steps in pre-order.

Node ids encode the path from the root ("Q", "QL", "QLR", …).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence

ROOT      = "root"
PARTITION = "partition"
LEAF      = "leaf"


@dataclass(frozen=True)
class QuickTreeNode:
    id:           str
    values:       List[int]
    kind:         str                        # ROOT | PARTITION | LEAF
    pivot_value:  Optional[int]             = None
    left_values:  List[int]                 = field(default_factory=list)
    right_values: List[int]                 = field(default_factory=list)
    left:         Optional["QuickTreeNode"] = None
    right:        Optional["QuickTreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.kind == LEAF

    def walk(self) -> Iterator["QuickTreeNode"]:
        """Pre-order: node, left subtree, right subtree."""
        yield self
        if self.left is not None:
            yield from self.left.walk()
        if self.right is not None:
            yield from self.right.walk()

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "kind": self.kind,
            "values": list(self.values),
            "pivot_value": self.pivot_value,
            "left_values": list(self.left_values),
            "right_values": list(self.right_values),
        }
        if self.left is not None:
            out["left"] = self.left.to_dict()
        if self.right is not None:
            out["right"] = self.right.to_dict()
        return out


@dataclass(frozen=True)
class QuickSortTree:
    root:          QuickTreeNode
    sorted_values: List[int]

    def partitions(self) -> List[QuickTreeNode]:
        """Non-leaf nodes in the order quick_sort partitions them."""
        return [node for node in self.root.walk() if not node.is_leaf]

    def to_dict(self) -> Dict[str, Any]:
        return {"root": self.root.to_dict(), "sorted_values": list(self.sorted_values)}


def build_quick_tree(values: Sequence[int]) -> QuickSortTree:
    """Does not mutate `values`; the working copy ends up sorted."""
    arr = list(values)

    def partition(low: int, high: int) -> int:
        pivot = arr[high]
        i = low - 1
        for j in range(low, high):
            if arr[j] <= pivot:
                i += 1
                arr[i], arr[j] = arr[j], arr[i]
        arr[i + 1], arr[high] = arr[high], arr[i + 1]
        return i + 1

    def build(low: int, high: int, kind: str, path: str) -> QuickTreeNode:
        segment = arr[low:high + 1]
        if len(segment) <= 1:
            return QuickTreeNode(
                id=path,
                values=segment,
                kind=LEAF,
                pivot_value=segment[0] if segment else None,
            )

        pivot_value = arr[high]
        p = partition(low, high)
        left_values = arr[low:p]
        right_values = arr[p + 1:high + 1]

        left = build(low, p - 1, PARTITION, path + "L") if p - 1 >= low else None
        right = build(p + 1, high, PARTITION, path + "R") if p + 1 <= high else None
        return QuickTreeNode(
            id=path,
            values=segment,
            kind=kind,
            pivot_value=pivot_value,
            left_values=left_values,
            right_values=right_values,
            left=left,
            right=right,
        )

    if not arr:
        root = QuickTreeNode(id="Q", values=[], kind=ROOT)
    else:
        root = build(0, len(arr) - 1, ROOT, "Q")
    return QuickSortTree(root=root, sorted_values=list(arr))
