"""
merge_tree.py — Merge Sort Recursion Tree
==========================================
Builds the divide/merge tree that merge sort walks, as plain data.
Node ids encode the path from the root ("R", "RL", "RLR", …), so a
viewer can key nodes stably between renders.  Layout is the viewer's job.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class MergeTreeNode:
    id:     str
    values: List[int]
    left:   Optional["MergeTreeNode"] = None
    right:  Optional["MergeTreeNode"] = None
    merged: Optional[List[int]]       = None   # None on leaves

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    @property
    def result(self) -> List[int]:
        return self.merged if self.merged is not None else self.values

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id, "values": list(self.values)}
        if self.left is not None:
            out["left"] = self.left.to_dict()
        if self.right is not None:
            out["right"] = self.right.to_dict()
        if self.merged is not None:
            out["merged"] = list(self.merged)
        return out


def _merge(a: List[int], b: List[int]) -> List[int]:
    out: List[int] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] <= b[j]:
            out.append(a[i])
            i += 1
        else:
            out.append(b[j])
            j += 1
    out.extend(a[i:])
    out.extend(b[j:])
    return out


def build_merge_tree(values: Sequence[int]) -> MergeTreeNode:
    """Split at len // 2 (left half gets the smaller share), merge stably."""

    def build(segment: List[int], path: str) -> MergeTreeNode:
        if len(segment) <= 1:
            return MergeTreeNode(id=path, values=list(segment))
        mid = len(segment) // 2
        left = build(segment[:mid], path + "L")
        right = build(segment[mid:], path + "R")
        return MergeTreeNode(
            id=path,
            values=list(segment),
            left=left,
            right=right,
            merged=_merge(left.result, right.result),
        )

    return build(list(values), "R")
