"""Tests for the quick-sort partition tree."""

import pytest

from algorithms import instrument
from algorithms.quick_tree import LEAF, PARTITION, ROOT, build_quick_tree


class TestQuickTree:
    def test_root_partition(self):
        tree = build_quick_tree([3, 1, 2])
        root = tree.root
        assert root.id == "Q"
        assert root.kind == ROOT
        assert root.values == [3, 1, 2]
        assert root.pivot_value == 2
        assert root.left_values == [1]
        assert root.right_values == [3]
        assert tree.sorted_values == [1, 2, 3]

    def test_children_are_leaves_or_partitions(self):
        root = build_quick_tree([23, 1, 10, 5, 2, 7, 15]).root
        # pivot 15 splits into [1, 10, 5, 2, 7] and [23]
        assert root.left.kind == PARTITION
        assert root.left.id == "QL"
        assert root.right.kind == LEAF
        assert root.right.values == [23]

    def test_missing_side_has_no_child(self):
        # pivot 3 is the maximum: nothing goes right
        root = build_quick_tree([1, 2, 3]).root
        assert root.right is None
        assert root.right_values == []

    def test_empty(self):
        tree = build_quick_tree([])
        assert tree.root.kind == ROOT
        assert tree.root.values == []
        assert tree.root.pivot_value is None
        assert tree.sorted_values == []

    def test_single_value_is_leaf(self):
        tree = build_quick_tree([7])
        assert tree.root.kind == LEAF
        assert tree.root.pivot_value == 7

    def test_input_not_mutated(self):
        values = [4, 2, 9, 1]
        build_quick_tree(values)
        assert values == [4, 2, 9, 1]

    def test_to_dict(self):
        d = build_quick_tree([2, 1]).to_dict()
        assert d["sorted_values"] == [1, 2]
        assert d["root"]["pivot_value"] == 1
        assert d["root"]["right"] == {
            "id": "QR", "kind": "leaf", "values": [2],
            "pivot_value": 2, "left_values": [], "right_values": [],
        }
        assert "left" not in d["root"]


class TestQuickTreeMatchesTrace:
    @pytest.mark.parametrize("values", [
        [23, 1, 10, 5, 2, 7, 15],
        [5, 3, 5, 1, 3, 5],
        [9, 8, 7, 6, 5, 4, 3, 2, 1],
        [1, 2, 3, 4],
        [2, 1],
    ])
    def test_pivots_follow_pivot_placement_steps(self, values):
        steps = instrument("quick-sort", values)
        placed = [s.after[s.pointers["pivot"]] for s in steps if s.label == "Pivot Placement"]
        tree = build_quick_tree(values)
        assert [node.pivot_value for node in tree.partitions()] == placed
        assert tree.sorted_values == list(steps[-1].after)
