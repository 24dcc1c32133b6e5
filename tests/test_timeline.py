"""Tests for event classification, the comparison timeline and action badges."""

import pytest

from algorithms import REGISTRY, instrument
from algorithms.step import ArrowKind, Highlights, MoveArrow, Step, StepHighlights
from engine.timeline import (
    EventType,
    build_comparison_timeline,
    classify_event,
    describe_action,
    is_milestone,
)

SAMPLE = [23, 1, 10, 5, 2, 7, 15]


def _step(arrows=(), hl=None, label="", after=(1, 2, 3)):
    hl = hl or Highlights()
    return Step(
        label=label,
        before=after,
        after=after,
        highlights=StepHighlights(before=hl, after=hl),
        move_arrows=tuple(arrows),
    )


class TestClassifyEvent:
    def test_swap_arrow_is_swap(self):
        assert classify_event(_step([MoveArrow(0, 1, ArrowKind.SWAP)])) == EventType.SWAP

    def test_shift_arrow_is_swap(self):
        assert classify_event(_step([MoveArrow(0, 1, ArrowKind.SHIFT)])) == EventType.SWAP

    def test_move_beats_compare(self):
        arrows = [MoveArrow(0, 1, ArrowKind.COMPARE), MoveArrow(0, 1, ArrowKind.SWAP)]
        assert classify_event(_step(arrows)) == EventType.SWAP

    def test_compare_arrow_is_compare(self):
        assert classify_event(_step([MoveArrow(0, 1, ArrowKind.COMPARE)])) == EventType.COMPARE

    def test_compare_highlight_is_compare(self):
        assert classify_event(_step(hl=Highlights(compare=[2]))) == EventType.COMPARE

    def test_swap_highlight_alone_is_not_evidence(self):
        assert classify_event(_step(hl=Highlights(swap=[0, 1]))) == EventType.OTHER

    def test_plain_step_is_other(self):
        assert classify_event(_step()) == EventType.OTHER


class TestMilestones:
    @pytest.mark.parametrize("marker", ["pivot", "key", "found", "sorted", "eliminated"])
    def test_markers(self, marker):
        assert is_milestone(_step(hl=Highlights(**{marker: [0]})))

    def test_shift_highlight_is_not_a_milestone(self):
        assert not is_milestone(_step(hl=Highlights(shift=[0])))


class TestBuildTimeline:
    def test_empty_trace(self):
        assert build_comparison_timeline([]) == []

    def test_single_step(self):
        assert build_comparison_timeline([_step()]) == [0]

    def test_narration_only_steps_dropped(self):
        steps = [_step(), _step(), _step([MoveArrow(0, 1, ArrowKind.COMPARE)]), _step(), _step()]
        assert build_comparison_timeline(steps) == [0, 2, 4]

    def test_milestones_kept(self):
        steps = [_step(), _step(hl=Highlights(pivot=[1])), _step(hl=Highlights(swap=[0])), _step()]
        assert build_comparison_timeline(steps) == [0, 1, 3]

    @pytest.mark.parametrize("key", list(REGISTRY))
    def test_invariants_on_real_traces(self, key):
        steps = instrument(key, SAMPLE, 10)
        timeline = build_comparison_timeline(steps)
        assert timeline[0] == 0
        assert timeline[-1] == len(steps) - 1
        assert timeline == sorted(set(timeline))

    def test_bubble_sample_keeps_every_step(self):
        steps = instrument("bubble-sort", SAMPLE)
        assert len(build_comparison_timeline(steps)) == 34

    def test_selection_sample_length(self):
        steps = instrument("selection-sort", SAMPLE)
        assert len(build_comparison_timeline(steps)) == 43


class TestDescribeAction:
    def test_none_step(self):
        assert describe_action(None) is None

    def test_swap_detail_uses_ordered_pair(self):
        action = describe_action(_step([MoveArrow(3, 1, ArrowKind.SWAP)]))
        assert action.kind == "swap"
        assert action.detail == "Swap 1 ↔ 3"

    def test_compare_falls_back_to_highlights(self):
        action = describe_action(_step(hl=Highlights(compare=[4, 2])))
        assert action.kind == "compare"
        assert action.detail == "Compare 2 vs 4"

    def test_single_compare_index_has_plain_detail(self):
        assert describe_action(_step(hl=Highlights(compare=[4]))).detail == "Compare"

    def test_fully_sorted_step(self):
        action = describe_action(_step(hl=Highlights(sorted=[0, 1, 2])))
        assert action.kind == "sorted"

    def test_partially_sorted_compare_is_still_compare(self):
        step = _step([MoveArrow(0, 1, ArrowKind.COMPARE)], hl=Highlights(sorted=[2]))
        assert describe_action(step).kind == "compare"

    def test_other(self):
        assert describe_action(_step(label="Partition Setup")).kind == "other"
