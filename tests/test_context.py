"""Tests for input parsing and the DebuggerContext session object."""

import pytest

from engine.context import (
    DEFAULT_ALGORITHM,
    DebuggerContext,
    parse_array_input,
    parse_target,
    random_array,
)
from engine.stepper import StepperState


class TestParseArrayInput:
    def test_comma_separated(self):
        assert parse_array_input("23,1,10") == [23, 1, 10]

    def test_whitespace_and_junk_dropped(self):
        assert parse_array_input(" 4, x,, -2 ,3.5, 9") == [4, -2, 3, 9]

    def test_leading_integer_kept(self):
        assert parse_array_input("3.5, 7x, +4, x7") == [3, 7, 4]

    def test_empty(self):
        assert parse_array_input("") == []
        assert parse_array_input(None) == []
        assert parse_array_input("a,b") == []


class TestParseTarget:
    def test_number(self):
        assert parse_target(" 7 ", [1, 2]) == 7

    def test_non_numeric_falls_back(self):
        assert parse_target("abc", [4, 5]) == 4

    def test_leading_integer_kept(self):
        assert parse_target("12abc", [1]) == 12
        assert parse_target("-2.9", [1]) == -2

    def test_missing_falls_back(self):
        assert parse_target(None, [4, 5]) == 4

    def test_no_array_no_target(self):
        assert parse_target(None, []) is None


class TestRandomArray:
    def test_values_in_range(self):
        values = random_array(50, seed=1)
        assert all(1 <= v <= 99 for v in values)

    def test_size_clamped(self):
        assert len(random_array(0)) == 1
        assert len(random_array(500)) == 50

    def test_seeded_is_deterministic(self):
        assert random_array(10, seed=3) == random_array(10, seed=3)


class TestDebuggerContext:
    def test_defaults(self):
        ctx = DebuggerContext()
        assert ctx.algorithm == DEFAULT_ALGORITHM
        assert ctx.stepper.state == StepperState.IDLE

    def test_generate_loads_stepper(self):
        ctx = DebuggerContext()
        assert ctx.generate()
        assert ctx.stepper.state == StepperState.READY
        assert ctx.current_step.label == "Initial Array"

    def test_unknown_algorithm(self):
        ctx = DebuggerContext()
        with pytest.raises(ValueError):
            ctx.select_algorithm("stooge-sort")
        with pytest.raises(ValueError):
            DebuggerContext(algorithm="stooge-sort")

    def test_switching_invalidates_trace(self):
        ctx = DebuggerContext()
        ctx.generate()
        ctx.stepper.next_step()
        ctx.select_algorithm("heap-sort")
        assert ctx.steps == []
        assert ctx.stepper.state == StepperState.IDLE
        assert ctx.stepper.current_idx == 0

    def test_empty_input_clears_previous_trace(self):
        ctx = DebuggerContext()
        ctx.generate()
        ctx.array_input = "no numbers here"
        assert not ctx.generate()
        assert ctx.steps == []
        assert ctx.current_step is None

    def test_search_uses_target(self):
        ctx = DebuggerContext(algorithm="binary-search", target_input="10")
        ctx.generate()
        assert ctx.steps[-1].highlights.after.found == (4,)

    def test_search_bad_target_uses_first_element(self):
        ctx = DebuggerContext(algorithm="linear-search", target_input="?")
        ctx.generate()
        assert ctx.steps[-1].highlights.after.found == (0,)

    def test_randomize_rewrites_input(self):
        ctx = DebuggerContext()
        values = ctx.randomize(5, seed=7)
        assert ctx.array_input == ",".join(map(str, values))
        assert ctx.steps == []

    def test_restore(self):
        ctx = DebuggerContext()
        ctx.generate()
        ctx.restore(3, "paused")
        assert ctx.stepper.current_idx == 3
        assert ctx.stepper.state == StepperState.PAUSED

    def test_restore_clamps_cursor(self):
        ctx = DebuggerContext()
        ctx.generate()
        ctx.restore(10_000, "ready")
        assert ctx.stepper.at_end

    def test_to_dict(self):
        ctx = DebuggerContext()
        ctx.generate()
        d = ctx.to_dict()
        assert d["state"] == "ready"
        assert d["current_index"] == 0
        assert d["total_steps"] == len(ctx.steps)
        assert d["current_step"]["label"] == "Initial Array"
        assert d["pseudocode"]
