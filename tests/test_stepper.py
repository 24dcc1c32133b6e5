"""Tests for the single-trace playback state machine."""

import pytest

from algorithms import instrument
from engine.stepper import MIN_SPEED, SPEED_PRESETS, Stepper, StepperState


@pytest.fixture
def steps():
    return instrument("bubble-sort", [3, 1, 2])


@pytest.fixture
def stepper(steps):
    s = Stepper(clock=lambda: 0.0)
    s.load(steps)
    return s


class TestLifecycle:
    def test_new_stepper_is_idle(self):
        assert Stepper().state == StepperState.IDLE

    def test_load_is_ready_at_zero(self, stepper):
        assert stepper.state == StepperState.READY
        assert stepper.current_idx == 0

    def test_empty_trace_stays_idle(self):
        s = Stepper()
        s.load([])
        assert s.state == StepperState.IDLE
        assert s.current_step is None

    def test_unload_returns_to_idle(self, stepper):
        stepper.unload()
        assert stepper.state == StepperState.IDLE
        assert stepper.steps == []

    def test_reset_keeps_trace(self, stepper, steps):
        stepper.seek(3)
        stepper.play()
        stepper.reset()
        assert stepper.state == StepperState.READY
        assert stepper.current_idx == 0
        assert stepper.steps == steps


class TestNavigation:
    def test_next_and_prev(self, stepper):
        assert stepper.next_step()
        assert stepper.current_idx == 1
        assert stepper.prev_step()
        assert stepper.current_idx == 0

    def test_prev_at_start_is_clamped(self, stepper):
        assert not stepper.prev_step()
        assert stepper.current_idx == 0

    def test_next_at_end_is_clamped(self, stepper):
        stepper.seek(stepper.last_index)
        assert not stepper.next_step()
        assert stepper.current_idx == stepper.last_index

    def test_seek_out_of_range_is_ignored(self, stepper):
        stepper.seek(2)
        assert not stepper.seek(-1)
        assert not stepper.seek(len(stepper.steps))
        assert stepper.current_idx == 2

    def test_on_step_fires_on_change(self, steps):
        seen = []
        s = Stepper(on_step=seen.append)
        s.load(steps)
        s.next_step()
        assert seen == [steps[0], steps[1]]


class TestPlayback:
    def test_play_is_noop_when_idle(self):
        s = Stepper()
        s.play()
        assert s.state == StepperState.IDLE

    def test_play_is_noop_at_end(self, stepper):
        stepper.seek(stepper.last_index)
        stepper.play()
        assert not stepper.is_playing

    def test_tick_waits_for_speed(self, stepper):
        stepper.set_speed_value(1.0)
        stepper.play()
        assert not stepper.tick(0.5)
        assert stepper.tick(1.0)
        assert stepper.current_idx == 1
        assert not stepper.tick(1.5)
        assert stepper.tick(2.0)
        assert stepper.current_idx == 2

    def test_playing_to_end_finishes(self, stepper):
        stepper.set_speed_value(1.0)
        stepper.play()
        now = 0.0
        while stepper.is_playing:
            now += 1.0
            stepper.tick(now)
        assert stepper.state == StepperState.FINISHED
        assert stepper.at_end
        assert not stepper.tick(now + 10)

    def test_pause_stops_ticks(self, stepper):
        stepper.play()
        stepper.pause()
        assert stepper.state == StepperState.PAUSED
        assert not stepper.tick(100.0)
        assert stepper.current_idx == 0

    def test_stepping_back_from_finished_pauses(self, stepper):
        stepper.seek(stepper.last_index - 1)
        stepper.play()
        stepper.next_step()
        assert stepper.is_finished
        stepper.prev_step()
        assert stepper.state == StepperState.PAUSED

    def test_toggle_play(self, stepper):
        stepper.toggle_play()
        assert stepper.is_playing
        stepper.toggle_play()
        assert stepper.state == StepperState.PAUSED


class TestSpeed:
    def test_presets(self, stepper):
        stepper.set_speed("fast")
        assert stepper.speed == SPEED_PRESETS["fast"]

    def test_unknown_preset_falls_back_to_medium(self, stepper):
        stepper.set_speed("ludicrous")
        assert stepper.speed == SPEED_PRESETS["medium"]

    def test_raw_speed_has_floor(self, stepper):
        stepper.set_speed_value(0.0)
        assert stepper.speed == MIN_SPEED
