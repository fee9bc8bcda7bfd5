# tests/test_animation.py
"""
SPIN TESTS: SpinState, SpinClock and Animation Frames
"""

import math

import numpy as np
import pytest

from molcraft.animation import DEFAULT_SPIN_RATE, SpinClock, SpinState, spin_frames
from molcraft.geometry import rotate_vector


class FakeTime:
    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now


class TestSpinState:

    def test_advance_by_rate_times_elapsed(self):
        state = SpinState(angle=0.0, rate=0.1).advance(2.5)
        assert state.angle == pytest.approx(0.25)

    def test_advance_returns_new_state(self):
        state = SpinState()
        assert state.advance(1.0) is not state
        assert state.angle == 0.0

    def test_non_positive_elapsed_ignored(self):
        state = SpinState(angle=0.3)
        assert state.advance(0.0) == state
        assert state.advance(-5.0) == state

    def test_angle_wraps(self):
        state = SpinState(angle=0.0, rate=1.0).advance(2 * math.pi + 0.5)
        assert state.angle == pytest.approx(0.5)

    def test_orientation_about_vertical_axis(self):
        q = SpinState(angle=math.pi).orientation()
        np.testing.assert_allclose(rotate_vector(q, (0.0, 1.0, 0.0)), [0.0, 1.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(rotate_vector(q, (1.0, 0.0, 0.0)), [-1.0, 0.0, 0.0], atol=1e-12)


class TestSpinClock:

    def test_first_tick_starts_clock(self):
        clock = SpinClock(now=FakeTime())
        assert clock.tick().angle == 0.0

    def test_ticks_accumulate_elapsed_time(self):
        time = FakeTime()
        clock = SpinClock(now=time)
        clock.tick()
        time.now += 3.0
        state = clock.tick()
        assert state.angle == pytest.approx(3.0 * DEFAULT_SPIN_RATE)

    def test_explicit_now(self):
        clock = SpinClock(SpinState(rate=0.5))
        clock.tick(10.0)
        assert clock.tick(12.0).angle == pytest.approx(1.0)

    def test_pause_holds_angle_and_resume_skips_gap(self):
        clock = SpinClock(SpinState(rate=1.0))
        clock.tick(0.0)
        clock.tick(1.0)
        clock.pause()
        assert clock.tick(50.0).angle == pytest.approx(1.0)

        clock.resume()
        clock.tick(60.0)
        assert clock.tick(60.5).angle == pytest.approx(1.5)

    def test_disposed_clock_refuses_to_tick(self):
        clock = SpinClock()
        clock.dispose()

        assert clock.disposed
        with pytest.raises(RuntimeError):
            clock.tick()
        with pytest.raises(RuntimeError):
            clock.state
        clock.dispose()


def test_spin_frames_spacing():
    frames = list(spin_frames(SpinState(rate=0.3), n_frames=4, fps=10.0))

    assert len(frames) == 4
    assert frames[0].angle == 0.0
    np.testing.assert_allclose(np.diff([f.angle for f in frames]), 0.03)
