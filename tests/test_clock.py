"""Tests for the frame clock."""

import pytest

from starry_defense.clock import FrameClock


class TestFrameClock:
    """dt is elapsed milliseconds expressed in nominal frames."""

    def test_first_tick_is_zero(self):
        clock = FrameClock()
        assert clock.tick(5000) == 0.0

    def test_one_nominal_frame(self):
        clock = FrameClock()
        clock.reset(1000)
        assert clock.tick(1016.67) == pytest.approx(1.0)

    def test_two_frames(self):
        clock = FrameClock(frame_ms=10.0)
        clock.reset(0)
        assert clock.tick(20) == pytest.approx(2.0)

    def test_long_gap_is_capped(self):
        """A stalled window never integrates more than max_dt frames."""
        clock = FrameClock(max_dt=4.0)
        clock.reset(0)
        assert clock.tick(10_000) == 4.0

    def test_time_going_backwards_gives_zero(self):
        clock = FrameClock()
        clock.reset(1000)
        assert clock.tick(900) == 0.0
        # The clock keeps its high-water mark
        assert clock.tick(1016.67) == pytest.approx(1.0)

    def test_reset_discards_paused_time(self):
        clock = FrameClock()
        clock.reset(0)
        clock.tick(16.67)
        clock.reset(60_000)
        assert clock.tick(60_016.67) == pytest.approx(1.0)
