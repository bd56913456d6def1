from unittest import mock

import pytest

from voxelspark.timer import Timer


def test_elapsed_uses_clock_difference():
    with mock.patch("time.perf_counter", side_effect=[10.0, 12.5]):
        timer = Timer()
        assert timer.elapsed() == pytest.approx(2.5)


def test_reset_restarts_measurement():
    with mock.patch("time.perf_counter", side_effect=[1.0, 5.0, 6.0, 7.0]):
        timer = Timer()
        assert timer.elapsed() == pytest.approx(4.0)
        timer.reset()
        assert timer.elapsed() == pytest.approx(1.0)


def test_elapsed_is_monotonic_in_real_time():
    timer = Timer()
    first = timer.elapsed()
    second = timer.elapsed()
    assert 0.0 <= first <= second


def test_timers_are_independent():
    with mock.patch("time.perf_counter", side_effect=[0.0, 3.0, 4.0, 4.0]):
        early = Timer()
        late = Timer()
        assert early.elapsed() == pytest.approx(4.0)
        assert late.elapsed() == pytest.approx(1.0)