"""Tests for the ping-pong progress schedule."""
import pytest

from gradient_loop.schedule import schedule_frame, iter_progress
from gradient_loop.errors import InvalidParameter


def test_starts_at_zero_and_peaks_at_midpoint():
    assert schedule_frame(0, 60) == 0.0
    assert schedule_frame(30, 60) == pytest.approx(1.0)


def test_rises_then_falls():
    values = [p for _, p in iter_progress(60)]
    assert values[:31] == sorted(values[:31])
    assert values[30:] == sorted(values[30:], reverse=True)
    assert values[-1] == pytest.approx(2 / 60)


@pytest.mark.parametrize("total", [30, 60, 90, 150])
def test_ping_pong_symmetry(total):
    for k in (1, 2, 3, total // 4):
        assert schedule_frame(k, total) == pytest.approx(schedule_frame(total - k, total))


@pytest.mark.parametrize("total", [1, 7, 30, 61])
def test_progress_stays_in_unit_interval(total):
    for _, p in iter_progress(total):
        assert 0.0 <= p <= 1.0


def test_iter_progress_is_in_index_order():
    indices = [i for i, _ in iter_progress(45)]
    assert indices == list(range(45))


@pytest.mark.parametrize("total", [0, -30])
def test_non_positive_total_rejected(total):
    with pytest.raises(InvalidParameter):
        schedule_frame(0, total)
    with pytest.raises(InvalidParameter):
        list(iter_progress(total))


@pytest.mark.parametrize("index", [-1, 60, 61])
def test_index_out_of_range_rejected(index):
    with pytest.raises(InvalidParameter):
        schedule_frame(index, 60)
