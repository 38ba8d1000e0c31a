"""Tests for true range and the Wilder ATR."""

import math
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from trendscan.errors import InsufficientData, InvalidBar, TrendScanErrorCode
from trendscan.indicators.atr import calculate_atr, wilder_smooth
from trendscan.indicators.true_range import true_range, true_ranges
from trendscan.models.bar import Bar


def _bar(high: float, low: float, close: float) -> Bar:
    return Bar(
        timestamp=datetime(2024, 1, 2, tzinfo=timezone.utc),
        open=close, high=high, low=low, close=close, volume=100.0,
    )


class TestTrueRange:
    def test_no_previous_is_high_minus_low(self):
        assert true_range(_bar(11.0, 9.0, 10.0)) == 2.0

    def test_inside_bar_uses_range(self):
        assert true_range(_bar(10.5, 9.5, 10.0), _bar(10.0, 10.0, 10.0)) == 1.0

    def test_gap_up_uses_high_to_previous_close(self):
        assert true_range(_bar(12.0, 10.0, 12.0), _bar(8.0, 8.0, 8.0)) == 4.0

    def test_gap_down_uses_low_to_previous_close(self):
        assert true_range(_bar(11.0, 9.0, 9.0), _bar(12.0, 12.0, 12.0)) == 3.0

    def test_series(self, swing_bars):
        assert true_ranges(swing_bars) == pytest.approx([1.0, 2.0, 4.0, 1.0, 2.8])

    def test_empty_series(self):
        assert true_ranges([]) == []


class TestCalculateATR:
    def test_seed_then_wilder(self, swing_bars):
        atr = calculate_atr(swing_bars, period=2)
        assert atr == pytest.approx([1.5, 2.75, 1.875, 2.3375])

    def test_flat_range_then_jump(self, flat_then_jump_bars):
        atr = calculate_atr(flat_then_jump_bars, period=10)
        assert atr == pytest.approx([0.2, 0.29])

    def test_length(self, random_walk):
        bars = random_walk(seed=1, n=50)
        assert len(calculate_atr(bars, period=14)) == 50 - 14 + 1

    def test_period_equal_to_length_gives_mean(self, swing_bars):
        atr = calculate_atr(swing_bars, period=5)
        assert atr == pytest.approx([sum([1.0, 2.0, 4.0, 1.0, 2.8]) / 5])

    def test_period_one_is_true_range(self, swing_bars):
        assert calculate_atr(swing_bars, period=1) == pytest.approx(true_ranges(swing_bars))

    def test_insufficient_data(self, swing_bars):
        with pytest.raises(InsufficientData) as exc_info:
            calculate_atr(swing_bars[:3], period=5)
        err = exc_info.value
        assert err.required == 5
        assert err.actual == 3
        assert err.code == TrendScanErrorCode.INSUFFICIENT_DATA
        assert "5" in str(err) and "3" in str(err)

    def test_bad_period(self, swing_bars):
        with pytest.raises(ValueError):
            calculate_atr(swing_bars, period=0)

    def test_invalid_bar_rejected(self, swing_bars):
        bars = list(swing_bars)
        bars[2] = replace(bars[2], high=bars[2].low - 1.0)
        with pytest.raises(InvalidBar) as exc_info:
            calculate_atr(bars, period=2)
        assert exc_info.value.index == 2

    @pytest.mark.parametrize("seed", range(10))
    def test_non_negative(self, seed, random_walk):
        atr = calculate_atr(random_walk(seed, n=80), period=10)
        assert all(v >= 0 and math.isfinite(v) for v in atr)


class TestWilderSmooth:
    def test_recurrence(self):
        assert wilder_smooth([2.0, 4.0, 6.0, 0.0], 2) == pytest.approx([3.0, 4.5, 2.25])

    def test_too_short(self):
        with pytest.raises(InsufficientData):
            wilder_smooth([1.0], 2)
