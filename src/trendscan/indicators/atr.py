"""Average True Range with Wilder smoothing."""

from __future__ import annotations

from collections.abc import Sequence

from trendscan.errors import InsufficientData
from trendscan.indicators.true_range import true_ranges
from trendscan.models.bar import Bar
from trendscan.quality import ensure_valid_bars


def calculate_atr(bars: Sequence[Bar], period: int = 14) -> list[float]:
    """Compute the ATR series for ``bars``.

    The first value is the simple mean of the first ``period`` true ranges
    and belongs to bar ``period - 1``; every later value is
    ``(prev * (period - 1) + tr) / period``.

    Returns:
        ``len(bars) - period + 1`` values, where ``atr[0]`` is aligned to
        ``bars[period - 1]``.

    Raises:
        ValueError: ``period`` is less than 1.
        InsufficientData: fewer than ``period`` bars.
        InvalidBar: a bar violates the OHLCV invariants.
    """
    if period < 1:
        raise ValueError(f"period must be >= 1, got {period}")
    if len(bars) < period:
        raise InsufficientData(period, len(bars), "ATR calculation")
    ensure_valid_bars(bars)
    return wilder_smooth(true_ranges(bars), period)


def wilder_smooth(values: Sequence[float], period: int) -> list[float]:
    """Wilder moving average seeded with the mean of the first ``period`` values."""
    if len(values) < period:
        raise InsufficientData(period, len(values), "Wilder smoothing")

    smoothed = [sum(values[:period]) / period]
    for value in values[period:]:
        smoothed.append((smoothed[-1] * (period - 1) + value) / period)
    return smoothed
