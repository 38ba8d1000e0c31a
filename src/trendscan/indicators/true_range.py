"""True range of a bar relative to its predecessor."""

from __future__ import annotations

from collections.abc import Sequence

from trendscan.models.bar import Bar


def true_range(current: Bar, previous: Bar | None = None) -> float:
    """Largest of the bar's range and its gaps from the previous close.

    Without a previous bar this is simply ``high - low``.
    """
    if previous is None:
        return current.high - current.low
    return max(
        current.high - current.low,
        abs(current.high - previous.close),
        abs(current.low - previous.close),
    )


def true_ranges(bars: Sequence[Bar]) -> list[float]:
    """True range for every bar; the first bar has no predecessor."""
    return [
        true_range(bar, bars[i - 1] if i > 0 else None)
        for i, bar in enumerate(bars)
    ]
