"""Mock provider for testing and CI: no data files required."""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, timezone

from trendscan.models.bar import Bar
from trendscan.providers.base import BaseBarProvider


class MockProvider(BaseBarProvider):
    """In-memory provider that returns configurable static data.

    Use ``set_bars`` to pre-load data, or leave defaults for auto-generated
    synthetic daily bars.
    """

    def __init__(self, synthetic_bars: int = 60, end: date | None = None) -> None:
        self._bars: dict[str, list[Bar]] = {}
        self.synthetic_bars = synthetic_bars
        self.end = end or date(2024, 6, 28)

    # --- Pre-load helpers ---

    def set_bars(self, symbol: str, bars: list[Bar]) -> None:
        self._bars[symbol.upper()] = bars

    # --- Provider implementation ---

    def get_bars(self, symbol: str, limit: int | None = None) -> list[Bar]:
        key = symbol.upper()
        if key in self._bars:
            return self._tail(self._bars[key], limit)
        return self._tail(self._generate_bars(key), limit)

    def symbols(self) -> list[str]:
        return sorted(self._bars)

    # --- Synthetic data generation ---

    def _generate_bars(self, symbol: str) -> list[Bar]:
        """Deterministic daily bars: a slow drift with a sine swing."""
        bars: list[Bar] = []
        base_price = 100.0 + sum(ord(ch) for ch in symbol) % 100
        start = self.end - timedelta(days=self.synthetic_bars - 1)

        prev_close = base_price
        for i in range(self.synthetic_bars):
            ts = datetime.combine(start + timedelta(days=i), time(0, 0), tzinfo=timezone.utc)
            c = base_price * (1 + 0.002 * i + 0.03 * math.sin(i / 4))
            o = prev_close
            h = max(o, c) * 1.005
            l = min(o, c) * 0.995
            bars.append(Bar(
                timestamp=ts,
                open=round(o, 2),
                high=round(h, 2),
                low=round(l, 2),
                close=round(c, 2),
                volume=1_000_000.0 + i * 1_000,
            ))
            prev_close = c

        return bars
