"""Shared fixtures for trendscan tests."""

from __future__ import annotations

import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from trendscan.models.bar import Bar

BASE_TS = datetime(2024, 1, 2, tzinfo=timezone.utc)


def make_bars(rows: list[tuple[float, float, float]], volume: float = 1000.0) -> list[Bar]:
    """Daily bars from ``(high, low, close)`` rows; open equals close."""
    return [
        Bar(
            timestamp=BASE_TS + timedelta(days=i),
            open=close,
            high=high,
            low=low,
            close=close,
            volume=volume,
        )
        for i, (high, low, close) in enumerate(rows)
    ]


def bars_from_closes(closes: list[float], spread: float = 0.1) -> list[Bar]:
    return make_bars([(c + spread, c - spread, c) for c in closes])


def random_walk_bars(seed: int, n: int = 120, drift: float = 0.0) -> list[Bar]:
    """Seeded random-walk bars that satisfy the OHLCV invariants."""
    rng = random.Random(seed)
    bars: list[Bar] = []
    close = 100.0
    for i in range(n):
        open_ = close
        close = max(1.0, open_ * (1 + drift + rng.gauss(0, 0.02)))
        high = max(open_, close) * (1 + abs(rng.gauss(0, 0.005)))
        low = min(open_, close) * (1 - abs(rng.gauss(0, 0.005)))
        bars.append(Bar(
            timestamp=BASE_TS + timedelta(days=i),
            open=open_,
            high=high,
            low=low,
            close=close,
            volume=float(rng.randint(1_000, 50_000)),
        ))
    return bars


@pytest.fixture
def flat_then_jump_bars() -> list[Bar]:
    """Ten closes at 10 followed by one at 11; high/low are close +/- 0.1."""
    return bars_from_closes([10.0] * 10 + [11.0])


@pytest.fixture
def rising_bars() -> list[Bar]:
    """30 strictly rising closes."""
    return make_bars([(100.0 + i + 0.5, 100.0 + i - 0.5, 100.0 + i) for i in range(30)])


@pytest.fixture
def swing_bars() -> list[Bar]:
    """Down, flip up (buy), hold, flip down (sell) with period=2, factor=0.5."""
    return make_bars([
        (10.5, 9.5, 10.0),
        (10.0, 8.0, 8.0),
        (12.0, 10.0, 12.0),
        (12.5, 11.5, 11.8),
        (11.0, 9.0, 9.2),
    ])


@pytest.fixture
def random_walk():
    return random_walk_bars


@pytest.fixture
def bars_from_rows():
    return make_bars
