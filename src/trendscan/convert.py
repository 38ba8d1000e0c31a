"""Turn raw price payloads into ``Bar`` sequences."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from trendscan.models.bar import Bar

ALPHA_VANTAGE_DAILY_KEY = "Time Series (Daily)"


def _as_datetime(value: date | datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time(0, 0), tzinfo=timezone.utc)
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def convert_prices_to_bars(
    prices: Sequence[float],
    dates: Sequence[date | datetime | str] | None = None,
    *,
    spread: float = 0.01,
    volume: float = 1_000_000.0,
) -> list[Bar]:
    """Build estimated bars from a close-only price list.

    Each bar gets ``open = close = price`` and a high/low ``spread`` either
    side of it. Without ``dates`` the bars are placed on consecutive days
    ending yesterday (UTC).
    """
    if dates is not None and len(dates) != len(prices):
        raise ValueError(f"Got {len(dates)} dates for {len(prices)} prices")

    if dates is None:
        today = datetime.now(timezone.utc).date()
        timestamps = [
            _as_datetime(today - timedelta(days=len(prices) - i))
            for i in range(len(prices))
        ]
    else:
        timestamps = [_as_datetime(d) for d in dates]

    return [
        Bar(
            timestamp=ts,
            open=float(price),
            high=float(price) * (1 + spread),
            low=float(price) * (1 - spread),
            close=float(price),
            volume=volume,
        )
        for ts, price in zip(timestamps, prices)
    ]


def bars_from_alpha_vantage(payload: Mapping[str, Any], days: int = 30) -> list[Bar]:
    """Parse an Alpha Vantage ``TIME_SERIES_DAILY`` response.

    Keeps the most recent ``days`` entries and returns them oldest first.
    A payload without a daily series (error or rate-limit notes) yields ``[]``.
    """
    series = payload.get(ALPHA_VANTAGE_DAILY_KEY) if payload else None
    if not series:
        return []

    recent = sorted(series)[-days:] if days > 0 else []
    bars: list[Bar] = []
    for day in recent:
        row = series[day]
        bars.append(Bar(
            timestamp=_as_datetime(day),
            open=float(row["1. open"]),
            high=float(row["2. high"]),
            low=float(row["3. low"]),
            close=float(row["4. close"]),
            volume=float(row["5. volume"]),
        ))
    return bars
