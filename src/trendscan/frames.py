"""DataFrame conversion for bars and Supertrend results."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from trendscan.models.bar import Bar
from trendscan.models.supertrend import SupertrendResult

BAR_COLUMNS = ["timestamp", "open", "high", "low", "close", "volume"]
RESULT_COLUMNS = [
    "timestamp", "value", "direction", "signal", "atr", "final_upper", "final_lower",
]


def bars_to_frame(bars: Sequence[Bar]) -> pd.DataFrame:
    if not bars:
        return pd.DataFrame(columns=BAR_COLUMNS)

    records = [
        {
            "timestamp": b.timestamp,
            "open": float(b.open),
            "high": float(b.high),
            "low": float(b.low),
            "close": float(b.close),
            "volume": float(b.volume),
        }
        for b in bars
    ]
    return pd.DataFrame(records, columns=BAR_COLUMNS)


def bars_from_frame(df: pd.DataFrame) -> list[Bar]:
    """Build bars from a frame with the ``BAR_COLUMNS`` columns.

    Column names are matched case-insensitively. Rows are sorted by
    timestamp; timezone-naive timestamps are taken as UTC.
    """
    frame = df.rename(columns={c: str(c).lower() for c in df.columns})
    missing = [c for c in BAR_COLUMNS if c not in frame.columns]
    if missing:
        raise ValueError(f"Missing columns: {missing}")

    frame = frame.assign(timestamp=pd.to_datetime(frame["timestamp"], utc=True))
    frame = frame.sort_values("timestamp", kind="stable")

    bars: list[Bar] = []
    for _, row in frame.iterrows():
        bars.append(Bar(
            timestamp=pd.Timestamp(row["timestamp"]).to_pydatetime(),
            open=float(row["open"]),
            high=float(row["high"]),
            low=float(row["low"]),
            close=float(row["close"]),
            volume=float(row["volume"]),
        ))
    return bars


def results_to_frame(results: Sequence[SupertrendResult]) -> pd.DataFrame:
    """Supertrend results as a frame; enum fields become their string values."""
    if not results:
        return pd.DataFrame(columns=RESULT_COLUMNS)

    records = [
        {
            "timestamp": r.timestamp,
            "value": r.value,
            "direction": r.direction.value,
            "signal": r.signal.value,
            "atr": r.atr,
            "final_upper": r.final_upper,
            "final_lower": r.final_lower,
        }
        for r in results
    ]
    return pd.DataFrame(records, columns=RESULT_COLUMNS)
