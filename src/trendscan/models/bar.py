"""Bar (OHLCV) data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Bar:
    """Single price bar (OHLCV).

    Attributes:
        timestamp: Bar timestamp (start of period).
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
        volume: Trading volume.
    """

    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float

    @property
    def hl2(self) -> float:
        """Midpoint of the bar's range."""
        return (self.high + self.low) / 2
