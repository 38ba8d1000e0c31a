"""Supertrend configuration and result models."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Direction(Enum):
    """Prevailing trend direction."""

    UP = "up"
    DOWN = "down"


class Signal(Enum):
    """Transition signal emitted on a bar."""

    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


@dataclass(frozen=True)
class SupertrendConfig:
    """Parameters for one Supertrend run.

    Attributes:
        atr_period: Wilder smoothing period for the ATR.
        factor: ATR multiplier applied around the bar midpoint.
    """

    atr_period: int = 10
    factor: float = 3.0

    def __post_init__(self) -> None:
        if self.atr_period < 1:
            raise ValueError(f"atr_period must be >= 1, got {self.atr_period}")
        if not math.isfinite(self.factor) or self.factor < 0:
            raise ValueError(f"factor must be finite and >= 0, got {self.factor}")

    @property
    def min_bars(self) -> int:
        """Fewest bars that produce a result."""
        return self.atr_period + 1


@dataclass(frozen=True)
class SupertrendResult:
    """Supertrend output for a single bar.

    Attributes:
        timestamp: Timestamp of the bar this result belongs to.
        value: Active band, i.e. the line plotted against price.
        direction: Prevailing trend direction after this bar.
        signal: ``BUY``/``SELL`` on the bar where direction flips, else ``HOLD``.
        atr: ATR value used for this bar.
        final_upper: Ratchet-adjusted upper band.
        final_lower: Ratchet-adjusted lower band.
    """

    timestamp: datetime
    value: float
    direction: Direction
    signal: Signal
    atr: float
    final_upper: float
    final_lower: float

    @property
    def is_flip(self) -> bool:
        """True on the bar where the direction changes."""
        return self.signal is not Signal.HOLD
