"""Timeframe configuration model."""

from __future__ import annotations

from dataclasses import dataclass

from trendscan.models.supertrend import SupertrendConfig


@dataclass(frozen=True)
class TimeframeConfig:
    """One row of the timeframe table.

    Attributes:
        label: Timeframe label, e.g. ``"1D"``.
        atr_period: ATR period for this timeframe.
        factor: ATR multiplier for this timeframe.
        window_length: Number of most recent bars to use (``None`` = all).
    """

    label: str
    atr_period: int
    factor: float
    window_length: int | None = None

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("label must be non-empty")
        if self.window_length is not None and self.window_length < 1:
            raise ValueError(f"window_length must be >= 1, got {self.window_length}")
        # Rejects bad ATR parameters at construction.
        SupertrendConfig(atr_period=self.atr_period, factor=self.factor)

    @property
    def supertrend(self) -> SupertrendConfig:
        """Supertrend parameters for this timeframe."""
        return SupertrendConfig(atr_period=self.atr_period, factor=self.factor)

    def window_size(self, available: int) -> int:
        """Number of bars this timeframe uses out of ``available``."""
        if self.window_length is None:
            return available
        return min(self.window_length, available)
