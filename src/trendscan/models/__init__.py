"""Trendscan models."""

from trendscan.models.bar import Bar
from trendscan.models.supertrend import Direction, Signal, SupertrendConfig, SupertrendResult
from trendscan.models.timeframe import TimeframeConfig

__all__ = [
    "Bar",
    "Direction",
    "Signal",
    "SupertrendConfig",
    "SupertrendResult",
    "TimeframeConfig",
]
