"""Indicator engine: true range, ATR and Supertrend."""

from trendscan.indicators.atr import calculate_atr, wilder_smooth
from trendscan.indicators.supertrend import (
    SupertrendState,
    advance,
    calculate_supertrend,
    latest_supertrend_signal,
    ratchet_bands,
)
from trendscan.indicators.true_range import true_range, true_ranges

__all__ = [
    "true_range",
    "true_ranges",
    "calculate_atr",
    "wilder_smooth",
    "SupertrendState",
    "advance",
    "ratchet_bands",
    "calculate_supertrend",
    "latest_supertrend_signal",
]
