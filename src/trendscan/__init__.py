"""trendscan: multi-timeframe Supertrend signals from OHLCV bars.

True range, Wilder ATR and the Supertrend band/direction state machine,
evaluated over a table of timeframes against a single price series.

Quick start::

    from trendscan import calculate_timeframes
    latest = calculate_timeframes(bars)
    latest["1D"].signal
"""

from __future__ import annotations

import os

from trendscan.config import ProviderType, TrendScanConfig, parse_timeframes
from trendscan.convert import bars_from_alpha_vantage, convert_prices_to_bars
from trendscan.errors import InsufficientData, InvalidBar, TrendScanError, TrendScanErrorCode
from trendscan.indicators import (
    SupertrendState,
    calculate_atr,
    calculate_supertrend,
    latest_supertrend_signal,
    true_range,
)
from trendscan.models.bar import Bar
from trendscan.models.supertrend import Direction, Signal, SupertrendConfig, SupertrendResult
from trendscan.models.timeframe import TimeframeConfig
from trendscan.quality import ensure_valid_bars, validate_bars
from trendscan.scanner import AssetScan, SupertrendScanner
from trendscan.timeframes import (
    DEFAULT_TIMEFRAMES,
    TimeframeOrchestrator,
    TimeframeOutcome,
    calculate_timeframes,
)

__version__ = "0.1.0"

__all__ = [
    # Scanner
    "SupertrendScanner",
    "AssetScan",
    "create_scanner_from_env",
    # Engine
    "true_range",
    "calculate_atr",
    "calculate_supertrend",
    "latest_supertrend_signal",
    "SupertrendState",
    "TimeframeOrchestrator",
    "TimeframeOutcome",
    "calculate_timeframes",
    "DEFAULT_TIMEFRAMES",
    # Config
    "TrendScanConfig",
    "ProviderType",
    "parse_timeframes",
    # Errors
    "TrendScanError",
    "TrendScanErrorCode",
    "InsufficientData",
    "InvalidBar",
    # Models
    "Bar",
    "Direction",
    "Signal",
    "SupertrendConfig",
    "SupertrendResult",
    "TimeframeConfig",
    # Input helpers
    "convert_prices_to_bars",
    "bars_from_alpha_vantage",
    "validate_bars",
    "ensure_valid_bars",
]


def create_scanner_from_env() -> SupertrendScanner:
    """Zero-config factory: reads provider and timeframe table from env vars.

    Environment variables:
        TRENDSCAN_PROVIDER: Bar provider: "mock" or "csv" (default: "mock").
        TRENDSCAN_DATA_DIR: Directory of ``{SYMBOL}.csv`` files (default: "data/bars").
        TRENDSCAN_HISTORY_BARS: Bars requested per symbol (default: 60).
        TRENDSCAN_TIMEFRAMES: ``LABEL:PERIOD:FACTOR:WINDOW`` entries, comma-separated
            (default: the built-in table).
        TRENDSCAN_VALIDATE: "0" disables quality checks (default: "1").
    """
    timeframes_str = os.getenv("TRENDSCAN_TIMEFRAMES")

    config = TrendScanConfig(
        provider=ProviderType(os.getenv("TRENDSCAN_PROVIDER", "mock").strip().lower()),
        data_dir=os.getenv("TRENDSCAN_DATA_DIR", "data/bars"),
        history_bars=int(os.getenv("TRENDSCAN_HISTORY_BARS", "60")),
        timeframes=parse_timeframes(timeframes_str) if timeframes_str else DEFAULT_TIMEFRAMES,
        validate=os.getenv("TRENDSCAN_VALIDATE", "1") != "0",
    )

    return SupertrendScanner(config)
