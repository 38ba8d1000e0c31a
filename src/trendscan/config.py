"""Trendscan configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from trendscan.models.timeframe import TimeframeConfig
from trendscan.timeframes import DEFAULT_TIMEFRAMES


class ProviderType(Enum):
    """Supported bar provider backends."""

    MOCK = "mock"
    CSV = "csv"


@dataclass
class TrendScanConfig:
    """Configuration for SupertrendScanner.

    Attributes:
        provider: Bar provider backend.
        data_dir: Directory holding ``{SYMBOL}.csv`` files for the CSV provider.
        history_bars: Most recent bars requested per symbol.
        timeframes: Timeframe table evaluated for every symbol.
        validate: Whether to run quality checks on fetched bars.
    """

    provider: ProviderType = ProviderType.MOCK
    data_dir: str = "data/bars"
    history_bars: int = 60
    timeframes: tuple[TimeframeConfig, ...] = DEFAULT_TIMEFRAMES
    validate: bool = True


def parse_timeframes(text: str) -> tuple[TimeframeConfig, ...]:
    """Parse ``"LABEL:PERIOD:FACTOR:WINDOW,..."`` into a timeframe table.

    ``WINDOW`` may be ``all`` (or omitted) to use the whole series.
    """
    timeframes: list[TimeframeConfig] = []
    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        parts = [p.strip() for p in entry.split(":")]
        if len(parts) not in (3, 4):
            raise ValueError(f"Bad timeframe entry {entry!r}, expected LABEL:PERIOD:FACTOR[:WINDOW]")
        label, period, factor = parts[:3]
        window = parts[3] if len(parts) == 4 else "all"
        try:
            timeframes.append(TimeframeConfig(
                label=label,
                atr_period=int(period),
                factor=float(factor),
                window_length=None if window.lower() == "all" else int(window),
            ))
        except ValueError as e:
            raise ValueError(f"Bad timeframe entry {entry!r}: {e}") from e
    if not timeframes:
        raise ValueError("No timeframes given")
    return tuple(timeframes)
