"""Run the Supertrend state machine once per configured timeframe.

Every timeframe takes the most recent ``window_length`` bars of the same
series and keeps only the last result. Timeframes are independent: a
timeframe that is too short, or whose window contains an invalid bar, is
recorded as having no result and the rest carry on.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from trendscan.errors import InsufficientData, TrendScanError
from trendscan.indicators.supertrend import calculate_supertrend
from trendscan.models.bar import Bar
from trendscan.models.supertrend import SupertrendResult
from trendscan.models.timeframe import TimeframeConfig

DEFAULT_TIMEFRAMES: tuple[TimeframeConfig, ...] = (
    TimeframeConfig("45M", atr_period=7, factor=2.0, window_length=20),
    TimeframeConfig("2H", atr_period=8, factor=2.5, window_length=25),
    TimeframeConfig("4H", atr_period=10, factor=2.8, window_length=30),
    TimeframeConfig("1D", atr_period=12, factor=3.0, window_length=40),
    TimeframeConfig("3D", atr_period=14, factor=3.5, window_length=50),
    TimeframeConfig("1W", atr_period=15, factor=4.0, window_length=None),
)


@dataclass(frozen=True)
class TimeframeOutcome:
    """Result of evaluating one timeframe.

    Attributes:
        label: Timeframe label.
        bars_used: Size of the window the timeframe ran over.
        result: Latest Supertrend result, or None when absent.
        error: Why the result is absent, if it is.
    """

    label: str
    bars_used: int
    result: SupertrendResult | None = None
    error: TrendScanError | None = None


class TimeframeOrchestrator:
    """Evaluate a fixed table of timeframes over one bar series.

    Usage::

        orchestrator = TimeframeOrchestrator()
        latest = orchestrator.latest_signals(bars)
        latest["1D"]  # SupertrendResult or None
    """

    def __init__(self, timeframes: Iterable[TimeframeConfig] = DEFAULT_TIMEFRAMES) -> None:
        self.timeframes = tuple(timeframes)
        labels = [tf.label for tf in self.timeframes]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ValueError(f"Duplicate timeframe labels: {', '.join(duplicates)}")

    @property
    def labels(self) -> list[str]:
        return [tf.label for tf in self.timeframes]

    def evaluate_one(self, timeframe: TimeframeConfig, bars: Sequence[Bar]) -> TimeframeOutcome:
        size = timeframe.window_size(len(bars))
        window = bars[len(bars) - size:]

        if size < timeframe.atr_period + 1:
            return TimeframeOutcome(
                label=timeframe.label,
                bars_used=size,
                error=InsufficientData(
                    timeframe.atr_period + 1, size, f"timeframe {timeframe.label}",
                ),
            )

        try:
            results = calculate_supertrend(window, timeframe.supertrend)
        except TrendScanError as e:
            return TimeframeOutcome(label=timeframe.label, bars_used=size, error=e)

        return TimeframeOutcome(label=timeframe.label, bars_used=size, result=results[-1])

    def evaluate(self, bars: Sequence[Bar]) -> dict[str, TimeframeOutcome]:
        """Evaluate every timeframe, in table order."""
        return {tf.label: self.evaluate_one(tf, bars) for tf in self.timeframes}

    def latest_signals(self, bars: Sequence[Bar]) -> dict[str, SupertrendResult | None]:
        """Map each timeframe label to its latest result, or None when absent."""
        return {label: outcome.result for label, outcome in self.evaluate(bars).items()}


def calculate_timeframes(
    bars: Sequence[Bar],
    timeframes: Iterable[TimeframeConfig] = DEFAULT_TIMEFRAMES,
) -> dict[str, SupertrendResult | None]:
    """Latest Supertrend result per timeframe for ``bars``."""
    return TimeframeOrchestrator(timeframes).latest_signals(bars)
