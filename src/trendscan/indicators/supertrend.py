"""Supertrend band/direction state machine.

Each bar's final bands depend on the previous bar's final bands and close,
and its direction on the previous direction, so the series is computed as a
fold: ``advance`` takes the carried ``SupertrendState`` (``None`` for the
first eligible bar) and returns the bar's result plus the next state.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from trendscan.errors import InsufficientData, TrendScanError
from trendscan.indicators.atr import calculate_atr
from trendscan.models.bar import Bar
from trendscan.models.supertrend import (
    Direction,
    Signal,
    SupertrendConfig,
    SupertrendResult,
)


@dataclass(frozen=True)
class SupertrendState:
    """Values carried from one bar to the next."""

    direction: Direction
    final_upper: float
    final_lower: float
    close: float


def ratchet_bands(
    basic_upper: float,
    basic_lower: float,
    previous: SupertrendState,
) -> tuple[float, float]:
    """Apply the band ratchet to this bar's basic bands.

    The upper band may only move down unless the previous close broke above
    it; the lower band may only move up unless the previous close broke
    below it.
    """
    if basic_upper < previous.final_upper or previous.close > previous.final_upper:
        final_upper = basic_upper
    else:
        final_upper = previous.final_upper

    if basic_lower > previous.final_lower or previous.close < previous.final_lower:
        final_lower = basic_lower
    else:
        final_lower = previous.final_lower

    return final_upper, final_lower


def advance(
    previous: SupertrendState | None,
    bar: Bar,
    atr: float,
    factor: float,
) -> tuple[SupertrendResult, SupertrendState]:
    """Compute one bar of the Supertrend recurrence."""
    hl2 = bar.hl2
    basic_upper = hl2 + factor * atr
    basic_lower = hl2 - factor * atr

    signal = Signal.HOLD
    if previous is None:
        final_upper, final_lower = basic_upper, basic_lower
        direction = Direction.DOWN if bar.close <= final_lower else Direction.UP
    else:
        final_upper, final_lower = ratchet_bands(basic_upper, basic_lower, previous)
        if previous.direction is Direction.UP:
            if bar.close > final_lower:
                direction = Direction.UP
            else:
                direction = Direction.DOWN
                signal = Signal.SELL
        else:
            if bar.close < final_upper:
                direction = Direction.DOWN
            else:
                direction = Direction.UP
                signal = Signal.BUY

    value = final_lower if direction is Direction.UP else final_upper
    result = SupertrendResult(
        timestamp=bar.timestamp,
        value=value,
        direction=direction,
        signal=signal,
        atr=atr,
        final_upper=final_upper,
        final_lower=final_lower,
    )
    state = SupertrendState(
        direction=direction,
        final_upper=final_upper,
        final_lower=final_lower,
        close=bar.close,
    )
    return result, state


def calculate_supertrend(
    bars: Sequence[Bar],
    config: SupertrendConfig | None = None,
) -> list[SupertrendResult]:
    """Compute the Supertrend series for ``bars``.

    Returns:
        One result per bar from index ``atr_period - 1`` onward, aligned with
        ``calculate_atr``.

    Raises:
        InsufficientData: fewer than ``atr_period + 1`` bars.
        InvalidBar: a bar violates the OHLCV invariants.
    """
    config = config or SupertrendConfig()
    period = config.atr_period

    if len(bars) < config.min_bars:
        raise InsufficientData(config.min_bars, len(bars), "Supertrend calculation")

    atr_values = calculate_atr(bars, period)

    results: list[SupertrendResult] = []
    state: SupertrendState | None = None
    for bar, atr in zip(bars[period - 1:], atr_values):
        result, state = advance(state, bar, atr, config.factor)
        results.append(result)
    return results


def latest_supertrend_signal(
    bars: Sequence[Bar],
    config: SupertrendConfig | None = None,
) -> SupertrendResult | None:
    """Most recent Supertrend result, or None if it cannot be computed."""
    try:
        results = calculate_supertrend(bars, config)
    except TrendScanError:
        return None
    return results[-1] if results else None
