"""Data quality validation for bar sequences.

``validate_bars`` produces a non-raising report for callers that want to
inspect a feed; ``ensure_valid_bars`` is the guard the indicators run before
computing anything.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from trendscan.errors import InvalidBar
from trendscan.models.bar import Bar


@dataclass
class ValidationCheck:
    """Single validation check result."""

    name: str
    passed: bool
    message: str = ""


@dataclass
class ValidationResult:
    """Aggregate validation result."""

    checks: list[ValidationCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def failed_checks(self) -> list[ValidationCheck]:
        return [c for c in self.checks if not c.passed]


def bar_violation(bar: Bar) -> str | None:
    """Return the first OHLCV invariant ``bar`` violates, or None."""
    for name in ("open", "high", "low", "close", "volume"):
        if not math.isfinite(getattr(bar, name)):
            return f"{name} is not finite"
    if bar.high < bar.low:
        return f"high {bar.high} < low {bar.low}"
    if not bar.low <= bar.open <= bar.high:
        return f"open {bar.open} outside [{bar.low}, {bar.high}]"
    if not bar.low <= bar.close <= bar.high:
        return f"close {bar.close} outside [{bar.low}, {bar.high}]"
    if bar.volume < 0:
        return f"negative volume {bar.volume}"
    return None


def ensure_valid_bars(bars: Sequence[Bar]) -> None:
    """Raise ``InvalidBar`` for the first bar violating the OHLCV invariants."""
    for i, bar in enumerate(bars):
        reason = bar_violation(bar)
        if reason is not None:
            raise InvalidBar(i, reason)


def validate_bars(bars: Sequence[Bar]) -> ValidationResult:
    """Run all quality checks on a sequence of bars.

    Checks:
        1. Not empty
        2. No NaN/Inf OHLCV
        3. Volume sanity (non-negative)
        4. Timestamp ordering (strictly increasing, no duplicates)
        5. OHLC consistency (low <= open/close <= high)
    """
    result = ValidationResult()

    # 1. Not empty
    if not bars:
        result.checks.append(ValidationCheck("not_empty", False, "No bars provided"))
        return result
    result.checks.append(ValidationCheck("not_empty", True, f"{len(bars)} bars"))

    # 2. No NaN/Inf
    nan_count = 0
    for b in bars:
        for val in (b.open, b.high, b.low, b.close, b.volume):
            if not math.isfinite(val):
                nan_count += 1
    if nan_count:
        result.checks.append(ValidationCheck("no_nulls", False, f"{nan_count} NaN/Inf values"))
    else:
        result.checks.append(ValidationCheck("no_nulls", True))

    # 3. Volume sanity
    neg_vol = sum(1 for b in bars if b.volume < 0)
    if neg_vol:
        result.checks.append(
            ValidationCheck("volume_sanity", False, f"{neg_vol} bars with negative volume")
        )
    else:
        result.checks.append(ValidationCheck("volume_sanity", True))

    # 4. Timestamp ordering
    out_of_order = 0
    for i in range(1, len(bars)):
        if bars[i].timestamp <= bars[i - 1].timestamp:
            out_of_order += 1
    if out_of_order:
        result.checks.append(
            ValidationCheck("timestamp_order", False, f"{out_of_order} out of order or duplicate")
        )
    else:
        result.checks.append(ValidationCheck("timestamp_order", True))

    # 5. OHLC consistency
    inconsistent = 0
    for b in bars:
        if b.high < b.low:
            inconsistent += 1
        elif b.high < b.open or b.high < b.close:
            inconsistent += 1
        elif b.low > b.open or b.low > b.close:
            inconsistent += 1
    if inconsistent:
        result.checks.append(
            ValidationCheck("ohlc_consistency", False, f"{inconsistent} bars with H<L or O/C outside range")
        )
    else:
        result.checks.append(ValidationCheck("ohlc_consistency", True))

    return result
