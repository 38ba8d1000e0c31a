"""Trendscan error types."""

from __future__ import annotations

from enum import Enum


class TrendScanErrorCode(Enum):
    """Error classification codes."""

    INSUFFICIENT_DATA = "insufficient_data"
    INVALID_BAR = "invalid_bar"
    NOT_FOUND = "not_found"
    PROVIDER_ERROR = "provider_error"
    VALIDATION_FAILED = "validation_failed"
    NO_DATA = "no_data"


class TrendScanError(Exception):
    """Trendscan exception with error code and retryable flag.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        retryable: Whether the caller could succeed by retrying with other data.
    """

    def __init__(
        self,
        message: str,
        code: TrendScanErrorCode = TrendScanErrorCode.PROVIDER_ERROR,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.retryable = retryable


class InsufficientData(TrendScanError):
    """Raised when a bar sequence is shorter than an indicator needs.

    Attributes:
        required: Minimum number of bars the computation needs.
        actual: Number of bars supplied.
    """

    def __init__(self, required: int, actual: int, what: str = "calculation") -> None:
        super().__init__(
            f"Insufficient data for {what}: need at least {required} bars, got {actual}",
            code=TrendScanErrorCode.INSUFFICIENT_DATA,
        )
        self.required = required
        self.actual = actual


class InvalidBar(TrendScanError):
    """Raised when a bar violates the OHLCV invariants.

    Attributes:
        index: Position of the offending bar in the input sequence.
        reason: Which invariant was violated.
    """

    def __init__(self, index: int, reason: str) -> None:
        super().__init__(
            f"Invalid bar at index {index}: {reason}",
            code=TrendScanErrorCode.INVALID_BAR,
        )
        self.index = index
        self.reason = reason
