"""Abstract base class for bar providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from trendscan.models.bar import Bar


class BaseBarProvider(ABC):
    """Abstract source of historical bars.

    Providers own fetching, deduplication and time ordering; the indicator
    engine only ever sees the list they return.
    """

    @abstractmethod
    def get_bars(self, symbol: str, limit: int | None = None) -> list[Bar]:
        """Return historical OHLCV bars.

        Args:
            symbol: Ticker symbol.
            limit: Keep only the most recent ``limit`` bars (``None`` = all).

        Returns:
            List of Bar objects ordered by timestamp ascending.
        """
        ...

    def symbols(self) -> list[str]:
        """Symbols this provider can serve without generating data."""
        return []

    @staticmethod
    def _tail(bars: list[Bar], limit: int | None) -> list[Bar]:
        if limit is None:
            return bars
        return bars[-limit:] if limit > 0 else []
