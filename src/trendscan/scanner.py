"""SupertrendScanner: provider -> quality check -> per-timeframe Supertrend."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from trendscan.config import ProviderType, TrendScanConfig
from trendscan.errors import TrendScanError, TrendScanErrorCode
from trendscan.models.bar import Bar
from trendscan.models.supertrend import SupertrendResult
from trendscan.providers import create_provider
from trendscan.providers.base import BaseBarProvider
from trendscan.quality import ValidationResult, validate_bars
from trendscan.timeframes import TimeframeOrchestrator, TimeframeOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetScan:
    """Scan of one symbol.

    Attributes:
        symbol: Ticker symbol.
        price: Close of the most recent bar.
        bars: Bars the timeframes were evaluated over.
        outcomes: Per-timeframe outcome, in table order.
        quality: Quality report, when validation is enabled.
    """

    symbol: str
    price: float
    bars: list[Bar]
    outcomes: dict[str, TimeframeOutcome]
    quality: ValidationResult | None = None

    @property
    def supertrend(self) -> dict[str, SupertrendResult | None]:
        return {label: o.result for label, o in self.outcomes.items()}


class SupertrendScanner:
    """Central entry point: fetch bars for a symbol and run every timeframe.

    Usage::

        from trendscan import create_scanner_from_env
        scanner = create_scanner_from_env()
        scan = scanner.scan("AAPL")
        scan.supertrend["1D"]
    """

    def __init__(
        self,
        config: TrendScanConfig | None = None,
        provider: BaseBarProvider | None = None,
    ) -> None:
        self.config = config or TrendScanConfig()

        if provider is None:
            kwargs: dict[str, Any] = {}
            if self.config.provider is ProviderType.CSV:
                kwargs["base_path"] = self.config.data_dir
            provider = create_provider(self.config.provider, **kwargs)
        self.provider = provider

        self.orchestrator = TimeframeOrchestrator(self.config.timeframes)

    def scan(self, symbol: str) -> AssetScan:
        """Fetch, check and evaluate one symbol.

        Failed quality checks are logged; bars breaking the OHLCV invariants
        leave the affected timeframes without a result.
        """
        key = symbol.upper()
        bars = self.provider.get_bars(key, limit=self.config.history_bars)
        if not bars:
            raise TrendScanError(f"No bars for {key}", code=TrendScanErrorCode.NO_DATA)

        quality: ValidationResult | None = None
        if self.config.validate:
            quality = validate_bars(bars)
            if not quality.passed:
                msgs = "; ".join(c.message for c in quality.failed_checks)
                logger.warning("%s: quality checks failed: %s", key, msgs)

        logger.debug(
            "%s: evaluating %d timeframes over %d bars",
            key, len(self.orchestrator.timeframes), len(bars),
        )
        outcomes = self.orchestrator.evaluate(bars)
        for label, outcome in outcomes.items():
            if outcome.error is None:
                logger.debug(
                    "%s %s: %s using %d bars",
                    key, label, outcome.result.signal.value, outcome.bars_used,
                )
            elif outcome.error.code is TrendScanErrorCode.INSUFFICIENT_DATA:
                logger.debug("%s %s: no result: %s", key, label, outcome.error)
            else:
                logger.warning("%s %s: no result: %s", key, label, outcome.error)

        return AssetScan(
            symbol=key,
            price=bars[-1].close,
            bars=bars,
            outcomes=outcomes,
            quality=quality,
        )

    def scan_many(self, symbols: list[str]) -> list[AssetScan]:
        """Scan several symbols; symbols that fail are logged and skipped."""
        scans: list[AssetScan] = []
        for symbol in symbols:
            try:
                scans.append(self.scan(symbol))
            except TrendScanError as e:
                logger.warning("Skipping %s (%s): %s", symbol.upper(), e.code.value, e)
        return scans
