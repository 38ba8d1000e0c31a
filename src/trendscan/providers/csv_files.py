"""CSV file provider: one ``{SYMBOL}.csv`` per symbol under a directory."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from trendscan.errors import TrendScanError, TrendScanErrorCode
from trendscan.frames import bars_from_frame
from trendscan.models.bar import Bar
from trendscan.providers.base import BaseBarProvider


class CsvProvider(BaseBarProvider):
    """Read bars from CSV files with pandas.

    Storage layout: ``{base_path}/{SYMBOL}.csv`` with columns
    ``timestamp, open, high, low, close, volume`` (case-insensitive).
    Duplicate timestamps keep the last row.
    """

    def __init__(self, base_path: Path | str = "data/bars") -> None:
        self.base_path = Path(base_path)

    def _file_path(self, symbol: str) -> Path:
        return self.base_path / f"{symbol.upper()}.csv"

    def get_bars(self, symbol: str, limit: int | None = None) -> list[Bar]:
        fp = self._file_path(symbol)
        if not fp.exists():
            raise TrendScanError(
                f"No bar file for {symbol.upper()} at {fp}",
                code=TrendScanErrorCode.NOT_FOUND,
            )

        try:
            df = pd.read_csv(fp)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise TrendScanError(
                f"Could not read {fp}: {e}",
                code=TrendScanErrorCode.PROVIDER_ERROR,
            ) from e

        df.columns = [str(c).strip().lower() for c in df.columns]

        try:
            if "timestamp" in df.columns:
                # Compare parsed instants, not the raw strings.
                df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True, format="mixed")
                df = df.drop_duplicates(subset="timestamp", keep="last")
            bars = bars_from_frame(df)
        except (KeyError, ValueError) as e:
            raise TrendScanError(
                f"Malformed bar file {fp}: {e}",
                code=TrendScanErrorCode.PROVIDER_ERROR,
            ) from e

        return self._tail(bars, limit)

    def symbols(self) -> list[str]:
        if not self.base_path.exists():
            return []
        return sorted(p.stem.upper() for p in self.base_path.glob("*.csv"))
