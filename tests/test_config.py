"""Tests for configuration and the env factory."""

import pytest

from trendscan import create_scanner_from_env
from trendscan.config import ProviderType, TrendScanConfig, parse_timeframes
from trendscan.models.timeframe import TimeframeConfig
from trendscan.providers.csv_files import CsvProvider
from trendscan.providers.mock import MockProvider
from trendscan.timeframes import DEFAULT_TIMEFRAMES


class TestTrendScanConfig:
    def test_defaults(self):
        config = TrendScanConfig()
        assert config.provider is ProviderType.MOCK
        assert config.history_bars == 60
        assert config.timeframes == DEFAULT_TIMEFRAMES
        assert config.validate


class TestParseTimeframes:
    def test_parse(self):
        table = parse_timeframes("45M:7:2.0:20, 1W:15:4:all")
        assert table == (
            TimeframeConfig("45M", atr_period=7, factor=2.0, window_length=20),
            TimeframeConfig("1W", atr_period=15, factor=4.0, window_length=None),
        )

    def test_window_optional(self):
        assert parse_timeframes("1D:12:3")[0].window_length is None

    @pytest.mark.parametrize("text", [
        "", "1D:12", "1D:x:3:40", "1D:12:3:0", "1D:12:3:40:9",
        "X:0:1:4", "X:5:-1:4", "X:10:nan:40", "X:10:inf:40",
    ])
    def test_malformed(self, text):
        with pytest.raises(ValueError):
            parse_timeframes(text)

    def test_bad_row_names_entry(self):
        with pytest.raises(ValueError, match="bad:0:1.0:4"):
            parse_timeframes("good:2:0.5:4,bad:0:1.0:4")


class TestCreateScannerFromEnv:
    def test_defaults(self, monkeypatch):
        for var in ("TRENDSCAN_PROVIDER", "TRENDSCAN_TIMEFRAMES", "TRENDSCAN_HISTORY_BARS", "TRENDSCAN_VALIDATE"):
            monkeypatch.delenv(var, raising=False)
        scanner = create_scanner_from_env()
        assert isinstance(scanner.provider, MockProvider)
        assert scanner.config.timeframes == DEFAULT_TIMEFRAMES

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TRENDSCAN_PROVIDER", "csv")
        monkeypatch.setenv("TRENDSCAN_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("TRENDSCAN_HISTORY_BARS", "120")
        monkeypatch.setenv("TRENDSCAN_TIMEFRAMES", "1D:12:3.0:40")
        monkeypatch.setenv("TRENDSCAN_VALIDATE", "0")

        scanner = create_scanner_from_env()

        assert isinstance(scanner.provider, CsvProvider)
        assert str(scanner.provider.base_path) == str(tmp_path)
        assert scanner.config.history_bars == 120
        assert scanner.orchestrator.labels == ["1D"]
        assert not scanner.config.validate

    def test_unknown_provider(self, monkeypatch):
        monkeypatch.setenv("TRENDSCAN_PROVIDER", "polygon")
        with pytest.raises(ValueError):
            create_scanner_from_env()
