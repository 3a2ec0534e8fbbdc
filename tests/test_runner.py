# tests/test_runner.py
"""
Tests for the runner module.
"""
import logging
from pathlib import Path

import numpy as np
import pytest

from streamta.config import settings
from streamta.indicators import EMA, MACD, BollingerBands, OnBalanceVolume
from streamta.runner import configure_logging, replay, run_indicators

CSV_TEXT = (
    "timestamp,open,high,low,close,volume\n"
    "2025-12-28T00:00:00Z,2,2,2,2,10\n"
    "2025-12-28T00:05:00Z,5,5,5,5,10\n"
    "2025-12-28T00:10:00Z,1,1,1,1,10\n"
    "2025-12-28T00:15:00Z,6.25,6.25,6.25,6.25,10\n"
)


@pytest.fixture
def csv_path(tmp_path: Path) -> Path:
    path = tmp_path / "bars.csv"
    path.write_text(CSV_TEXT)
    return path


@pytest.fixture
def clean_settings(monkeypatch):
    monkeypatch.setattr(settings, "log_level", "INFO")
    monkeypatch.setattr(settings, "csv_delimiter", ",")
    monkeypatch.setattr(settings, "indicator_config", None)
    return settings


class TestConfigureLogging:
    def test_configure_logging_defaults(self):
        """Test logging configuration works when no handlers exist."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()

        configure_logging("DEBUG")

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], logging.StreamHandler)

    def test_configure_logging_respects_existing(self):
        """Test logging configuration does NOT overwrite existing handlers."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()

        dummy_handler = logging.NullHandler()
        root_logger.addHandler(dummy_handler)
        root_logger.setLevel(logging.WARNING)

        configure_logging("DEBUG")

        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0] == dummy_handler

    def test_configure_logging_force(self):
        """Test logging configuration CAN force overwrite."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(logging.NullHandler())

        configure_logging("DEBUG", force=True)

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], logging.StreamHandler)


class TestReplay:
    def test_single_value_indicator(self):
        out = replay(EMA(period=3), [2.0, 5.0, 1.0, 6.25])

        assert out.dtype == np.float64
        np.testing.assert_allclose(out, [2.0, 3.5, 2.25, 4.25])

    def test_matches_direct_updates(self, make_bars):
        bars = make_bars(25)
        direct = EMA(period=5)
        expected = [direct.update(b) for b in bars]

        np.testing.assert_array_equal(replay(EMA(period=5), bars), expected)

    def test_multi_output_indicator(self):
        out = replay(BollingerBands(period=2, multiplier=2.0), [10.0, 14.0])

        assert set(out) == {"average", "upper", "lower"}
        np.testing.assert_allclose(out["average"], [10.0, 12.0])
        np.testing.assert_allclose(out["upper"], [10.0, 16.0])
        np.testing.assert_allclose(out["lower"], [10.0, 8.0])

    def test_empty_input(self):
        out = replay(EMA(period=3), [])
        assert out.shape == (0,)


class TestRunIndicators:
    def test_explicit_indicators(self, csv_path, clean_settings):
        results = run_indicators(
            csv_path,
            indicators=[EMA(period=3), OnBalanceVolume()],
            setup_logging=False,
        )

        assert list(results) == ["EMA(3)", "OBV()"]
        np.testing.assert_allclose(results["EMA(3)"], [2.0, 3.5, 2.25, 4.25])
        np.testing.assert_allclose(results["OBV()"], [0.0, 10.0, 0.0, 10.0])

    def test_indicators_from_yaml(self, csv_path, clean_settings, tmp_path):
        config = tmp_path / "indicators.yaml"
        config.write_text(
            "indicators:\n"
            "  - name: ema\n"
            "    period: 3\n"
            "  - macd\n"
        )

        results = run_indicators(csv_path, config, setup_logging=False)

        assert list(results) == ["EMA(3)", "MACD(12, 26, 9)"]
        assert set(results["MACD(12, 26, 9)"]) == {"macd", "signal", "histogram"}

    def test_config_from_settings(self, csv_path, clean_settings, tmp_path):
        config = tmp_path / "indicators.yaml"
        config.write_text("indicators:\n  - sma\n")
        clean_settings.indicator_config = str(config)

        results = run_indicators(csv_path, setup_logging=False)

        assert list(results) == ["SMA(9)"]

    def test_duplicate_labels_are_suffixed(self, csv_path, clean_settings, caplog):
        with caplog.at_level(logging.WARNING, logger="streamta.runner"):
            results = run_indicators(
                csv_path,
                indicators=[MACD(), MACD(), MACD()],
                setup_logging=False,
            )

        assert list(results) == ["MACD(12, 26, 9)", "MACD(12, 26, 9) #2", "MACD(12, 26, 9) #3"]
        assert "Duplicate indicator" in caplog.text

    def test_no_indicators(self, csv_path, clean_settings):
        with pytest.raises(ValueError, match="No indicators given"):
            run_indicators(csv_path, setup_logging=False)

    def test_invalid_settings(self, csv_path, clean_settings, caplog):
        clean_settings.csv_delimiter = "::"

        with caplog.at_level(logging.ERROR, logger="streamta.runner"):
            with pytest.raises(ValueError):
                run_indicators(csv_path, indicators=[EMA()], setup_logging=False)

        assert "Configuration error" in caplog.text

    def test_delimiter_from_settings(self, tmp_path, clean_settings):
        path = tmp_path / "bars.csv"
        path.write_text("open;high;low;close\n1;2;0.5;1.5\n")
        clean_settings.csv_delimiter = ";"

        results = run_indicators(path, indicators=[EMA()], setup_logging=False)

        np.testing.assert_allclose(results["EMA(9)"], [1.5])
