# streamta/runner.py
"""
Replay of bar series through indicators.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Iterable

import numpy as np

from .config import load_indicator_config, settings
from .csvdata import read_bars
from .indicators import Indicator
from .registry import build_indicators

log = logging.getLogger(__name__)

ReplayResult = np.ndarray | dict[str, np.ndarray]


def configure_logging(level: str = "INFO", force: bool = False) -> None:
    """
    Configure root logger with console output.

    By default, this is non-destructive: if the root logger already has handlers,
    it will do nothing (assuming the application has configured logging).

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        force: If True, clear existing handlers and force this configuration
    """
    root_logger = logging.getLogger()

    # If logging is already configured and we aren't forcing it, exit.
    if root_logger.hasHandlers() and not force:
        return

    root_logger.setLevel(level.upper())

    if force:
        root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def replay(indicator: Indicator, inputs: Iterable[Any]) -> ReplayResult:
    """
    Feed `inputs` through `indicator` in order and collect every output.

    Returns:
        A float64 array with one value per input for single-value
        indicators, or a dict of such arrays keyed by output name for
        multi-output indicators (Bollinger Bands, MACD, ...).
    """
    outputs = [indicator.update(value) for value in inputs]

    if outputs and isinstance(outputs[0], dict):
        return {
            key: np.array([out[key] for out in outputs], dtype=np.float64)
            for key in outputs[0]
        }
    return np.array(outputs, dtype=np.float64)


def _describe_last(result: ReplayResult) -> str:
    if isinstance(result, dict):
        return ", ".join(f"{key}={values[-1]:.4f}" for key, values in result.items())
    return f"{result[-1]:.4f}"


def run_indicators(
    csv_path: str | Path,
    config_path: str | Path | None = None,
    *,
    indicators: list[Indicator] | None = None,
    log_level: str | None = None,
    setup_logging: bool = True,
) -> dict[str, ReplayResult]:
    """
    Replay a CSV bar series through a set of indicators.

    Args:
        csv_path: CSV file with open/high/low/close (and optionally volume) columns
        config_path: YAML indicator config; defaults to settings.indicator_config
        indicators: Explicit indicator instances, taking precedence over any config
        log_level: Optional log level override
        setup_logging: If True, configure basic logging

    Returns:
        Mapping of indicator label to its replayed outputs (see `replay`)

    Examples:
        run_indicators("AMZN.csv", "indicators.yaml")

        run_indicators("AMZN.csv", indicators=[EMA(9), ATR(14)])
    """
    if setup_logging:
        configure_logging(log_level or settings.log_level)

    try:
        settings.validate()
    except ValueError as e:
        log.error("Configuration error: %s", e)
        raise

    if indicators is None:
        path = config_path or settings.indicator_config
        if not path:
            raise ValueError(
                "No indicators given: pass `indicators`, `config_path` "
                "or set STREAMTA_INDICATOR_CONFIG"
            )
        indicators = build_indicators(load_indicator_config(path))

    bars = read_bars(csv_path, delimiter=settings.csv_delimiter)
    log.info("Replaying %d bars through %d indicators", len(bars), len(indicators))

    results: dict[str, ReplayResult] = {}
    for indicator in indicators:
        key = str(indicator)
        if key in results:
            suffix = 2
            while f"{key} #{suffix}" in results:
                suffix += 1
            log.warning("Duplicate indicator %s, reporting as '%s #%d'", key, key, suffix)
            key = f"{key} #{suffix}"

        results[key] = replay(indicator, bars)
        if bars:
            log.info("%s = %s", key, _describe_last(results[key]))

    return results
