# streamta/__init__.py
"""
streamta - streaming technical analysis indicators.

Every indicator consumes one observation per `update` call and returns
its current value in bounded time, without re-scanning history.

Quick start:
    from streamta import Bar
    from streamta.indicators import ATR, EMA

    atr = ATR(period=14)
    ema = EMA(period=9)

    for bar in bars:
        atr_value = atr.update(bar)
        ema_value = ema.update(bar)   # or ema.update(bar.close)

Replaying a CSV file through indicators listed in a YAML config:
    from streamta import run_indicators

    results = run_indicators("AMZN.csv", "indicators.yaml")
"""

from .config import load_indicator_config, settings
from .csvdata import read_bars
from .errors import InvalidBar, InvalidParameter, SnapshotError, StreamTAError
from .marketdata import Bar
from .persistence import dumps, loads, restore, snapshot
from .registry import build_indicators, create_indicator
from .runner import replay, run_indicators

__version__ = "0.1.0"
__all__ = [
    "Bar",
    "InvalidBar",
    "InvalidParameter",
    "SnapshotError",
    "StreamTAError",
    "build_indicators",
    "create_indicator",
    "dumps",
    "load_indicator_config",
    "loads",
    "read_bars",
    "replay",
    "restore",
    "run_indicators",
    "settings",
    "snapshot",
]
