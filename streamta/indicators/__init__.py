# streamta/indicators/__init__.py
"""
Streaming technical indicators.

Provides stateful indicator classes that consume one observation per
`update` call and return the calculated value in bounded time.

Example:
    from streamta.indicators import ATR, EMA, Minimum

    atr = ATR(period=14)
    ema = EMA(period=9)
    low = Minimum(period=10)

    # Update with each new bar (or a bare number where a price is enough)
    atr_value = atr.update(bar)
    ema_value = ema.update(bar.close)
    low_value = low.update(bar)
"""

from .base import (
    Indicator,
    SupportsClose,
    SupportsOHLC,
    SupportsOHLCV,
)
from .atr import ATR
from .bollinger_bands import BollingerBands
from .cci import CommodityChannelIndex
from .chandelier_exit import ChandelierExit
from .efficiency_ratio import EfficiencyRatio
from .ema import EMA
from .extremum import Maximum, Minimum
from .keltner_channel import KeltnerChannel
from .macd import MACD
from .mean_absolute_deviation import MeanAbsoluteDeviation
from .mfi import MoneyFlowIndex
from .obv import OnBalanceVolume
from .ppo import PPO
from .roc import RateOfChange
from .rsi import RSI
from .sma import SMA
from .standard_deviation import StandardDeviation
from .stochastic import FastStochastic, SlowStochastic
from .true_range import TrueRange
from .wema import WEMA

__all__ = [
    "Indicator",
    "SupportsClose",
    "SupportsOHLC",
    "SupportsOHLCV",
    "ATR",
    "BollingerBands",
    "ChandelierExit",
    "CommodityChannelIndex",
    "EMA",
    "EfficiencyRatio",
    "FastStochastic",
    "KeltnerChannel",
    "MACD",
    "Maximum",
    "MeanAbsoluteDeviation",
    "Minimum",
    "MoneyFlowIndex",
    "OnBalanceVolume",
    "PPO",
    "RSI",
    "RateOfChange",
    "SMA",
    "SlowStochastic",
    "StandardDeviation",
    "TrueRange",
    "WEMA",
]
