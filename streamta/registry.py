"""
Indicator lookup by name.

Lets indicator sets be described as data (for example in a YAML file)
and built on demand:

    build_indicators({"indicators": ["ema", {"name": "atr", "period": 3}]})
"""

import logging
from typing import Any, Mapping

from .errors import InvalidParameter
from .indicators import (
    ATR,
    EMA,
    MACD,
    PPO,
    RSI,
    SMA,
    WEMA,
    BollingerBands,
    ChandelierExit,
    CommodityChannelIndex,
    EfficiencyRatio,
    FastStochastic,
    Indicator,
    KeltnerChannel,
    Maximum,
    MeanAbsoluteDeviation,
    Minimum,
    MoneyFlowIndex,
    OnBalanceVolume,
    RateOfChange,
    SlowStochastic,
    StandardDeviation,
    TrueRange,
)

log = logging.getLogger(__name__)

INDICATORS: dict[str, type[Indicator]] = {
    "ema": EMA,
    "wema": WEMA,
    "min": Minimum,
    "max": Maximum,
    "tr": TrueRange,
    "atr": ATR,
    "sma": SMA,
    "sd": StandardDeviation,
    "mad": MeanAbsoluteDeviation,
    "bb": BollingerBands,
    "kc": KeltnerChannel,
    "ce": ChandelierExit,
    "rsi": RSI,
    "macd": MACD,
    "ppo": PPO,
    "fast_stoch": FastStochastic,
    "slow_stoch": SlowStochastic,
    "roc": RateOfChange,
    "er": EfficiencyRatio,
    "obv": OnBalanceVolume,
    "mfi": MoneyFlowIndex,
    "cci": CommodityChannelIndex,
}

# Class name -> class, used to revive persisted snapshots
INDICATOR_CLASSES: dict[str, type[Indicator]] = {
    cls.__name__: cls for cls in INDICATORS.values()
}


def create_indicator(name: str, **params: Any) -> Indicator:
    """
    Create an indicator by its registry name.

    Args:
        name: Case-insensitive registry name (e.g. "ema", "ATR")
        **params: Constructor arguments (e.g. period=14)

    Raises:
        InvalidParameter: unknown name, unexpected argument or bad value
    """
    cls = INDICATORS.get(str(name).strip().lower())
    if cls is None:
        raise InvalidParameter(
            f"Unknown indicator {name!r}; expected one of: {', '.join(sorted(INDICATORS))}"
        )

    try:
        indicator = cls(**params)
    except TypeError as e:
        raise InvalidParameter(f"Invalid parameters for {name!r}: {e}") from e

    log.debug("Created %s from %r with %s", indicator, name, params)
    return indicator


def build_indicators(config: Mapping[str, Any]) -> list[Indicator]:
    """
    Build every indicator listed under the `indicators` key of a config mapping.

    Each entry is either a bare name ("ema") or a mapping with a `name` key
    plus constructor arguments ({"name": "bb", "period": 20, "multiplier": 2}).
    """
    entries = config.get("indicators")
    if not isinstance(entries, list):
        raise InvalidParameter("config must contain an 'indicators' list")

    indicators = []
    for entry in entries:
        if isinstance(entry, str):
            indicators.append(create_indicator(entry))
        elif isinstance(entry, Mapping) and "name" in entry:
            params = {k: v for k, v in entry.items() if k != "name"}
            indicators.append(create_indicator(entry["name"], **params))
        else:
            raise InvalidParameter(f"Invalid indicator entry: {entry!r}")

    log.info("Built %d indicator%s", len(indicators), "s" if len(indicators) != 1 else "")
    return indicators
