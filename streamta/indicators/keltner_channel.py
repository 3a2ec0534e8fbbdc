"""Keltner Channel indicator implementation."""

from .atr import ATR
from .base import (
    Indicator,
    PriceInput,
    format_number,
    typical_price_of,
    validate_multiplier,
)
from .ema import EMA


class KeltnerChannel(Indicator):
    """
    Keltner Channel: an EMA of typical price banded by ATR.

      average = EMA(period) of (high + low + close) / 3
      upper   = average + multiplier * ATR(period)
      lower   = average - multiplier * ATR(period)
    """

    def __init__(self, period: int = 10, multiplier: float = 2.0):
        self._ema = EMA(period)
        self._atr = ATR(period)
        self.multiplier = validate_multiplier(multiplier)

    @property
    def period(self) -> int:
        return self._ema.period

    def update(self, value: PriceInput) -> dict[str, float]:
        average = self._ema.update(typical_price_of(value))
        atr = self._atr.update(value)

        return {
            "average": average,
            "upper": average + self.multiplier * atr,
            "lower": average - self.multiplier * atr,
        }

    def reset(self) -> None:
        self._ema.reset()
        self._atr.reset()

    def label(self) -> str:
        return f"KC({self.period}, {format_number(self.multiplier)})"
