"""Chandelier Exit indicator implementation."""

from .atr import ATR
from .base import Indicator, PriceInput, format_number, validate_multiplier
from .extremum import Maximum, Minimum


class ChandelierExit(Indicator):
    """
    Chandelier Exit: ATR-based trailing stop levels.

    Returns a dict:
      - long:  highest high over period - multiplier * ATR
      - short: lowest low over period + multiplier * ATR
    """

    def __init__(self, period: int = 22, multiplier: float = 3.0):
        self._atr = ATR(period)
        self._min = Minimum(period)
        self._max = Maximum(period)
        self.multiplier = validate_multiplier(multiplier)

    @property
    def period(self) -> int:
        return self._atr.period

    def update(self, value: PriceInput) -> dict[str, float]:
        atr = self._atr.update(value)
        highest_high = self._max.update(value)
        lowest_low = self._min.update(value)

        return {
            "long": highest_high - self.multiplier * atr,
            "short": lowest_low + self.multiplier * atr,
        }

    def reset(self) -> None:
        self._atr.reset()
        self._min.reset()
        self._max.reset()

    def label(self) -> str:
        return f"CE({self.period}, {format_number(self.multiplier)})"
