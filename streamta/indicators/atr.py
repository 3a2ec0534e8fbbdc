"""Average True Range (ATR) indicator implementation."""

from .base import Indicator, PriceInput
from .ema import EMA
from .true_range import TrueRange


class ATR(Indicator):
    """
    ATR (Average True Range): an EMA of the true range.

      ATR = EMA(period) of TR

    Example:
        atr = ATR(period=3)
        atr.update(Bar(open=9.7, high=10.0, low=9.0, close=9.5))   # 1.0
        atr.update(Bar(open=9.9, high=10.4, low=9.8, close=10.2))  # 0.95
    """

    def __init__(self, period: int = 14):
        self._true_range = TrueRange()
        self._ema = EMA(period)

    @property
    def period(self) -> int:
        return self._ema.period

    def update(self, value: PriceInput) -> float:
        return self._ema.update(self._true_range.update(value))

    def reset(self) -> None:
        self._true_range.reset()
        self._ema.reset()

    def label(self) -> str:
        return f"ATR({self.period})"
