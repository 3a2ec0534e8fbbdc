"""Exponential Moving Average (EMA) indicator implementation."""

from .base import Indicator, PriceInput, price_of, validate_period


class EMA(Indicator):
    """
    Exponential Moving Average of close prices.

    The first input seeds the average unchanged; every later input is
    blended in as:

        ema = k * x + (1 - k) * ema

    With the default smoothing k = 2 / (period + 1). Passing `wilder=True`
    selects Wilder's k = 1 / period instead, which decays more slowly for
    the same period. History is unbounded: `period` only controls decay.
    """

    def __init__(self, period: int = 9, wilder: bool = False):
        self._period = validate_period(period)
        self.wilder = bool(wilder)
        self.k = 1.0 / self._period if self.wilder else 2.0 / (self._period + 1.0)
        self._current: float = 0.0
        self._is_new: bool = True

    def update(self, value: PriceInput) -> float:
        x = price_of(value)

        if self._is_new:
            # Seed EMA with first value
            self._is_new = False
            self._current = x
        else:
            self._current = self.k * x + (1.0 - self.k) * self._current

        return self._current

    def reset(self) -> None:
        self._current = 0.0
        self._is_new = True

    def label(self) -> str:
        return f"EMA({self._period})"
