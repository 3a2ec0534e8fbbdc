"""Kaufman Efficiency Ratio (ER) indicator implementation."""

from .base import Indicator, PriceInput, price_of, validate_period


class EfficiencyRatio(Indicator):
    """
    Efficiency Ratio: net move divided by the path length over the window.

      ER = |last - first| / sum(|x_i - x_(i-1)|)

    Ranges from 0 (pure noise) to 1 (straight line). A window with no
    movement at all yields 1.0.
    """

    def __init__(self, period: int = 14):
        self._period = validate_period(period)
        self._buffer: list[float] = [0.0] * self._period
        self._index = 0
        self._count = 0

    def update(self, value: PriceInput) -> float:
        x = price_of(value)

        self._buffer[self._index] = x
        self._index = (self._index + 1) % self._period
        if self._count < self._period:
            self._count += 1

        start = (self._index - self._count) % self._period
        first = self._buffer[start]

        volatility = 0.0
        previous = first
        for i in range(1, self._count):
            current = self._buffer[(start + i) % self._period]
            volatility += abs(current - previous)
            previous = current

        if volatility == 0.0:
            return 1.0
        return abs(x - first) / volatility

    def reset(self) -> None:
        for i in range(self._period):
            self._buffer[i] = 0.0
        self._index = 0
        self._count = 0

    def label(self) -> str:
        return f"ER({self._period})"
