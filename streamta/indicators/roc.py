"""Rate of Change (ROC) indicator implementation."""

from .base import Indicator, PriceInput, price_of, validate_period


class RateOfChange(Indicator):
    """
    Rate of Change: percentage change against the value `period` steps back.

      ROC = (x - x[t - period]) / x[t - period] * 100

    Until `period` inputs have been seen, the first input is used as the
    base. If the base value is 0 the result is defined as 0.0.
    """

    def __init__(self, period: int = 9):
        self._period = validate_period(period)
        self._buffer: list[float] = [0.0] * self._period
        self._index = 0
        self._count = 0

    def update(self, value: PriceInput) -> float:
        x = price_of(value)

        if self._count < self._period:
            previous = x if self._count == 0 else self._buffer[0]
            self._count += 1
        else:
            # Slot about to be overwritten holds the value `period` steps back
            previous = self._buffer[self._index]

        self._buffer[self._index] = x
        self._index = (self._index + 1) % self._period

        if previous == 0.0:
            return 0.0
        return (x - previous) / previous * 100.0

    def reset(self) -> None:
        for i in range(self._period):
            self._buffer[i] = 0.0
        self._index = 0
        self._count = 0

    def label(self) -> str:
        return f"ROC({self._period})"
