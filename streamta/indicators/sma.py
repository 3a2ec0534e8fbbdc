"""Simple Moving Average (SMA) indicator implementation."""

from .base import Indicator, PriceInput, price_of, validate_period


class SMA(Indicator):
    """
    Simple Moving Average of close prices.

    Keeps a running sum over a circular buffer. Until `period` inputs have
    been seen the average is taken over the inputs so far.
    """

    def __init__(self, period: int = 9):
        self._period = validate_period(period)
        self._buffer: list[float] = [0.0] * self._period
        self._index = 0
        self._count = 0
        self._sum = 0.0

    def update(self, value: PriceInput) -> float:
        x = price_of(value)

        old_val = self._buffer[self._index]
        self._buffer[self._index] = x
        self._index = (self._index + 1) % self._period

        if self._count < self._period:
            self._count += 1

        self._sum = self._sum - old_val + x
        return self._sum / self._count

    def reset(self) -> None:
        for i in range(self._period):
            self._buffer[i] = 0.0
        self._index = 0
        self._count = 0
        self._sum = 0.0

    def label(self) -> str:
        return f"SMA({self._period})"
