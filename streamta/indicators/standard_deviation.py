"""Standard Deviation (SD) indicator implementation."""

import math

from .base import Indicator, PriceInput, price_of, validate_period


class StandardDeviation(Indicator):
    """
    Population standard deviation (ddof=0) over the last `period` inputs.

    Uses Welford's running mean / sum of squared deviations, extended to a
    sliding window: once the window is full, each update swaps the evicted
    value for the new one in a single step.
    """

    def __init__(self, period: int = 9):
        self._period = validate_period(period)
        self._buffer: list[float] = [0.0] * self._period
        self._index = 0
        self._count = 0
        self._mean = 0.0
        self._m2 = 0.0

    @property
    def mean(self) -> float:
        """Mean of the current window."""
        return self._mean

    def update(self, value: PriceInput) -> float:
        x = price_of(value)

        old_val = self._buffer[self._index]
        self._buffer[self._index] = x
        self._index = (self._index + 1) % self._period

        if self._count < self._period:
            self._count += 1
            delta = x - self._mean
            self._mean += delta / self._count
            self._m2 += delta * (x - self._mean)
        else:
            delta = x - old_val
            old_mean = self._mean
            self._mean += delta / self._period
            self._m2 += delta * (x - self._mean + old_val - old_mean)

        # Rounding can push m2 slightly negative on flat windows
        if self._m2 < 0.0:
            self._m2 = 0.0

        return math.sqrt(self._m2 / self._count)

    def reset(self) -> None:
        for i in range(self._period):
            self._buffer[i] = 0.0
        self._index = 0
        self._count = 0
        self._mean = 0.0
        self._m2 = 0.0

    def label(self) -> str:
        return f"SD({self._period})"
