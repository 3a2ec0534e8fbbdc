"""Mean Absolute Deviation (MAD) indicator implementation."""

from .base import Indicator, PriceInput, price_of, validate_period


class MeanAbsoluteDeviation(Indicator):
    """
    Mean absolute deviation from the window mean.

      MAD = mean(|x_i - mean(x)|) over the last `period` inputs

    The mean is maintained incrementally; the deviation sum needs one pass
    over the window, so updates are O(period).
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

        mean = self._sum / self._count
        # Slots are written in order, so the first `count` hold live values
        deviation = sum(abs(self._buffer[i] - mean) for i in range(self._count))
        return deviation / self._count

    def reset(self) -> None:
        for i in range(self._period):
            self._buffer[i] = 0.0
        self._index = 0
        self._count = 0
        self._sum = 0.0

    def label(self) -> str:
        return f"MAD({self._period})"
