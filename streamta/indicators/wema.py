"""Windowed Exponential Moving Average (WEMA) indicator implementation."""

from .base import Indicator, PriceInput, price_of, validate_period


class WEMA(Indicator):
    """
    EMA restricted to the last `period` inputs.

    The output equals what a fresh EMA (k = 2 / (period + 1), seeded with
    its first input) would return if it were run over only the most recent
    `period` values, but is maintained in O(1) per update.

    A fresh EMA over w1..wp weights the oldest value by (1 - k)^(p - 1).
    After one more plain EMA step that weight has decayed to (1 - k)^p, while
    the next oldest value w2, which now seeds the window, should carry
    (1 - k)^(p - 1) = (1 - k)^p + k * (1 - k)^(p - 1). Replacing the dropped
    value's (1 - k)^p share with w2 therefore lands exactly on the fresh EMA
    of the shifted window.
    """

    def __init__(self, period: int = 9):
        self._period = validate_period(period)
        self.k = 2.0 / (self._period + 1.0)
        self._factor = (1.0 - self.k) ** self._period
        self._buffer: list[float] = [0.0] * self._period
        self._index = 0
        self._count = 0
        self._wsum = 0.0

    def update(self, value: PriceInput) -> float:
        x = price_of(value)

        old_val = self._buffer[self._index]
        self._buffer[self._index] = x
        self._index = (self._index + 1) % self._period

        if self._count == 0:
            self._count = 1
            self._wsum = x
            return x

        window_full = self._count >= self._period
        if not window_full:
            self._count += 1

        self._wsum = x * self.k + self._wsum * (1.0 - self.k)

        if window_full:
            # Pretend the dropped value was equal to the oldest value still
            # in the window; buffer[index] is that value after the advance.
            self._wsum -= old_val * self._factor
            self._wsum += self._buffer[self._index] * self._factor

        return self._wsum

    def reset(self) -> None:
        for i in range(self._period):
            self._buffer[i] = 0.0
        self._index = 0
        self._count = 0
        self._wsum = 0.0

    def label(self) -> str:
        return f"WEMA({self._period})"
