"""Sliding-window Minimum and Maximum indicators."""

import abc
import math

from .base import Indicator, PriceInput, price_of, validate_period


class _WindowExtremum(Indicator):
    """
    Sliding-window extremum over a circular buffer.

    The buffer starts filled with a sentinel that can never win against a
    finite input, so slots not yet written are ignored without a counter.
    The index of the current extremum is cached; the buffer is only
    rescanned when the extremum itself is overwritten by a less extreme
    value, which makes updates O(1) amortized.
    """

    _sentinel: float
    _field: str
    _name: str

    def __init__(self, period: int = 14):
        self._period = validate_period(period)
        self._buffer: list[float] = [self._sentinel] * self._period
        self._index = 0
        self._extremum_index = 0

    @staticmethod
    @abc.abstractmethod
    def _beats(candidate: float, current: float) -> bool:
        """True if `candidate` is strictly more extreme than `current`."""
        raise NotImplementedError

    def _find_extremum_index(self) -> int:
        best = self._sentinel
        index = 0
        for i, value in enumerate(self._buffer):
            if self._beats(value, best):
                best = value
                index = i
        return index

    def update(self, value: PriceInput) -> float:
        x = price_of(value, self._field)
        self._buffer[self._index] = x

        if self._beats(x, self._buffer[self._extremum_index]):
            self._extremum_index = self._index
        elif self._extremum_index == self._index:
            # The old extremum was just evicted
            self._extremum_index = self._find_extremum_index()

        self._index = (self._index + 1) % self._period

        return self._buffer[self._extremum_index]

    def reset(self) -> None:
        for i in range(self._period):
            self._buffer[i] = self._sentinel
        self._index = 0
        self._extremum_index = 0

    def label(self) -> str:
        return f"{self._name}({self._period})"


class Minimum(_WindowExtremum):
    """
    Lowest value over the last `period` inputs.

    Bars contribute their low; bare numbers contribute themselves.

    Example:
        low = Minimum(period=3)
        low.update(10.0)  # 10.0
        low.update(11.0)  # 10.0
        low.update(12.0)  # 10.0
        low.update(13.0)  # 11.0
    """

    _sentinel = math.inf
    _field = "low"
    _name = "MIN"

    @staticmethod
    def _beats(candidate: float, current: float) -> bool:
        return candidate < current


class Maximum(_WindowExtremum):
    """Highest value over the last `period` inputs. Bars contribute their high."""

    _sentinel = -math.inf
    _field = "high"
    _name = "MAX"

    @staticmethod
    def _beats(candidate: float, current: float) -> bool:
        return candidate > current
