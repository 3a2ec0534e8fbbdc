"""On-Balance Volume (OBV) indicator implementation."""

from .base import Indicator, SupportsOHLCV, price_of, volume_of


class OnBalanceVolume(Indicator):
    """
    On-Balance Volume: running total of volume signed by the close-to-close move.

    An up close adds the bar's volume, a down close subtracts it and an
    unchanged close leaves the total alone. The first bar has nothing to
    compare against and reports 0.0.

    Needs bars carrying volume. There is no window, so `period` is 0.
    """

    def __init__(self):
        self._prev_close: float | None = None
        self._total: float = 0.0

    def update(self, value: SupportsOHLCV) -> float:
        close = price_of(value)
        volume = volume_of(value)

        if self._prev_close is not None and close != self._prev_close:
            self._total += volume if close > self._prev_close else -volume

        self._prev_close = close
        return self._total

    def reset(self) -> None:
        self._prev_close = None
        self._total = 0.0

    def label(self) -> str:
        return "OBV()"
