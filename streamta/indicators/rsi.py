"""Relative Strength Index (RSI) indicator implementation."""

from .base import Indicator, PriceInput, price_of
from .ema import EMA


class RSI(Indicator):
    """
    Relative Strength Index.

    RSI = 100 * up_ema / (up_ema + down_ema)

    where up_ema / down_ema are EMAs of the per-step gains and losses.

    Notes:
    - The first input has no previous value; both EMAs are seeded with a
      small equal move (0.1), so the first RSI is 50.0.
    - If both EMAs decay to exactly 0 (flat prices, period 1), returns 50.0.
    """

    _SEED_MOVE = 0.1

    def __init__(self, period: int = 14):
        self._up_ema = EMA(period)
        self._down_ema = EMA(period)
        self._prev: float | None = None

    @property
    def period(self) -> int:
        return self._up_ema.period

    def update(self, value: PriceInput) -> float:
        x = price_of(value)

        if self._prev is None:
            up = down = self._SEED_MOVE
        else:
            up = max(x - self._prev, 0.0)
            down = max(self._prev - x, 0.0)
        self._prev = x

        avg_up = self._up_ema.update(up)
        avg_down = self._down_ema.update(down)

        total = avg_up + avg_down
        if total == 0.0:
            return 50.0
        return 100.0 * avg_up / total

    def reset(self) -> None:
        self._up_ema.reset()
        self._down_ema.reset()
        self._prev = None

    def label(self) -> str:
        return f"RSI({self.period})"
