# streamta/indicators/macd.py
"""
MACD (Moving Average Convergence Divergence) indicator implementation.
"""

from .base import Indicator, PriceInput, price_of
from .ema import EMA


class MACD(Indicator):
    """
    Moving Average Convergence Divergence.

    Tracks the gap between a fast and a slow EMA of the input, plus an EMA
    of that gap:

        macd      = EMA(fast) - EMA(slow)
        signal    = EMA(signal) of macd
        histogram = macd - signal

    Args:
        fast: Fast EMA period (default: 12)
        slow: Slow EMA period (default: 26)
        signal: Signal EMA period (default: 9)

    Example:
        macd = MACD(fast=12, slow=26, signal=9)

        for bar in bars:
            out = macd.update(bar)
            if out["histogram"] > 0:
                ...
    """

    def __init__(self, fast: int = 12, slow: int = 26, signal: int = 9):
        self._fast_ema = EMA(fast)
        self._slow_ema = EMA(slow)
        self._signal_ema = EMA(signal)

    @property
    def period(self) -> int:
        """The slow EMA period, the longest horizon involved."""
        return self._slow_ema.period

    def update(self, value: PriceInput) -> dict[str, float]:
        x = price_of(value)

        line = self._fast_ema.update(x) - self._slow_ema.update(x)
        signal = self._signal_ema.update(line)

        return {"macd": line, "signal": signal, "histogram": line - signal}

    def reset(self) -> None:
        self._fast_ema.reset()
        self._slow_ema.reset()
        self._signal_ema.reset()

    def label(self) -> str:
        return (
            f"MACD({self._fast_ema.period}, {self._slow_ema.period}, "
            f"{self._signal_ema.period})"
        )
