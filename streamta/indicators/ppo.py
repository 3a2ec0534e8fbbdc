"""Percentage Price Oscillator (PPO) indicator implementation."""

from .base import Indicator, PriceInput, price_of
from .ema import EMA


class PPO(Indicator):
    """
    Percentage Price Oscillator: MACD expressed as a percentage of the slow EMA.

      PPO       = (fast_ema - slow_ema) / slow_ema * 100
      Signal    = EMA(signal) of PPO
      Histogram = PPO - Signal

    If the slow EMA is exactly 0 the PPO line is defined as 0.0.
    """

    def __init__(self, fast: int = 12, slow: int = 26, signal: int = 9):
        self._fast_ema = EMA(fast)
        self._slow_ema = EMA(slow)
        self._signal_ema = EMA(signal)

    @property
    def period(self) -> int:
        return self._slow_ema.period

    def update(self, value: PriceInput) -> dict[str, float]:
        x = price_of(value)

        fast = self._fast_ema.update(x)
        slow = self._slow_ema.update(x)
        ppo = 0.0 if slow == 0.0 else (fast - slow) / slow * 100.0
        signal = self._signal_ema.update(ppo)

        return {"ppo": ppo, "signal": signal, "histogram": ppo - signal}

    def reset(self) -> None:
        self._fast_ema.reset()
        self._slow_ema.reset()
        self._signal_ema.reset()

    def label(self) -> str:
        return (
            f"PPO({self._fast_ema.period}, {self._slow_ema.period}, "
            f"{self._signal_ema.period})"
        )
