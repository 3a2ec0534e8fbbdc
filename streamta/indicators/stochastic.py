"""Fast and Slow Stochastic Oscillator indicator implementations."""

from .base import Indicator, PriceInput, price_of
from .ema import EMA
from .extremum import Maximum, Minimum


class FastStochastic(Indicator):
    """
    Fast Stochastic Oscillator (%K).

    %K = 100 * (close - lowest_low) / (highest_high - lowest_low) over period

    Notes:
    - If highest_high == lowest_low, %K is defined as 50.0 (avoids division-by-zero).
    """

    def __init__(self, period: int = 14):
        self._min = Minimum(period)
        self._max = Maximum(period)

    @property
    def period(self) -> int:
        return self._min.period

    def update(self, value: PriceInput) -> float:
        lowest_low = self._min.update(value)
        highest_high = self._max.update(value)
        close = price_of(value)

        denom = highest_high - lowest_low
        if denom == 0.0:
            return 50.0
        return 100.0 * (close - lowest_low) / denom

    def reset(self) -> None:
        self._min.reset()
        self._max.reset()

    def label(self) -> str:
        return f"FAST_STOCH({self.period})"


class SlowStochastic(Indicator):
    """Slow Stochastic Oscillator: an EMA of the fast %K."""

    def __init__(self, stochastic_period: int = 14, ema_period: int = 3):
        self._fast = FastStochastic(stochastic_period)
        self._ema = EMA(ema_period)

    @property
    def period(self) -> int:
        return self._fast.period

    def update(self, value: PriceInput) -> float:
        return self._ema.update(self._fast.update(value))

    def reset(self) -> None:
        self._fast.reset()
        self._ema.reset()

    def label(self) -> str:
        return f"SLOW_STOCH({self._fast.period}, {self._ema.period})"
