"""Bollinger Bands indicator implementation."""

from .base import (
    Indicator,
    PriceInput,
    format_number,
    validate_multiplier,
)
from .standard_deviation import StandardDeviation


class BollingerBands(Indicator):
    """
    Bollinger Bands (rolling mean +/- multiplier * population standard deviation).

    Returns a dict:
      - average: mean of the window
      - upper:   average + multiplier * std
      - lower:   average - multiplier * std
    """

    def __init__(self, period: int = 9, multiplier: float = 2.0):
        self._sd = StandardDeviation(period)
        self.multiplier = validate_multiplier(multiplier)

    @property
    def period(self) -> int:
        return self._sd.period

    def update(self, value: PriceInput) -> dict[str, float]:
        std = self._sd.update(value)
        mean = self._sd.mean

        return {
            "average": mean,
            "upper": mean + self.multiplier * std,
            "lower": mean - self.multiplier * std,
        }

    def reset(self) -> None:
        self._sd.reset()

    def label(self) -> str:
        return f"BB({self.period}, {format_number(self.multiplier)})"
