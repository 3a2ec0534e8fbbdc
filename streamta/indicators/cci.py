"""Commodity Channel Index (CCI) indicator implementation."""

from .base import Indicator, PriceInput, typical_price_of
from .mean_absolute_deviation import MeanAbsoluteDeviation
from .sma import SMA

# Lambert's scaling constant: puts most readings inside +/-100
LAMBERT = 0.015


class CommodityChannelIndex(Indicator):
    """
    Commodity Channel Index.

    Distance of the typical price from its moving average, in units of
    mean absolute deviation:

        CCI = (tp - SMA(tp)) / (0.015 * MAD(tp))

    A window with zero deviation reports 0.0.
    """

    def __init__(self, period: int = 14):
        self._sma = SMA(period)
        self._mad = MeanAbsoluteDeviation(period)

    @property
    def period(self) -> int:
        return self._sma.period

    def update(self, value: PriceInput) -> float:
        tp = typical_price_of(value)
        average = self._sma.update(tp)
        deviation = self._mad.update(tp)

        if deviation == 0.0:
            return 0.0
        return (tp - average) / (LAMBERT * deviation)

    def reset(self) -> None:
        self._sma.reset()
        self._mad.reset()

    def label(self) -> str:
        return f"CCI({self.period})"
