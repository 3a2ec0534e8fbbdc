"""Money Flow Index (MFI) indicator implementation."""

from .base import (
    Indicator,
    SupportsOHLCV,
    typical_price_of,
    validate_period,
    volume_of,
)


class MoneyFlowIndex(Indicator):
    """
    Money Flow Index - volume-weighted momentum (range: 0 to 100).

    Raw money flow is typical price * volume, counted as positive when the
    typical price rose against the previous bar and negative when it fell.
    Over the last `period` flows:

      MFI = 100 - 100 / (1 + positive_flow / negative_flow)

    Notes:
    - The first bar has nothing to compare against and returns 50.0.
    - No flow at all is neutral (50.0); no negative flow is 100.0.
    """

    def __init__(self, period: int = 14):
        self._period = validate_period(period)
        self._positive_flows: list[float] = [0.0] * self._period
        self._negative_flows: list[float] = [0.0] * self._period
        self._index = 0
        self._prev_typical_price: float | None = None

    def update(self, value: SupportsOHLCV) -> float:
        typical_price = typical_price_of(value)
        volume = volume_of(value)

        if self._prev_typical_price is None:
            self._prev_typical_price = typical_price
            return 50.0

        raw_money_flow = typical_price * volume
        positive = negative = 0.0
        if typical_price > self._prev_typical_price:
            positive = raw_money_flow
        elif typical_price < self._prev_typical_price:
            negative = raw_money_flow
        self._prev_typical_price = typical_price

        self._positive_flows[self._index] = positive
        self._negative_flows[self._index] = negative
        self._index = (self._index + 1) % self._period

        positive_mf = sum(self._positive_flows)
        negative_mf = sum(self._negative_flows)

        if negative_mf == 0.0:
            # If there is no flow at all, treat as neutral.
            if positive_mf == 0.0:
                return 50.0
            return 100.0

        money_flow_ratio = positive_mf / negative_mf
        return 100.0 - (100.0 / (1.0 + money_flow_ratio))

    def reset(self) -> None:
        for i in range(self._period):
            self._positive_flows[i] = 0.0
            self._negative_flows[i] = 0.0
        self._index = 0
        self._prev_typical_price = None

    def label(self) -> str:
        return f"MFI({self._period})"
