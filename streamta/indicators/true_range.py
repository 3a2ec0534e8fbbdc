"""True Range indicator implementation."""

from .base import Indicator, PriceInput, price_of


class TrueRange(Indicator):
    """
    True Range (TR), the single-bar volatility primitive.

      TR = high - low                                    (first bar)
      TR = max(
        high - low,
        abs(high - prev_close),
        abs(prev_close - low),
      )                                                  (thereafter)

    For bare numbers high == low == close, so TR is 0 for the first input
    and abs(x - prev) afterwards. TR has no window; `period` is 0.
    """

    def __init__(self):
        self._prev_close: float | None = None

    def update(self, value: PriceInput) -> float:
        high = price_of(value, "high")
        low = price_of(value, "low")
        close = price_of(value, "close")

        if self._prev_close is None:
            tr = high - low
        else:
            tr = max(
                high - low,
                abs(high - self._prev_close),
                abs(self._prev_close - low),
            )

        self._prev_close = close
        return tr

    def reset(self) -> None:
        self._prev_close = None

    def label(self) -> str:
        return "TRUE_RANGE()"
