# streamta/marketdata.py
"""
Market data records consumed by indicators.

A Bar is a single OHLCV observation. It is validated once, at construction,
so indicators can assume every bar they receive is internally consistent.
"""

from dataclasses import dataclass

from .errors import InvalidBar


@dataclass(frozen=True)
class Bar:
    """
    Represents a single OHLCV bar.

    Attributes:
        open: Opening price
        high: Highest price during period
        low: Lowest price during period
        close: Closing price
        volume: Traded volume (or 0 if unavailable)
        timestamp: Optional ISO 8601 timestamp, carried for display only

    Raises:
        InvalidBar: if low <= open <= high, low <= close <= high or
            volume >= 0 does not hold
    """

    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0
    timestamp: str | None = None

    def __post_init__(self):
        if not (self.low <= self.open <= self.high):
            raise InvalidBar(
                f"open {self.open} outside [low {self.low}, high {self.high}]"
            )
        if not (self.low <= self.close <= self.high):
            raise InvalidBar(
                f"close {self.close} outside [low {self.low}, high {self.high}]"
            )
        if not (self.volume >= 0):
            raise InvalidBar(f"volume must be >= 0, got {self.volume}")

    @property
    def typical_price(self) -> float:
        """Typical price (HLC/3), used by CCI, MFI and Keltner channels."""
        return (self.high + self.low + self.close) / 3

    def __repr__(self) -> str:
        return (
            f"Bar(timestamp={self.timestamp}, "
            f"O={self.open:.5f}, H={self.high:.5f}, "
            f"L={self.low:.5f}, C={self.close:.5f}, "
            f"V={self.volume:.0f})"
        )
