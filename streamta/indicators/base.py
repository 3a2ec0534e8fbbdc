"""Base class and input capabilities shared by all indicators."""

import abc
import numbers
from typing import Protocol, runtime_checkable

from streamta.errors import InvalidParameter


@runtime_checkable
class SupportsClose(Protocol):
    """Anything exposing a closing price."""

    close: float


@runtime_checkable
class SupportsOHLC(Protocol):
    """Anything exposing open/high/low/close prices."""

    open: float
    high: float
    low: float
    close: float


@runtime_checkable
class SupportsOHLCV(SupportsOHLC, Protocol):
    """OHLC plus traded volume."""

    volume: float


# A bare number is accepted wherever a price is; it acts as a bar whose
# open, high, low and close are all equal to it.
PriceInput = float | SupportsClose | SupportsOHLC


def price_of(value: PriceInput, field: str = "close") -> float:
    """Return the requested price field, or the number itself for bare numbers."""
    if isinstance(value, numbers.Real):
        return float(value)
    return float(getattr(value, field))


def typical_price_of(value: PriceInput) -> float:
    """(high + low + close) / 3."""
    return (price_of(value, "high") + price_of(value, "low") + price_of(value, "close")) / 3.0


def volume_of(value: SupportsOHLCV) -> float:
    """Return the volume of a volume-capable input."""
    if isinstance(value, numbers.Real):
        raise TypeError("volume-based indicators require a bar with a volume field")
    return float(value.volume)


def validate_period(value: int, name: str = "period") -> int:
    """Return `value` if it is a positive integer, else raise InvalidParameter."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameter(f"{name} must be > 0")
    return int(value)


def validate_multiplier(value: float, name: str = "multiplier") -> float:
    """Return `value` as float if it is a positive real number, else raise InvalidParameter."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"{name} must be a number, got {value!r}")
    if not value > 0:
        raise InvalidParameter(f"{name} must be > 0")
    return float(value)


def format_number(value: float) -> str:
    """Render a parameter compactly for labels: 2.0 -> '2', 2.5 -> '2.5'."""
    return f"{value:g}"


class Indicator(abc.ABC):
    """
    Abstract base class for all streaming indicators.

    Subclasses store their window length in `_period` (0 for indicators
    without a window) and keep all state in fixed-size buffers allocated
    in `__init__`, so `update` never allocates and `reset` never reallocates.
    """

    _period: int = 0

    @property
    def period(self) -> int:
        """Configured window length (0 for indicators without a window)."""
        return self._period

    @abc.abstractmethod
    def update(self, value):
        """Consume one observation and return the latest value(s)."""
        raise NotImplementedError

    @abc.abstractmethod
    def reset(self) -> None:
        """Reset indicator internal state to its just-constructed condition."""
        raise NotImplementedError

    @abc.abstractmethod
    def label(self) -> str:
        """Short canonical label, e.g. ``EMA(9)``."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.label()

    def __repr__(self) -> str:
        return self.label()
