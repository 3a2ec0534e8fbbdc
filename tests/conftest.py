import pytest

from streamta.marketdata import Bar


def make_bar(i: int) -> Bar:
    """
    Deterministic bar series with monotonically increasing prices.
    """
    base = 100.0 + i
    return Bar(
        open=base,
        high=base + 0.5,
        low=base - 0.5,
        close=base + 0.2,
        volume=1000.0,
        timestamp=f"2025-01-01T00:{i % 60:02d}:00Z",
    )


@pytest.fixture
def bar_factory():
    """
    Returns a function: (i:int) -> Bar
    """
    return make_bar


@pytest.fixture
def make_bars(bar_factory):
    """
    Returns a function: (n:int, start:int=0) -> list[Bar]
    """
    def _make(n: int, start: int = 0) -> list[Bar]:
        return [bar_factory(i) for i in range(start, start + n)]

    return _make


@pytest.fixture
def zigzag_closes() -> list[float]:
    """A fixed sequence mixing rises, falls, zeros and negatives."""
    return [
        10.0, 9.4, 23.1, 0.0, 0.0, 91.837261, 0.0, 0.5, -1.5, 25.1,
        -84.1235, 101.0, 78.0, 1.0, 6.232,
    ]
