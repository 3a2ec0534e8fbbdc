import pytest

from streamta.indicators.true_range import TrueRange
from streamta.marketdata import Bar


def bar(h: float, l: float, c: float) -> Bar:
    return Bar(open=c, high=h, low=l, close=c, volume=1.0)


class TestTrueRange:
    def test_first_bar_is_high_minus_low(self) -> None:
        tr = TrueRange()
        assert tr.update(bar(10.0, 7.5, 9.0)) == pytest.approx(2.5)

    def test_uses_previous_close(self) -> None:
        tr = TrueRange()
        tr.update(bar(10.0, 9.0, 9.5))

        # high - prev_close dominates
        assert tr.update(bar(10.4, 9.8, 10.2)) == pytest.approx(0.9)
        # high - low dominates
        assert tr.update(bar(10.7, 9.4, 9.7)) == pytest.approx(1.3)
        # prev_close - low dominates
        assert tr.update(bar(9.2, 8.1, 8.4)) == pytest.approx(1.6)

    def test_bare_numbers(self) -> None:
        tr = TrueRange()
        assert tr.update(5.0) == 0.0
        assert tr.update(8.0) == 3.0
        assert tr.update(6.5) == 1.5

    def test_reset(self) -> None:
        tr = TrueRange()
        tr.update(bar(10.0, 9.0, 9.5))
        tr.reset()
        assert tr.update(bar(60.0, 15.0, 51.0)) == 45.0

    def test_period_and_label(self) -> None:
        assert TrueRange().period == 0
        assert str(TrueRange()) == "TRUE_RANGE()"
