import pytest

from streamta.errors import InvalidParameter
from streamta.indicators.mfi import MoneyFlowIndex
from streamta.marketdata import Bar


def bar(price: float, volume: float) -> Bar:
    return Bar(open=price, high=price, low=price, close=price, volume=volume)


class TestMoneyFlowIndex:
    def test_rejects_non_positive_period(self) -> None:
        with pytest.raises(InvalidParameter):
            MoneyFlowIndex(period=0)

    def test_known_sequence(self) -> None:
        mfi = MoneyFlowIndex(period=2)

        assert mfi.update(bar(10.0, 100.0)) == 50.0
        assert mfi.update(bar(11.0, 100.0)) == 100.0
        assert mfi.update(bar(12.0, 50.0)) == 100.0
        # flows now: positive [600], negative [1100]
        expected = 100.0 - 100.0 / (1.0 + 600.0 / 1100.0)
        assert mfi.update(bar(11.0, 100.0)) == pytest.approx(expected)

    def test_flat_prices_are_neutral(self) -> None:
        mfi = MoneyFlowIndex(period=3)
        for _ in range(5):
            assert mfi.update(bar(10.0, 100.0)) == 50.0

    def test_requires_volume(self) -> None:
        with pytest.raises(TypeError):
            MoneyFlowIndex(period=3).update(10.0)

    def test_reset(self) -> None:
        mfi = MoneyFlowIndex(period=2)
        mfi.update(bar(10.0, 100.0))
        mfi.update(bar(9.0, 100.0))
        mfi.reset()
        assert mfi.update(bar(5.0, 10.0)) == 50.0
        assert mfi.update(bar(6.0, 10.0)) == 100.0

    def test_default_and_label(self) -> None:
        assert MoneyFlowIndex().period == 14
        assert str(MoneyFlowIndex(period=10)) == "MFI(10)"
