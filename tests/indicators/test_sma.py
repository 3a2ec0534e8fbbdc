import pytest

from streamta.errors import InvalidParameter
from streamta.indicators.sma import SMA
from streamta.marketdata import Bar


class TestSMA:
    def test_rejects_non_positive_period(self) -> None:
        with pytest.raises(InvalidParameter):
            SMA(period=0)
        with pytest.raises(ValueError):
            SMA(period=-2)

    def test_known_sequence(self) -> None:
        sma = SMA(period=3)

        # Averages over the inputs seen so far until the window fills
        assert sma.update(4.0) == pytest.approx(4.0)
        assert sma.update(5.0) == pytest.approx(4.5)
        assert sma.update(6.0) == pytest.approx(5.0)
        assert sma.update(6.0) == pytest.approx(17.0 / 3.0)
        assert sma.update(6.0) == pytest.approx(6.0)
        assert sma.update(6.2) == pytest.approx(18.2 / 3.0)

    def test_bars_use_close(self) -> None:
        sma = SMA(period=2)
        sma.update(Bar(open=1.0, high=5.0, low=0.0, close=2.0))
        assert sma.update(Bar(open=1.0, high=5.0, low=0.0, close=4.0)) == pytest.approx(3.0)

    def test_reset(self) -> None:
        sma = SMA(period=4)
        sma.update(5.0)
        sma.update(7.0)
        sma.reset()
        assert sma.update(9.0) == 9.0

    def test_default_and_label(self) -> None:
        assert SMA().period == 9
        assert str(SMA(period=5)) == "SMA(5)"
