import math

import pytest

from streamta.errors import InvalidParameter
from streamta.indicators.standard_deviation import StandardDeviation


class TestStandardDeviation:
    def test_rejects_non_positive_period(self) -> None:
        with pytest.raises(InvalidParameter):
            StandardDeviation(period=0)

    def test_known_sequence(self) -> None:
        sd = StandardDeviation(period=4)

        assert sd.update(10.0) == 0.0
        assert sd.update(20.0) == pytest.approx(5.0)
        assert sd.update(30.0) == pytest.approx(8.16496580927726)
        assert sd.update(20.0) == pytest.approx(math.sqrt(50.0))
        # window is now [20, 30, 20, 10]
        assert sd.update(10.0) == pytest.approx(math.sqrt(50.0))
        assert sd.mean == pytest.approx(20.0)

    @pytest.mark.parametrize("period", [3, 6])
    def test_matches_population_std_of_window(self, period: int, zigzag_closes) -> None:
        sd = StandardDeviation(period=period)
        seen: list[float] = []

        for x in zigzag_closes:
            seen.append(x)
            window = seen[-period:]
            mean = sum(window) / len(window)
            expected = math.sqrt(sum((v - mean) ** 2 for v in window) / len(window))
            assert sd.update(x) == pytest.approx(expected, abs=1e-6)
            assert sd.mean == pytest.approx(mean, abs=1e-9)

    def test_flat_window_is_zero(self) -> None:
        sd = StandardDeviation(period=3)
        for _ in range(6):
            v = sd.update(0.1)
        assert v == pytest.approx(0.0, abs=1e-12)

    def test_reset(self) -> None:
        sd = StandardDeviation(period=3)
        sd.update(1.0)
        sd.update(100.0)
        sd.reset()
        assert sd.update(5.0) == 0.0
        assert sd.mean == 5.0

    def test_default_and_label(self) -> None:
        assert StandardDeviation().period == 9
        assert str(StandardDeviation(period=4)) == "SD(4)"
