"""Tests for moving average calculations."""

import math

import pytest

from pdt_core.errors import InvalidIndicatorParameterError
from pdt_core.indicators import ema, sma, standard_deviation


class TestSMA:
    """Test Simple Moving Average calculation."""

    def test_basic_sma(self) -> None:
        assert sma([1, 2, 3, 4, 5], 3) == [2.0, 3.0, 4.0]

    def test_output_length(self) -> None:
        """Output has one value per complete window."""
        series = [float(i) for i in range(50)]
        for period in (1, 5, 20, 50):
            assert len(sma(series, period)) == len(series) - period + 1

    def test_series_shorter_than_period(self) -> None:
        assert sma([1, 2], 3) == []
        assert sma([], 1) == []

    def test_period_one_is_identity(self) -> None:
        assert sma([3.5, 1.25, 8.0], 1) == [3.5, 1.25, 8.0]

    def test_no_drift_on_long_series(self) -> None:
        """Windows are summed independently, so a constant stays constant."""
        series = [0.1] * 10_000
        assert all(value == pytest.approx(0.1, abs=1e-15) for value in sma(series, 7))

    @pytest.mark.parametrize("period", [0, -3, 2.5, True])
    def test_invalid_period(self, period) -> None:
        with pytest.raises(InvalidIndicatorParameterError) as exc_info:
            sma([1, 2, 3], period)

        assert exc_info.value.parameter == "period"
        assert isinstance(exc_info.value, ValueError)


class TestEMA:
    """Test Exponential Moving Average calculation."""

    def test_seeded_with_sma(self) -> None:
        result = ema([1, 2, 3, 4, 5], 3)

        assert result[0] == 2.0
        assert result == pytest.approx([2.0, 3.0, 4.0])

    def test_smoothing(self) -> None:
        """Multiplier is 2 / (period + 1)."""
        result = ema([10, 10, 10, 20], 3)

        assert result == pytest.approx([10.0, 15.0])

    def test_output_length_matches_sma(self) -> None:
        series = [float(i % 7) for i in range(40)]
        assert len(ema(series, 9)) == len(sma(series, 9))

    def test_series_shorter_than_period(self) -> None:
        assert ema([1, 2], 5) == []

    def test_invalid_period(self) -> None:
        with pytest.raises(InvalidIndicatorParameterError):
            ema([1, 2, 3], 0)


class TestStandardDeviation:
    """Test population standard deviation."""

    def test_population_std(self) -> None:
        assert standard_deviation([2, 4, 4, 4, 5, 5, 7, 9]) == 2.0

    def test_constant_series(self) -> None:
        assert standard_deviation([3.0] * 5) == 0.0

    def test_empty(self) -> None:
        assert standard_deviation([]) == 0.0

    def test_single_value(self) -> None:
        assert standard_deviation([42.0]) == 0.0

    def test_two_values(self) -> None:
        assert standard_deviation([1.0, 3.0]) == pytest.approx(1.0)
        assert not math.isclose(standard_deviation([1.0, 3.0]), math.sqrt(2))
