"""Tests for Bollinger Bands."""

import math

import pytest

from pdt_core.errors import InvalidIndicatorParameterError
from pdt_core.indicators import bollinger_bands, sma


class TestBollingerBands:
    """Test Bollinger Bands calculation."""

    def test_basic_bands(self) -> None:
        bands = bollinger_bands([1, 2, 3, 4, 5], period=5, std_dev_multiplier=2.0)

        assert bands.middle == [3.0]
        assert bands.upper[0] == pytest.approx(3.0 + 2 * math.sqrt(2))
        assert bands.lower[0] == pytest.approx(3.0 - 2 * math.sqrt(2))

    def test_middle_is_sma(self) -> None:
        series = [float((i * 7) % 10) for i in range(30)]

        bands = bollinger_bands(series, period=10)

        assert bands.middle == sma(series, 10)
        assert len(bands) == len(bands.upper) == len(bands.lower) == 21

    def test_constant_series_collapses(self) -> None:
        bands = bollinger_bands([10.0] * 25)

        assert bands.upper == bands.middle == bands.lower

    def test_symmetry(self) -> None:
        bands = bollinger_bands([float(i ** 2 % 13) for i in range(40)], period=20, std_dev_multiplier=1.5)

        for upper, middle, lower in zip(bands.upper, bands.middle, bands.lower):
            assert upper - middle == pytest.approx(middle - lower)
            assert upper >= middle >= lower

    def test_short_series(self) -> None:
        bands = bollinger_bands([1.0, 2.0], period=20)

        assert len(bands) == 0
        assert bands.upper == []

    def test_invalid_period(self) -> None:
        with pytest.raises(InvalidIndicatorParameterError):
            bollinger_bands([1.0] * 30, period=-1)
