"""Bollinger Bands"""

from collections.abc import Sequence

from ..models.indicators import BollingerBands
from .moving_averages import check_period, sma, standard_deviation


def bollinger_bands(
    series: Sequence[float],
    period: int = 20,
    std_dev_multiplier: float = 2.0,
) -> BollingerBands:
    """
    Calculate Bollinger Bands

    middle is the SMA; upper/lower are middle +/- multiplier times the
    population standard deviation of the same trailing window.

    Args:
        series: Prices in chronological order
        period: Window width (default 20)
        std_dev_multiplier: Band width in standard deviations (default 2)

    Returns:
        BollingerBands aligned with sma(series, period); empty when the
        series is shorter than the period
    """
    check_period(period)

    values = list(series)
    middle = sma(values, period)

    upper = []
    lower = []
    for i, mean in enumerate(middle):
        width = standard_deviation(values[i:i + period]) * std_dev_multiplier
        upper.append(mean + width)
        lower.append(mean - width)

    return BollingerBands(upper=upper, middle=middle, lower=lower)
