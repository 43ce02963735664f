"""Simple and exponential moving averages"""

import math
from collections.abc import Sequence

from ..errors import InvalidIndicatorParameterError


def check_period(period: int, name: str = "period") -> None:
    """Reject non-positive or non-integer look-back periods."""
    if not isinstance(period, int) or isinstance(period, bool) or period <= 0:
        raise InvalidIndicatorParameterError(
            f"{name} must be a positive integer, got {period!r}",
            parameter=name,
            value=period,
        )


def sma(series: Sequence[float], period: int) -> list[float]:
    """
    Calculate a Simple Moving Average

    Each output value is the arithmetic mean of a `period`-wide trailing
    window, so output[i] covers series[i : i + period].

    Args:
        series: Prices in chronological order
        period: Window width

    Returns:
        List of length max(0, len(series) - period + 1); empty if the
        series is shorter than the period
    """
    check_period(period)

    values = list(series)
    if len(values) < period:
        return []

    # Each window is summed from scratch; a sliding sum drifts on long series
    return [
        math.fsum(values[i - period + 1:i + 1]) / period
        for i in range(period - 1, len(values))
    ]


def ema(series: Sequence[float], period: int) -> list[float]:
    """
    Calculate an Exponential Moving Average

    Seeded with the SMA of the first `period` samples, then
    ema[i] = (price[i] - ema[i-1]) * 2 / (period + 1) + ema[i-1].

    Args:
        series: Prices in chronological order
        period: Smoothing period

    Returns:
        List of length max(0, len(series) - period + 1); output[0] lines up
        with series[period - 1]
    """
    check_period(period)

    values = list(series)
    if len(values) < period:
        return []

    multiplier = 2.0 / (period + 1)
    result = [math.fsum(values[:period]) / period]

    for price in values[period:]:
        previous = result[-1]
        result.append((price - previous) * multiplier + previous)

    return result


def standard_deviation(values: Sequence[float]) -> float:
    """
    Population standard deviation (divide by N)

    Returns:
        0.0 for an empty input
    """
    data = list(values)
    if not data:
        return 0.0

    mean = math.fsum(data) / len(data)
    variance = math.fsum((v - mean) ** 2 for v in data) / len(data)
    return math.sqrt(variance)
