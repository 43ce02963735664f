"""RSI and MACD oscillators"""

from collections.abc import Sequence

from ..models.indicators import MACDResult
from .moving_averages import check_period, ema

RSI_NEUTRAL = 50.0
RSI_MAX = 100.0


def rsi(series: Sequence[float], period: int = 14) -> float:
    """
    Calculate the Relative Strength Index with Wilder smoothing

    Average gain and loss are seeded with the simple mean of the first
    `period` price changes and then smoothed as
    avg = (avg * (period - 1) + change) / period for every later change.

    Sentinels (documented contract, not errors):
        - fewer than period + 1 samples: 50.0 (neutral)
        - average loss exactly 0: 100.0 (no downside)

    Callers that need to tell "neutral" apart from "not enough data" must
    check len(series) themselves.

    Args:
        series: Prices in chronological order
        period: Look-back period (default 14)

    Returns:
        RSI value in [0, 100] for the last sample
    """
    check_period(period)

    values = list(series)
    if len(values) < period + 1:
        return RSI_NEUTRAL

    changes = [curr - prev for prev, curr in zip(values, values[1:])]

    avg_gain = sum(max(c, 0.0) for c in changes[:period]) / period
    avg_loss = sum(max(-c, 0.0) for c in changes[:period]) / period

    for change in changes[period:]:
        avg_gain = (avg_gain * (period - 1) + max(change, 0.0)) / period
        avg_loss = (avg_loss * (period - 1) + max(-change, 0.0)) / period

    if avg_loss == 0:
        return RSI_MAX

    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def macd(
    series: Sequence[float],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> MACDResult:
    """
    Calculate MACD, its signal line and histogram

    All three sequences pair their inputs by list index:
    macd[i] = ema_fast[i] - ema_slow[i], signal is the EMA of the macd line
    and histogram[i] = macd[i] - signal[i]. Each is as long as the shorter
    of its inputs; nothing is padded.

    Args:
        series: Prices in chronological order
        fast: Fast EMA period (default 12)
        slow: Slow EMA period (default 26)
        signal: Signal EMA period (default 9)

    Returns:
        MACDResult; all three lists empty when there is not enough data
    """
    check_period(fast, "fast")
    check_period(slow, "slow")
    check_period(signal, "signal")

    values = list(series)
    ema_fast = ema(values, fast)
    ema_slow = ema(values, slow)

    macd_line = [f - s for f, s in zip(ema_fast, ema_slow)]
    signal_line = ema(macd_line, signal)
    histogram = [m - s for m, s in zip(macd_line, signal_line)]

    return MACDResult(macd=macd_line, signal=signal_line, histogram=histogram)
