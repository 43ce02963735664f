"""Technical indicators and risk metrics over ordered price series"""

from .bands import bollinger_bands
from .calculator import IndicatorEngine
from .moving_averages import ema, sma, standard_deviation
from .oscillators import RSI_MAX, RSI_NEUTRAL, macd, rsi
from .risk import position_size, risk_reward_ratio, sharpe_ratio

__all__ = [
    "IndicatorEngine",
    "RSI_MAX",
    "RSI_NEUTRAL",
    "bollinger_bands",
    "ema",
    "macd",
    "position_size",
    "risk_reward_ratio",
    "rsi",
    "sharpe_ratio",
    "sma",
    "standard_deviation",
]
