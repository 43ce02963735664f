"""Risk and position sizing metrics"""

import math
from collections.abc import Sequence

from .moving_averages import standard_deviation


def sharpe_ratio(
    returns: Sequence[float],
    risk_free_rate: float = 0.02,
    trading_days_per_year: int = 252,
) -> float:
    """
    Calculate the annualized Sharpe ratio of periodic returns

    The annual risk-free rate is de-annualized per trading day and
    subtracted from each return; the mean excess return is divided by the
    population standard deviation of excess returns and scaled by
    sqrt(trading_days_per_year).

    Args:
        returns: Per-period simple returns
        risk_free_rate: Annual risk-free rate (default 0.02)
        trading_days_per_year: Annualization factor (default 252)

    Returns:
        Sharpe ratio; 0.0 for an empty input or zero variance
    """
    data = list(returns)
    if not data or trading_days_per_year <= 0:
        return 0.0

    daily_rf = risk_free_rate / trading_days_per_year
    excess = [r - daily_rf for r in data]
    std_dev = standard_deviation(excess)

    if std_dev == 0:
        return 0.0

    mean_excess = math.fsum(excess) / len(excess)
    return mean_excess / std_dev * math.sqrt(trading_days_per_year)


def position_size(
    account_value: float,
    risk_percentage: float,
    entry_price: float,
    stop_loss_price: float,
) -> int:
    """
    Calculate shares to buy so a stop-out loses `risk_percentage` of the account

    shares = floor(account_value * risk_percentage / 100 / |entry - stop|)

    Returns:
        Whole number of shares; 0 when entry equals stop (undefined risk
        per share) or when the risk budget is not positive
    """
    risk_per_share = abs(entry_price - stop_loss_price)
    if risk_per_share == 0:
        return 0

    risk_amount = account_value * (risk_percentage / 100.0)
    if risk_amount <= 0:
        return 0

    return math.floor(risk_amount / risk_per_share)


def risk_reward_ratio(entry: float, stop_loss: float, take_profit: float) -> float:
    """
    Calculate reward over risk for a planned trade

    Returns:
        |take_profit - entry| / |entry - stop_loss|; 0.0 when risk is 0
    """
    risk = abs(entry - stop_loss)
    if risk == 0:
        return 0.0

    return abs(take_profit - entry) / risk
