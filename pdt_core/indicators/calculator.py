"""Indicator engine coordinating all indicator calculations"""

from collections.abc import Sequence
from typing import Optional, Union

import structlog

from ..config.defaults import IndicatorParams
from ..models.indicators import BollingerBands, IndicatorSnapshot, MACDResult
from ..models.market import PriceSeries
from . import bands, moving_averages, oscillators, risk

logger = structlog.get_logger(__name__)

SeriesLike = Union[PriceSeries, Sequence[float]]


def _as_prices(series: SeriesLike) -> list[float]:
    if isinstance(series, PriceSeries):
        return series.prices()
    return list(series)


def _default(value, fallback):
    return fallback if value is None else value


class IndicatorEngine:
    """
    Stateless facade over the indicator functions with configured defaults.

    Holds no per-series state, so one instance can be shared across threads.
    """

    def __init__(self, config: Optional[IndicatorParams] = None):
        self.config = config or IndicatorParams()

    def sma(self, series: SeriesLike, period: int) -> list[float]:
        return moving_averages.sma(_as_prices(series), period)

    def ema(self, series: SeriesLike, period: int) -> list[float]:
        return moving_averages.ema(_as_prices(series), period)

    def rsi(self, series: SeriesLike, period: Optional[int] = None) -> float:
        return oscillators.rsi(_as_prices(series), _default(period, self.config.rsi_period))

    def bollinger_bands(
        self,
        series: SeriesLike,
        period: Optional[int] = None,
        std_dev_multiplier: Optional[float] = None,
    ) -> BollingerBands:
        if std_dev_multiplier is None:
            std_dev_multiplier = self.config.bollinger_std_multiplier
        return bands.bollinger_bands(
            _as_prices(series),
            _default(period, self.config.bollinger_period),
            std_dev_multiplier,
        )

    def macd(
        self,
        series: SeriesLike,
        fast: Optional[int] = None,
        slow: Optional[int] = None,
        signal: Optional[int] = None,
    ) -> MACDResult:
        return oscillators.macd(
            _as_prices(series),
            _default(fast, self.config.macd_fast),
            _default(slow, self.config.macd_slow),
            _default(signal, self.config.macd_signal),
        )

    def sharpe_ratio(
        self,
        returns: Sequence[float],
        risk_free_rate: Optional[float] = None,
        trading_days_per_year: Optional[int] = None,
    ) -> float:
        if risk_free_rate is None:
            risk_free_rate = self.config.risk_free_rate
        return risk.sharpe_ratio(
            returns,
            risk_free_rate,
            _default(trading_days_per_year, self.config.trading_days_per_year),
        )

    def position_size(self, account_value: float, risk_percentage: float,
                      entry_price: float, stop_loss_price: float) -> int:
        return risk.position_size(account_value, risk_percentage, entry_price, stop_loss_price)

    def risk_reward_ratio(self, entry: float, stop_loss: float, take_profit: float) -> float:
        return risk.risk_reward_ratio(entry, stop_loss, take_profit)

    def warmup_period(self) -> int:
        """Minimum number of samples for every snapshot field to be real data"""
        return max(
            self.config.rsi_period + 1,
            self.config.bollinger_period,
            self.config.macd_slow + self.config.macd_signal - 1,
        )

    def is_warmed_up(self, series: SeriesLike) -> bool:
        return len(_as_prices(series)) >= self.warmup_period()

    def snapshot(self, series: PriceSeries, period: Optional[int] = None) -> IndicatorSnapshot:
        """
        Calculate the latest value of every indicator for a series

        Args:
            series: Price series to analyze
            period: Moving-average period for the sma/ema fields
                    (defaults to the Bollinger period)

        Returns:
            IndicatorSnapshot; fields without enough history stay None and
            rsi keeps its neutral sentinel
        """
        prices = series.prices()
        ma_period = _default(period, self.config.bollinger_period)

        sma_values = moving_averages.sma(prices, ma_period)
        ema_values = moving_averages.ema(prices, ma_period)
        bb = self.bollinger_bands(prices)
        macd_result = self.macd(prices)

        snapshot = IndicatorSnapshot(
            symbol=series.symbol,
            sample_count=len(prices),
            warmup_period=self.warmup_period(),
            timestamp=series.points[-1].ts if series.points else None,
            last_price=prices[-1] if prices else None,
            sma=sma_values[-1] if sma_values else None,
            ema=ema_values[-1] if ema_values else None,
            rsi=self.rsi(prices),
            bollinger_upper=bb.upper[-1] if bb.upper else None,
            bollinger_middle=bb.middle[-1] if bb.middle else None,
            bollinger_lower=bb.lower[-1] if bb.lower else None,
            macd=macd_result.macd[-1] if macd_result.macd else None,
            macd_signal=macd_result.signal[-1] if macd_result.signal else None,
            macd_histogram=macd_result.histogram[-1] if macd_result.histogram else None,
        )

        if not snapshot.has_sufficient_data():
            logger.debug(
                "Indicator snapshot computed during warm-up",
                symbol=series.symbol,
                sample_count=snapshot.sample_count,
                warmup_period=snapshot.warmup_period,
            )

        return snapshot
