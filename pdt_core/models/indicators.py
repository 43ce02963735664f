"""Data models for indicator results"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class BollingerBands:
    """Parallel band sequences aligned with the SMA of the same period."""
    upper: list[float] = field(default_factory=list)
    middle: list[float] = field(default_factory=list)
    lower: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.middle)


@dataclass(frozen=True)
class MACDResult:
    """MACD line, signal line and histogram, paired by list index."""
    macd: list[float] = field(default_factory=list)
    signal: list[float] = field(default_factory=list)
    histogram: list[float] = field(default_factory=list)


@dataclass
class IndicatorSnapshot:
    """Latest indicator values for a price series"""
    symbol: str
    sample_count: int
    warmup_period: int
    timestamp: Optional[datetime] = None
    last_price: Optional[float] = None
    sma: Optional[float] = None
    ema: Optional[float] = None
    rsi: float = 50.0  # Neutral sentinel until enough samples exist
    bollinger_upper: Optional[float] = None
    bollinger_middle: Optional[float] = None
    bollinger_lower: Optional[float] = None
    macd: Optional[float] = None
    macd_signal: Optional[float] = None
    macd_histogram: Optional[float] = None

    def has_sufficient_data(self) -> bool:
        """True once every indicator was computed from real history, not a sentinel."""
        return self.sample_count >= self.warmup_period

    def bollinger_percent_b(self) -> Optional[float]:
        """Position of the last price inside the bands (0 = lower, 1 = upper)."""
        if (self.last_price is None or self.bollinger_upper is None
                or self.bollinger_lower is None):
            return None

        width = self.bollinger_upper - self.bollinger_lower
        if width == 0:
            return 0.5

        return (self.last_price - self.bollinger_lower) / width

    def is_overbought(self, threshold: float = 70.0) -> bool:
        return self.has_sufficient_data() and self.rsi >= threshold

    def is_oversold(self, threshold: float = 30.0) -> bool:
        return self.has_sufficient_data() and self.rsi <= threshold
