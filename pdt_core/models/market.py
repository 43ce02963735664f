"""Price series inputs for the indicator engine."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional


@dataclass(frozen=True)
class PricePoint:
    """One sample of a price series."""
    price: float
    ts: Optional[datetime] = None
    volume: Optional[float] = None
    bid: Optional[float] = None
    ask: Optional[float] = None

    @property
    def spread(self) -> Optional[float]:
        """Ask minus bid, None if either side is missing."""
        if self.bid is None or self.ask is None:
            return None
        return self.ask - self.bid


@dataclass(frozen=True)
class PriceSeries:
    """Ordered (oldest first) samples for one symbol."""
    symbol: str
    points: tuple[PricePoint, ...] = field(default_factory=tuple)

    @classmethod
    def from_prices(cls, symbol: str, prices: Iterable[float]) -> "PriceSeries":
        return cls(symbol=symbol, points=tuple(PricePoint(price=float(p)) for p in prices))

    def __len__(self) -> int:
        return len(self.points)

    def prices(self) -> list[float]:
        return [p.price for p in self.points]

    def volumes(self) -> list[float]:
        """Volumes of the samples that carry one."""
        return [p.volume for p in self.points if p.volume is not None]

    def returns(self) -> list[float]:
        """Simple period-over-period returns; samples at price 0 are skipped."""
        prices = self.prices()
        return [
            (curr - prev) / prev
            for prev, curr in zip(prices, prices[1:])
            if prev != 0
        ]
