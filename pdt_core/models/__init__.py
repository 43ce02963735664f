"""Value types shared by the compliance and indicator engines."""

from .decisions import (
    UNLIMITED,
    BlockReason,
    Decision,
    EligibilityState,
    PDTStatus,
    RemainingDayTrades,
)
from .indicators import BollingerBands, IndicatorSnapshot, MACDResult
from .market import PricePoint, PriceSeries
from .orders import DayTrade, OpenPosition, Order, OrderSide, validate_order

__all__ = [
    "UNLIMITED",
    "BlockReason",
    "BollingerBands",
    "DayTrade",
    "Decision",
    "EligibilityState",
    "IndicatorSnapshot",
    "MACDResult",
    "OpenPosition",
    "Order",
    "OrderSide",
    "PDTStatus",
    "PricePoint",
    "PriceSeries",
    "RemainingDayTrades",
    "validate_order",
]
