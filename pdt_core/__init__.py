"""
pdt_core: pattern day trading compliance and technical indicators.

Two independent engines:
- PDTComplianceEngine decides whether an account's orders may complete
  another day trade inside the rolling window.
- IndicatorEngine computes moving averages, oscillators, bands and risk
  metrics over price series.
"""

from .compliance import AccountSnapshot, PDTComplianceEngine
from .indicators import IndicatorEngine
from .models import Decision, Order, OrderSide, PDTStatus, PriceSeries

__version__ = "0.1.0"

__all__ = [
    "AccountSnapshot",
    "Decision",
    "IndicatorEngine",
    "Order",
    "OrderSide",
    "PDTComplianceEngine",
    "PDTStatus",
    "PriceSeries",
    "__version__",
]
