"""
Utility functions module.

Time Semantics:
- "Now" always comes from an injected Clock; SystemClock is the production default
- Timestamps are timezone-aware; naive values are treated as UTC
- Session dates are derived by the trading calendar in the exchange timezone
"""

from .time import Clock, FixedClock, SystemClock, ensure_aware, format_timestamp, get_current_time

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "ensure_aware",
    "format_timestamp",
    "get_current_time",
]
