"""Trading calendars used for all rolling-window day arithmetic."""

from .trading_calendar import (
    NYSECalendar,
    TradingCalendar,
    WeekdayCalendar,
    create_calendar,
    us_equity_holidays,
)

__all__ = [
    "NYSECalendar",
    "TradingCalendar",
    "WeekdayCalendar",
    "create_calendar",
    "us_equity_holidays",
]
