"""
Trading calendars for session-date arithmetic.

Every "day" the compliance engine counts is a trading day: weekends and
exchange holidays never occupy a slot in the rolling window.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta
from functools import lru_cache
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from ..config.defaults import CalendarParams
from ..errors import ConfigurationError
from ..utils.time import ensure_aware


class TradingCalendar(ABC):
    """Base class: subclasses only decide which dates are sessions."""

    def __init__(self, timezone_name: str = "America/New_York"):
        self.timezone_name = timezone_name
        self.timezone = ZoneInfo(timezone_name)

    @abstractmethod
    def is_trading_day(self, day: date) -> bool:
        """Return True if the exchange holds a regular session on this date."""

    def session_date(self, ts: datetime) -> date:
        """Calendar date of a timestamp in the exchange timezone."""
        return ensure_aware(ts).astimezone(self.timezone).date()

    def trading_session(self, ts: datetime) -> date:
        """
        Session an instant trades in.

        Instants on weekends and holidays roll forward to the next session, so
        the result is always a trading day.
        """
        day = self.session_date(ts)
        if self.is_trading_day(day):
            return day
        return self.next_trading_day(day)

    def previous_trading_day(self, day: date) -> date:
        """Closest trading day strictly before `day`."""
        cursor = day - timedelta(days=1)
        while not self.is_trading_day(cursor):
            cursor -= timedelta(days=1)
        return cursor

    def next_trading_day(self, day: date) -> date:
        """Closest trading day strictly after `day`."""
        cursor = day + timedelta(days=1)
        while not self.is_trading_day(cursor):
            cursor += timedelta(days=1)
        return cursor

    def add_trading_days(self, day: date, count: int) -> date:
        """
        Step forward `count` trading days from `day`.

        Args:
            day: Starting date (need not be a trading day)
            count: Number of sessions to advance, non-negative

        Returns:
            The date reached; `day` itself when count is 0
        """
        if count < 0:
            raise ValueError("count must be non-negative")

        cursor = day
        for _ in range(count):
            cursor = self.next_trading_day(cursor)
        return cursor

    def window_start(self, day: date, length: int) -> date:
        """
        First session of the trailing window of `length` trading days ending on `day`.

        `day` counts as the window's last slot only if it is itself a trading day.
        """
        if length <= 0:
            raise ValueError("length must be positive")

        cursor = day if self.is_trading_day(day) else self.previous_trading_day(day)
        for _ in range(length - 1):
            cursor = self.previous_trading_day(cursor)
        return cursor

    def in_window(self, candidate: date, day: date, length: int) -> bool:
        """True if `candidate` falls inside the trailing window ending on `day`."""
        return self.window_start(day, length) <= candidate <= day

    def trading_days_between(self, start: date, end: date) -> list[date]:
        """All trading days in [start, end]."""
        days = []
        cursor = start
        while cursor <= end:
            if self.is_trading_day(cursor):
                days.append(cursor)
            cursor += timedelta(days=1)
        return days


class WeekdayCalendar(TradingCalendar):
    """Monday-Friday sessions minus an explicit holiday list."""

    def __init__(self, holidays: Iterable[date] = (), timezone_name: str = "America/New_York"):
        super().__init__(timezone_name)
        self.holidays = frozenset(holidays)

    def is_trading_day(self, day: date) -> bool:
        return day.weekday() < 5 and day not in self.holidays


class NYSECalendar(WeekdayCalendar):
    """US equity market calendar with computed full-day NYSE holidays."""

    def is_trading_day(self, day: date) -> bool:
        if not super().is_trading_day(day):
            return False
        return day not in us_equity_holidays(day.year)


def _nth_weekday_of_month(year: int, month: int, weekday: int, occurrence: int) -> date:
    first = date(year, month, 1)
    offset = (weekday - first.weekday()) % 7
    return date(year, month, 1 + offset + (occurrence - 1) * 7)


def _last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)
    cursor = next_month - timedelta(days=1)
    while cursor.weekday() != weekday:
        cursor -= timedelta(days=1)
    return cursor


def _observed(day: date) -> date:
    # Saturday holidays move to Friday, Sunday holidays to Monday
    if day.weekday() == 5:
        return day - timedelta(days=1)
    if day.weekday() == 6:
        return day + timedelta(days=1)
    return day


def _easter_sunday(year: int) -> date:
    # Anonymous Gregorian algorithm
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day_num = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day_num)


@lru_cache(maxsize=64)
def us_equity_holidays(year: int) -> frozenset:
    """
    Full-day NYSE closures for a year.

    New Year's Day falling on a Saturday is not observed on the preceding
    Friday, matching NYSE practice.
    """
    holidays = {
        _nth_weekday_of_month(year, 1, 0, 3),           # Martin Luther King Jr. Day
        _nth_weekday_of_month(year, 2, 0, 3),           # Washington's Birthday
        _easter_sunday(year) - timedelta(days=2),       # Good Friday
        _last_weekday_of_month(year, 5, 0),             # Memorial Day
        _observed(date(year, 7, 4)),                    # Independence Day
        _nth_weekday_of_month(year, 9, 0, 1),           # Labor Day
        _nth_weekday_of_month(year, 11, 3, 4),          # Thanksgiving
        _observed(date(year, 12, 25)),                  # Christmas
    }

    new_year = date(year, 1, 1)
    if new_year.weekday() != 5:
        holidays.add(_observed(new_year))

    if year >= 2022:
        holidays.add(_observed(date(year, 6, 19)))      # Juneteenth

    return frozenset(holidays)


def create_calendar(params: Optional[CalendarParams] = None) -> TradingCalendar:
    """Build the calendar named by the configuration."""
    params = params or CalendarParams()
    if params.exchange == "NYSE":
        return NYSECalendar(timezone_name=params.timezone)
    if params.exchange == "WEEKDAYS":
        return WeekdayCalendar(timezone_name=params.timezone)
    raise ConfigurationError(f"Unknown exchange calendar: {params.exchange}")
