"""
Clock abstractions and timestamp helpers.

The compliance engine never reads the wall clock directly. It asks an injected
clock for "now" so rolling-window boundaries can be driven deterministically in
tests and in historical replays.
"""

import threading
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol


class Clock(Protocol):
    """Anything that can report the current time as an aware datetime."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Manually driven clock for tests and replays.

    Naive datetimes are treated as UTC.
    """

    def __init__(self, now: datetime):
        self._lock = threading.Lock()
        self._now = ensure_aware(now)

    def now(self) -> datetime:
        with self._lock:
            return self._now

    def set(self, now: datetime) -> None:
        """Jump to an absolute instant."""
        with self._lock:
            self._now = ensure_aware(now)

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward and return the new instant."""
        with self._lock:
            self._now = self._now + delta
            return self._now


def ensure_aware(ts: datetime, default_tz: timezone = timezone.utc) -> datetime:
    """
    Attach a timezone to naive datetimes.

    Args:
        ts: Timestamp that may be naive
        default_tz: Timezone assumed for naive values

    Returns:
        Timezone-aware datetime
    """
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        return ts.replace(tzinfo=default_tz)
    return ts


def get_current_time(clock: Optional[Clock] = None) -> datetime:
    """
    Get the current time from a clock, falling back to wall-clock UTC.

    Args:
        clock: Optional injected clock

    Returns:
        Timezone-aware current time
    """
    if clock is not None:
        return ensure_aware(clock.now())

    return datetime.now(timezone.utc)


def format_timestamp(ts: datetime) -> str:
    """
    Format a timestamp for logging and snapshots.

    Args:
        ts: Timestamp to format

    Returns:
        ISO8601 formatted string
    """
    return ts.isoformat()
