"""Pytest configuration and shared fixtures."""

import itertools
from datetime import date, datetime, timezone
from typing import Callable

import pytest

from pdt_core.calendar import NYSECalendar
from pdt_core.compliance import PDTComplianceEngine
from pdt_core.config import ComplianceParams
from pdt_core.models import Order, OrderSide
from pdt_core.utils import FixedClock

# Monday 2024-03-04, 10:00 in New York
MONDAY_OPEN = datetime(2024, 3, 4, 15, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to Monday 2024-03-04 10:00 ET."""
    return FixedClock(MONDAY_OPEN)


@pytest.fixture
def calendar() -> NYSECalendar:
    return NYSECalendar()


@pytest.fixture
def params() -> ComplianceParams:
    return ComplianceParams()


@pytest.fixture
def engine(calendar: NYSECalendar, clock: FixedClock, params: ComplianceParams) -> PDTComplianceEngine:
    """Compliance engine on the NYSE calendar driven by the fixed clock."""
    return PDTComplianceEngine(calendar=calendar, clock=clock, params=params)


@pytest.fixture
def make_order(clock: FixedClock) -> Callable[..., Order]:
    """Factory for orders stamped with the fixed clock's current time."""
    counter = itertools.count(1)

    def _make(side: str = "buy", symbol: str = "AAPL", account_id: str = "acct-1",
              quantity: int = 100, order_id: str = None) -> Order:
        return Order(
            id=order_id or f"ord-{next(counter)}",
            account_id=account_id,
            symbol=symbol,
            side=OrderSide(side),
            quantity=quantity,
            submitted_at=clock.now(),
        )

    return _make


@pytest.fixture
def round_trip(engine: PDTComplianceEngine, make_order: Callable[..., Order]) -> Callable[..., tuple]:
    """Submit a buy then a sell on the same symbol; returns both decisions."""

    def _round_trip(symbol: str = "AAPL", account_id: str = "acct-1") -> tuple:
        opened = engine.evaluate(make_order("buy", symbol, account_id))
        closed = engine.evaluate(make_order("sell", symbol, account_id))
        return opened, closed

    return _round_trip


@pytest.fixture
def go_to(clock: FixedClock) -> Callable[[date], None]:
    """Move the fixed clock to mid-morning of the given session date."""

    def _go(day: date) -> None:
        clock.set(datetime(day.year, day.month, day.day, 15, 0, 0, tzinfo=timezone.utc))

    return _go
