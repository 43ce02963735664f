"""
Per-account compliance state.

Each account owns its day-trade log, its open-position log for the current
session and a re-entrant lock. Every read-modify-write on the account happens
while holding that lock; the engine is responsible for taking it.
"""

import threading
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..models.decisions import EligibilityState
from ..models.orders import DayTrade, OpenPosition, Order, OrderSide


@dataclass(frozen=True)
class AccountSnapshot:
    """Immutable copy of an account's compliance state, for persistence."""
    account_id: str
    equity: float
    day_trades: tuple[DayTrade, ...]
    open_positions: tuple[OpenPosition, ...]
    blocked_count: int = 0
    last_blocked_on: Optional[date] = None


@dataclass
class AccountComplianceState:
    """Mutable compliance state for a single account."""

    account_id: str
    equity: float = 0.0

    # Detection order; pruned lazily as entries leave the rolling window
    day_trades: list[DayTrade] = field(default_factory=list)

    # Accepted, unmatched orders of the current session, oldest first
    open_positions: list[OpenPosition] = field(default_factory=list)

    session_date: Optional[date] = None
    session_order_ids: set[str] = field(default_factory=set)

    eligibility: EligibilityState = EligibilityState.ELIGIBLE
    blocked_count: int = 0
    last_blocked_on: Optional[date] = None

    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def roll_session(self, today: date) -> int:
        """
        Drop open positions that were not opened today.

        Returns:
            Number of stale positions dropped
        """
        if self.session_date != today:
            self.session_date = today
            self.session_order_ids = {
                order_id
                for trade in self.day_trades if trade.trade_date == today
                for order_id in (trade.opening_order_id, trade.closing_order_id)
            }

        before = len(self.open_positions)
        self.open_positions = [p for p in self.open_positions if p.session_date == today]
        for position in self.open_positions:
            self.session_order_ids.add(position.order.id)
        return before - len(self.open_positions)

    def has_seen(self, order_id: str) -> bool:
        return order_id in self.session_order_ids

    def find_opposite(self, symbol: str, side: OrderSide, today: date) -> Optional[int]:
        """Index of the oldest open position on `symbol` with the opposite side."""
        wanted = side.opposite()
        for index, position in enumerate(self.open_positions):
            if (position.session_date == today and position.symbol == symbol
                    and position.side is wanted):
                return index
        return None

    def add_open(self, order: Order, today: date) -> OpenPosition:
        position = OpenPosition(order=order, session_date=today)
        self.open_positions.append(position)
        self.session_order_ids.add(order.id)
        return position

    def pop_open(self, index: int) -> OpenPosition:
        return self.open_positions.pop(index)

    def record_day_trade(self, day_trade: DayTrade) -> None:
        self.day_trades.append(day_trade)
        if day_trade.trade_date == self.session_date:
            self.session_order_ids.add(day_trade.opening_order_id)
            self.session_order_ids.add(day_trade.closing_order_id)

    def has_pair(self, day_trade: DayTrade) -> bool:
        pair = day_trade.order_pair
        return any(existing.order_pair == pair for existing in self.day_trades)

    def trades_in_window(self, start: date, end: date) -> list[DayTrade]:
        return [t for t in self.day_trades if start <= t.trade_date <= end]

    def prune_before(self, start: date) -> int:
        """
        Forget day trades strictly older than `start`.

        Returns:
            Number of entries pruned
        """
        before = len(self.day_trades)
        self.day_trades = [t for t in self.day_trades if t.trade_date >= start]
        return before - len(self.day_trades)

    def snapshot(self) -> AccountSnapshot:
        return AccountSnapshot(
            account_id=self.account_id,
            equity=self.equity,
            day_trades=tuple(self.day_trades),
            open_positions=tuple(self.open_positions),
            blocked_count=self.blocked_count,
            last_blocked_on=self.last_blocked_on,
        )
