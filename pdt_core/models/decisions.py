"""Compliance decision and status value types."""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union

from ..errors import PDTLimitExceededError
from .orders import DayTrade

# Returned by remaining_day_trades() for equity-exempt accounts. A float
# infinity so it still orders correctly against integer counts.
UNLIMITED = math.inf

RemainingDayTrades = Union[int, float]


class BlockReason(str, Enum):
    """Why an otherwise valid order was blocked."""
    PDT_LIMIT_EXCEEDED = "pdt_limit_exceeded"


class EligibilityState(str, Enum):
    """Per-account day-trading gate."""
    ELIGIBLE = "eligible"
    AT_LIMIT = "at_limit"


@dataclass(frozen=True)
class Decision:
    """Outcome of evaluating one order."""
    accepted: bool
    order_id: str
    reason: Optional[BlockReason] = None
    next_eligible_date: Optional[date] = None
    day_trade: Optional[DayTrade] = None     # Set when this order completed a day trade
    duplicate: bool = False                  # Order id already processed this session

    @classmethod
    def accept(cls, order_id: str, day_trade: Optional[DayTrade] = None,
               duplicate: bool = False) -> "Decision":
        return cls(accepted=True, order_id=order_id, day_trade=day_trade, duplicate=duplicate)

    @classmethod
    def block(cls, order_id: str, reason: BlockReason,
              next_eligible_date: Optional[date]) -> "Decision":
        return cls(accepted=False, order_id=order_id, reason=reason,
                   next_eligible_date=next_eligible_date)

    @property
    def blocked(self) -> bool:
        return not self.accepted

    @property
    def completed_day_trade(self) -> bool:
        return self.day_trade is not None

    def raise_for_block(self) -> None:
        """Raise PDTLimitExceededError if this decision is a block."""
        if self.reason is BlockReason.PDT_LIMIT_EXCEEDED:
            raise PDTLimitExceededError(
                f"Order {self.order_id} would exceed the pattern day trading limit; "
                f"next eligible date: {self.next_eligible_date}",
                next_eligible_date=self.next_eligible_date,
                context={"order_id": self.order_id},
            )


@dataclass(frozen=True)
class PDTStatus:
    """Consistent snapshot of an account's day-trading position."""
    account_id: str
    equity: float
    equity_threshold: float
    day_trade_limit: int
    day_trade_count: int
    remaining_day_trades: RemainingDayTrades
    can_day_trade: bool
    meets_equity_threshold: bool
    state: EligibilityState
    window_start: date
    next_eligible_date: Optional[date]
    blocked_count: int
    open_positions: int

    def to_dict(self) -> dict:
        remaining = self.remaining_day_trades
        return {
            'account_id': self.account_id,
            'equity': self.equity,
            'equity_threshold': self.equity_threshold,
            'day_trade_limit': self.day_trade_limit,
            'day_trade_count': self.day_trade_count,
            'remaining_day_trades': None if remaining == UNLIMITED else remaining,
            'unlimited': remaining == UNLIMITED,
            'can_day_trade': self.can_day_trade,
            'meets_equity_threshold': self.meets_equity_threshold,
            'state': self.state.value,
            'window_start': self.window_start.isoformat(),
            'next_eligible_date': self.next_eligible_date.isoformat() if self.next_eligible_date else None,
            'blocked_count': self.blocked_count,
            'open_positions': self.open_positions,
        }
