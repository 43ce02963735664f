"""
Order and day-trade value types.

Orders are validated once, at construction, and never change afterwards. The
compliance engine holds references to them but never mutates them.
"""

import re
import uuid
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional, Union

from ..errors import InvalidOrderError

SYMBOL_PATTERN = re.compile(r"^[A-Z][A-Z0-9.\-]{0,9}$")


class OrderSide(str, Enum):
    """Order direction."""
    BUY = "buy"
    SELL = "sell"

    def opposite(self) -> "OrderSide":
        return OrderSide.SELL if self is OrderSide.BUY else OrderSide.BUY


@dataclass(frozen=True)
class Order:
    """Single submitted trade instruction."""
    id: str
    account_id: str
    symbol: str              # Uppercase ticker, e.g. "AAPL", "BRK.B"
    side: OrderSide
    quantity: int            # Shares, strictly positive
    submitted_at: datetime   # Timezone-aware submission time

    def __post_init__(self) -> None:
        validate_order(self)

    @classmethod
    def create(
        cls,
        account_id: str,
        symbol: str,
        side: Union[OrderSide, str],
        quantity: int,
        submitted_at: Optional[datetime] = None,
        order_id: Optional[str] = None,
    ) -> "Order":
        """
        Build an order from loosely formatted boundary input.

        Symbol case and surrounding whitespace are normalized, the side may be
        given as a string, a uuid4 id is generated when none is supplied and
        the submission time defaults to now (UTC).

        Raises:
            InvalidOrderError: if any field cannot be normalized into a valid order
        """
        if isinstance(symbol, str):
            symbol = symbol.strip().upper()

        if not isinstance(side, OrderSide):
            try:
                side = OrderSide(str(side).strip().lower())
            except ValueError:
                raise InvalidOrderError(
                    f"Invalid order side: {side!r}. Must be 'buy' or 'sell'",
                    order_id=order_id, field="side", value=side
                )

        return cls(
            id=order_id or str(uuid.uuid4()),
            account_id=account_id,
            symbol=symbol,
            side=side,
            quantity=quantity,
            submitted_at=submitted_at or datetime.now(timezone.utc),
        )


def validate_order(order: Order) -> None:
    """
    Check every field of an order.

    Raises:
        InvalidOrderError: naming the first offending field
    """
    order_id = order.id if isinstance(order.id, str) else None

    if not isinstance(order.id, str) or not order.id.strip():
        raise InvalidOrderError("Order id must be a non-empty string",
                                field="id", value=order.id)

    if not isinstance(order.account_id, str) or not order.account_id.strip():
        raise InvalidOrderError("Account id must be a non-empty string",
                                order_id=order_id, field="account_id", value=order.account_id)

    if not isinstance(order.symbol, str) or not order.symbol:
        raise InvalidOrderError("Symbol must be a non-empty string",
                                order_id=order_id, field="symbol", value=order.symbol)

    if not SYMBOL_PATTERN.match(order.symbol):
        raise InvalidOrderError(f"Invalid symbol format: {order.symbol!r}",
                                order_id=order_id, field="symbol", value=order.symbol)

    if not isinstance(order.side, OrderSide):
        raise InvalidOrderError(f"Invalid order side: {order.side!r}",
                                order_id=order_id, field="side", value=order.side)

    if (not isinstance(order.quantity, int) or isinstance(order.quantity, bool)
            or order.quantity <= 0):
        raise InvalidOrderError(f"Invalid quantity: {order.quantity!r}. Must be a positive integer",
                                order_id=order_id, field="quantity", value=order.quantity)

    if not isinstance(order.submitted_at, datetime) or order.submitted_at.tzinfo is None:
        raise InvalidOrderError("Submission time must be a timezone-aware datetime",
                                order_id=order_id, field="submitted_at", value=order.submitted_at)


@dataclass(frozen=True)
class DayTrade:
    """Round trip: opening and closing order on one symbol in one session."""
    account_id: str
    symbol: str
    opening_order_id: str
    closing_order_id: str
    opening_side: OrderSide
    trade_date: date         # Session date in the exchange timezone
    detected_at: datetime

    @property
    def buy_order_id(self) -> str:
        if self.opening_side is OrderSide.BUY:
            return self.opening_order_id
        return self.closing_order_id

    @property
    def sell_order_id(self) -> str:
        if self.opening_side is OrderSide.SELL:
            return self.opening_order_id
        return self.closing_order_id

    @property
    def order_pair(self) -> frozenset:
        return frozenset((self.opening_order_id, self.closing_order_id))


@dataclass(frozen=True)
class OpenPosition:
    """Accepted order still waiting for an opposite-side order to pair with."""
    order: Order
    session_date: date

    @property
    def symbol(self) -> str:
        return self.order.symbol

    @property
    def side(self) -> OrderSide:
        return self.order.side
