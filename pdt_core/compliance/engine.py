"""
Pattern day trading compliance engine.

Tracks day trades per account over a rolling window of trading days and
decides, order by order, whether the account may complete another one.
Every operation on an account runs under that account's lock, so callers may
share one engine across threads.
"""

import math
from collections.abc import Iterable
from datetime import date
from numbers import Real
from typing import Optional

from ..calendar import NYSECalendar, TradingCalendar, create_calendar
from ..config.defaults import ComplianceParams, DefaultConfig, get_default_config
from ..errors import InvalidEquityError, InvalidOrderError, StateReplayError
from ..logging.config import (
    configure_logging,
    get_compliance_logger,
    get_logger,
    log_compliance_decision,
    log_state_transition,
)
from ..models.decisions import (
    UNLIMITED,
    BlockReason,
    Decision,
    EligibilityState,
    PDTStatus,
    RemainingDayTrades,
)
from ..models.orders import DayTrade, OpenPosition, Order, validate_order
from ..utils.time import Clock, SystemClock, get_current_time
from .registry import AccountRegistry
from .state import AccountComplianceState, AccountSnapshot

logger = get_logger(__name__)
compliance_logger = get_compliance_logger(__name__)


def validate_equity(account_id: str, value) -> float:
    """
    Check an equity value pushed by the account collaborator.

    Raises:
        InvalidEquityError: for non-numeric, NaN, infinite or negative values
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidEquityError(f"Equity must be a number, got {value!r}",
                                 account_id=account_id, value=value)

    equity = float(value)
    if math.isnan(equity) or math.isinf(equity):
        raise InvalidEquityError(f"Equity must be finite, got {value!r}",
                                 account_id=account_id, value=value)
    if equity < 0:
        raise InvalidEquityError(f"Equity cannot be negative, got {value!r}",
                                 account_id=account_id, value=value)
    return equity


def _check_account_id(account_id) -> None:
    if not isinstance(account_id, str) or not account_id.strip():
        raise InvalidOrderError("Account id must be a non-empty string",
                                field="account_id", value=account_id)


class PDTComplianceEngine:
    """
    Enforces the pattern day trading rule for any number of accounts.

    An account below the equity threshold may complete at most
    `day_trade_limit` day trades inside the trailing window of
    `window_trading_days` trading days. An order that would complete one more
    is blocked; everything else is accepted.
    """

    def __init__(
        self,
        calendar: Optional[TradingCalendar] = None,
        clock: Optional[Clock] = None,
        params: Optional[ComplianceParams] = None,
        registry: Optional[AccountRegistry] = None,
    ):
        self.params = params or get_default_config().compliance
        self.calendar = calendar or NYSECalendar()
        self.clock = clock or SystemClock()
        self.registry = registry or AccountRegistry()
        self.logger = logger
        self.compliance_logger = compliance_logger

    @classmethod
    def from_config(
        cls,
        config: DefaultConfig,
        clock: Optional[Clock] = None,
        registry: Optional[AccountRegistry] = None,
    ) -> "PDTComplianceEngine":
        """Build an engine from a loaded configuration, applying its logging section."""
        configure_logging(level=config.logging.level, format_json=config.logging.format_json)
        return cls(
            calendar=create_calendar(config.calendar),
            clock=clock,
            params=config.compliance,
            registry=registry,
        )

    def today(self) -> date:
        """
        Session the engine is currently trading in.

        Weekends and holidays roll forward to the next session, so every
        recorded trade date and open position is dated on a trading day.
        """
        return self.calendar.trading_session(get_current_time(self.clock))

    # ------------------------------------------------------------------
    # Equity
    # ------------------------------------------------------------------

    def set_equity(self, account_id: str, value: float) -> None:
        """
        Record the account's latest equity.

        Raises:
            InvalidEquityError: if the value is unusable; nothing is changed
        """
        if not isinstance(account_id, str) or not account_id.strip():
            raise InvalidEquityError("Account id must be a non-empty string",
                                     account_id=account_id, value=value)
        equity = validate_equity(account_id, value)

        state = self.registry.get_or_create(account_id)
        with state.lock:
            previous = state.equity
            state.equity = equity
            self.logger.info(
                "Account equity updated",
                account_id=account_id,
                previous_equity=previous,
                equity=equity,
                meets_threshold=self._meets_threshold(state)
            )
            self._sync_eligibility(state, self.today(), trigger="equity_update")

    def meets_equity_threshold(self, account_id: str) -> bool:
        """True if the account's equity exempts it from the day-trade limit."""
        state = self._state(account_id)
        with state.lock:
            return self._meets_threshold(state)

    # ------------------------------------------------------------------
    # Order evaluation
    # ------------------------------------------------------------------

    def evaluate(self, order: Order) -> Decision:
        """
        Decide whether an order may proceed.

        The order is paired with the oldest open position on the same symbol
        and opposite side opened today. A pairing completes a day trade, which
        is only allowed while the account can still day trade; otherwise the
        order is blocked and nothing but the block counter changes. Unpaired
        orders are accepted and become open positions.

        Args:
            order: Order to evaluate

        Returns:
            Decision describing the outcome

        Raises:
            InvalidOrderError: if the order is malformed; no state is touched
        """
        if not isinstance(order, Order):
            raise InvalidOrderError(f"Expected an Order, got {type(order).__name__}",
                                    value=order)
        validate_order(order)

        state = self.registry.get_or_create(order.account_id)
        with state.lock:
            today = self.today()

            dropped = state.roll_session(today)
            if dropped:
                self.logger.debug(
                    "Dropped stale open positions",
                    account_id=order.account_id,
                    dropped=dropped,
                    session_date=today.isoformat()
                )

            if state.has_seen(order.id):
                self.logger.warning(
                    "Duplicate order ignored",
                    account_id=order.account_id,
                    order_id=order.id,
                    session_date=today.isoformat()
                )
                return Decision.accept(order.id, duplicate=True)

            match_index = state.find_opposite(order.symbol, order.side, today)

            if match_index is None:
                state.add_open(order, today)
                log_compliance_decision(
                    self.compliance_logger,
                    account_id=order.account_id,
                    order_id=order.id,
                    accepted=True,
                    reason="opened_position",
                    context={"symbol": order.symbol, "side": order.side.value}
                )
                return Decision.accept(order.id)

            if not self._can_day_trade(state, today):
                next_date = self._next_eligible(state, today)
                state.blocked_count += 1
                state.last_blocked_on = today
                log_compliance_decision(
                    self.compliance_logger,
                    account_id=order.account_id,
                    order_id=order.id,
                    accepted=False,
                    reason=BlockReason.PDT_LIMIT_EXCEEDED.value,
                    context={
                        "symbol": order.symbol,
                        "day_trade_count": self._count(state, today),
                        "limit": self.params.day_trade_limit,
                        "equity": state.equity,
                        "next_eligible_date": next_date.isoformat() if next_date else None,
                        "blocked_count": state.blocked_count,
                    }
                )
                self._sync_eligibility(state, today, trigger="order_blocked")
                return Decision.block(order.id, BlockReason.PDT_LIMIT_EXCEEDED, next_date)

            opening = state.pop_open(match_index)
            day_trade = DayTrade(
                account_id=order.account_id,
                symbol=order.symbol,
                opening_order_id=opening.order.id,
                closing_order_id=order.id,
                opening_side=opening.side,
                trade_date=today,
                detected_at=get_current_time(self.clock),
            )
            state.record_day_trade(day_trade)

            self.compliance_logger.info(
                "Day trade recorded",
                account_id=order.account_id,
                symbol=order.symbol,
                buy_order_id=day_trade.buy_order_id,
                sell_order_id=day_trade.sell_order_id,
                trade_date=today.isoformat(),
                day_trade_count=self._count(state, today)
            )
            log_compliance_decision(
                self.compliance_logger,
                account_id=order.account_id,
                order_id=order.id,
                accepted=True,
                reason="completed_day_trade",
                context={"symbol": order.symbol, "opening_order_id": opening.order.id}
            )
            self._sync_eligibility(state, today, trigger="day_trade_recorded")
            return Decision.accept(order.id, day_trade=day_trade)

    def would_complete_day_trade(self, order: Order) -> bool:
        """Preview whether `order` would pair with an open position today. No side effects."""
        if not isinstance(order, Order):
            raise InvalidOrderError(f"Expected an Order, got {type(order).__name__}",
                                    value=order)
        validate_order(order)

        state = self.registry.get(order.account_id)
        if state is None:
            return False
        with state.lock:
            return state.find_opposite(order.symbol, order.side, self.today()) is not None

    def would_violate(self, order: Order) -> bool:
        """Preview whether evaluating `order` now would be blocked. No side effects."""
        if not self.would_complete_day_trade(order):
            return False
        return not self.can_day_trade(order.account_id)

    # ------------------------------------------------------------------
    # Window queries
    # ------------------------------------------------------------------

    def day_trade_count(self, account_id: str) -> int:
        """Day trades inside the trailing window ending today."""
        state = self._state(account_id)
        with state.lock:
            return self._count(state, self.today())

    def can_day_trade(self, account_id: str) -> bool:
        """True if the account may complete another day trade right now."""
        state = self._state(account_id)
        with state.lock:
            today = self.today()
            allowed = self._can_day_trade(state, today)
            self._sync_eligibility(state, today, trigger="window_check")
            return allowed

    def remaining_day_trades(self, account_id: str) -> RemainingDayTrades:
        """Day trades left in the window, or UNLIMITED for exempt accounts."""
        state = self._state(account_id)
        with state.lock:
            return self._remaining(state, self.today())

    def next_eligible_date(self, account_id: str) -> Optional[date]:
        """
        Earliest session on which the account regains a day trade.

        Returns None while the account can already day trade.
        """
        state = self._state(account_id)
        with state.lock:
            return self._next_eligible(state, self.today())

    def eligibility(self, account_id: str) -> EligibilityState:
        state = self._state(account_id)
        with state.lock:
            today = self.today()
            self._sync_eligibility(state, today, trigger="window_check")
            return state.eligibility

    def status(self, account_id: str) -> PDTStatus:
        """Consistent snapshot of the account's day-trading position."""
        state = self._state(account_id)
        with state.lock:
            today = self.today()
            self._sync_eligibility(state, today, trigger="window_check")
            return PDTStatus(
                account_id=account_id,
                equity=state.equity,
                equity_threshold=self.params.equity_threshold,
                day_trade_limit=self.params.day_trade_limit,
                day_trade_count=self._count(state, today),
                remaining_day_trades=self._remaining(state, today),
                can_day_trade=self._can_day_trade(state, today),
                meets_equity_threshold=self._meets_threshold(state),
                state=state.eligibility,
                window_start=self._window_start(today),
                next_eligible_date=self._next_eligible(state, today),
                blocked_count=state.blocked_count,
                open_positions=sum(1 for p in state.open_positions if p.session_date == today),
            )

    # ------------------------------------------------------------------
    # Persistence hooks
    # ------------------------------------------------------------------

    def export_account(self, account_id: str) -> AccountSnapshot:
        """Immutable copy of the account's state for the persistence layer."""
        state = self._state(account_id)
        with state.lock:
            return state.snapshot()

    def restore_account(
        self,
        account_id: str,
        equity: Optional[float] = None,
        day_trades: Iterable[DayTrade] = (),
        open_positions: Iterable[OpenPosition] = (),
    ) -> None:
        """
        Replay persisted history into an account.

        Records are validated before anything is applied. Day trades already
        present in the log are skipped so a replay never double counts.
        Open positions from earlier sessions are dropped on the next
        evaluation, like any other stale position.

        Raises:
            InvalidEquityError: if `equity` is unusable
            StateReplayError: if a record belongs to another account or is
                internally inconsistent
        """
        _check_account_id(account_id)
        new_equity = validate_equity(account_id, equity) if equity is not None else None
        trades = list(day_trades)
        positions = list(open_positions)

        for trade in trades:
            self._check_replayed_trade(account_id, trade)

        seen_position_ids = set()
        for position in positions:
            if not isinstance(position, OpenPosition):
                raise StateReplayError(
                    f"Expected an OpenPosition, got {type(position).__name__}",
                    account_id=account_id, record=repr(position)
                )
            if position.order.account_id != account_id:
                raise StateReplayError(
                    f"Open position {position.order.id} belongs to account "
                    f"{position.order.account_id}",
                    account_id=account_id, record=position.order.id
                )
            if position.order.id in seen_position_ids:
                raise StateReplayError(
                    f"Open position {position.order.id} replayed twice",
                    account_id=account_id, record=position.order.id
                )
            seen_position_ids.add(position.order.id)

        state = self.registry.get_or_create(account_id)
        with state.lock:
            if new_equity is not None:
                state.equity = new_equity

            restored = 0
            for trade in sorted(trades, key=lambda t: (t.trade_date, t.detected_at)):
                if state.has_pair(trade):
                    continue
                state.record_day_trade(trade)
                restored += 1
            state.day_trades.sort(key=lambda t: (t.trade_date, t.detected_at))

            # Replayed positions keep their given order; it is the FIFO order
            known_ids = {p.order.id for p in state.open_positions}
            for position in positions:
                if position.order.id not in known_ids:
                    state.open_positions.append(position)

            today = self.today()
            state.session_date = None
            state.roll_session(today)

            self.logger.info(
                "Account compliance state restored",
                account_id=account_id,
                day_trades_restored=restored,
                day_trades_skipped=len(trades) - restored,
                open_positions=len(state.open_positions),
                equity=state.equity
            )
            self._sync_eligibility(state, today, trigger="state_restored")

    def _check_replayed_trade(self, account_id: str, trade: DayTrade) -> None:
        if not isinstance(trade, DayTrade):
            raise StateReplayError(
                f"Expected a DayTrade, got {type(trade).__name__}",
                account_id=account_id, record=repr(trade)
            )
        if trade.account_id != account_id:
            raise StateReplayError(
                f"Day trade {trade.opening_order_id}/{trade.closing_order_id} "
                f"belongs to account {trade.account_id}",
                account_id=account_id, record=trade.closing_order_id
            )
        if trade.opening_order_id == trade.closing_order_id:
            raise StateReplayError(
                f"Day trade pairs order {trade.opening_order_id} with itself",
                account_id=account_id, record=trade.closing_order_id
            )
        if not self.calendar.is_trading_day(trade.trade_date):
            raise StateReplayError(
                f"Day trade dated {trade.trade_date.isoformat()} is not on a trading day",
                account_id=account_id, record=trade.closing_order_id
            )

    # ------------------------------------------------------------------
    # Internals, all called with the account lock held
    # ------------------------------------------------------------------

    def _state(self, account_id: str) -> AccountComplianceState:
        """
        State for a read-only query.

        Unknown accounts get a fresh, unregistered state so queries never
        grow the registry; only equity updates, evaluations and replays do.
        """
        _check_account_id(account_id)
        state = self.registry.get(account_id)
        if state is None:
            return AccountComplianceState(account_id=account_id)
        return state

    def _window_start(self, today: date) -> date:
        return self.calendar.window_start(today, self.params.window_trading_days)

    def _count(self, state: AccountComplianceState, today: date) -> int:
        start = self._window_start(today)
        pruned = state.prune_before(start)
        if pruned:
            self.logger.debug(
                "Pruned day trades outside the window",
                account_id=state.account_id,
                pruned=pruned,
                window_start=start.isoformat()
            )
        return len(state.trades_in_window(start, today))

    def _meets_threshold(self, state: AccountComplianceState) -> bool:
        return state.equity >= self.params.equity_threshold

    def _can_day_trade(self, state: AccountComplianceState, today: date) -> bool:
        if self._meets_threshold(state):
            return True
        return self._count(state, today) < self.params.day_trade_limit

    def _remaining(self, state: AccountComplianceState, today: date) -> RemainingDayTrades:
        if self._meets_threshold(state):
            return UNLIMITED
        return max(0, self.params.day_trade_limit - self._count(state, today))

    def _next_eligible(self, state: AccountComplianceState, today: date) -> Optional[date]:
        if self._can_day_trade(state, today):
            return None

        windowed = state.trades_in_window(self._window_start(today), today)
        if not windowed:
            # A zero limit never frees a slot
            return None

        oldest = min(trade.trade_date for trade in windowed)
        return self.calendar.add_trading_days(oldest, self.params.window_trading_days)

    def _sync_eligibility(self, state: AccountComplianceState, today: date, trigger: str) -> None:
        if self._can_day_trade(state, today):
            current = EligibilityState.ELIGIBLE
        else:
            current = EligibilityState.AT_LIMIT

        if current is not state.eligibility:
            log_state_transition(
                self.compliance_logger,
                account_id=state.account_id,
                from_state=state.eligibility.value,
                to_state=current.value,
                trigger=trigger,
                context={
                    "day_trade_count": self._count(state, today),
                    "limit": self.params.day_trade_limit,
                    "equity": state.equity,
                }
            )
            state.eligibility = current
