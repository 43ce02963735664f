"""Tests for structured logging of compliance decisions and transitions."""

from unittest.mock import MagicMock, Mock

from pdt_core.logging.config import (
    configure_logging,
    log_compliance_decision,
    log_state_transition,
)


class TestLoggingHelpers:
    """Test the standardized logging helpers."""

    def test_accepted_decision_logged_at_info(self) -> None:
        logger = MagicMock()

        log_compliance_decision(logger, "acct-1", "ord-1", accepted=True, reason="opened_position")

        bound = logger.bind.call_args.kwargs
        assert bound["decision"] == "ACCEPTED"
        assert bound["event_type"] == "compliance_decision"
        assert bound["order_id"] == "ord-1"
        logger.bind.return_value.info.assert_called_once_with("Order accepted")

    def test_blocked_decision_logged_at_warning_with_context(self) -> None:
        logger = MagicMock()

        log_compliance_decision(logger, "acct-1", "ord-1", accepted=False,
                                reason="pdt_limit_exceeded", context={"limit": 3})

        assert logger.bind.call_args.kwargs["decision"] == "BLOCKED"
        with_context = logger.bind.return_value.bind
        with_context.assert_called_once_with(context={"limit": 3})
        with_context.return_value.warning.assert_called_once_with("Order blocked")

    def test_state_transition(self) -> None:
        logger = MagicMock()

        log_state_transition(logger, "acct-1", "eligible", "at_limit", trigger="day_trade_recorded")

        bound = logger.bind.call_args.kwargs
        assert bound["from_state"] == "eligible"
        assert bound["to_state"] == "at_limit"
        assert bound["trigger"] == "day_trade_recorded"
        logger.bind.return_value.info.assert_called_once_with("Eligibility transition")


class TestEngineLogging:
    """Test that the engine emits audit records."""

    def setup_method(self):
        """Capture bound log records instead of writing them."""
        configure_logging(level="DEBUG", format_json=True)
        self.records = []

        def bind(**kwargs):
            bound = Mock()

            def emit(level):
                def _emit(message, **extra):
                    self.records.append({'message': message, 'level': level, **kwargs, **extra})
                return _emit

            bound.info = emit('info')
            bound.warning = emit('warning')
            bound.bind = lambda **more: bind(**kwargs, **more)
            return bound

        self.mock_logger = Mock()
        self.mock_logger.bind = bind
        self.mock_logger.info = lambda message, **kwargs: self.records.append(
            {'message': message, 'level': 'info', **kwargs}
        )

    def test_day_trade_and_block_logged(self, engine, make_order, round_trip) -> None:
        engine.compliance_logger = self.mock_logger

        for _ in range(3):
            round_trip()
        engine.evaluate(make_order("buy"))
        engine.evaluate(make_order("sell"))

        recorded = [r for r in self.records if r['message'] == "Day trade recorded"]
        blocked = [r for r in self.records if r['message'] == "Order blocked"]
        transitions = [r for r in self.records if r['message'] == "Eligibility transition"]

        assert len(recorded) == 3
        assert recorded[-1]['day_trade_count'] == 3
        assert len(blocked) == 1
        assert blocked[0]['level'] == 'warning'
        assert blocked[0]['reason'] == "pdt_limit_exceeded"
        assert blocked[0]['context']['next_eligible_date'] == "2024-03-11"
        assert len(transitions) == 1
        assert transitions[0]['to_state'] == "at_limit"

    def test_duplicate_order_logged(self, engine, make_order) -> None:
        engine.logger = Mock()
        order = make_order("buy", order_id="b1")

        engine.evaluate(order)
        engine.evaluate(order)

        engine.logger.warning.assert_called_once()
        args, kwargs = engine.logger.warning.call_args
        assert args[0] == "Duplicate order ignored"
        assert kwargs['order_id'] == "b1"

    def test_equity_update_logged(self, engine) -> None:
        engine.logger = Mock()

        engine.set_equity("acct-1", 30000)

        args, kwargs = engine.logger.info.call_args
        assert args[0] == "Account equity updated"
        assert kwargs['equity'] == 30000.0
        assert kwargs['meets_threshold'] is True
