"""End-to-end pattern day trading scenarios across several sessions."""

from datetime import date

from pdt_core import IndicatorEngine, Order, PDTComplianceEngine, PriceSeries
from pdt_core.config import ConfigLoader
from pdt_core.models import BlockReason


class TestWeekOfTrading:
    """A small account trading through one week."""

    def test_three_day_trades_then_block(self, engine, make_order, go_to) -> None:
        """Mon-Wed day trades fill the window; Thursday's round trip is blocked."""
        engine.set_equity("acct-1", 10000)

        for day in (4, 5, 6):
            go_to(date(2024, 3, day))
            engine.evaluate(make_order("buy", symbol="AAPL"))
            closed = engine.evaluate(make_order("sell", symbol="AAPL"))
            assert closed.completed_day_trade is True

        go_to(date(2024, 3, 7))
        assert engine.remaining_day_trades("acct-1") == 0
        engine.evaluate(make_order("buy", symbol="TSLA", order_id="tsla-buy"))
        blocked = engine.evaluate(make_order("sell", symbol="TSLA", order_id="tsla-sell"))

        assert blocked.blocked is True
        assert blocked.reason is BlockReason.PDT_LIMIT_EXCEEDED
        assert blocked.next_eligible_date == date(2024, 3, 11)

        # Holding overnight is not a day trade
        go_to(date(2024, 3, 8))
        overnight = engine.evaluate(make_order("sell", symbol="TSLA", order_id="tsla-sell-fri"))
        assert overnight.accepted is True
        assert overnight.day_trade is None

        go_to(date(2024, 3, 11))
        assert engine.day_trade_count("acct-1") == 2
        assert engine.can_day_trade("acct-1") is True

    def test_status_payload_over_time(self, engine, round_trip, go_to) -> None:
        """The status payload tracks the window as sessions pass."""
        round_trip()
        go_to(date(2024, 3, 5))
        round_trip()

        payload = engine.status("acct-1").to_dict()
        assert payload["day_trade_count"] == 2
        assert payload["remaining_day_trades"] == 1
        assert payload["window_start"] == "2024-02-28"

        go_to(date(2024, 3, 11))
        payload = engine.status("acct-1").to_dict()
        assert payload["day_trade_count"] == 1
        assert payload["remaining_day_trades"] == 2

    def test_restart_mid_week(self, engine, round_trip, go_to, calendar, clock, make_order) -> None:
        """History exported before a restart keeps the limit in force afterwards."""
        for day in (4, 5, 6):
            go_to(date(2024, 3, day))
            round_trip()
        snapshot = engine.export_account("acct-1")

        restarted = PDTComplianceEngine(calendar=calendar, clock=clock)
        restarted.restore_account("acct-1", equity=snapshot.equity, day_trades=snapshot.day_trades)

        go_to(date(2024, 3, 7))
        restarted.evaluate(make_order("buy"))
        assert restarted.evaluate(make_order("sell")).blocked is True


class TestPaperProfile:
    """Engines built from the paper trading profile."""

    def test_paper_profile_has_looser_limit(self, clock) -> None:
        config = ConfigLoader.create().build_config("paper")
        engine = PDTComplianceEngine.from_config(config, clock=clock)

        for n in range(5):
            engine.evaluate(Order.create("paper-1", "AAPL", "buy", 1, submitted_at=clock.now(), order_id=f"b{n}"))
            closed = engine.evaluate(
                Order.create("paper-1", "AAPL", "sell", 1, submitted_at=clock.now(), order_id=f"s{n}")
            )
            assert closed.accepted is True

        assert engine.remaining_day_trades("paper-1") == 5


class TestEnginesSideBySide:
    """Indicators inform a trade that compliance then gates."""

    def test_signal_then_compliance(self, engine, make_order) -> None:
        indicators = IndicatorEngine()
        series = PriceSeries.from_prices("AAPL", [100 + i * 0.5 for i in range(40)])

        snapshot = indicators.snapshot(series)
        assert snapshot.has_sufficient_data() is True

        size = indicators.position_size(10000, 1, snapshot.last_price, snapshot.last_price - 2)
        order = make_order("buy", quantity=size)

        assert engine.would_complete_day_trade(order) is False
        assert engine.evaluate(order).accepted is True
