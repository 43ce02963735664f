"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from pdt_core.config import (
    ComplianceParams,
    ConfigLoader,
    ConfigValidator,
    DefaultConfig,
    get_default_config,
)
from pdt_core.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration carries the regulatory values."""
        config = get_default_config()

        assert config.compliance.equity_threshold == 25000.0
        assert config.compliance.day_trade_limit == 3
        assert config.compliance.window_trading_days == 5
        assert config.calendar.exchange == "NYSE"
        assert config.indicators.rsi_period == 14
        assert config.indicators.macd_slow == 26


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader points at the shipped config directory."""
        loader = ConfigLoader.create()

        assert isinstance(loader.config_dir, Path)
        assert (loader.config_dir / "profiles.yaml").exists()

    def test_merge_config_defaults_only(self) -> None:
        loader = ConfigLoader.create()

        config = loader.merge_config()

        assert config["compliance"]["day_trade_limit"] == 3
        assert config["indicators"]["bollinger_period"] == 20

    def test_unknown_profile_falls_back_to_defaults(self) -> None:
        loader = ConfigLoader.create()

        assert loader.merge_config("no-such-profile") == loader.merge_config()

    def test_profile_overrides_defaults(self) -> None:
        loader = ConfigLoader.create()

        config = loader.merge_config("paper")

        assert config["compliance"]["day_trade_limit"] == 10
        assert config["calendar"]["exchange"] == "WEEKDAYS"
        # Untouched defaults remain
        assert config["compliance"]["equity_threshold"] == 25000.0

    def test_overrides_win_over_profile(self) -> None:
        loader = ConfigLoader.create()

        config = loader.merge_config("paper", {"compliance": {"day_trade_limit": 4}})

        assert config["compliance"]["day_trade_limit"] == 4
        assert config["calendar"]["exchange"] == "WEEKDAYS"

    def test_build_config(self) -> None:
        config = ConfigLoader.create().build_config("finra")

        assert isinstance(config, DefaultConfig)
        assert config.compliance == ComplianceParams()

    def test_build_config_rejects_invalid_values(self) -> None:
        loader = ConfigLoader.create()

        with pytest.raises(ConfigurationError) as exc_info:
            loader.build_config(overrides={"compliance": {"window_trading_days": 0}})

        assert exc_info.value.errors[0].field == "window_trading_days"
        assert exc_info.value.recoverable is False

    def test_build_config_rejects_unknown_keys(self) -> None:
        loader = ConfigLoader.create()

        with pytest.raises(ConfigurationError) as exc_info:
            loader.build_config(overrides={"compliance": {"max_trades": 5}, "alerts": {}})

        fields = {error.field for error in exc_info.value.errors}
        assert fields == {"compliance.max_trades", "alerts"}

    def test_missing_profiles_file(self, tmp_path) -> None:
        loader = ConfigLoader.create(tmp_path)

        assert loader.load_profile_config("finra") == {}

    def test_custom_profiles_file(self, tmp_path) -> None:
        (tmp_path / "profiles.yaml").write_text(
            "profiles:\n  strict:\n    compliance:\n      day_trade_limit: 1\n"
        )

        config = ConfigLoader.create(tmp_path).build_config("strict")

        assert config.compliance.day_trade_limit == 1


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_compliance_params(self) -> None:
        params = {"equity_threshold": 25000.0, "day_trade_limit": 3, "window_trading_days": 5}

        assert ConfigValidator.validate_compliance_params(params) == []

    def test_invalid_compliance_params(self) -> None:
        params = {"equity_threshold": -1, "day_trade_limit": 2.5, "window_trading_days": 0}

        errors = ConfigValidator.validate_compliance_params(params)

        assert [e.field for e in errors] == ["equity_threshold", "day_trade_limit", "window_trading_days"]

    def test_unknown_exchange(self) -> None:
        errors = ConfigValidator.validate_calendar_params({"exchange": "LSE"})

        assert len(errors) == 1
        assert errors[0].field == "exchange"

    def test_macd_fast_must_be_below_slow(self) -> None:
        errors = ConfigValidator.validate_indicator_params({"macd_fast": 26, "macd_slow": 12})

        assert len(errors) == 1
        assert errors[0].field == "macd_fast"

    def test_non_positive_periods(self) -> None:
        errors = ConfigValidator.validate_indicator_params({"rsi_period": 0, "bollinger_period": True})

        assert {e.field for e in errors} == {"rsi_period", "bollinger_period"}

    def test_logging_level(self) -> None:
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []
        assert len(ConfigValidator.validate_logging_params({"level": "LOUD"})) == 1

    def test_validate_full_config(self) -> None:
        config = ConfigLoader.create().merge_config()

        assert ConfigValidator.validate_config(config) == []
