"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any

KNOWN_EXCHANGES = ("NYSE", "WEEKDAYS")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and not math.isnan(value) and not math.isinf(value))


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_compliance_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate PDT rule parameters."""
        errors = []

        if "equity_threshold" in params:
            value = params["equity_threshold"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="equity_threshold",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "day_trade_limit" in params:
            value = params["day_trade_limit"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="day_trade_limit",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "window_trading_days" in params:
            value = params["window_trading_days"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="window_trading_days",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_calendar_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate exchange calendar parameters."""
        errors = []

        if "exchange" in params:
            value = params["exchange"]
            if value not in KNOWN_EXCHANGES:
                errors.append(ValidationError(
                    field="exchange",
                    message=f"Must be one of {', '.join(KNOWN_EXCHANGES)}",
                    value=value
                ))

        if "timezone" in params:
            value = params["timezone"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="timezone",
                    message="Must be a non-empty IANA timezone name",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate indicator parameters."""
        errors = []

        for name in ("rsi_period", "bollinger_period", "macd_fast", "macd_slow",
                     "macd_signal", "trading_days_per_year"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        if "bollinger_std_multiplier" in params:
            value = params["bollinger_std_multiplier"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="bollinger_std_multiplier",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "risk_free_rate" in params:
            value = params["risk_free_rate"]
            if not _is_number(value):
                errors.append(ValidationError(
                    field="risk_free_rate",
                    message="Must be a finite number",
                    value=value
                ))

        fast = params.get("macd_fast")
        slow = params.get("macd_slow")
        if _is_positive_int(fast) and _is_positive_int(slow) and fast >= slow:
            errors.append(ValidationError(
                field="macd_fast",
                message="Must be smaller than macd_slow",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ValidationError(
                field="format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "compliance" in config:
            errors.extend(ConfigValidator.validate_compliance_params(config["compliance"]))

        if "calendar" in config:
            errors.extend(ConfigValidator.validate_calendar_params(config["calendar"]))

        if "indicators" in config:
            errors.extend(ConfigValidator.validate_indicator_params(config["indicators"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
