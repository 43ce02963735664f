"""Default configuration parameters for the compliance and indicator engines."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ComplianceParams:
    """Pattern day trading rule parameters (FINRA Rule 4210 defaults)."""
    equity_threshold: float = 25000.0        # Equity at or above this is exempt
    day_trade_limit: int = 3                 # Max day trades inside the window
    window_trading_days: int = 5             # Rolling window length, trading days


@dataclass(frozen=True)
class CalendarParams:
    """Exchange calendar parameters."""
    exchange: str = "NYSE"                   # "NYSE" or "WEEKDAYS"
    timezone: str = "America/New_York"       # Session dates are taken in this zone


@dataclass(frozen=True)
class IndicatorParams:
    """Indicator defaults used by IndicatorEngine."""
    rsi_period: int = 14
    bollinger_period: int = 20
    bollinger_std_multiplier: float = 2.0
    macd_fast: int = 12
    macd_slow: int = 26
    macd_signal: int = 9
    risk_free_rate: float = 0.02
    trading_days_per_year: int = 252


@dataclass(frozen=True)
class LoggingParams:
    """structlog output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    compliance: ComplianceParams
    calendar: CalendarParams
    indicators: IndicatorParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        compliance=ComplianceParams(),
        calendar=CalendarParams(),
        indicators=IndicatorParams(),
        logging=LoggingParams(),
    )
