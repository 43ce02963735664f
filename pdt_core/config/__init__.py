"""Configuration defaults, profile loading and validation."""

from .defaults import (
    CalendarParams,
    ComplianceParams,
    DefaultConfig,
    IndicatorParams,
    LoggingParams,
    get_default_config,
)
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "CalendarParams",
    "ComplianceParams",
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "IndicatorParams",
    "LoggingParams",
    "ValidationError",
    "get_default_config",
]
