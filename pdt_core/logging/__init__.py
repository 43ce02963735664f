"""
Logging configuration and utilities for the compliance core.
"""
from .config import (
    configure_logging,
    get_compliance_logger,
    get_logger,
    log_compliance_decision,
    log_state_transition,
)

__all__ = [
    "configure_logging",
    "get_compliance_logger",
    "get_logger",
    "log_compliance_decision",
    "log_state_transition",
]
