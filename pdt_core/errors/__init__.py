"""
Error classification system for the compliance core.

Three families: input errors raised before any state mutation, compliance
blocks that are normal outcomes rather than faults, and system failures that
need operator attention.
"""

from .compliance_blocks import (
    ComplianceBlock,
    PDTLimitExceededError,
)
from .input_errors import (
    ComplianceInputError,
    InvalidEquityError,
    InvalidIndicatorParameterError,
    InvalidOrderError,
)
from .system_failures import (
    ConfigurationError,
    StateReplayError,
    SystemFailureError,
)

__all__ = [
    # Input errors
    "ComplianceInputError",
    "InvalidOrderError",
    "InvalidEquityError",
    "InvalidIndicatorParameterError",
    # Compliance blocks
    "ComplianceBlock",
    "PDTLimitExceededError",
    # System failures
    "SystemFailureError",
    "StateReplayError",
    "ConfigurationError",
]
