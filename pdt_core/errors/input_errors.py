"""
Input error classifications for order, equity and indicator arguments.

These exceptions are raised before any state is touched. They represent
caller mistakes that should be surfaced immediately and fixed at the source.
"""

from typing import Any, Dict, Optional


class ComplianceInputError(Exception):
    """Base class for malformed input rejected at the engine boundary."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidOrderError(ComplianceInputError):
    """Order is missing a field or carries an out-of-range value."""

    def __init__(self, message: str, order_id: Optional[str] = None,
                 field: Optional[str] = None, value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.order_id = order_id
        self.field = field
        self.value = value


class InvalidEquityError(ComplianceInputError):
    """Equity value pushed by the account collaborator is unusable."""

    def __init__(self, message: str, account_id: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.account_id = account_id
        self.value = value


class InvalidIndicatorParameterError(ComplianceInputError, ValueError):
    """Indicator called with a non-positive period or similar bad argument."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value
