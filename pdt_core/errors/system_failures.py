"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures that need operator intervention: a bad
configuration file or compliance history that cannot be trusted.
"""

from typing import Any, Dict, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class StateReplayError(SystemFailureError):
    """Replayed compliance history is inconsistent with the account."""

    def __init__(self, message: str, account_id: Optional[str] = None,
                 record: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.account_id = account_id
        self.record = record


class ConfigurationError(SystemFailureError):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
