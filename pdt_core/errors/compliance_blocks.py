"""
Compliance block classifications.

A block is an expected outcome, not a fault. The engine reports blocks inside
its Decision values; these exception types exist for callers that would rather
propagate a block up their own stack than branch on the decision.
"""

from datetime import date
from typing import Any, Dict, Optional


class ComplianceBlock(Exception):
    """Base class for regulatory blocks on an otherwise valid order."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True
        self.is_system_failure = False


class PDTLimitExceededError(ComplianceBlock):
    """Order would complete a day trade beyond the rolling-window limit."""

    def __init__(self, message: str, account_id: Optional[str] = None,
                 next_eligible_date: Optional[date] = None,
                 day_trade_count: Optional[int] = None,
                 limit: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.account_id = account_id
        self.next_eligible_date = next_eligible_date
        self.day_trade_count = day_trade_count
        self.limit = limit
