"""
Account registry.

Owns every AccountComplianceState. The registry lock only guards the mapping
itself, so accounts never wait on each other once their state exists.
"""

import threading
from typing import Optional

import structlog

from .state import AccountComplianceState

logger = structlog.get_logger(__name__)


class AccountRegistry:
    """Creates and looks up per-account compliance state."""

    def __init__(self):
        self.logger = logger
        self._lock = threading.Lock()
        self._accounts: dict[str, AccountComplianceState] = {}

    def get_or_create(self, account_id: str) -> AccountComplianceState:
        """Get existing state or create a fresh one for the account."""
        with self._lock:
            state = self._accounts.get(account_id)
            if state is None:
                state = AccountComplianceState(account_id=account_id)
                self._accounts[account_id] = state
                self.logger.info(
                    "Created new account compliance state",
                    account_id=account_id,
                    initial_state=state.eligibility.value
                )
            return state

    def get(self, account_id: str) -> Optional[AccountComplianceState]:
        with self._lock:
            return self._accounts.get(account_id)

    def account_ids(self) -> list[str]:
        with self._lock:
            return list(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        with self._lock:
            return account_id in self._accounts

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
