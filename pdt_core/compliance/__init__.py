"""Pattern day trading compliance: per-account state and the decision engine."""

from .engine import PDTComplianceEngine, validate_equity
from .registry import AccountRegistry
from .state import AccountComplianceState, AccountSnapshot

__all__ = [
    "AccountComplianceState",
    "AccountRegistry",
    "AccountSnapshot",
    "PDTComplianceEngine",
    "validate_equity",
]
