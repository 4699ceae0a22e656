"""Core functionality including models, configuration, and the batch runner."""

from bsc_balance_checker.core.config import CheckerConfig
from bsc_balance_checker.core.models import (
    WEI_DECIMALS,
    BalanceResult,
    QueryAttempt,
    QueryResult,
    QueryStatus,
    RunSummary,
    format_units,
)
from bsc_balance_checker.core.runner import BatchRunner

__all__ = [
    "WEI_DECIMALS",
    "BalanceResult",
    "BatchRunner",
    "CheckerConfig",
    "QueryAttempt",
    "QueryResult",
    "QueryStatus",
    "RunSummary",
    "format_units",
]
