"""RPC layer with endpoint rotation, JSON-RPC provider, and retry logic."""

from bsc_balance_checker.rpc.pool import EndpointPool
from bsc_balance_checker.rpc.provider import JsonRpcProvider, wei_to_bnb
from bsc_balance_checker.rpc.retry import (
    FAILOVER_ATTEMPT,
    BalanceProvider,
    QueryExecutor,
    QueryState,
    RetryConfig,
    should_failover,
)

__all__ = [
    "FAILOVER_ATTEMPT",
    "BalanceProvider",
    "EndpointPool",
    "JsonRpcProvider",
    "QueryExecutor",
    "QueryState",
    "RetryConfig",
    "should_failover",
    "wei_to_bnb",
]
