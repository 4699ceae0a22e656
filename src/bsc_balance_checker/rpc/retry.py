"""Retry and endpoint failover state machine for balance queries."""

import logging
import time
from collections.abc import Callable
from enum import StrEnum
from typing import Protocol

from bsc_balance_checker.core.models import BalanceResult, QueryAttempt, QueryResult
from bsc_balance_checker.exceptions import NetworkError, RPCConnectionError
from bsc_balance_checker.rpc.pool import EndpointPool

logger = logging.getLogger(__name__)

# Failed attempt after which the executor switches to the next endpoint.
# Only this exact count triggers failover, whatever max_retries is.
FAILOVER_ATTEMPT = 2


def should_failover(failed_attempts: int) -> bool:
    """
    Transition guard for endpoint failover.

    Parameters
    ----------
    failed_attempts : int
        Number of failed attempts so far for the current address

    Returns
    -------
    bool
        True exactly when the failure count equals ``FAILOVER_ATTEMPT``

    """
    return failed_attempts == FAILOVER_ATTEMPT


class QueryState(StrEnum):
    """States of the per-address query state machine."""

    IDLE = "idle"
    ATTEMPTING = "attempting"
    RETRYING = "retrying"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class BalanceProvider(Protocol):
    """Interface the executor needs from an RPC client."""

    def connect(self, endpoint: str) -> int: ...

    def get_balance(self, address: str) -> BalanceResult: ...


class RetryConfig:
    """
    Configuration for retry behavior.

    Parameters
    ----------
    max_retries : int
        Maximum number of attempts per address
    base_delay : float
        Base inter-request delay in seconds
    backoff_factor : float
        Multiplier applied to ``base_delay`` before each retry

    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 0.1,
        backoff_factor: float = 2.0,
    ) -> None:
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.backoff_factor = backoff_factor

    @property
    def retry_delay(self) -> float:
        """Pause before every retry, in seconds."""
        return self.base_delay * self.backoff_factor


class QueryExecutor:
    """
    Resolves one address to a terminal QueryResult.

    Each address gets up to ``max_retries`` balance queries. Failed attempts
    back off for ``retry_delay`` seconds, and the second failure additionally
    rotates the endpoint pool and reconnects the provider before the next
    attempt.

    Parameters
    ----------
    provider : BalanceProvider
        RPC client bound to the pool's current endpoint
    pool : EndpointPool
        Endpoint pool rotated on failover
    config : RetryConfig | None
        Retry configuration
    sleep : Callable[[float], None]
        Blocking pause function

    """

    def __init__(
        self,
        provider: BalanceProvider,
        pool: EndpointPool,
        config: RetryConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.provider = provider
        self.pool = pool
        self.config = config or RetryConfig()
        self.sleep = sleep
        self.state = QueryState.IDLE
        self.attempts: list[QueryAttempt] = []
        self.failovers = 0

    def execute(self, address: str) -> QueryResult:
        """
        Query the balance of an address with retries and failover.

        Parameters
        ----------
        address : str
            Wallet address

        Returns
        -------
        QueryResult
            Successful result, or a failed one carrying the last error message

        """
        self.state = QueryState.IDLE
        self.attempts = []
        failed_attempts = 0
        last_error = "retry budget exhausted before any attempt"
        result: QueryResult | None = None

        while failed_attempts < self.config.max_retries and result is None:
            self.state = QueryState.ATTEMPTING
            attempt_number = failed_attempts + 1
            try:
                balance = self.provider.get_balance(address)
            except NetworkError as e:
                last_error = str(e) or type(e).__name__
                self.attempts.append(
                    QueryAttempt(address=address, attempt=attempt_number, succeeded=False, error=last_error)
                )
                failed_attempts += 1

                if failed_attempts < self.config.max_retries:
                    self.state = QueryState.RETRYING
                    logger.warning(
                        "Balance query for %s failed (%s), retry %d/%d",
                        address,
                        last_error,
                        failed_attempts,
                        self.config.max_retries,
                    )
                    self.sleep(self.config.retry_delay)

                    if should_failover(failed_attempts):
                        self._failover()
                else:
                    self.state = QueryState.FAILED
                    result = QueryResult.failed(address, last_error)
            else:
                self.attempts.append(QueryAttempt(address=address, attempt=attempt_number, succeeded=True))
                self.state = QueryState.SUCCEEDED
                result = QueryResult.succeeded(balance)

        if result is None:
            # Only reachable with a non-positive retry budget
            self.state = QueryState.FAILED
            result = QueryResult.failed(address, last_error)

        return result

    def _failover(self) -> None:
        """Rotate to the next endpoint and reconnect the provider."""
        endpoint = self.pool.rotate()
        self.failovers += 1
        logger.warning("Switching to RPC endpoint %s", endpoint)
        try:
            self.provider.connect(endpoint)
        except RPCConnectionError as e:
            # Not fatal: the next attempt runs against the new endpoint anyway
            logger.warning("Failover connection to %s failed: %s", endpoint, e)

