"""Sequential batch runner feeding addresses to the query executor."""

import logging
import time
from collections.abc import Callable, Sequence

from bsc_balance_checker.core.models import QueryResult, RunSummary
from bsc_balance_checker.rpc.retry import QueryExecutor

logger = logging.getLogger(__name__)

ResultCallback = Callable[[int, int, QueryResult], None]


class BatchRunner:
    """
    Processes an address list one address at a time.

    Addresses are never queried concurrently: the runner waits for each
    address to reach a terminal result, then pauses ``request_delay`` seconds
    before the next one to stay under public RPC rate limits.

    Parameters
    ----------
    executor : QueryExecutor
        Resolves a single address with retries and failover
    request_delay : float
        Pause between consecutive addresses in seconds
    on_result : ResultCallback | None
        Called with (position, total, result) after each address, position
        starting at 1
    sleep : Callable[[float], None]
        Blocking pause function
    clock : Callable[[], float]
        Monotonic clock used to time the run

    """

    def __init__(
        self,
        executor: QueryExecutor,
        request_delay: float = 0.1,
        on_result: ResultCallback | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.executor = executor
        self.request_delay = request_delay
        self.on_result = on_result
        self.sleep = sleep
        self.clock = clock
        self.results: list[QueryResult] = []

    def run(self, addresses: Sequence[str]) -> RunSummary:
        """
        Check every address in input order.

        Parameters
        ----------
        addresses : Sequence[str]
            Wallet addresses

        Returns
        -------
        RunSummary
            Counts, total balance, and elapsed time for this run

        """
        self.results = []
        total = len(addresses)
        started = self.clock()

        for position, address in enumerate(addresses, start=1):
            logger.debug("[%d/%d] Checking %s", position, total, address)
            result = self.executor.execute(address)
            self.results.append(result)

            if self.on_result is not None:
                self.on_result(position, total, result)

            if position < total:
                self.sleep(self.request_delay)

        summary = RunSummary.from_results(self.results, duration_seconds=self.clock() - started)
        logger.debug(
            "Finished %d wallets in %.2fs: %d ok, %d failed",
            summary.total_wallets,
            summary.duration_seconds,
            summary.successful_checks,
            summary.failed_checks,
        )
        return summary
