"""JSON-RPC provider for BNB Smart Chain balance queries."""

import logging
from decimal import Decimal
from typing import Any

import httpx

from bsc_balance_checker.core.models import WEI_DECIMALS, BalanceResult, format_units
from bsc_balance_checker.exceptions import NetworkError, RPCConnectionError

logger = logging.getLogger(__name__)


class JsonRpcProvider:
    """
    Minimal JSON-RPC client bound to one endpoint at a time.

    The provider performs no retries of its own; callers decide how to
    react to ``NetworkError`` and ``RPCConnectionError``.

    Parameters
    ----------
    chain_id : int
        Chain ID the endpoint must report on connect
    timeout : float
        Request timeout in seconds
    client : httpx.Client | None
        HTTP client to use. A new one is created if None.

    """

    def __init__(
        self,
        chain_id: int,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.chain_id = chain_id
        self.timeout = timeout
        self.endpoint: str | None = None
        self.client = client or httpx.Client(timeout=timeout)
        self._request_id = 0

    def connect(self, endpoint: str) -> int:
        """
        Switch to an endpoint and verify it serves the expected chain.

        The endpoint is selected before the handshake, so later queries go to
        it even when verification fails.

        Parameters
        ----------
        endpoint : str
            RPC endpoint URL

        Returns
        -------
        int
            Chain ID reported by the endpoint

        Raises
        ------
        RPCConnectionError
            If the endpoint is unreachable, times out, errors, or reports a
            different chain ID

        """
        self.endpoint = endpoint
        logger.info("Connecting to BSC RPC: %s", endpoint)

        try:
            reported = int(self._call("eth_chainId", []), 16)
        except (NetworkError, TypeError, ValueError) as e:
            msg = f"Failed to connect to RPC {endpoint}: {e}"
            raise RPCConnectionError(msg) from e

        if reported != self.chain_id:
            msg = f"RPC {endpoint} reports chain ID {reported}, expected {self.chain_id}"
            raise RPCConnectionError(msg)

        logger.info("Connected to chain ID %d via %s", reported, endpoint)
        return reported

    def get_balance(self, address: str) -> BalanceResult:
        """
        Fetch the latest native balance of an address.

        Parameters
        ----------
        address : str
            Wallet address

        Returns
        -------
        BalanceResult
            Balance in wei and in BNB

        Raises
        ------
        NetworkError
            If the request fails or the response cannot be parsed

        """
        result = self._call("eth_getBalance", [address, "latest"])
        try:
            balance_wei = int(result, 16)
        except (TypeError, ValueError) as e:
            msg = f"Invalid balance in RPC response: {result!r}"
            raise NetworkError(msg) from e

        return BalanceResult(
            address=address,
            balance_wei=balance_wei,
            balance=wei_to_bnb(balance_wei),
        )

    def _call(self, method: str, params: list[Any]) -> Any:
        """
        Make a single JSON-RPC call against the current endpoint.

        Parameters
        ----------
        method : str
            RPC method name (e.g., 'eth_getBalance')
        params : list[Any]
            Method parameters

        Returns
        -------
        Any
            RPC result value

        Raises
        ------
        NetworkError
            On transport errors, HTTP errors, malformed JSON, or RPC errors

        """
        if self.endpoint is None:
            msg = "Provider not connected. Call connect() first."
            raise NetworkError(msg)

        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": self._request_id,
        }

        try:
            response = self.client.post(self.endpoint, json=payload, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except httpx.TimeoutException as e:
            msg = f"{method} timed out after {self.timeout}s"
            raise NetworkError(msg) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"{method} failed: {e}") from e
        except ValueError as e:
            raise NetworkError(f"{method} returned invalid JSON: {e}") from e

        if not isinstance(body, dict):
            msg = f"{method} returned an unexpected payload: {body!r}"
            raise NetworkError(msg)
        if "error" in body:
            error = body["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            msg = f"RPC error from {method}: {message}"
            raise NetworkError(msg)
        if "result" not in body:
            msg = f"{method} response has no result"
            raise NetworkError(msg)

        return body["result"]

    def close(self) -> None:
        """Close HTTP client."""
        self.client.close()

    def __enter__(self) -> "JsonRpcProvider":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def wei_to_bnb(balance_wei: int) -> Decimal:
    """Scale a wei amount to BNB without floating point rounding."""
    return Decimal(format_units(balance_wei, WEI_DECIMALS))
