"""Pytest configuration for bsc-balance-checker tests."""

from collections.abc import Iterable

import pytest

from bsc_balance_checker.core.models import BalanceResult
from bsc_balance_checker.exceptions import NetworkError, RPCConnectionError
from bsc_balance_checker.rpc import EndpointPool, wei_to_bnb

ONE_BNB = 10**18

ENDPOINTS = [
    "https://rpc-a.example/",
    "https://rpc-b.example/",
    "https://rpc-c.example/",
]


class FakeProvider:
    """Scripted stand-in for JsonRpcProvider.

    Each address maps to a sequence of outcomes consumed one per
    ``get_balance`` call: an int is a balance in wei, an exception is raised.
    Addresses without a script always return ``default_wei``.
    """

    def __init__(
        self,
        script: dict[str, Iterable[int | BaseException]] | None = None,
        default_wei: int = 0,
        fail_connect: bool = False,
    ) -> None:
        self.script = {address: list(outcomes) for address, outcomes in (script or {}).items()}
        self.default_wei = default_wei
        self.fail_connect = fail_connect
        self.endpoint: str | None = None
        self.calls: list[tuple[str, str | None]] = []
        self.connects: list[str] = []
        self.closed = False

    def connect(self, endpoint: str) -> int:
        self.endpoint = endpoint
        self.connects.append(endpoint)
        if self.fail_connect:
            raise RPCConnectionError(f"Failed to connect to RPC {endpoint}")
        return 56

    def get_balance(self, address: str) -> BalanceResult:
        self.calls.append((address, self.endpoint))
        outcomes = self.script.get(address)
        outcome = outcomes.pop(0) if outcomes else self.default_wei
        if isinstance(outcome, BaseException):
            raise outcome
        return BalanceResult(address=address, balance_wei=outcome, balance=wei_to_bnb(outcome))

    def close(self) -> None:
        self.closed = True


class SleepRecorder:
    """Records requested pauses instead of sleeping."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def pool():
    return EndpointPool(ENDPOINTS)


@pytest.fixture
def sleep():
    return SleepRecorder()


def network_error(message: str = "connection reset by peer") -> NetworkError:
    return NetworkError(message)
