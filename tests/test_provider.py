"""Tests for the JSON-RPC provider using a mocked HTTP transport."""

import json
from decimal import Decimal

import httpx
import pytest

from bsc_balance_checker.exceptions import NetworkError, RPCConnectionError
from bsc_balance_checker.rpc import JsonRpcProvider, wei_to_bnb

ENDPOINT = "https://rpc.example/"
ADDRESS = "0x1111111111111111111111111111111111111111"


def make_provider(handler, chain_id=56):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return JsonRpcProvider(chain_id=chain_id, timeout=5.0, client=client)


def rpc_handler(results):
    """Answer JSON-RPC requests from a method -> result mapping, recording them."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        seen.append((str(request.url), payload))
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": payload["id"], "result": results[payload["method"]]})

    handler.seen = seen
    return handler


def test_connect_verifies_chain_id():
    handler = rpc_handler({"eth_chainId": "0x38"})
    provider = make_provider(handler)

    assert provider.connect(ENDPOINT) == 56
    assert provider.endpoint == ENDPOINT
    assert handler.seen[0][1]["method"] == "eth_chainId"


def test_connect_rejects_wrong_chain():
    provider = make_provider(rpc_handler({"eth_chainId": "0x1"}))

    with pytest.raises(RPCConnectionError, match="expected 56"):
        provider.connect(ENDPOINT)


def test_connect_unreachable_endpoint():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    provider = make_provider(handler)

    with pytest.raises(RPCConnectionError, match="connection refused"):
        provider.connect(ENDPOINT)
    # The endpoint stays selected even though the handshake failed
    assert provider.endpoint == ENDPOINT


def test_get_balance_converts_wei():
    handler = rpc_handler({"eth_chainId": "0x38", "eth_getBalance": hex(1_234_500_000_000_000_000)})
    provider = make_provider(handler)
    provider.connect(ENDPOINT)

    balance = provider.get_balance(ADDRESS)

    assert balance.balance_wei == 1_234_500_000_000_000_000
    assert balance.balance == Decimal("1.2345")
    url, payload = handler.seen[-1]
    assert url == ENDPOINT
    assert payload["method"] == "eth_getBalance"
    assert payload["params"] == [ADDRESS, "latest"]
    assert payload["jsonrpc"] == "2.0"


def test_get_balance_rpc_error():
    def handler(request):
        payload = json.loads(request.content)
        if payload["method"] == "eth_chainId":
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": payload["id"], "result": "0x38"})
        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": payload["id"], "error": {"code": -32005, "message": "limit exceeded"}},
        )

    provider = make_provider(handler)
    provider.connect(ENDPOINT)

    with pytest.raises(NetworkError, match="limit exceeded"):
        provider.get_balance(ADDRESS)


def test_get_balance_http_error():
    provider = make_provider(lambda request: httpx.Response(503, text="unavailable"))
    provider.endpoint = ENDPOINT

    with pytest.raises(NetworkError, match="eth_getBalance failed"):
        provider.get_balance(ADDRESS)


def test_get_balance_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    provider = make_provider(handler)
    provider.endpoint = ENDPOINT

    with pytest.raises(NetworkError, match="timed out"):
        provider.get_balance(ADDRESS)


def test_get_balance_invalid_json():
    provider = make_provider(lambda request: httpx.Response(200, text="<html>busy</html>"))
    provider.endpoint = ENDPOINT

    with pytest.raises(NetworkError, match="invalid JSON"):
        provider.get_balance(ADDRESS)


def test_get_balance_malformed_result():
    provider = make_provider(rpc_handler({"eth_getBalance": None}))
    provider.endpoint = ENDPOINT

    with pytest.raises(NetworkError, match="Invalid balance"):
        provider.get_balance(ADDRESS)


def test_get_balance_requires_connect():
    provider = make_provider(rpc_handler({}))

    with pytest.raises(NetworkError, match="not connected"):
        provider.get_balance(ADDRESS)


def test_context_manager_closes_client():
    provider = make_provider(rpc_handler({}))

    with provider:
        pass

    assert provider.client.is_closed


@pytest.mark.parametrize(
    ("wei", "expected"),
    [
        (0, Decimal("0")),
        (1, Decimal("0.000000000000000001")),
        (10**18, Decimal("1")),
        (123 * 10**21, Decimal("123000")),
    ],
)
def test_wei_to_bnb(wei, expected):
    assert wei_to_bnb(wei) == expected
