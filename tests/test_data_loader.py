"""Tests for configuration and wallet file loading."""

from decimal import Decimal
from pathlib import Path

import pytest

from bsc_balance_checker.data import (
    get_rpc_endpoints,
    load_config,
    load_defaults,
    parse_addresses,
    read_addresses,
)
from bsc_balance_checker.exceptions import ConfigurationError


def test_defaults_match_bsc_mainnet():
    """Bundled defaults target BSC mainnet."""
    config = load_config()

    assert config.chain_id == 56
    assert len(config.rpc_urls) == 12
    assert config.rpc_urls[0] == "https://bsc-dataseed1.binance.org/"
    assert config.request_delay == 0.1
    assert config.max_retries == 3
    assert config.request_timeout == 10.0
    assert config.wallet_file == Path("wallets.txt")
    assert config.output_file == Path("balance_results.json")
    assert config.min_balance_for_txt == Decimal("1.0")
    assert config.max_balance_for_low_txt == Decimal("1.0")
    assert config.report_timezone == "Asia/Jakarta"


def test_get_rpc_endpoints():
    endpoints = get_rpc_endpoints()

    assert isinstance(endpoints, list)
    assert all(endpoint.startswith("https://") for endpoint in endpoints)


def test_user_file_overrides_defaults(tmp_path):
    """Keys from the user file replace the defaults."""
    path = tmp_path / "settings.yaml"
    path.write_text("rpc_urls:\n  - https://my-node.example/\nmax_retries: 5\n", encoding="utf-8")

    config = load_config(path)

    assert config.rpc_urls == ["https://my-node.example/"]
    assert config.max_retries == 5
    assert config.chain_id == 56


def test_keyword_overrides_win(tmp_path):
    """Explicit overrides beat the file; None values are ignored."""
    path = tmp_path / "settings.yaml"
    path.write_text("wallet_file: from_file.txt\n", encoding="utf-8")

    assert load_config(path, wallet_file=Path("cli.txt")).wallet_file == Path("cli.txt")
    assert load_config(path, wallet_file=None).wallet_file == Path("from_file.txt")


def test_empty_user_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path).rpc_urls == load_defaults()["rpc_urls"]


@pytest.mark.parametrize(
    "content",
    [
        "rpc_urls: []\n",
        "max_retries: -1\n",
        "request_timeout: 0\n",
        "report_timezone: Mars/Olympus_Mons\n",
        "- just\n- a list\n",
        "rpc_urls: [unclosed\n",
    ],
)
def test_invalid_config_raises(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_parse_addresses_filters_lines():
    """Blank lines and lines without the 0x prefix are discarded."""
    content = "\n".join(
        [
            "0xAbC0000000000000000000000000000000000001",
            "",
            "   ",
            "  0x0000000000000000000000000000000000000002  ",
            "not-an-address",
            "1x0000000000000000000000000000000000000003",
            "0xshort",
            "0xAbC0000000000000000000000000000000000001",
        ]
    )

    assert parse_addresses(content) == [
        "0xAbC0000000000000000000000000000000000001",
        "0x0000000000000000000000000000000000000002",
        "0xshort",
        "0xAbC0000000000000000000000000000000000001",
    ]


def test_parse_addresses_handles_crlf():
    assert parse_addresses("0x1\r\n0x2\r\n") == ["0x1", "0x2"]


def test_read_addresses(tmp_path):
    path = tmp_path / "wallets.txt"
    path.write_text("0x1\n# comment\n0x2\n", encoding="utf-8")

    assert read_addresses(path) == ["0x1", "0x2"]


def test_read_addresses_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        read_addresses(tmp_path / "wallets.txt")


def test_read_addresses_tolerates_invalid_utf8(tmp_path):
    path = tmp_path / "wallets.txt"
    path.write_bytes(b"0x1\n\xff\xfe bad\n0x2\n")

    assert read_addresses(path) == ["0x1", "0x2"]
