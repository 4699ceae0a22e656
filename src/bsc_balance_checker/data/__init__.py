"""Configuration and input loading."""

from bsc_balance_checker.data.addresses import (
    ADDRESS_PREFIX,
    is_candidate_address,
    parse_addresses,
    read_addresses,
)
from bsc_balance_checker.data.loader import (
    get_rpc_endpoints,
    load_config,
    load_defaults,
)

__all__ = [
    "ADDRESS_PREFIX",
    "get_rpc_endpoints",
    "is_candidate_address",
    "load_config",
    "load_defaults",
    "parse_addresses",
    "read_addresses",
]
