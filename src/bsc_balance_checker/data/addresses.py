"""Wallet address list reader."""

import logging
from pathlib import Path

from bsc_balance_checker.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ADDRESS_PREFIX = "0x"


def is_candidate_address(value: str) -> bool:
    """Check the only validation applied to addresses: non-empty with a 0x prefix."""
    return bool(value) and value.startswith(ADDRESS_PREFIX)


def parse_addresses(content: str) -> list[str]:
    """
    Extract wallet addresses from newline-delimited text.

    Lines are stripped; blank lines and lines without the ``0x`` prefix are
    discarded. Order and duplicates are preserved.

    Parameters
    ----------
    content : str
        File content

    Returns
    -------
    list[str]
        Addresses in input order

    """
    stripped = (line.strip() for line in content.splitlines())
    return [line for line in stripped if is_candidate_address(line)]


def read_addresses(path: Path) -> list[str]:
    """
    Read wallet addresses from a file.

    Parameters
    ----------
    path : Path
        Newline-delimited wallet file

    Returns
    -------
    list[str]
        Addresses in file order

    Raises
    ------
    ConfigurationError
        If the file does not exist or cannot be read

    """
    if not path.exists():
        msg = f"Wallet file {path} not found. Create it with one wallet address per line."
        raise ConfigurationError(msg)

    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        msg = f"Error reading wallet file {path}: {e}"
        raise ConfigurationError(msg) from e

    addresses = parse_addresses(content)
    logger.debug("Read %d wallet addresses from %s", len(addresses), path)
    return addresses
