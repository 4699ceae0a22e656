"""Exception hierarchy for the balance checker."""


class BalanceCheckerError(Exception):
    """Base class for all balance checker errors."""


class ConfigurationError(BalanceCheckerError):
    """Raised when configuration or input files are missing or invalid."""


class RPCConnectionError(BalanceCheckerError):
    """Raised when an endpoint is unreachable or reports the wrong chain."""


class NetworkError(BalanceCheckerError):
    """Raised when a single RPC query fails at the transport or protocol level."""


class WriteError(BalanceCheckerError):
    """Raised when a report cannot be persisted."""
