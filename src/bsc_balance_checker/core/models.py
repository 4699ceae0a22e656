"""Data models for balance queries, results, and run summaries."""

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

# BNB, like ether, is natively denominated in 10**18 wei
WEI_DECIMALS = 18


def format_units(value: int, decimals: int = WEI_DECIMALS) -> str:
    """
    Format an integer amount of the smallest unit as a decimal string.

    Trailing zeros of the fractional part are dropped, but at least one
    fractional digit is kept (``1`` BNB formats as ``"1.0"``).

    Parameters
    ----------
    value : int
        Amount in the smallest indivisible unit (wei)
    decimals : int
        Number of decimal places of the unit scale

    Returns
    -------
    str
        Human-readable decimal amount

    Examples
    --------
    >>> format_units(1_500_000_000_000_000_000)
    '1.5'
    >>> format_units(0)
    '0.0'

    """
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10**decimals)
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{fraction_str}"


class QueryStatus(StrEnum):
    """Terminal outcome of a balance query."""

    SUCCESS = "success"
    ERROR = "error"


class BalanceResult(BaseModel):
    """
    Successful balance lookup returned by the RPC client.

    Attributes
    ----------
    address : str
        Queried wallet address
    balance_wei : int
        Balance in wei
    balance : Decimal
        Balance in BNB

    """

    model_config = ConfigDict(frozen=True)

    address: str
    balance_wei: int
    balance: Decimal


class QueryAttempt(BaseModel):
    """Single attempt made while resolving an address."""

    address: str
    attempt: int
    succeeded: bool
    error: str | None = None


class QueryResult(BaseModel):
    """
    Terminal result for one address.

    Attributes
    ----------
    address : str
        Wallet address
    status : QueryStatus
        Whether the balance was obtained within the retry budget
    balance : str
        Balance in BNB as a decimal string ("0" on failure)
    balance_wei : str
        Balance in wei as a decimal string ("0" on failure)
    error : str | None
        Last error message for failed queries

    """

    model_config = ConfigDict(frozen=True)

    address: str
    status: QueryStatus
    balance: str = "0"
    balance_wei: str = "0"
    error: str | None = None

    @classmethod
    def succeeded(cls, balance: BalanceResult) -> "QueryResult":
        """Build a successful result from an RPC balance lookup."""
        return cls(
            address=balance.address,
            status=QueryStatus.SUCCESS,
            balance=format_units(balance.balance_wei),
            balance_wei=str(balance.balance_wei),
        )

    @classmethod
    def failed(cls, address: str, error: str) -> "QueryResult":
        """Build a failed result carrying the last error message."""
        if not error:
            error = "unknown error"
        return cls(address=address, status=QueryStatus.ERROR, error=error)

    @property
    def success(self) -> bool:
        return self.status == QueryStatus.SUCCESS

    @property
    def balance_decimal(self) -> Decimal:
        return Decimal(self.balance)


class RunSummary(BaseModel):
    """
    Aggregate statistics over a completed batch run.

    Attributes
    ----------
    total_wallets : int
        Number of addresses processed
    successful_checks : int
        Results with a balance
    failed_checks : int
        Results that exhausted the retry budget
    total_balance : Decimal
        Sum of balances over successful results, in BNB
    duration_seconds : float
        Wall-clock duration of the run

    """

    model_config = ConfigDict(frozen=True)

    total_wallets: int
    successful_checks: int
    failed_checks: int
    total_balance: Decimal
    duration_seconds: float

    @classmethod
    def from_results(cls, results: list[QueryResult], duration_seconds: float) -> "RunSummary":
        """Compute the summary for a result collection."""
        successful = [r for r in results if r.success]
        return cls(
            total_wallets=len(results),
            successful_checks=len(successful),
            failed_checks=len(results) - len(successful),
            total_balance=sum((r.balance_decimal for r in successful), Decimal("0")),
            duration_seconds=duration_seconds,
        )
