"""Validated runtime configuration."""

from decimal import Decimal
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class CheckerConfig(BaseModel):
    """
    Settings for a balance checking run.

    Attributes
    ----------
    rpc_urls : list[str]
        Ordered RPC endpoint URLs used for round-robin failover
    chain_id : int
        Chain ID every endpoint must report (56 for BSC mainnet)
    request_delay : float
        Pause between addresses in seconds; retries wait twice as long
    max_retries : int
        Attempts allowed per address
    request_timeout : float
        Timeout for each RPC request in seconds
    wallet_file : Path
        Newline-delimited list of wallet addresses
    output_file : Path
        JSON summary destination
    high_balance_txt_file : Path
        Text report of wallets at or above ``min_balance_for_txt``
    low_balance_txt_file : Path
        Text report of non-empty wallets below ``max_balance_for_low_txt``
    min_balance_for_txt : Decimal
        Inclusive lower bound for the high balance report, in BNB
    max_balance_for_low_txt : Decimal
        Exclusive upper bound for the low balance report, in BNB
    report_timezone : str
        IANA timezone used for text report timestamps

    """

    rpc_urls: list[str] = Field(min_length=1)
    chain_id: int = 56
    request_delay: float = Field(default=0.1, ge=0)
    max_retries: int = Field(default=3, ge=0)
    request_timeout: float = Field(default=10.0, gt=0)
    wallet_file: Path = Path("wallets.txt")
    output_file: Path = Path("balance_results.json")
    high_balance_txt_file: Path = Path("high_balance_wallets.txt")
    low_balance_txt_file: Path = Path("low_balance_wallets.txt")
    min_balance_for_txt: Decimal = Decimal("1.0")
    max_balance_for_low_txt: Decimal = Decimal("1.0")
    report_timezone: str = "Asia/Jakarta"

    @field_validator("report_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            msg = f"Unknown timezone: {value}"
            raise ValueError(msg) from e
        return value
