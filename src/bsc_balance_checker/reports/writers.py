"""JSON summary and filtered text report writers."""

import json
import logging
from datetime import UTC, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, NamedTuple
from zoneinfo import ZoneInfo

from bsc_balance_checker.core.models import QueryResult, RunSummary
from bsc_balance_checker.exceptions import WriteError
from bsc_balance_checker.pricing import FixedPricing

logger = logging.getLogger(__name__)

RULE = "=" * 49


class ReportLayout(NamedTuple):
    """Wording that differs between the high and low balance reports."""

    title: str
    filter_line: str
    label: str
    comparison: str


def select_high_balance(results: list[QueryResult], threshold: Decimal) -> list[QueryResult]:
    """
    Successful results with a balance of at least ``threshold``, largest first.

    Parameters
    ----------
    results : list[QueryResult]
        All results of a run
    threshold : Decimal
        Inclusive lower bound in BNB

    Returns
    -------
    list[QueryResult]
        Matching results sorted by descending balance

    """
    matching = [r for r in results if r.success and r.balance_decimal >= threshold]
    return sorted(matching, key=lambda r: r.balance_decimal, reverse=True)


def select_low_balance(results: list[QueryResult], threshold: Decimal) -> list[QueryResult]:
    """
    Successful, non-empty results below ``threshold``, largest first.

    Parameters
    ----------
    results : list[QueryResult]
        All results of a run
    threshold : Decimal
        Exclusive upper bound in BNB

    Returns
    -------
    list[QueryResult]
        Matching results sorted by descending balance

    """
    matching = [r for r in results if r.success and Decimal("0") < r.balance_decimal < threshold]
    return sorted(matching, key=lambda r: r.balance_decimal, reverse=True)


def build_json_report(
    results: list[QueryResult],
    summary: RunSummary,
    generated_at: datetime,
) -> dict[str, Any]:
    """
    Assemble the JSON-serializable run summary.

    Parameters
    ----------
    results : list[QueryResult]
        Per-address results in input order
    summary : RunSummary
        Aggregate statistics
    generated_at : datetime
        Report timestamp

    Returns
    -------
    dict[str, Any]
        Report document

    """
    return {
        "timestamp": generated_at.astimezone(UTC).isoformat(),
        "total_wallets": summary.total_wallets,
        "successful_checks": summary.successful_checks,
        "failed_checks": summary.failed_checks,
        "total_balance_bnb": str(summary.total_balance),
        "duration_seconds": round(summary.duration_seconds, 2),
        "results": [r.model_dump(mode="json") for r in results],
    }


def write_json_report(
    path: Path,
    results: list[QueryResult],
    summary: RunSummary,
    generated_at: datetime | None = None,
) -> Path:
    """
    Write the JSON run summary to disk.

    Raises
    ------
    WriteError
        If the file cannot be written

    """
    document = build_json_report(results, summary, generated_at or datetime.now(UTC))
    _write_text(path, json.dumps(document, indent=2))
    logger.debug("Results saved to %s", path)
    return path


def format_report_timestamp(moment: datetime, timezone: str) -> str:
    """Render a timestamp as DD/MM/YYYY HH.MM.SS in the given timezone."""
    return moment.astimezone(ZoneInfo(timezone)).strftime("%d/%m/%Y %H.%M.%S")


def render_balance_report(
    layout: ReportLayout,
    wallets: list[QueryResult],
    total_checked: int,
    timestamp: str,
    pricing: FixedPricing,
) -> str:
    """
    Render a filtered wallet report as plain text.

    Parameters
    ----------
    layout : ReportLayout
        High or low balance wording
    wallets : list[QueryResult]
        Selected wallets, already sorted
    total_checked : int
        Number of wallets in the whole run
    timestamp : str
        Preformatted report timestamp
    pricing : FixedPricing
        USD estimate source

    Returns
    -------
    str
        Report content

    """
    total = sum((w.balance_decimal for w in wallets), Decimal("0"))
    upper = layout.label.upper()

    lines = [
        f"BSC WALLET BALANCE CHECKER - {upper} BALANCE RESULTS",
        RULE,
        f"Timestamp: {timestamp}",
        layout.filter_line,
        f"Total {layout.label} Balance Wallets: {len(wallets)}",
        RULE,
        "",
        "SUMMARY:",
        f"- Total Wallets Checked: {total_checked}",
        f"- {layout.label} Balance Wallets ({layout.comparison} BNB): {len(wallets)}",
        f"- Total {layout.label} Balance: {total:.6f} BNB",
        f"- Estimated USD Value: ${pricing.usd_value(total):.2f}",
        "",
        f"{upper} BALANCE WALLETS LIST:",
        "=" * 25,
        "",
    ]

    for number, wallet in enumerate(wallets, start=1):
        balance = f"{wallet.balance_decimal:.6f}".rjust(12)
        usd = f"{pricing.usd_value(wallet.balance_decimal):.2f}".rjust(10)
        lines.append(f"{number:>3}. Address: {wallet.address}")
        lines.append(f"     Balance: {balance} BNB (~${usd} USD)")
        lines.append("")

    lines.extend(["", "RAW WALLET ADDRESSES (for copy-paste):", "=" * 37])
    lines.extend(w.address for w in wallets)
    lines.extend(
        [
            "",
            RULE,
            "Generated by BSC Balance Checker Bot",
            f"Note: USD values are estimated based on ${pricing.price}/BNB",
            RULE,
        ]
    )
    return "\n".join(lines)


def high_balance_layout(threshold: Decimal) -> ReportLayout:
    return ReportLayout(
        title="high",
        filter_line=f"Minimum Balance Filter: {threshold} BNB",
        label="High",
        comparison=f"≥{threshold}",
    )


def low_balance_layout(threshold: Decimal) -> ReportLayout:
    return ReportLayout(
        title="low",
        filter_line=f"Maximum Balance Filter: < {threshold} BNB",
        label="Low",
        comparison=f"<{threshold}",
    )


def write_balance_report(
    path: Path,
    layout: ReportLayout,
    wallets: list[QueryResult],
    total_checked: int,
    generated_at: datetime,
    timezone: str,
    pricing: FixedPricing | None = None,
) -> Path | None:
    """
    Write a filtered wallet report, skipping it when nothing matched.

    Returns
    -------
    Path | None
        Written path, or None if no wallet matched

    Raises
    ------
    WriteError
        If the file cannot be written

    """
    if not wallets:
        logger.warning("No wallets for the %s balance report, skipping %s", layout.title, path)
        return None

    content = render_balance_report(
        layout,
        wallets,
        total_checked,
        format_report_timestamp(generated_at, timezone),
        pricing or FixedPricing(),
    )
    _write_text(path, content)
    logger.debug("%s balance wallets saved to %s", layout.label, path)
    return path


def _write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        msg = f"Error saving {path}: {e}"
        raise WriteError(msg) from e
