"""Rich console rendering of run results."""

from decimal import Decimal

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bsc_balance_checker.core.models import QueryResult, RunSummary
from bsc_balance_checker.pricing import FixedPricing
from bsc_balance_checker.reports.writers import select_high_balance, select_low_balance


def format_outcome(position: int, total: int, result: QueryResult) -> str:
    """Console line reporting the outcome of one address."""
    progress = f"[{position}/{total}]"
    address = escape(result.address)
    if result.success:
        return f"[green]{progress} ✓ {address}: {result.balance_decimal:.6f} BNB[/green]"
    error = escape(result.error or "")
    return f"[red]{progress} ✗ {address}: Error - {error}[/red]"


def build_results_table(results: list[QueryResult]) -> Table:
    """
    Build the per-address results table.

    Parameters
    ----------
    results : list[QueryResult]
        Results in input order

    Returns
    -------
    Table
        Rich table with one row per address

    """
    table = Table(title="Balance Check Results", show_header=True, header_style="bold magenta")
    table.add_column("No", style="dim", justify="right")
    table.add_column("Wallet Address", style="cyan")
    table.add_column("Balance (BNB)", style="white", justify="right")
    table.add_column("Status")

    for number, result in enumerate(results, start=1):
        balance = f"{result.balance_decimal:.6f}" if result.success else "0.000000"
        status = "[green]✓ OK[/green]" if result.success else "[red]✗ Error[/red]"
        table.add_row(str(number), escape(result.address), balance, status)

    return table


def print_statistics(
    console: Console,
    results: list[QueryResult],
    summary: RunSummary,
    min_balance: Decimal,
    max_low_balance: Decimal,
    pricing: FixedPricing | None = None,
) -> None:
    """Print totals, threshold counts, and the USD estimate."""
    pricing = pricing or FixedPricing()
    high = select_high_balance(results, min_balance)
    low = select_low_balance(results, max_low_balance)

    stats = Table(show_header=False, box=None)
    stats.add_column("Label", style="bold")
    stats.add_column("Value", style="bold green")

    stats.add_row("Total Wallets:", str(summary.total_wallets))
    stats.add_row("Total Balance:", f"{summary.total_balance:.6f} BNB")
    stats.add_row(f"Wallets ≥ {min_balance} BNB:", str(len(high)))
    stats.add_row(f"Wallets < {max_low_balance} BNB:", str(len(low)))
    stats.add_row("USD Value (estimate):", f"${pricing.usd_value(summary.total_balance):,.2f} *")

    console.print("\n[bold blue]STATISTICS[/bold blue]")
    console.print(stats)
    console.print(f"[dim]* BNB price assumed at ${pricing.price} for the estimate[/dim]")
