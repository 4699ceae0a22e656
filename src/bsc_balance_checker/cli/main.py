"""CLI for the BSC balance checker."""

import logging
from datetime import UTC, datetime
from decimal import Decimal
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.traceback import install

from bsc_balance_checker.core import BatchRunner, CheckerConfig, QueryResult, RunSummary
from bsc_balance_checker.data import load_config, read_addresses
from bsc_balance_checker.exceptions import BalanceCheckerError, RPCConnectionError, WriteError
from bsc_balance_checker.pricing import FixedPricing
from bsc_balance_checker.reports import (
    build_results_table,
    format_outcome,
    high_balance_layout,
    low_balance_layout,
    print_statistics,
    select_high_balance,
    select_low_balance,
    write_balance_report,
    write_json_report,
)
from bsc_balance_checker.rpc import EndpointPool, JsonRpcProvider, QueryExecutor, RetryConfig

# Install rich traceback handler
install(show_locals=True)

app = typer.Typer(
    name="bsc-balance-checker",
    help="Check BNB balances of many BSC wallets with RPC retries and endpoint failover",
    add_completion=False,
)

console = Console()


def _configure_logging(debug: bool) -> None:
    """Route log records through rich, at DEBUG level when requested."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)


def _save_reports(settings: CheckerConfig, results: list[QueryResult], summary: RunSummary) -> None:
    """
    Persist the JSON summary and the high/low balance text reports.

    A failed writer is reported and the remaining writers still run.

    """
    generated_at = datetime.now(UTC)
    pricing = FixedPricing()

    try:
        path = write_json_report(settings.output_file, results, summary, generated_at)
        console.print(f"[green]Results saved to: {path}[/green]")
    except WriteError as e:
        console.print(f"[bold red]Error saving results:[/bold red] {escape(str(e))}")

    reports = [
        (
            settings.high_balance_txt_file,
            high_balance_layout(settings.min_balance_for_txt),
            select_high_balance(results, settings.min_balance_for_txt),
        ),
        (
            settings.low_balance_txt_file,
            low_balance_layout(settings.max_balance_for_low_txt),
            select_low_balance(results, settings.max_balance_for_low_txt),
        ),
    ]
    for path, layout, wallets in reports:
        if not wallets:
            console.print(f"[yellow]No wallets with balance {layout.comparison} BNB[/yellow]")
            continue
        try:
            write_balance_report(
                path,
                layout,
                wallets,
                total_checked=len(results),
                generated_at=generated_at,
                timezone=settings.report_timezone,
                pricing=pricing,
            )
        except WriteError as e:
            console.print(f"[bold red]Error saving {layout.title} balance report:[/bold red] {escape(str(e))}")
            continue

        total = sum((w.balance_decimal for w in wallets), Decimal("0"))
        console.print(f"[green]{layout.label} balance wallets ({layout.comparison} BNB) saved to: {path}[/green]")
        console.print(f"[cyan]{len(wallets)} wallets holding {total:.6f} BNB[/cyan]")


def _check(config: Path | None, wallets: Path | None, debug: bool) -> None:
    """Load settings, query every wallet, then print and save the results."""
    try:
        settings = load_config(config, wallet_file=wallets)
        addresses = read_addresses(settings.wallet_file)
    except BalanceCheckerError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        if debug:
            raise
        raise typer.Exit(code=1)

    if not addresses:
        console.print("[red]No valid wallet addresses found![/red]")
        return

    console.print(f"[blue]Found {len(addresses)} wallet addresses to check[/blue]")

    pool = EndpointPool(settings.rpc_urls)
    provider = JsonRpcProvider(chain_id=settings.chain_id, timeout=settings.request_timeout)

    try:
        try:
            provider.connect(pool.current())
        except RPCConnectionError as e:
            console.print(f"[bold red]Cannot connect to the BSC network:[/bold red] {escape(str(e))}")
            raise typer.Exit(code=1)

        executor = QueryExecutor(
            provider,
            pool,
            RetryConfig(max_retries=settings.max_retries, base_delay=settings.request_delay),
        )
        runner = BatchRunner(
            executor,
            request_delay=settings.request_delay,
            on_result=lambda position, total, result: console.print(format_outcome(position, total, result)),
        )

        console.print(f"[blue]Checking balances of {len(addresses)} wallets...[/blue]\n")
        summary = runner.run(addresses)
    except BalanceCheckerError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        if debug:
            raise
        raise typer.Exit(code=1)
    finally:
        provider.close()

    console.print(f"\n[blue]Done! Time: {summary.duration_seconds:.2f} seconds[/blue]")
    console.print(f"[green]Successful: {summary.successful_checks}[/green]")
    console.print(f"[red]Errors: {summary.failed_checks}[/red]")

    console.print("\n")
    console.print(build_results_table(runner.results))
    print_statistics(
        console,
        runner.results,
        summary,
        settings.min_balance_for_txt,
        settings.max_balance_for_low_txt,
    )
    _save_reports(settings, runner.results, summary)


@app.command()
def check(
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML file overriding the default settings"),
    wallets: Path | None = typer.Option(None, "--wallets", "-w", help="Wallet list, one address per line"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug output"),
) -> None:
    """
    Check the BNB balance of every wallet in the wallet file.

    Examples:

        # Use wallets.txt and the default BSC endpoints
        bsc-balance-checker check

        # Custom wallet list and settings
        bsc-balance-checker check --wallets my_wallets.txt --config settings.yaml
    """
    _configure_logging(debug)

    console.print("\n[bold blue]BSC BALANCE CHECKER[/bold blue]")
    console.print("[dim]Bulk balance checks for BSC wallets[/dim]")
    console.print("[dim]" + "=" * 50 + "[/dim]")

    # Ctrl-C is a clean stop during report writing too
    try:
        _check(config, wallets, debug)
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopped by user[/yellow]")
        raise typer.Exit(code=0)


@app.command()
def list_endpoints(
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML file overriding the default settings"),
) -> None:
    """List the configured RPC endpoints in failover order."""
    try:
        settings = load_config(config)
    except BalanceCheckerError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    table = Table(title=f"RPC Endpoints (chain ID {settings.chain_id})", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Endpoint", style="cyan")

    for index, url in enumerate(EndpointPool(settings.rpc_urls)):
        table.add_row(str(index), url)

    console.print(table)


if __name__ == "__main__":
    app()
