"""Report rendering for the console, JSON summaries, and text exports."""

from bsc_balance_checker.reports.console import build_results_table, format_outcome, print_statistics
from bsc_balance_checker.reports.writers import (
    ReportLayout,
    build_json_report,
    format_report_timestamp,
    high_balance_layout,
    low_balance_layout,
    render_balance_report,
    select_high_balance,
    select_low_balance,
    write_balance_report,
    write_json_report,
)

__all__ = [
    "ReportLayout",
    "build_json_report",
    "build_results_table",
    "format_outcome",
    "format_report_timestamp",
    "high_balance_layout",
    "low_balance_layout",
    "print_statistics",
    "render_balance_report",
    "select_high_balance",
    "select_low_balance",
    "write_balance_report",
    "write_json_report",
]
