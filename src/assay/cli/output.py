"""CLI output for run reports.

Renders the Rich summary table shown by quiet runs and writes the
machine-readable JSON summary.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from assay.models.summary import RunSummary


def render_summary_table(summary: RunSummary, console: Console) -> None:
    """Render a compact per-suite table followed by the overall verdict.

    Used when per-test output is silenced, so a quiet run still
    reports its numbers.

    Args:
        summary: The RunSummary to display.
        console: Rich Console for output.
    """
    table = Table(box=box.SIMPLE, padding=(0, 2))
    table.add_column("Suite", style="bold")
    table.add_column("Passed", justify="right")
    table.add_column("Failed", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Detail")

    for suite in summary.suites:
        failed_style = "red" if suite.failed else "dim"
        table.add_row(
            escape(suite.name),
            f"[green]{suite.passed}[/green]",
            f"[{failed_style}]{suite.failed}[/{failed_style}]",
            str(suite.total),
            suite.detail,
        )

    console.print(table)
    if summary.successful:
        verdict = "[bold green]✓ PASS[/bold green]"
    else:
        verdict = "[bold red]✗ FAIL[/bold red]"
    console.print(
        f"{verdict}  {summary.total_passed}/{summary.total_tests} passed "
        f"({summary.success_rate:.0%}) in {summary.total_suites} suite(s)"
    )


def output_json(summary: RunSummary) -> None:
    """Write the run summary as indented JSON to stdout."""
    sys.stdout.write(summary.model_dump_json(indent=2))
    sys.stdout.write("\n")
