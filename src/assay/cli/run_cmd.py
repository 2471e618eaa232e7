"""assay run -- execute the test suites defined in a Python file.

Loads configuration, imports the suite file, runs every suite through
SuiteRunner, prints the report, and exits with a code reflecting the
outcome.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Optional, Sequence

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from assay.cli.output import output_json, render_summary_table
from assay.execution.context import ExecutionContext
from assay.loader.errors import SuiteLoadError, config_error_details
from assay.loader.suite_loader import load_suites
from assay.models.config import EngineConfig, Language, load_config
from assay.suite import RunReport, SuiteRunner, TestSuite

console = Console(stderr=True, soft_wrap=True)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_LOAD_ERROR = 2


def run(
    suite_path: str = typer.Argument(..., help="Path to a Python file defining test suites"),
    timeout: Optional[int] = typer.Option(None, "--timeout", "-t", min=1, help="Default timeout per test in seconds"),
    lang: Optional[Language] = typer.Option(None, "--lang", "-l", help="Message language"),
    csv: bool = typer.Option(False, "--csv", help="Print the compact CSV summary"),
    format_json: bool = typer.Option(False, "--json", help="Write the run summary as JSON to stdout"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Hide per-test output"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to assay.yaml"),
) -> None:
    """Run the test suites defined in a Python file."""
    config = resolve_config(
        config_file,
        timeout=timeout,
        lang=lang,
        csv=csv,
        no_color=no_color,
        quiet=quiet,
    )

    try:
        suites = load_suites(suite_path)
    except SuiteLoadError as exc:
        console.print(f"[bold red]Could not load suites:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_LOAD_ERROR)

    report = asyncio.run(execute_suites(suites, config, format_json=format_json))
    finish(report, config, format_json=format_json)


def resolve_config(
    config_file: Path | None,
    *,
    timeout: int | None = None,
    lang: Language | None = None,
    csv: bool = False,
    no_color: bool = False,
    quiet: bool = False,
) -> EngineConfig:
    """Load the config file and apply command-line overrides.

    Exits with code 2 when the file is unreadable or invalid.
    """
    if config_file is not None and not config_file.is_file():
        console.print(f"[bold red]Config file not found:[/bold red] {escape(str(config_file))}")
        raise typer.Exit(code=EXIT_LOAD_ERROR)

    overrides: dict[str, Any] = {}
    if timeout is not None:
        overrides["timeout"] = timeout
    if lang is not None:
        overrides["language"] = lang
    if csv:
        overrides["csv_output"] = True
    if no_color:
        overrides["color"] = False
    if quiet:
        overrides["logging"] = False

    try:
        base = load_config(config_file)
        return EngineConfig.model_validate({**base.model_dump(), **overrides})
    except yaml.YAMLError as exc:
        console.print(f"[bold red]Config YAML error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_LOAD_ERROR)
    except ValidationError as exc:
        console.print("[bold red]Config validation errors:[/bold red]")
        for detail in config_error_details(exc):
            console.print(f"  {detail}", markup=False)
        raise typer.Exit(code=EXIT_LOAD_ERROR)


async def execute_suites(
    suites: Sequence[TestSuite],
    config: EngineConfig,
    *,
    format_json: bool = False,
) -> RunReport:
    """Run *suites* with a context built from *config*.

    In JSON mode per-test output goes to stderr so stdout carries
    nothing but the JSON document.
    """
    output_console = Console(stderr=True, highlight=False) if format_json else Console(highlight=False)
    context = ExecutionContext.from_config(config, console=output_console)
    return await SuiteRunner(context).run_all(suites)


def finish(report: RunReport, config: EngineConfig, *, format_json: bool) -> None:
    """Emit the quiet-mode and JSON outputs, then exit with the run's code."""
    if not config.logging:
        if config.csv_output:
            for line in report.csv():
                typer.echo(line, err=format_json)
        if not format_json:
            render_summary_table(report.summary, Console(highlight=False))

    if format_json:
        output_json(report.summary)

    raise typer.Exit(code=EXIT_OK if report.successful else EXIT_FAILED)
