"""assay demo -- run the bundled example suites."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from assay.cli.run_cmd import execute_suites, finish, resolve_config
from assay.models.config import Language


def demo(
    lang: Optional[Language] = typer.Option(None, "--lang", "-l", help="Message language"),
    csv: bool = typer.Option(False, "--csv", help="Print the compact CSV summary"),
    format_json: bool = typer.Option(False, "--json", help="Write the run summary as JSON to stdout"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Hide per-test output"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to assay.yaml"),
) -> None:
    """Run the example suites shipped with assay.

    Some examples fail on purpose to show every kind of failure report,
    so the exit code is 1.
    """
    from assay.examples import SUITES

    config = resolve_config(config_file, lang=lang, csv=csv, no_color=no_color, quiet=quiet)
    report = asyncio.run(execute_suites(SUITES, config, format_json=format_json))
    finish(report, config, format_json=format_json)
