"""Assay CLI entry point."""

import logging
import os

import typer

from assay import __version__
from assay.cli.demo_cmd import demo
from assay.cli.run_cmd import run

# Environment variable selecting the log level of the assay loggers
LOG_LEVEL_ENV_VAR = "ASSAY_LOG_LEVEL"

app = typer.Typer(
    name="assay",
    help="Bounded-time assertion and exception test runner",
    no_args_is_help=True,
)

# Register subcommands
app.command()(run)
app.command()(demo)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"assay {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Bounded-time assertion and exception test runner."""
    level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
