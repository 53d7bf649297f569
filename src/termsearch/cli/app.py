"""Main CLI application."""

from __future__ import annotations

import typer

from termsearch import __version__
from termsearch.cli import config, search
from termsearch.cli.context import CLIContext
from termsearch.infrastructure.logging import configure_logging

app = typer.Typer(
    name="termsearch",
    help="Fuzzy matching of a term against candidate strings.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("search")(search.search_command)
app.command("compare")(search.compare_command)
app.add_typer(config.app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"termsearch {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress informational output.",
    ),
    log_json: bool = typer.Option(
        False,
        "--log-json",
        help="Emit log records as JSON on stderr.",
    ),
) -> None:
    """termsearch: score candidate strings against a term by edit distance."""
    ctx = CLIContext.get()
    ctx.quiet = quiet
    configure_logging(debug=verbose, quiet=quiet, json_logs=log_json)
