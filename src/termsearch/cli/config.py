"""Configuration CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer

from termsearch.cli.context import CLIContext
from termsearch.cli.formatters import print_config, print_error, print_success
from termsearch.infrastructure.config import ConfigError, save_config, update_config
from termsearch.infrastructure.paths import default_resolver

app = typer.Typer(
    name="config",
    help="Inspect and change persisted settings.",
    no_args_is_help=True,
)


@app.command("show")
def show() -> None:
    """Show the effective configuration."""
    ctx = CLIContext.get()
    resolver = ctx.resolver or default_resolver
    print_config(ctx.get_config(), resolver.global_config())


@app.command("set")
def set_value(
    key: Annotated[
        str,
        typer.Argument(help="Setting name: default_threshold or case_sensitive"),
    ],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Change a setting and save it.

    \b
    Examples:
        termsearch config set default_threshold 0.7
        termsearch config set case_sensitive false
    """
    ctx = CLIContext.get()
    try:
        config = update_config(ctx.get_config(), key, value)
        save_config(config, ctx.resolver)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    ctx.config = config
    print_success(f"Set {key.replace('-', '_')} = {value}")
