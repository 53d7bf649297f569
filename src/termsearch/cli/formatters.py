"""Rich console output formatting utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from termsearch.cli.context import CLIContext

if TYPE_CHECKING:
    from pathlib import Path

    from termsearch.infrastructure.config import SearchConfig
    from termsearch.modules.search import SearchResults

__all__ = [
    "console",
    "error_console",
    "format_similarity",
    "print_comparison",
    "print_config",
    "print_error",
    "print_info",
    "print_search_results",
    "print_success",
]

console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message.

    Suppressed when --quiet flag is set.
    """
    if not CLIContext.get().quiet:
        console.print(f"[blue]i[/blue] {escape(message)}")


def format_similarity(similarity: float) -> str:
    """Format a similarity score with two decimals (e.g. "0.56")."""
    return f"{similarity:.2f}"


def print_search_results(results: SearchResults, threshold: float) -> None:
    """Print matches as a table followed by the total.

    Args:
        results: Results of a search.
        threshold: Threshold the search ran with, for the header.
    """
    bound = format_similarity(threshold)
    if not results.matches:
        print_info(f"No matches for '{results.term}' above {bound}")
        return

    table = Table(title=f"Matches for '{escape(results.term)}' (> {bound})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Candidate", style="cyan")
    table.add_column("Similarity", style="green", justify="right")

    for index, match in enumerate(results.matches, start=1):
        table.add_row(
            str(index),
            escape(match.candidate),
            format_similarity(match.similarity),
        )

    console.print(table)
    if not CLIContext.get().quiet:
        console.print(f"[bold]Total:[/bold] {results.total}")


def print_comparison(s1: str, s2: str, distance: int, similarity: float) -> None:
    """Print edit distance and similarity of two strings."""
    lines = [
        f"[bold]First:[/bold]      '{escape(s1)}'",
        f"[bold]Second:[/bold]     '{escape(s2)}'",
        f"[bold]Distance:[/bold]   {distance}",
        f"[bold]Similarity:[/bold] {format_similarity(similarity)}",
    ]
    console.print(
        Panel("\n".join(lines), title="[cyan]Comparison[/cyan]", border_style="cyan")
    )


def print_config(config: SearchConfig, path: Path) -> None:
    """Print the effective configuration and where it is stored."""
    lines = [
        f"[bold]default_threshold:[/bold] {config.default_threshold}",
        f"[bold]case_sensitive:[/bold]    {str(config.case_sensitive).lower()}",
        "",
        f"[dim]{escape(str(path))}[/dim]",
    ]
    console.print(
        Panel("\n".join(lines), title="[blue]Configuration[/blue]", border_style="blue")
    )
