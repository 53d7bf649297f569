"""Search and compare CLI commands."""

from __future__ import annotations

import json
import math
from typing import Annotated

import structlog
import typer

from termsearch.cli.context import CLIContext
from termsearch.cli.formatters import (
    print_comparison,
    print_error,
    print_search_results,
)
from termsearch.infrastructure.candidates import CandidateSourceError, read_candidates
from termsearch.infrastructure.similarity import levenshtein_distance
from termsearch.modules.search import search, similarity_score

__all__ = ["compare_command", "search_command"]

logger = structlog.get_logger()


def search_command(
    term: Annotated[str, typer.Argument(help="Term to search for")],
    candidates: Annotated[
        list[str] | None,
        typer.Argument(help="Candidate strings", show_default=False),
    ] = None,
    file: Annotated[
        str | None,
        typer.Option(
            "--file",
            "-f",
            help="Read candidates from a file, one per line ('-' = stdin)",
        ),
    ] = None,
    threshold: Annotated[
        float | None,
        typer.Option(
            "--threshold",
            "-t",
            help="Keep candidates scoring above this (default from config)",
        ),
    ] = None,
    ignore_case: Annotated[
        bool | None,
        typer.Option(
            "--ignore-case/--case-sensitive",
            help="Compare case-insensitively (default from config)",
            show_default=False,
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print results as JSON"),
    ] = False,
) -> None:
    """Find candidates similar to a term.

    Scores each candidate by edit distance relative to the longer string
    and keeps those strictly above the threshold, in input order.

    \b
    Examples:
        termsearch search apple apple pineapple orange
        termsearch search apple -t 0 apple pineapple orange
        termsearch search colour -f words.txt --json
        cat words.txt | termsearch search colour -f -
    """
    ctx = CLIContext.get()
    config = ctx.get_config()

    pool = list(candidates or [])
    if file is not None:
        try:
            pool.extend(read_candidates(file))
        except CandidateSourceError as e:
            print_error(str(e))
            raise typer.Exit(1) from e

    if not pool:
        print_error("No candidates given. Pass them as arguments or use --file.")
        raise typer.Exit(1)

    if threshold is None:
        threshold = config.default_threshold
    if not math.isfinite(threshold):
        print_error(f"Threshold must be a finite number, got {threshold}.")
        raise typer.Exit(1)
    if ignore_case is None:
        ignore_case = not config.case_sensitive

    results = search(term, pool, threshold, key=str.lower if ignore_case else None)
    logger.debug(
        "search_complete",
        term=term,
        threshold=threshold,
        ignore_case=ignore_case,
        scanned=len(pool),
        total=results.total,
    )

    if as_json:
        payload = {
            "term": results.term,
            "threshold": threshold,
            "total": results.total,
            "matches": [
                {"candidate": m.candidate, "similarity": m.similarity}
                for m in results.matches
            ],
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print_search_results(results, threshold)


def compare_command(
    first: Annotated[str, typer.Argument(help="First string")],
    second: Annotated[str, typer.Argument(help="Second string")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the comparison as JSON"),
    ] = False,
) -> None:
    """Show the edit distance and similarity of two strings.

    \b
    Examples:
        termsearch compare kitten knitting
        termsearch compare pineapple apple --json
    """
    distance = levenshtein_distance(first, second)
    similarity = similarity_score(first, second)

    if as_json:
        payload = {
            "first": first,
            "second": second,
            "distance": distance,
            "similarity": similarity,
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print_comparison(first, second, distance, similarity)
