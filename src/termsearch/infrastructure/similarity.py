"""Edit distance between strings."""

from __future__ import annotations

__all__ = [
    "levenshtein_distance",
]


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein (edit) distance between two strings.

    The Levenshtein distance is the minimum number of single-character
    edits (insertions, deletions, substitutions) to transform s1 into s2.
    Characters are compared by codepoint; no case folding or Unicode
    normalization is applied.

    Only the previous and current rows of the cost matrix are kept, so
    memory use is O(len(s2)).

    Args:
        s1: First string (rows of the cost matrix).
        s2: Second string (columns of the cost matrix).

    Returns:
        The edit distance between the strings.
    """
    previous_row = list(range(len(s2) + 1))
    current_row = [0] * (len(s2) + 1)

    for row, c1 in enumerate(s1, start=1):
        # First column: deleting every character of s1[:row]
        current_row[0] = row
        for col, c2 in enumerate(s2, start=1):
            substitution_cost = 0 if c1 == c2 else 1
            current_row[col] = min(
                current_row[col - 1] + 1,  # insertion
                previous_row[col] + 1,  # deletion
                previous_row[col - 1] + substitution_cost,
            )
        # Swap rather than reallocate; the old previous row is overwritten next pass
        previous_row, current_row = current_row, previous_row

    return previous_row[-1]
