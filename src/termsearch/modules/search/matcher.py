"""Similarity scoring and threshold filtering over candidate strings."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from termsearch.infrastructure.similarity import levenshtein_distance

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

__all__ = [
    "Match",
    "SearchResults",
    "search",
    "similarity_score",
]


@dataclass(frozen=True)
class Match:
    """A candidate that passed the threshold, with its similarity score."""

    candidate: str
    similarity: float


@dataclass(frozen=True)
class SearchResults:
    """Immutable outcome of a single search.

    Attributes:
        term: The search term as given.
        matches: Matching candidates in input order.
        total: Number of matches, always ``len(matches)``.
    """

    term: str
    matches: tuple[Match, ...] = ()
    total: int = field(init=False)

    def __post_init__(self) -> None:
        # Accept any sequence of matches but store an immutable tuple
        object.__setattr__(self, "matches", tuple(self.matches))
        object.__setattr__(self, "total", len(self.matches))


def _round_half_up(value: float, ndigits: int = 2) -> float:
    """Round a non-negative value half away from zero.

    The builtin round() rounds half to even, which would turn 0.625 into
    0.62 instead of 0.63.
    """
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def similarity_score(s1: str, s2: str) -> float:
    """Calculate a similarity score between 0.0 and 1.0 for two strings.

    The score is the share of the longer string's characters that did not
    need an edit, rounded to two decimal places.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        1.0 for identical strings (including two empty strings),
        0.0 when every character needs an edit.
    """
    max_length = max(len(s1), len(s2))
    if max_length == 0:
        return 1.0

    distance = levenshtein_distance(s1, s2)
    return _round_half_up((max_length - distance) / max_length)


def search(
    term: str,
    candidates: Iterable[str],
    threshold: float,
    *,
    key: Callable[[str], str] | None = None,
) -> SearchResults:
    """Find candidates whose similarity to a term exceeds a threshold.

    Candidates scoring exactly the threshold are excluded. Matches keep the
    order of the input; they are not ranked by score.

    Args:
        term: The string to match against.
        candidates: Possible matches.
        threshold: Exclusive lower bound on the similarity score. Any float
            is accepted; values outside [0, 1] pass everything or nothing.
        key: Optional normalization applied to the term and each candidate
            before scoring (e.g. str.lower). Matches still report the
            candidate as given.

    Returns:
        SearchResults for the term.
    """
    matches = []
    compared_term = key(term) if key is not None else term

    for candidate in candidates:
        compared = key(candidate) if key is not None else candidate
        similarity = similarity_score(compared_term, compared)
        if similarity <= threshold:
            continue
        matches.append(Match(candidate=candidate, similarity=similarity))

    return SearchResults(term=term, matches=tuple(matches))
