"""Fuzzy term search module."""

from termsearch.modules.search.matcher import (
    Match,
    SearchResults,
    search,
    similarity_score,
)

__all__ = [
    "Match",
    "SearchResults",
    "search",
    "similarity_score",
]
