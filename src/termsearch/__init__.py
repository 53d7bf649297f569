"""termsearch: fuzzy matching of a term against candidate strings."""

from termsearch.modules.search import Match, SearchResults, search

__version__ = "0.1.0"

__all__ = [
    "Match",
    "SearchResults",
    "__version__",
    "search",
]
