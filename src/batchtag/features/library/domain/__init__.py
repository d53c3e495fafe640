"""
Summary: Pure library helpers such as record search.
Why: Keep query parsing independent of folder scanning and tag I/O.
"""

from .search import (
    ADVANCED_PREFIX,
    SearchResult,
    SearchTerm,
    is_advanced_query,
    parse_advanced_query,
    search_records,
)

__all__ = [
    "ADVANCED_PREFIX",
    "SearchResult",
    "SearchTerm",
    "is_advanced_query",
    "parse_advanced_query",
    "search_records",
]
