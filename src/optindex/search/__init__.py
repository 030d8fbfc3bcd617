"""Search – first-occurrence lookup returning an Option."""
from optindex.search.indexed import IndexedSearch, find_first_index
from optindex.search.settings import SearchSettings
from optindex.search.strategies import (
    IndexStrategy,
    SearchStrategy,
    available_strategies,
    filter_first_index,
    match_all_first_index,
    resolve_strategy,
    scan_first_index,
)

__all__ = [
    "IndexStrategy",
    "IndexedSearch",
    "SearchSettings",
    "SearchStrategy",
    "available_strategies",
    "filter_first_index",
    "find_first_index",
    "match_all_first_index",
    "resolve_strategy",
    "scan_first_index",
]
