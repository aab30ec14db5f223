# matchrank
# Rank and sort items by how well they match a query string

"""
Every candidate string is placed on a fixed ranking scale, from an exact
case-sensitive match down to a loose in-order match of the query
letters. Structured items are ranked through accessors, and the best
candidate of each item decides where the item sorts.
"""

from .accessors import AccessorOptions, extract_values, resolve_accessor
from .diacritics import expand_query
from .domain import (
    Acronym,
    CaseSensitiveEqual,
    Contains,
    DEFAULT_THRESHOLD,
    Equal,
    InvalidArgumentError,
    MatchRankError,
    Matches,
    MatchResult,
    NoMatch,
    Ranking,
    RankingInfo,
    RankItemOptions,
    StartsWith,
    WordStartsWith,
    parse_ranking,
)
from .ranking.scorer import score
from .sorter import compare_items, match_sorter, rank_item, rank_items, sort_key

__version__ = "0.1.0"

__all__ = [
    "AccessorOptions",
    "Acronym",
    "CaseSensitiveEqual",
    "Contains",
    "DEFAULT_THRESHOLD",
    "Equal",
    "InvalidArgumentError",
    "MatchRankError",
    "MatchResult",
    "Matches",
    "NoMatch",
    "Ranking",
    "RankItemOptions",
    "RankingInfo",
    "StartsWith",
    "WordStartsWith",
    "compare_items",
    "expand_query",
    "extract_values",
    "match_sorter",
    "parse_ranking",
    "rank_item",
    "rank_items",
    "resolve_accessor",
    "score",
    "sort_key",
]
