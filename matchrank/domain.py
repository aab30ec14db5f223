"""
Core Domain Model for matchrank.

Defines the closed ranking scale, the per-tier match payloads, and the
result record handed back to callers.

Match payloads are a tagged union: one frozen dataclass per ranking
tier. A payload can only carry the fields that make sense for its tier,
so closeness never shows up on a CONTAINS result and a STARTS_WITH
result never has an index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, Optional, Sequence, Union


# =============================================================================
# EXCEPTIONS
# =============================================================================

class MatchRankError(Exception):
    """Base class for errors raised by matchrank."""
    pass


class InvalidArgumentError(MatchRankError, TypeError):
    """Raised when a caller passes a value the ranking contract forbids."""
    pass


# =============================================================================
# RANKING SCALE
# =============================================================================

class Ranking(IntEnum):
    """
    Ordinal match quality, highest wins.

    Used both as a threshold cutoff and as a sort key:
    - CASE_SENSITIVE_EQUAL: candidate is exactly the query
    - EQUAL: candidate equals the query ignoring case
    - STARTS_WITH: candidate begins with the query
    - WORD_STARTS_WITH: a word inside the candidate begins with the query
    - CONTAINS: query appears somewhere in the candidate
    - ACRONYM: query letters begin successive words of the candidate
    - MATCHES: query letters appear in order, not necessarily together
    - NO_MATCH: none of the above
    """
    NO_MATCH = 0
    MATCHES = 1
    ACRONYM = 2
    CONTAINS = 3
    WORD_STARTS_WITH = 4
    STARTS_WITH = 5
    EQUAL = 6
    CASE_SENSITIVE_EQUAL = 7


DEFAULT_THRESHOLD = Ranking.MATCHES


def parse_ranking(value: Union[str, int, Ranking]) -> Ranking:
    """
    Resolve a ranking from its name or number.

    Accepts "starts_with", "STARTS_WITH", 5 or Ranking.STARTS_WITH.

    Raises:
        InvalidArgumentError: If the value names no ranking
    """
    if isinstance(value, Ranking):
        return value
    if isinstance(value, str):
        name = value.strip().upper().replace("-", "_")
        if name in Ranking.__members__:
            return Ranking[name]
        if name.isdigit():
            value = int(name)
        else:
            raise InvalidArgumentError(f"Unknown ranking name: {value!r}")
    try:
        return Ranking(value)
    except ValueError:
        raise InvalidArgumentError(f"Unknown ranking value: {value!r}") from None


# =============================================================================
# MATCH RESULTS (one variant per tier)
# =============================================================================

@dataclass(frozen=True)
class NoMatch:
    rank: ClassVar[Ranking] = Ranking.NO_MATCH


@dataclass(frozen=True)
class CaseSensitiveEqual:
    rank: ClassVar[Ranking] = Ranking.CASE_SENSITIVE_EQUAL


@dataclass(frozen=True)
class Equal:
    rank: ClassVar[Ranking] = Ranking.EQUAL


@dataclass(frozen=True)
class StartsWith:
    """Query matched a prefix of `length` characters."""
    length: int
    rank: ClassVar[Ranking] = Ranking.STARTS_WITH


@dataclass(frozen=True)
class WordStartsWith:
    """Query matched at the start of a word beginning at `index`."""
    index: int
    length: int
    rank: ClassVar[Ranking] = Ranking.WORD_STARTS_WITH


@dataclass(frozen=True)
class Contains:
    """Query matched the span [index, index + length)."""
    index: int
    length: int
    rank: ClassVar[Ranking] = Ranking.CONTAINS


@dataclass(frozen=True)
class Acronym:
    """One position per query character, each the start of a word."""
    letter_indexes: tuple[int, ...]
    rank: ClassVar[Ranking] = Ranking.ACRONYM


@dataclass(frozen=True)
class Matches:
    """
    Fuzzy subsequence hit.

    closeness = matched_char_count / query length / spread, so a tighter
    cluster of matched characters scores higher. Only compared against
    other MATCHES results.
    """
    spread: int
    matched_char_count: int
    closeness: float
    rank: ClassVar[Ranking] = Ranking.MATCHES


MatchResult = Union[
    NoMatch,
    CaseSensitiveEqual,
    Equal,
    StartsWith,
    WordStartsWith,
    Contains,
    Acronym,
    Matches,
]


# =============================================================================
# RANKING INFO
# =============================================================================

@dataclass(frozen=True)
class RankingInfo:
    """
    The best match found for one item.

    `rank` is the accessor-clamped ranking, while `match` is the raw
    payload the scorer produced for the winning candidate, so the two
    can disagree when an accessor bounds its rankings.

    accessor_index is -1 when the item was scored directly or when no
    candidate qualified.
    """
    ranked_value: Any
    rank: Ranking
    accessor_index: int
    accessor_threshold: Ranking
    passed: bool
    match: MatchResult = field(default_factory=NoMatch)

    @property
    def closeness(self) -> Optional[float]:
        """Closeness of a fuzzy match, None for every other payload."""
        if isinstance(self.match, Matches):
            return self.match.closeness
        return None


# =============================================================================
# OPTIONS
# =============================================================================

@dataclass(frozen=True)
class RankItemOptions:
    """
    Call-level options shared by rank_item and match_sorter.

    accessors: None to rank the items themselves (they must be strings)
    threshold: minimum ranking an item must reach to pass
    keep_diacritics: compare accented characters exactly
    """
    accessors: Optional[Sequence[Any]] = None
    threshold: Ranking = DEFAULT_THRESHOLD
    keep_diacritics: bool = False
