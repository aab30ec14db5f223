"""
Item Ranking and Sorting for matchrank.

rank_item finds the best match for one item across all of its accessor
values. compare_items orders two results. match_sorter puts the two
together for a whole collection.

Selection rules:
    - Each candidate's ranking is clamped by its accessor's bounds
    - A candidate must reach its accessor's threshold to count
    - A higher ranking replaces the current best
    - Within the MATCHES tier, higher closeness replaces the current best
    - Anything else keeps the earlier candidate
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Optional, Sequence, TypeVar

from .accessors import AccessorSpec, extract_values, resolve_accessors
from .domain import (
    InvalidArgumentError,
    Matches,
    NoMatch,
    Ranking,
    RankingInfo,
    RankItemOptions,
    parse_ranking,
)
from .logging import get_logger
from .ranking.scorer import score

logger = get_logger(__name__)

T = TypeVar("T")


def _merge_options(
    options: Optional[RankItemOptions],
    accessors: Optional[Sequence[AccessorSpec]],
    threshold: Optional[Ranking],
    keep_diacritics: Optional[bool],
) -> RankItemOptions:
    """Keyword arguments win over the options record."""
    base = options or RankItemOptions()
    return RankItemOptions(
        accessors=accessors if accessors is not None else base.accessors,
        threshold=parse_ranking(threshold if threshold is not None else base.threshold),
        keep_diacritics=(
            keep_diacritics if keep_diacritics is not None else base.keep_diacritics
        ),
    )


# =============================================================================
# RANK ITEM
# =============================================================================

def rank_item(
    item: Any,
    query: str,
    accessors: Optional[Sequence[AccessorSpec]] = None,
    threshold: Optional[Ranking] = None,
    keep_diacritics: Optional[bool] = None,
    options: Optional[RankItemOptions] = None,
) -> RankingInfo:
    """
    Rank a single item against a query.

    Without accessors the item itself is the candidate and must be a
    string. With accessors, every value they produce is scored and the
    best one is kept along with which accessor produced it.

    Args:
        item: The item to rank
        query: What the user typed
        accessors: Callables or AccessorOptions deriving candidate strings
        threshold: Minimum ranking to pass (default MATCHES)
        keep_diacritics: Compare accented characters exactly
        options: RankItemOptions; explicit keyword arguments override it

    Returns:
        RankingInfo for the best qualifying candidate, or a NO_MATCH
        RankingInfo with accessor_index -1 when none qualified

    Raises:
        InvalidArgumentError: If no accessors are given and item is not a str
    """
    opts = _merge_options(options, accessors, threshold, keep_diacritics)

    if opts.accessors is None:
        if not isinstance(item, str):
            raise InvalidArgumentError(
                f"Items ranked without accessors must be str, got {type(item).__name__}"
            )
        match = score(item, query, opts.keep_diacritics)
        return RankingInfo(
            ranked_value=item,
            rank=match.rank,
            accessor_index=-1,
            accessor_threshold=opts.threshold,
            passed=match.rank >= opts.threshold,
            match=match,
        )

    best = RankingInfo(
        ranked_value=item,
        rank=Ranking.NO_MATCH,
        accessor_index=-1,
        accessor_threshold=opts.threshold,
        passed=False,
        match=NoMatch(),
    )

    for candidate in extract_values(item, opts.accessors):
        match = score(candidate.value, query, opts.keep_diacritics)
        rank = candidate.accessor.clamp(match.rank)
        accessor_threshold = parse_ranking(
            candidate.accessor.threshold
            if candidate.accessor.threshold is not None
            else opts.threshold
        )

        if rank < accessor_threshold:
            continue

        closer = (
            rank == Ranking.MATCHES
            and best.rank == Ranking.MATCHES
            and isinstance(match, Matches)
            and isinstance(best.match, Matches)
            and match.closeness > best.match.closeness
        )

        if rank > best.rank or closer:
            best = RankingInfo(
                ranked_value=candidate.value,
                rank=rank,
                accessor_index=candidate.accessor_index,
                accessor_threshold=accessor_threshold,
                passed=True,
                match=match,
            )

    return best


# =============================================================================
# COMPARATOR
# =============================================================================

def compare_items(a: RankingInfo, b: RankingInfo) -> int:
    """
    Order two results, best first.

    -1 when `a` sorts first, 1 when `b` does, 0 for a tie.
    Two MATCHES results compare by closeness; everything else by rank.
    """
    if a.rank == Ranking.MATCHES and b.rank == Ranking.MATCHES:
        difference = (b.closeness or 0.0) - (a.closeness or 0.0)
    else:
        difference = int(b.rank) - int(a.rank)
    return (difference > 0) - (difference < 0)


sort_key = cmp_to_key(compare_items)


# =============================================================================
# COLLECTION SORTING
# =============================================================================

def rank_items(
    items: Sequence[T],
    query: str,
    accessors: Optional[Sequence[AccessorSpec]] = None,
    threshold: Optional[Ranking] = None,
    keep_diacritics: Optional[bool] = None,
    options: Optional[RankItemOptions] = None,
) -> list[tuple[T, RankingInfo]]:
    """
    Rank every item and return the passing ones, best first.

    Ties keep the original order of `items`. The input is not modified.
    """
    opts = _merge_options(options, accessors, threshold, keep_diacritics)
    if opts.accessors is not None:
        # Resolve once for the whole collection.
        opts = RankItemOptions(
            accessors=resolve_accessors(opts.accessors),
            threshold=opts.threshold,
            keep_diacritics=opts.keep_diacritics,
        )

    ranked = [(item, rank_item(item, query, options=opts)) for item in items]
    passed = [pair for pair in ranked if pair[1].passed]
    passed.sort(key=lambda pair: sort_key(pair[1]))

    logger.debug(
        "items_ranked",
        query=query,
        total=len(ranked),
        passed=len(passed),
    )

    return passed


def match_sorter(
    items: Sequence[T],
    query: str,
    accessors: Optional[Sequence[AccessorSpec]] = None,
    threshold: Optional[Ranking] = None,
    keep_diacritics: Optional[bool] = None,
    options: Optional[RankItemOptions] = None,
) -> list[T]:
    """
    Filter and sort items by how well they match the query.

    >>> match_sorter(["Foo", "Bar", "Baz"], "ba")
    ['Bar', 'Baz']
    """
    return [
        item
        for item, _ in rank_items(
            items,
            query,
            accessors=accessors,
            threshold=threshold,
            keep_diacritics=keep_diacritics,
            options=options,
        )
    ]
