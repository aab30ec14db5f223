"""
Match Strategies for matchrank.

Each strategy is independently computable and answers one question
about a candidate string: is it equal, does it start with the query,
does a word start with it, does it contain it, is the query an acronym
of it, are the query letters spread through it in order.

Strategies return a MatchResult variant when they hit and None when the
scorer should fall through to the next one. The fuzzy closeness check
is the last resort and always returns a result.

The acronym and closeness checks scan the candidate explicitly instead
of building one large pattern, so their cost stays linear in the
candidate length for each query character.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from ..diacritics import expand_query
from ..domain import (
    Acronym,
    CaseSensitiveEqual,
    Contains,
    Equal,
    Matches,
    NoMatch,
    StartsWith,
    WordStartsWith,
)


# Characters that, besides whitespace, end a word for acronym matching.
WORD_SEPARATORS = frozenset("-")


# =============================================================================
# PATTERN HELPERS
# =============================================================================

@lru_cache(maxsize=1024)
def compile_pattern(pattern: str, ignore_case: bool = True) -> re.Pattern[str]:
    """Compile (and cache) a query pattern."""
    return re.compile(pattern, re.IGNORECASE if ignore_case else 0)


def letter_pattern(letter: str) -> re.Pattern[str]:
    """Case-insensitive, diacritic-folding pattern for one query character."""
    return compile_pattern(expand_query(letter))


def is_word_start(text: str, index: int) -> bool:
    """True at the start of the text or right after whitespace or a hyphen."""
    if index == 0:
        return True
    previous = text[index - 1]
    return previous.isspace() or previous in WORD_SEPARATORS


# =============================================================================
# EXACT / PREFIX / SUBSTRING STRATEGIES
# =============================================================================

def equality_ranking(
    test_string: str,
    pattern: str,
) -> Optional[CaseSensitiveEqual | Equal]:
    """Anchored full match, first with case, then without."""
    if compile_pattern(pattern, ignore_case=False).fullmatch(test_string):
        return CaseSensitiveEqual()
    if compile_pattern(pattern).fullmatch(test_string):
        return Equal()
    return None


def starts_with_ranking(test_string: str, pattern: str) -> Optional[StartsWith]:
    match = compile_pattern(pattern).match(test_string)
    if match:
        return StartsWith(length=len(match.group(0)))
    return None


def word_starts_with_ranking(
    test_string: str,
    pattern: str,
) -> Optional[WordStartsWith]:
    """
    Whitespace immediately followed by the query.

    The reported span excludes the whitespace itself.
    """
    match = compile_pattern(r"\s" + pattern).search(test_string)
    if match:
        return WordStartsWith(
            index=match.start() + 1,
            length=len(match.group(0)) - 1,
        )
    return None


def contains_ranking(test_string: str, pattern: str) -> Optional[Contains]:
    match = compile_pattern(pattern).search(test_string)
    if match:
        return Contains(index=match.start(), length=len(match.group(0)))
    return None


# =============================================================================
# ACRONYM STRATEGY
# =============================================================================

def _word_start_hits(test_string: str, letter: str) -> list[tuple[int, int]]:
    """(start, end) of every place where `letter` begins a word."""
    matcher = letter_pattern(letter)
    hits = []
    for index in range(len(test_string)):
        if not is_word_start(test_string, index):
            continue
        match = matcher.match(test_string, index)
        if match:
            hits.append((index, match.end()))
    return hits


def acronym_ranking(test_string: str, query: str) -> Optional[Acronym]:
    """
    Match each query character as the first letter of successive words.

    Every word after the first must start past the end of the previous
    matched letter, with a separator in between. When several placements
    work, the first letter takes its earliest position and every later
    letter its latest one, which is where a greedy left-to-right pattern
    search would put them.

    Letters always fold diacritics and ignore case, even when the other
    strategies compare accents exactly.
    """
    if not query:
        return None

    hits = [_word_start_hits(test_string, letter) for letter in query]
    if not all(hits):
        return None

    # Walk backwards to find the latest feasible start for letters 2..n.
    latest: list[int] = [0] * len(query)
    bound = len(test_string) + 1
    for position in range(len(query) - 1, 0, -1):
        feasible = [start for start, end in hits[position] if end <= bound - 1]
        if not feasible:
            return None
        latest[position] = feasible[-1]
        bound = latest[position]

    first = next(
        (start for start, end in hits[0] if end <= bound - 1),
        None,
    )
    if first is None:
        return None
    latest[0] = first

    return Acronym(letter_indexes=tuple(latest))


# =============================================================================
# CLOSENESS STRATEGY (fuzzy subsequence)
# =============================================================================

def closeness_ranking(test_string: str, query: str) -> Matches | NoMatch:
    """
    Find the query characters in order, not necessarily together.

    Characters are compared exactly: no case or diacritic folding.
    Each character is looked up from just past the previous hit. Any
    miss is a NO_MATCH; otherwise closeness is 1 / spread, where spread
    runs from the first matched character to the end of the last one.
    """
    if not query:
        return NoMatch()

    first_index = -1
    position = 0
    matched = 0

    for letter in query:
        index = test_string.find(letter, position)
        if index < 0:
            return NoMatch()
        if first_index < 0:
            first_index = index
        position = index + 1
        matched += 1

    spread = position - first_index

    return Matches(
        spread=spread,
        matched_char_count=matched,
        closeness=(matched / len(query)) * (1 / spread),
    )
