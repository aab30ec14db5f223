"""
String Scorer for matchrank.

Ranks one candidate string against a query by walking the strategy
cascade in strict priority order. The first strategy that hits decides
the ranking:

    1. CASE_SENSITIVE_EQUAL   anchored full match, with case
    2. EQUAL                  anchored full match, ignoring case
    3. STARTS_WITH            prefix
    4. WORD_STARTS_WITH       prefix of a later word
    5. CONTAINS               anywhere
    6. ACRONYM                leading letters of successive words
    7. MATCHES / NO_MATCH     letters in order, or nothing

Steps 2 to 6 ignore case. Unless diacritics are kept, steps 1 to 5
expand the query so accented look-alikes match each other; step 6
always folds them. Step 7 compares characters exactly.
"""

from __future__ import annotations

from ..diacritics import expand_query
from ..domain import InvalidArgumentError, MatchResult
from .components import (
    acronym_ranking,
    closeness_ranking,
    contains_ranking,
    equality_ranking,
    starts_with_ranking,
    word_starts_with_ranking,
)


def score(
    test_string: str,
    query: str,
    keep_diacritics: bool = False,
) -> MatchResult:
    """
    Score how well `query` matches `test_string`.

    Args:
        test_string: The candidate being ranked
        query: What the user typed
        keep_diacritics: Compare accented characters exactly

    Returns:
        The MatchResult variant of the best strategy that hit

    Raises:
        InvalidArgumentError: If either argument is not a string
    """
    if not isinstance(test_string, str):
        raise InvalidArgumentError(
            f"test_string must be str, got {type(test_string).__name__}"
        )
    if not isinstance(query, str):
        raise InvalidArgumentError(
            f"query must be str, got {type(query).__name__}"
        )

    pattern = expand_query(query, keep_diacritics)

    result = (
        equality_ranking(test_string, pattern)
        or starts_with_ranking(test_string, pattern)
        or word_starts_with_ranking(test_string, pattern)
        or contains_ranking(test_string, pattern)
        or acronym_ranking(test_string, query)
    )
    if result is not None:
        return result

    return closeness_ranking(test_string, query)
