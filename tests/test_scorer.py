"""
Tests for the string scorer.

These tests verify:
1. Each strategy in the cascade produces its own ranking and payload
2. Higher-priority strategies win over lower ones
3. Diacritic folding and the keep_diacritics switch
4. Query metacharacters are matched literally
"""

import pytest

from matchrank.domain import (
    Acronym,
    CaseSensitiveEqual,
    Contains,
    Equal,
    InvalidArgumentError,
    Matches,
    NoMatch,
    Ranking,
    StartsWith,
    WordStartsWith,
)
from matchrank.ranking.components import (
    acronym_ranking,
    closeness_ranking,
    is_word_start,
)
from matchrank.ranking.scorer import score


# =============================================================================
# CASCADE TESTS
# =============================================================================

class TestCascade:
    """Test each tier of the ranking cascade."""

    @pytest.mark.parametrize("text", ["hello", "Fred Flintstone", "a", "x-y z"])
    def test_identical_strings_are_case_sensitive_equal(self, text):
        """A string always matches itself exactly."""
        assert score(text, text) == CaseSensitiveEqual()

    @pytest.mark.parametrize("text", ["hello", "Fred Flintstone", "mixed Case"])
    def test_uppercased_string_is_equal(self, text):
        """Case differences drop exactly one tier."""
        assert score(text.upper(), text) == Equal()

    def test_starts_with(self):
        """Prefix matches report the matched length."""
        assert score("Starts here", "start") == StartsWith(length=5)

    def test_word_starts_with(self):
        """Index points past the whitespace, length excludes it."""
        assert score("hello world", "wor") == WordStartsWith(index=6, length=3)

    def test_contains(self):
        """Substring matches report their span."""
        assert score("hello world", "ell") == Contains(index=1, length=3)

    def test_acronym(self):
        """Query letters as leading letters of words, case-insensitive."""
        assert score("Fred Flintstone", "ff") == Acronym(letter_indexes=(0, 5))

    def test_acronym_across_hyphen(self):
        """A hyphen starts a new word too."""
        assert score("jean-luc picard", "jlp") == Acronym(letter_indexes=(0, 5, 9))

    def test_fuzzy_subsequence(self):
        """Letters in order but apart fall back to MATCHES."""
        result = score("hello", "hlo")

        assert isinstance(result, Matches)
        assert result.spread == 5
        assert result.matched_char_count == 3
        assert result.closeness == pytest.approx(0.2)

    def test_missing_letter_is_no_match(self):
        """Every query letter must be present."""
        assert score("hello", "help") == NoMatch()

    def test_unrelated_is_no_match(self):
        assert score("hello", "xyz") == NoMatch()

    def test_rank_attribute_follows_variant(self):
        """Every payload exposes its tier."""
        assert score("hello", "hello").rank == Ranking.CASE_SENSITIVE_EQUAL
        assert score("hello world", "ell").rank == Ranking.CONTAINS
        assert score("hello", "xyz").rank == Ranking.NO_MATCH


# =============================================================================
# PRIORITY TESTS
# =============================================================================

class TestPriority:
    """Test that the first strategy to hit decides the ranking."""

    def test_prefix_beats_word_start(self):
        """A prefix hit is reported even when a later word also matches."""
        assert score("foo bar foo", "foo").rank == Ranking.STARTS_WITH

    def test_word_start_beats_contains(self):
        """'bar' occurs inside 'xbar' and at the start of a word."""
        assert score("xbar bar", "bar") == WordStartsWith(index=5, length=3)

    def test_word_start_checked_before_contains(self):
        assert score("an apple", "ap").rank == Ranking.WORD_STARTS_WITH
        assert score("snap peas", "ap").rank == Ranking.CONTAINS

    def test_ranking_scale_is_ordered(self):
        """The scale is strictly increasing from NO_MATCH upward."""
        ordered = [
            Ranking.NO_MATCH,
            Ranking.MATCHES,
            Ranking.ACRONYM,
            Ranking.CONTAINS,
            Ranking.WORD_STARTS_WITH,
            Ranking.STARTS_WITH,
            Ranking.EQUAL,
            Ranking.CASE_SENSITIVE_EQUAL,
        ]
        assert ordered == sorted(ordered)
        assert [int(r) for r in ordered] == list(range(8))


# =============================================================================
# DIACRITIC TESTS
# =============================================================================

class TestDiacritics:
    """Test accent folding and its opt-out."""

    def test_accented_candidate_matches_plain_query(self):
        assert score("café", "cafe").rank >= Ranking.EQUAL

    def test_keep_diacritics_blocks_folding(self):
        """Strings differing only by accents no longer compare equal."""
        result = score("café", "cafe", keep_diacritics=True)

        assert result.rank < Ranking.EQUAL
        assert result == NoMatch()

    def test_case_and_accent_together(self):
        assert score("Café", "cafe") == Equal()

    def test_ligature_matches_two_letters(self):
        """'ae' in the query matches the 'Æ' ligature."""
        assert score("Æther", "aether") == Equal()

    def test_whitespace_matches_any_whitespace(self):
        assert score("hello\tworld", "hello world") == CaseSensitiveEqual()

    def test_accented_acronym(self):
        assert score("Éric Fontaine", "ef") == Acronym(letter_indexes=(0, 5))

    def test_acronym_folds_even_when_keeping_diacritics(self):
        result = score("Éric Fontaine", "ef", keep_diacritics=True)

        assert result == Acronym(letter_indexes=(0, 5))


# =============================================================================
# LITERAL QUERY TESTS
# =============================================================================

class TestLiteralQueries:
    """Test that pattern metacharacters in queries are literal."""

    def test_dot_is_literal(self):
        assert score("a.b", "a.b") == CaseSensitiveEqual()
        assert score("axb", "a.b") == NoMatch()

    def test_unbalanced_parenthesis(self):
        assert score("(x", "(") == StartsWith(length=1)

    def test_plus_and_equals(self):
        assert score("1+1=2", "1+1") == StartsWith(length=3)

    def test_star_in_query(self):
        assert score("a*b", "*").rank == Ranking.CONTAINS
        assert score("aaa", "a*").rank == Ranking.NO_MATCH


# =============================================================================
# EDGE CASES
# =============================================================================

class TestEdgeCases:
    """Test degenerate inputs."""

    def test_empty_query_on_empty_string(self):
        assert score("", "") == CaseSensitiveEqual()

    def test_empty_query_is_zero_length_prefix(self):
        assert score("abc", "") == StartsWith(length=0)

    def test_empty_candidate(self):
        assert score("", "a") == NoMatch()

    def test_non_string_candidate_rejected(self):
        with pytest.raises(InvalidArgumentError):
            score(None, "x")

    def test_non_string_query_rejected(self):
        with pytest.raises(InvalidArgumentError):
            score("x", 1)


# =============================================================================
# STRATEGY TESTS
# =============================================================================

class TestAcronymStrategy:
    """Test the acronym scan directly."""

    def test_first_letter_earliest_later_letters_latest(self):
        """'a' begins words at 0, 3 and 9; the match spans 0 and 9."""
        assert acronym_ranking("an apple a day", "aa") == Acronym(letter_indexes=(0, 9))

    def test_letter_must_start_a_word(self):
        assert acronym_ranking("fluffy", "ff") is None

    def test_words_must_follow_in_order(self):
        assert acronym_ranking("Barney Adams", "ab") is None

    def test_word_start_helper(self):
        assert is_word_start("a b-c", 0)
        assert is_word_start("a b-c", 2)
        assert is_word_start("a b-c", 4)
        assert not is_word_start("ab", 1)


class TestClosenessStrategy:
    """Test the fuzzy subsequence scan directly."""

    def test_tighter_cluster_scores_higher(self):
        loose = closeness_ranking("hxxxlxxxo", "hlo")
        tight = closeness_ranking("hlxo", "hlo")

        assert tight.closeness > loose.closeness
        assert loose.spread == 9
        assert tight.spread == 4

    def test_spread_starts_at_first_match(self):
        """Leading characters before the first hit are not counted."""
        result = closeness_ranking("xxabc", "ac")

        assert result.spread == 3
        assert result.closeness == pytest.approx(1 / 3)

    def test_case_sensitive(self):
        """Fuzzy letters must match case exactly."""
        assert closeness_ranking("HeLLo", "hlo") == NoMatch()
        assert score("ABC", "ac") == NoMatch()

    def test_diacritics_not_folded(self):
        """An accented letter does not stand in for its plain form."""
        assert closeness_ranking("cxé", "ce") == NoMatch()
        assert score("cxé", "ce") == NoMatch()

    def test_out_of_order_is_no_match(self):
        assert closeness_ranking("olh", "hlo") == NoMatch()
