"""
Tests for query expansion and diacritic folding.

These tests verify:
1. Accented and case variants match through the expanded pattern
2. Expanded text is never rewritten by later table entries
3. Metacharacters are escaped, with or without folding
"""

import re

import pytest

from matchrank.diacritics import SIMILAR_CHARACTERS, expand_query


def matches(query: str, text: str, keep_diacritics: bool = False) -> bool:
    pattern = re.compile(expand_query(query, keep_diacritics), re.IGNORECASE)
    return pattern.fullmatch(text) is not None


# =============================================================================
# FOLDING TESTS
# =============================================================================

class TestFolding:
    """Test that variants fold onto their plain forms."""

    @pytest.mark.parametrize("text", ["cafe", "café", "CAFÉ", "cafè"])
    def test_plain_query_matches_variants(self, text):
        assert matches("cafe", text)

    def test_accented_query_matches_plain_text(self):
        """The accented letter belongs to the same class as its plain form."""
        assert matches("café", "cafe")

    def test_ligature_query(self):
        assert matches("æ", "ae")
        assert matches("æ", "Æ")

    def test_two_letter_form_claimed_as_ligature(self):
        assert expand_query("ae") == "(?:ae|æ|ǽ)"

    def test_whitespace_variants(self):
        assert matches("a b", "a\tb")
        assert matches("a b", "a b")

    def test_every_table_entry_matches_its_canonical_form(self):
        for variants in SIMILAR_CHARACTERS:
            for variant in variants:
                assert matches(variant, variants[0]), variant


# =============================================================================
# PATTERN SAFETY TESTS
# =============================================================================

class TestPatternSafety:
    """Test that any query yields a valid, literal pattern."""

    @pytest.mark.parametrize("query", ["(", "[a-", "a.b", "*", "\\", "s t", "\\s"])
    def test_pattern_always_compiles(self, query):
        re.compile(expand_query(query))

    def test_whitespace_class_not_rewritten(self):
        """The 's' entry must not touch the whitespace class already emitted."""
        assert matches("s t", "ś\tt")
        assert not matches("s t", "sst")

    def test_backslash_is_literal(self):
        assert matches("\\s", "\\s")
        assert not matches("\\s", " ")

    def test_keep_diacritics_only_escapes(self):
        assert expand_query("a.b", keep_diacritics=True) == re.escape("a.b")
        assert not matches("cafe", "café", keep_diacritics=True)

    def test_unknown_characters_escaped(self):
        assert matches("1+1", "1+1")
        assert not matches("1+1", "11")
