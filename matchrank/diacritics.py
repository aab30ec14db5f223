"""
Diacritic folding for query patterns.

A query is turned into a regular-expression pattern in which every
character with known look-alikes is replaced by an alternation that
matches all of them: case variants, accented forms, ligatures written
as one or two letters, and whitespace matching any whitespace.

The table below is fixed and ordered. Entries are applied one after the
other over the query; text produced by an earlier entry is never
rewritten by a later one, and any text no entry claims is escaped, so
the result is always a valid pattern whatever the query contains.
"""

from __future__ import annotations

import re
from functools import lru_cache


# =============================================================================
# SIMILAR CHARACTER TABLE
# =============================================================================

# Canonical form first. Multi-letter forms come before the single letters
# they are made of so that "AE" is claimed as a ligature, not as A then E.
SIMILAR_CHARACTERS: tuple[tuple[str, ...], ...] = (
    ("AE", "Æ", "Ǽ"),
    ("ae", "æ", "ǽ"),
    ("IJ", "Ĳ"),
    ("ij", "ĳ"),
    ("OE", "Œ"),
    ("oe", "œ"),
    ("TH", "Þ"),
    ("th", "þ"),
    ("A", "À", "Á", "Â", "Ã", "Ä", "Å", "Ấ", "Ắ", "Ẳ", "Ẵ", "Ặ", "Ầ", "Ằ", "Ȃ",
     "Ā", "Ă", "Ą", "Ǎ", "Ǻ", "Ȁ"),
    ("C", "Ç", "Ḉ", "Ć", "Ĉ", "Ċ", "Č"),
    ("E", "È", "É", "Ê", "Ë", "Ế", "Ḗ", "Ề", "Ḕ", "Ḝ", "Ȇ", "Ē", "Ĕ", "Ė", "Ę",
     "Ě", "Ȅ", "Ȩ", "Ɛ"),
    ("I", "Ì", "Í", "Î", "Ï", "Ḯ", "Ȋ", "Ĩ", "Ī", "Ĭ", "Į", "İ", "Ǐ", "Ȉ", "Ɨ"),
    ("D", "Ð", "Ď", "Đ", "Ḑ"),
    ("N", "Ñ", "Ń", "Ņ", "Ň", "Ǹ"),
    ("O", "Ò", "Ó", "Ô", "Õ", "Ö", "Ø", "Ố", "Ṍ", "Ṓ", "Ȏ", "Ō", "Ŏ", "Ő", "Ơ",
     "Ǒ", "Ǿ", "Ồ", "Ṑ", "Ȍ"),
    ("U", "Ù", "Ú", "Û", "Ü", "Ũ", "Ū", "Ŭ", "Ů", "Ű", "Ų", "Ȗ", "Ư", "Ǔ", "Ǖ",
     "Ǘ", "Ǚ", "Ǜ", "Ứ", "Ṹ", "Ừ", "Ȕ"),
    ("Y", "Ý", "Ŷ", "Ÿ", "Ỳ"),
    ("a", "à", "á", "â", "ã", "ä", "å", "ấ", "ắ", "ẳ", "ẵ", "ặ", "ầ", "ằ", "ȃ",
     "ā", "ă", "ą", "ǎ", "ǻ", "ȁ"),
    ("c", "ç", "ḉ", "ć", "ĉ", "ċ", "č"),
    ("e", "è", "é", "ê", "ë", "ế", "ḗ", "ề", "ḕ", "ḝ", "ȇ", "ē", "ĕ", "ė", "ę",
     "ě", "ȅ", "ȩ", "ɛ"),
    ("i", "ì", "í", "î", "ï", "ḯ", "ȋ", "ĩ", "ī", "ĭ", "į", "ı", "ǐ", "ȉ", "ɨ"),
    ("d", "ð", "ď", "đ", "ḑ"),
    ("n", "ñ", "ń", "ņ", "ň", "ŉ", "ǹ"),
    ("o", "ò", "ó", "ô", "õ", "ö", "ø", "ố", "ṍ", "ṓ", "ȏ", "ō", "ŏ", "ő", "ơ",
     "ǒ", "ǿ", "ồ", "ṑ", "ȍ"),
    ("u", "ù", "ú", "û", "ü", "ũ", "ū", "ŭ", "ů", "ű", "ų", "ȗ", "ư", "ǔ", "ǖ",
     "ǘ", "ǚ", "ǜ", "ứ", "ṹ", "ừ", "ȕ"),
    ("y", "ý", "ÿ", "ŷ", "ỳ"),
    ("G", "Ĝ", "Ǵ", "Ğ", "Ġ", "Ģ", "Ǧ"),
    ("g", "ĝ", "ǵ", "ğ", "ġ", "ģ", "ǧ"),
    ("H", "Ĥ", "Ħ", "Ḫ", "Ȟ", "Ḩ"),
    ("h", "ĥ", "ħ", "ḫ", "ȟ", "ḩ"),
    ("J", "Ĵ"),
    ("j", "ĵ", "ǰ"),
    ("K", "Ķ", "Ḱ", "Ǩ"),
    ("k", "ķ", "ḱ", "ǩ"),
    ("L", "Ĺ", "Ļ", "Ľ", "Ŀ"),
    ("l", "ĺ", "ļ", "ľ", "ŀ", "Ł", "ł"),
    ("M", "Ḿ"),
    ("m", "ḿ"),
    ("P", "Ṕ"),
    ("p", "ṕ"),
    ("R", "Ŕ", "Ŗ", "Ř", "Ȓ", "Ȑ"),
    ("r", "ŕ", "ŗ", "ř", "ȓ", "ȑ"),
    ("S", "Ś", "Ŝ", "Ş", "Ș", "Š", "Ṥ", "Ṧ"),
    ("s", "ś", "ŝ", "ș", "ş", "š", "ſ", "ṥ", "ṧ"),
    ("T", "Ţ", "Ț", "Ť", "Ŧ"),
    ("t", "ţ", "ț", "ť", "ŧ"),
    ("W", "Ŵ", "Ẃ", "Ẁ"),
    ("w", "ŵ", "ẃ", "ẁ"),
    ("Z", "Ź", "Ż", "Ž"),
    ("z", "ź", "ż", "ž"),
    ("f", "ƒ"),
    ("Г", "Ѓ"),
    ("г", "ѓ"),
    ("К", "Ќ"),
    ("к", "ќ"),
)

WHITESPACE_PATTERN = r"\s"


def _class_pattern(variants: tuple[str, ...]) -> str:
    return "(?:" + "|".join(re.escape(v) for v in variants) + ")"


def _finder(variants: tuple[str, ...]) -> re.Pattern[str]:
    # Longest variant first so a two-letter form wins over its prefix.
    ordered = sorted(variants, key=len, reverse=True)
    return re.compile("|".join(re.escape(v) for v in ordered))


# Compiled once at import, never mutated.
_SUBSTITUTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\s"), WHITESPACE_PATTERN),
) + tuple(
    (_finder(variants), _class_pattern(variants))
    for variants in SIMILAR_CHARACTERS
)


# =============================================================================
# QUERY EXPANSION
# =============================================================================

@lru_cache(maxsize=512)
def expand_query(query: str, keep_diacritics: bool = False) -> str:
    """
    Build the pattern used to look for `query` inside candidate strings.

    With keep_diacritics the query is only escaped. Otherwise every
    table entry claims its variants from the text that is still literal,
    in table order, and the remaining literal text is escaped.

    >>> re.fullmatch(expand_query("cafe"), "café") is not None
    True
    """
    if keep_diacritics:
        return re.escape(query)

    # (is_pattern, text) pieces; only literal pieces are searched further.
    segments: list[tuple[bool, str]] = [(False, query)]

    for finder, replacement in _SUBSTITUTIONS:
        next_segments: list[tuple[bool, str]] = []
        for is_pattern, text in segments:
            if is_pattern:
                next_segments.append((is_pattern, text))
                continue
            position = 0
            for found in finder.finditer(text):
                if found.start() > position:
                    next_segments.append((False, text[position:found.start()]))
                next_segments.append((True, replacement))
                position = found.end()
            if position < len(text):
                next_segments.append((False, text[position:]))
        segments = next_segments

    return "".join(
        text if is_pattern else re.escape(text)
        for is_pattern, text in segments
    )
