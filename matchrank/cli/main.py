"""
matchrank CLI: rank text from the command line.

Commands:
    matchrank score <text> <query>     Show how one string matches a query
    matchrank rank <query> [file]      Filter and sort candidates, best first

Candidates are read one per line. With --key, each line is a JSON object
and every --key names a field to rank (lists of strings are allowed).
Read-only: nothing is written except to stdout/stderr.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional, TextIO

from ..accessors import AccessorOptions
from ..domain import (
    Acronym,
    Contains,
    DEFAULT_THRESHOLD,
    MatchRankError,
    Matches,
    MatchResult,
    Ranking,
    RankingInfo,
    StartsWith,
    WordStartsWith,
    parse_ranking,
)
from ..logging import configure_logging, get_logger
from ..ranking.scorer import score
from ..sorter import rank_items

logger = get_logger(__name__)


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_rank_badge(rank: Ranking) -> str:
    """Format a ranking as a visual badge."""
    return f"[{rank.name}]"


def format_match_details(match: MatchResult) -> str:
    """Describe the positional payload of a match, if it has one."""
    if isinstance(match, Matches):
        return (
            f"spread={match.spread} matched={match.matched_char_count} "
            f"closeness={match.closeness:.3f}"
        )
    if isinstance(match, Acronym):
        return "letters at " + ", ".join(str(i) for i in match.letter_indexes)
    if isinstance(match, (Contains, WordStartsWith)):
        return f"index={match.index} length={match.length}"
    if isinstance(match, StartsWith):
        return f"length={match.length}"
    return ""


def format_ranked_row(value: Any, info: RankingInfo, show_rank: bool) -> str:
    """Format a single ranked candidate for display."""
    text = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
    if not show_rank:
        return text
    return f"{format_rank_badge(info.rank):<24} {text}"


# =============================================================================
# INPUT
# =============================================================================

def read_candidates(stream: TextIO, keys: list[str]) -> list[Any]:
    """
    Read candidates from a text stream.

    Blank lines are skipped. With keys, each line must be a JSON object.

    Raises:
        ValueError: If a line is not valid JSON (or not an object)
    """
    items: list[Any] = []
    for line_number, line in enumerate(stream, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        if not keys:
            items.append(line)
            continue
        item = json.loads(line)
        if not isinstance(item, dict):
            raise ValueError(f"line {line_number}: expected a JSON object")
        items.append(item)
    return items


def make_key_accessor(key: str) -> AccessorOptions:
    """Accessor reading one field of a JSON object."""
    return AccessorOptions(accessor=lambda item: item.get(key))


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_score(args: argparse.Namespace) -> int:
    """Score one text against a query."""
    try:
        match = score(args.text, args.query, keep_diacritics=args.keep_diacritics)
    except MatchRankError as e:
        logger.error("score_failed", error=str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"{format_rank_badge(match.rank)} {args.text}")
    details = format_match_details(match)
    if details:
        print(f"  {details}")

    return 0


def cmd_rank(args: argparse.Namespace) -> int:
    """Filter and sort candidates from a file or stdin."""
    keys = args.key or []

    try:
        threshold = parse_ranking(args.threshold)
        if args.file and args.file != "-":
            with open(args.file, "r", encoding="utf-8") as fh:
                items = read_candidates(fh, keys)
        else:
            items = read_candidates(sys.stdin, keys)

        accessors = [make_key_accessor(key) for key in keys] or None
        ranked = rank_items(
            items,
            args.query,
            accessors=accessors,
            threshold=threshold,
            keep_diacritics=args.keep_diacritics,
        )
    except (MatchRankError, OSError, ValueError) as e:
        logger.error("rank_failed", error=str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for value, info in ranked:
        print(format_ranked_row(value, info, args.show_rank))

    logger.info("rank_completed", candidates=len(items), matched=len(ranked))
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="matchrank",
        description="matchrank: rank strings and records by how well they match a query",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Score command
    score_parser = subparsers.add_parser(
        "score",
        help="Show how one text matches a query",
    )
    score_parser.add_argument("text", help="Candidate text")
    score_parser.add_argument("query", help="Query to match")
    score_parser.add_argument(
        "--keep-diacritics",
        action="store_true",
        help="Compare accented characters exactly",
    )
    score_parser.set_defaults(func=cmd_score)

    # Rank command
    rank_parser = subparsers.add_parser(
        "rank",
        help="Filter and sort candidates, best match first",
    )
    rank_parser.add_argument("query", help="Query to match")
    rank_parser.add_argument(
        "file",
        nargs="?",
        help="File with one candidate per line (default: stdin)",
    )
    rank_parser.add_argument(
        "--key",
        action="append",
        help="JSON field to rank; may be repeated, earlier keys win ties",
    )
    rank_parser.add_argument(
        "--threshold",
        default=DEFAULT_THRESHOLD.name,
        help="Minimum ranking name, e.g. CONTAINS (default: MATCHES)",
    )
    rank_parser.add_argument(
        "--keep-diacritics",
        action="store_true",
        help="Compare accented characters exactly",
    )
    rank_parser.add_argument(
        "--show-rank",
        action="store_true",
        help="Prefix each result with its ranking",
    )
    rank_parser.set_defaults(func=cmd_rank)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
