# Ranking package for matchrank
"""
String-level match scoring.

Provides the strategy cascade that turns a candidate string and a query
into one ranking tier plus its positional payload.
"""

from .scorer import score

__all__ = ["score"]
