"""Fuzzy matching for Hebrew station names."""

from jlr_mcp.matching.models import MatchResult, StationMatch
from jlr_mcp.matching.name_matcher import rank, rank_stations, similarity
from jlr_mcp.matching.normalizers import (
    LOCALITY_NAMES,
    fold_case,
    fold_text,
    mentions_locality,
)

__all__ = [
    # Matchers
    "rank",
    "rank_stations",
    "similarity",
    # Models
    "MatchResult",
    "StationMatch",
    # Normalizers
    "fold_case",
    "fold_text",
    "mentions_locality",
    "LOCALITY_NAMES",
]
