"""Fuzzy ranking of Hebrew station names."""

from collections.abc import Sequence

from rapidfuzz.distance import Levenshtein

from jlr_mcp.matching.models import MatchResult, StationMatch
from jlr_mcp.matching.normalizers import fold_case
from jlr_mcp.models.cfir import StationRecord

# Score when the query is found inside the candidate
QUERY_IN_CANDIDATE_SCORE = 1.0
# Score when the candidate is found inside the query
CANDIDATE_IN_QUERY_SCORE = 0.9


def similarity(query: str, candidate: str) -> float:
    """Compute similarity between a query and a candidate name.

    Scoring (first rule that applies):
    1. Folded query is a non-empty substring of the candidate -> 1.0
    2. Folded candidate is a non-empty substring of the query -> 0.9
    3. Both empty -> 1.0
    4. Normalized edit distance: 1 - distance / max(len(query), len(candidate))

    Edit distance counts unit-cost insertions, deletions and substitutions
    over code points, so each Hebrew letter is one unit.

    Returns:
        Score in 0-1 range
    """
    q = fold_case(query)
    c = fold_case(candidate)

    if q and q in c:
        return QUERY_IN_CANDIDATE_SCORE
    if c and c in q:
        return CANDIDATE_IN_QUERY_SCORE

    longest = max(len(q), len(c))
    if longest == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(q, c) / longest


def rank(query: str, candidates: Sequence[str], limit: int = 5) -> list[MatchResult]:
    """Rank candidates by similarity to the query.

    Results are sorted by score descending; candidates with equal scores keep
    their input order.

    Args:
        query: Name as typed by the user
        candidates: Names to rank
        limit: Maximum number of results to return

    Returns:
        At most `limit` MatchResults, best first
    """
    if limit <= 0:
        return []

    scored = [MatchResult(candidate=c, similarity=similarity(query, c)) for c in candidates]
    scored.sort(key=lambda m: -m.similarity)
    return scored[:limit]


def rank_stations(
    query: str, stations: Sequence[StationRecord], limit: int = 5
) -> list[StationMatch]:
    """Rank operator stations by display-name similarity to the query."""
    if limit <= 0:
        return []

    scored = [
        StationMatch(
            name=station.display_name,
            station_id=station.station_id,
            similarity=similarity(query, station.display_name),
        )
        for station in stations
    ]
    scored.sort(key=lambda m: -m.similarity)
    return scored[:limit]
