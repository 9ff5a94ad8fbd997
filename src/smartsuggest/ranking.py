"""
SmartSuggest ranker - the public boundary of the engine.

Both entry points are pure: identical inputs give identical outputs and no
state survives between calls.
"""

from collections.abc import Sequence
from datetime import UTC, datetime

from .models import DEFAULT_WEIGHTS, Candidate, RankingHints, ScoredCandidate, WeightVector
from .scoring import score_candidate
from .signals import NEUTRAL_GROUPS, GroupOverlapStrategy

DEFAULT_LIMIT = 5


def rank(
    query: str,
    candidates: Sequence[Candidate],
    hints: RankingHints | None = None,
    weights: WeightVector | None = None,
    *,
    group_strategy: GroupOverlapStrategy | None = None,
    now: datetime | None = None,
) -> list[ScoredCandidate]:
    """
    Score every candidate and order them by confidence, highest first.

    Candidates with equal confidence keep their input order. Nothing is
    dropped, however low its confidence.
    """
    weights = weights or DEFAULT_WEIGHTS
    group_strategy = group_strategy or NEUTRAL_GROUPS
    # Single clock reading shared by every candidate in the call
    now = now or datetime.now(UTC)

    scored = [
        score_candidate(query, candidate, hints, weights, group_strategy, now)
        for candidate in candidates
    ]
    # sorted() is stable; ties keep input order
    return sorted(scored, key=lambda s: s.confidence, reverse=True)


def top_suggestions(
    query: str,
    candidates: Sequence[Candidate],
    limit: int = DEFAULT_LIMIT,
    hints: RankingHints | None = None,
    weights: WeightVector | None = None,
    *,
    group_strategy: GroupOverlapStrategy | None = None,
    now: datetime | None = None,
) -> list[ScoredCandidate]:
    """Return the first `limit` entries of rank()."""
    if limit <= 0:
        return []
    ranked = rank(query, candidates, hints, weights, group_strategy=group_strategy, now=now)
    return ranked[:limit]
