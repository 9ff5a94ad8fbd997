"""
SmartSuggest weighted aggregation + explanation.

confidence = round(100 * sum(weight_i * signal_i)), rounded half up.
"""

import math
from datetime import datetime

from .models import (
    DEFAULT_WEIGHTS,
    Candidate,
    RankingHints,
    Reason,
    ScoredCandidate,
    SignalVector,
    WeightVector,
)
from .signals import (
    NEUTRAL,
    NEUTRAL_GROUPS,
    GroupOverlapStrategy,
    account_signal,
    completeness_signal,
    keyword_signal,
)
from .similarity import name_similarity

# Name signal thresholds for the name reason, highest first
NAME_REASONS: tuple[tuple[float, Reason], ...] = (
    (0.9, "exact_name"),
    (0.8, "strong_name"),
    (0.6, "moderate_name"),
)

ESTABLISHED_THRESHOLD = 0.7
COMPLETE_THRESHOLD = 0.7
KEYWORD_THRESHOLD = NEUTRAL


def compute_signals(
    query: str,
    candidate: Candidate,
    hints: RankingHints | None = None,
    group_strategy: GroupOverlapStrategy = NEUTRAL_GROUPS,
    now: datetime | None = None,
) -> SignalVector:
    """Compute all five signals for one candidate."""
    return SignalVector(
        name=name_similarity(query, candidate),
        account=account_signal(candidate, now),
        keyword=keyword_signal(candidate, hints),
        group=group_strategy.score(candidate, hints),
        completeness=completeness_signal(candidate),
    )


def aggregate_confidence(signals: SignalVector, weights: WeightVector = DEFAULT_WEIGHTS) -> int:
    """Combine signals into an integer confidence."""
    return math.floor(signals.weighted_sum(weights) * 100 + 0.5)


def explain(
    candidate: Candidate,
    signals: SignalVector,
    hints: RankingHints | None = None,
) -> tuple[Reason, ...]:
    """Derive the breakdown reasons for a scored candidate, in display order."""
    reasons: list[Reason] = []

    for threshold, reason in NAME_REASONS:
        if signals.name >= threshold:
            reasons.append(reason)
            break

    if candidate.verified:
        reasons.append("verified")
    if signals.account >= ESTABLISHED_THRESHOLD:
        reasons.append("established")
    if signals.completeness >= COMPLETE_THRESHOLD:
        reasons.append("complete_profile")
    if signals.keyword >= KEYWORD_THRESHOLD and hints is not None and hints.keywords:
        reasons.append("keyword_matches")

    return tuple(reasons)


def score_candidate(
    query: str,
    candidate: Candidate,
    hints: RankingHints | None = None,
    weights: WeightVector = DEFAULT_WEIGHTS,
    group_strategy: GroupOverlapStrategy = NEUTRAL_GROUPS,
    now: datetime | None = None,
) -> ScoredCandidate:
    """Score and explain a single candidate."""
    signals = compute_signals(query, candidate, hints, group_strategy, now)
    return ScoredCandidate(
        candidate=candidate,
        confidence=aggregate_confidence(signals, weights),
        signals=signals,
        reasons=explain(candidate, signals, hints),
    )
