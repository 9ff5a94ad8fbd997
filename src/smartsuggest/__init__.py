"""SmartSuggest - ranked, explainable disambiguation of account lookups."""

from .models import (
    DEFAULT_WEIGHTS,
    REASON_LABELS,
    Candidate,
    RankingHints,
    ScoredCandidate,
    SignalVector,
    WeightVector,
)
from .ranking import rank, top_suggestions

__all__ = [
    "DEFAULT_WEIGHTS",
    "REASON_LABELS",
    "Candidate",
    "RankingHints",
    "ScoredCandidate",
    "SignalVector",
    "WeightVector",
    "rank",
    "top_suggestions",
]
