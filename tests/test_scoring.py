"""Tests for weighted aggregation and breakdown reasons."""

from datetime import datetime

import pytest

from smartsuggest.models import (
    DEFAULT_WEIGHTS,
    Candidate,
    RankingHints,
    SignalVector,
    WeightVector,
)
from smartsuggest.scoring import aggregate_confidence, compute_signals, explain, score_candidate


def _signals(value: float = 0.0, **overrides: float) -> SignalVector:
    fields = {k: value for k in ("name", "account", "keyword", "group", "completeness")}
    fields.update(overrides)
    return SignalVector(**fields)


class TestAggregateConfidence:
    """Tests for aggregate_confidence."""

    def test_all_ones(self) -> None:
        assert aggregate_confidence(_signals(1.0)) == 100

    def test_all_zeros(self) -> None:
        assert aggregate_confidence(_signals(0.0)) == 0

    def test_default_weights(self) -> None:
        signals = _signals(name=1.0, account=0.5, keyword=0.5, group=0.5, completeness=0.0)
        # 40 + 12.5 + 7.5 + 5
        assert aggregate_confidence(signals, DEFAULT_WEIGHTS) == 65

    def test_rounds_half_up(self) -> None:
        weights = WeightVector(name=1.0, account=0, keyword=0, group=0, completeness=0)
        assert aggregate_confidence(_signals(name=0.125), weights) == 13

    def test_unnormalized_weights_accepted(self) -> None:
        """Weights summing to 2.0 may push confidence past 100."""
        weights = WeightVector(name=0.8, account=0.5, keyword=0.3, group=0.2, completeness=0.2)
        assert aggregate_confidence(_signals(1.0), weights) == 200


class TestExplain:
    """Tests for explain."""

    def test_full_breakdown_order(self, strong_candidate: Candidate) -> None:
        signals = _signals(name=0.95, account=1.0, keyword=1.0, group=0.5, completeness=1.0)
        hints = RankingHints(keywords=["discord"])
        assert explain(strong_candidate, signals, hints) == (
            "exact_name",
            "verified",
            "established",
            "complete_profile",
            "keyword_matches",
        )

    @pytest.mark.parametrize(
        ("name", "reason"),
        [(0.9, "exact_name"), (0.85, "strong_name"), (0.6, "moderate_name")],
    )
    def test_name_tiers(self, weak_candidate: Candidate, name: float, reason: str) -> None:
        assert explain(weak_candidate, _signals(name=name)) == (reason,)

    def test_low_name_has_no_tag(self, weak_candidate: Candidate) -> None:
        assert explain(weak_candidate, _signals(name=0.59)) == ()

    def test_keyword_reason_needs_hints(self, weak_candidate: Candidate) -> None:
        """A neutral 0.5 keyword signal without hints is not a keyword match."""
        signals = _signals(keyword=0.5)
        assert explain(weak_candidate, signals, None) == ()
        assert explain(weak_candidate, signals, RankingHints()) == ()
        assert explain(weak_candidate, signals, RankingHints(keywords=["a"])) == (
            "keyword_matches",
        )


class TestScoreCandidate:
    """Tests for score_candidate."""

    def test_strong_candidate(self, strong_candidate: Candidate, now: datetime) -> None:
        hints = RankingHints(keywords=["discord"])
        scored = score_candidate("robloxuser", strong_candidate, hints, now=now)
        assert scored.signals.name == 0.95
        assert scored.signals.account == 1.0
        assert scored.signals.keyword == 1.0
        assert scored.signals.group == 0.5
        assert scored.signals.completeness == 1.0
        # 38 + 25 + 15 + 5 + 10
        assert scored.confidence == 93
        assert scored.breakdown == [
            "Exact name match",
            "Verified badge",
            "Established account",
            "Complete profile",
            "Keyword matches",
        ]

    def test_does_not_modify_candidate(self, strong_candidate: Candidate, now: datetime) -> None:
        before = strong_candidate.model_dump()
        scored = score_candidate("  ROBLOXUSER ", strong_candidate, now=now)
        assert scored.candidate == strong_candidate
        assert strong_candidate.model_dump() == before

    def test_signals_in_range(self, sample_candidates: list[Candidate], now: datetime) -> None:
        hints = RankingHints(keywords=["discord"], group_ids=["1"])
        for c in sample_candidates:
            signals = compute_signals("robloxuser", c, hints, now=now)
            for value in signals.model_dump().values():
                assert 0.0 <= value <= 1.0
