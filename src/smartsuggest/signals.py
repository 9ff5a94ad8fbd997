"""
SmartSuggest signal calculators.

Four independent [0, 1] scorers besides name similarity:
- account trust (verified badge, account age, bio)
- bio keyword hits against caller hints
- group overlap (pluggable strategy, neutral by default)
- profile completeness

Missing optional fields degrade to a documented default, never to an error.
"""

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Protocol

from .models import Candidate, RankingHints
from .normalize import normalize_name

NEUTRAL = 0.5

ESTABLISHED_AGE = timedelta(days=365 * 3)
MATURE_AGE = timedelta(days=365)
SETTLED_AGE = timedelta(days=90)

SHORT_BIO = 10
LONG_BIO = 50


def _as_utc(value: datetime) -> datetime:
    """Read naive timestamps as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def account_age_bonus(created_at: datetime | None, now: datetime) -> float:
    """Contribution of account age to the account signal."""
    if created_at is None:
        return 0.15  # unknown age: neither new nor established

    age = _as_utc(now) - _as_utc(created_at)
    if age >= ESTABLISHED_AGE:
        return 0.3
    if age >= MATURE_AGE:
        return 0.2
    if age >= SETTLED_AGE:
        return 0.1
    return 0.0


def account_signal(candidate: Candidate, now: datetime | None = None) -> float:
    """
    Score how trustworthy the account looks.

    Scoring factors:
    - Verified badge (+0.4)
    - Account age: 3+ years (+0.3), 1+ year (+0.2), 90+ days (+0.1), unknown (+0.15)
    - Bio longer than 10 chars (+0.3), shorter bio (+0.15)
    """
    now = now or datetime.now(UTC)
    score = 0.0

    if candidate.verified:
        score += 0.4

    score += account_age_bonus(candidate.created_at, now)

    bio = candidate.bio or ""
    if len(bio) > SHORT_BIO:
        score += 0.3
    elif bio:
        score += 0.15

    return min(score, 1.0)


def keyword_signal(candidate: Candidate, hints: RankingHints | None = None) -> float:
    """Fraction of hint keywords found in the bio (0.5 when there are no keywords)."""
    if hints is None or not hints.keywords:
        return NEUTRAL
    if not candidate.bio:
        return 0.0

    bio = normalize_name(candidate.bio)
    hits = sum(1 for kw in hints.keywords if normalize_name(kw) in bio)
    return min(hits / len(hints.keywords), 1.0)


def completeness_signal(candidate: Candidate) -> float:
    """
    Score how filled-in the profile is.

    Scoring factors:
    - Display name distinct from the account name (+0.3)
    - Bio over 50 chars (+0.4), over 10 chars (+0.3), any bio (+0.1)
    - Verified badge (+0.3)
    """
    score = 0.0

    display = normalize_name(candidate.display_name)
    if display and display != normalize_name(candidate.primary_name):
        score += 0.3

    bio = candidate.bio or ""
    if len(bio) > LONG_BIO:
        score += 0.4
    elif len(bio) > SHORT_BIO:
        score += 0.3
    elif bio:
        score += 0.1

    if candidate.verified:
        score += 0.3

    return min(score, 1.0)


# =============================================================================
# GROUP OVERLAP STRATEGIES
# =============================================================================


class GroupOverlapStrategy(Protocol):
    """Scores overlap between a candidate's groups and the hinted groups."""

    def score(self, candidate: Candidate, hints: RankingHints | None) -> float: ...


class NeutralGroupOverlap:
    """Group membership is unknown to the scoring core; always neutral."""

    def score(self, candidate: Candidate, hints: RankingHints | None) -> float:
        return NEUTRAL


class PrefetchedGroupOverlap:
    """Overlap against group memberships fetched by the caller beforehand."""

    def __init__(self, memberships: Mapping[int, frozenset[str] | set[str] | list[str]]):
        self.memberships = {cid: frozenset(groups) for cid, groups in memberships.items()}

    def score(self, candidate: Candidate, hints: RankingHints | None) -> float:
        if hints is None or not hints.group_ids:
            return NEUTRAL
        groups = self.memberships.get(candidate.id)
        if groups is None:
            return NEUTRAL

        wanted = set(hints.group_ids)
        return len(wanted & groups) / len(wanted)


NEUTRAL_GROUPS = NeutralGroupOverlap()
