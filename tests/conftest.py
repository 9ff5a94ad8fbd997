"""Pytest configuration and fixtures."""

from datetime import UTC, datetime, timedelta

import pytest

from smartsuggest.models import Candidate, RankingHints

LONG_BIO = "Building obbies and tycoons since 2016. Join my discord server for updates!!"


@pytest.fixture
def now() -> datetime:
    """Fixed clock for account-age scoring."""
    return datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def strong_candidate(now: datetime) -> Candidate:
    """A verified, established account whose primary name matches 'robloxuser'."""
    return Candidate(
        id=1,
        primary_name="RobloxUser",
        display_name="Roblox Fan",
        verified=True,
        created_at=now - timedelta(days=365 * 4),
        bio=LONG_BIO,
    )


@pytest.fixture
def weak_candidate() -> Candidate:
    """A bare account with no bio, age or badge."""
    return Candidate(id=2, primary_name="xx_gamer_xx", display_name="xx_gamer_xx")


@pytest.fixture
def display_match_candidate() -> Candidate:
    """An account whose display name is exactly 'robloxuser'."""
    return Candidate(id=3, primary_name="Player123", display_name="  RobloxUser ")


@pytest.fixture
def sample_candidates(
    strong_candidate: Candidate,
    weak_candidate: Candidate,
    display_match_candidate: Candidate,
) -> list[Candidate]:
    """A mixed candidate list."""
    return [
        weak_candidate,
        strong_candidate,
        display_match_candidate,
        Candidate(id=4, primary_name="robloxuser_alt", display_name="Alt", bio="alt acct"),
        Candidate(id=5, primary_name="RoblxUsr", display_name="Typo"),
    ]


@pytest.fixture
def sample_hints() -> RankingHints:
    """Keyword hints matching the strong candidate's bio."""
    return RankingHints(keywords=["discord", "school"])


@pytest.fixture
def raw_records() -> list[dict]:
    """Records shaped like the lookup service's search response."""
    return [
        {
            "id": 101,
            "name": "RobloxUser",
            "displayName": "Player123",
            "hasVerifiedBadge": False,
            "previousUsernames": [],
        },
        {
            "id": 102,
            "name": "BuilderBob",
            "displayName": "Bob",
            "hasVerifiedBadge": True,
            "created": "2019-05-01T12:00:00.000Z",
            "description": "I build things",
        },
    ]
