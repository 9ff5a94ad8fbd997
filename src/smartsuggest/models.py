"""
SmartSuggest data models - strict Pydantic schemas for candidate ranking.

Design principles:
- Everything the engine consumes or produces is frozen (no hidden state between calls)
- Candidates accept both canonical field names and raw lookup-service names
- Signals are validated to [0, 1] at construction
- Breakdown reasons are tagged internally and rendered to labels only on output
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
)

# =============================================================================
# TYPE LITERALS
# =============================================================================

Reason = Literal[
    "exact_name",
    "strong_name",
    "moderate_name",
    "verified",
    "established",
    "complete_profile",
    "keyword_matches",
]

ConfidenceBand = Literal["high", "medium", "low"]

REASON_LABELS: dict[str, str] = {
    "exact_name": "Exact name match",
    "strong_name": "Strong name similarity",
    "moderate_name": "Moderate name similarity",
    "verified": "Verified badge",
    "established": "Established account",
    "complete_profile": "Complete profile",
    "keyword_matches": "Keyword matches",
}

HIGH_CONFIDENCE = 80
MEDIUM_CONFIDENCE = 60


# =============================================================================
# CANDIDATE (supplied by the identity lookup collaborator)
# =============================================================================


class Candidate(BaseModel):
    """One account record that could match a query."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(..., description="Account id")
    primary_name: str = Field(
        ...,
        validation_alias=AliasChoices("primary_name", "primaryName", "name"),
        description="Unique account name",
    )
    display_name: str = Field(
        default="",
        validation_alias=AliasChoices("display_name", "displayName"),
        description="Free-form display name",
    )
    verified: bool = Field(
        default=False,
        validation_alias=AliasChoices("verified", "hasVerifiedBadge"),
    )
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt", "created"),
    )
    bio: str | None = Field(
        default=None,
        validation_alias=AliasChoices("bio", "description"),
    )

    @field_validator("display_name", mode="before")
    @classmethod
    def _none_display_name(cls, value: object) -> object:
        return "" if value is None else value


# =============================================================================
# HINTS & WEIGHTS (supplied by the caller)
# =============================================================================


class RankingHints(BaseModel):
    """Optional caller hints that sharpen the keyword and group signals."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    keywords: tuple[str, ...] = Field(default=(), description="Bio keywords")
    group_ids: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("group_ids", "groupIds"),
        description="Group ids the target is believed to belong to",
    )

    @field_validator("keywords", "group_ids", mode="before")
    @classmethod
    def _drop_blank(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        return tuple(str(v).strip() for v in value if str(v).strip())

    @classmethod
    def from_text(cls, keywords: str = "", groups: str = "") -> RankingHints:
        """Build hints from comma-separated UI input."""
        return cls(keywords=keywords.split(","), group_ids=groups.split(","))


class WeightVector(BaseModel):
    """Per-signal weights. The sum is not enforced."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: float = Field(default=0.40, ge=0.0)
    account: float = Field(default=0.25, ge=0.0)
    keyword: float = Field(default=0.15, ge=0.0)
    group: float = Field(default=0.10, ge=0.0)
    completeness: float = Field(default=0.10, ge=0.0)

    @property
    def total(self) -> float:
        return self.name + self.account + self.keyword + self.group + self.completeness

    def normalized(self) -> WeightVector:
        """Return a copy scaled so the components sum to 1.0."""
        total = self.total
        if total == 0:
            raise ValueError("Cannot normalize weights that are all zero")
        return WeightVector(
            name=self.name / total,
            account=self.account / total,
            keyword=self.keyword / total,
            group=self.group / total,
            completeness=self.completeness / total,
        )


DEFAULT_WEIGHTS = WeightVector()


# =============================================================================
# SCORING OUTPUT
# =============================================================================


class SignalVector(BaseModel):
    """The five independent sub-scores for one candidate."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: float = Field(..., ge=0.0, le=1.0, description="Name similarity")
    account: float = Field(..., ge=0.0, le=1.0, description="Account trust")
    keyword: float = Field(..., ge=0.0, le=1.0, description="Bio keyword hits")
    group: float = Field(..., ge=0.0, le=1.0, description="Group overlap")
    completeness: float = Field(..., ge=0.0, le=1.0, description="Profile completeness")

    def weighted_sum(self, weights: WeightVector) -> float:
        return (
            self.name * weights.name
            + self.account * weights.account
            + self.keyword * weights.keyword
            + self.group * weights.group
            + self.completeness * weights.completeness
        )


class ScoredCandidate(BaseModel):
    """A candidate with its confidence, signals and explanation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    candidate: Candidate
    confidence: int = Field(..., ge=0)
    signals: SignalVector
    reasons: tuple[Reason, ...] = Field(default=())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def breakdown(self) -> list[str]:
        """Display labels for the reasons, in order."""
        return [REASON_LABELS[r] for r in self.reasons]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def band(self) -> ConfidenceBand:
        if self.confidence >= HIGH_CONFIDENCE:
            return "high"
        if self.confidence >= MEDIUM_CONFIDENCE:
            return "medium"
        return "low"
