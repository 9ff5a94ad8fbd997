"""
SmartSuggest weight profiles - save and reuse ranking weights.

Profiles are YAML files stored in `profiles/` (or $SMARTSUGGEST_PROFILES_DIR)
that define:
- weights: The five signal weights
- limit: Default number of suggestions
- name/description: Human-readable metadata
"""

import os
from datetime import datetime
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .models import DEFAULT_WEIGHTS, WeightVector
from .ranking import DEFAULT_LIMIT


class WeightProfile(BaseModel):
    """A named weight configuration for reproducible rankings."""

    model_config = ConfigDict(extra="forbid")

    # Metadata
    slug: str = Field(..., min_length=1, description="Unique identifier (filename stem)")
    name: str = Field(default="", description="Human-readable name")
    description: str = Field(default="", description="When to use this profile")
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    # Core
    weights: WeightVector = Field(default_factory=lambda: DEFAULT_WEIGHTS)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, description="Default suggestion count")


def get_profiles_dir() -> Path:
    """Get the profiles directory path."""
    override = os.getenv("SMARTSUGGEST_PROFILES_DIR")
    if override:
        return Path(override)
    return Path.cwd() / "profiles"


def get_default_limit() -> int:
    """Default suggestion limit from $SMARTSUGGEST_DEFAULT_LIMIT."""
    raw = os.getenv("SMARTSUGGEST_DEFAULT_LIMIT")
    if not raw:
        return DEFAULT_LIMIT
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"SMARTSUGGEST_DEFAULT_LIMIT must be an integer, got {raw!r}") from e


def list_profiles() -> list[WeightProfile]:
    """List all saved profiles."""
    profiles_dir = get_profiles_dir()
    if not profiles_dir.exists():
        return []

    profiles = []
    for path in profiles_dir.glob("*.yml"):
        try:
            profiles.append(load_profile(path.stem))
        except ValueError:
            continue  # Skip invalid profiles

    return sorted(profiles, key=lambda p: p.slug)


def load_profile(slug: str) -> WeightProfile:
    """Load a profile by slug.

    Args:
        slug: The profile slug (filename without .yml).

    Returns:
        The loaded WeightProfile.

    Raises:
        FileNotFoundError: If the profile doesn't exist.
        ValueError: If the profile is invalid.
    """
    path = get_profiles_dir() / f"{slug}.yml"

    if not path.exists():
        raise FileNotFoundError(f"Profile not found: {slug}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in profile {slug}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Profile {slug} must be a mapping")

    # Ensure slug matches filename
    data["slug"] = slug

    # pydantic's ValidationError is a ValueError
    return WeightProfile(**data)


def save_profile(profile: WeightProfile) -> Path:
    """Save a profile to disk.

    Returns:
        Path to the saved file.
    """
    profiles_dir = get_profiles_dir()
    profiles_dir.mkdir(parents=True, exist_ok=True)

    path = profiles_dir / f"{profile.slug}.yml"

    data = profile.model_dump(mode="json", exclude_none=True)
    data["updated_at"] = datetime.now().isoformat()

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    return path


def delete_profile(slug: str) -> bool:
    """Delete a profile by slug. Returns True if deleted, False if not found."""
    path = get_profiles_dir() / f"{slug}.yml"

    if path.exists():
        path.unlink()
        return True
    return False


def create_profile(
    slug: str,
    name: str = "",
    description: str = "",
    weights: WeightVector | None = None,
    limit: int = DEFAULT_LIMIT,
) -> WeightProfile:
    """Create a profile (not yet saved)."""
    return WeightProfile(
        slug=slug,
        name=name or slug.replace("-", " ").replace("_", " ").title(),
        description=description,
        weights=weights or DEFAULT_WEIGHTS,
        limit=limit,
    )
