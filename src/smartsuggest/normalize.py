"""Input normalization shared by every comparison in the engine."""


def normalize_name(value: str | None) -> str:
    """Trim and case-fold a query or name. None becomes an empty string."""
    if not value:
        return ""
    return value.strip().casefold()
