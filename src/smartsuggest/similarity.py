"""
SmartSuggest name similarity.

Tiered heuristics (exact, prefix, substring) cover the common cases; a
Jaro-Winkler + edit distance fallback recovers typos and partial matches.
"""

from typing import Literal

from rapidfuzz.distance import Levenshtein

from .models import Candidate
from .normalize import normalize_name

MatchTier = Literal[
    "empty_query",
    "exact_display",
    "exact_primary",
    "prefix_display",
    "prefix_primary",
    "contains_display",
    "contains_primary",
    "fuzzy",
]

TIER_SCORES: dict[str, float] = {
    "exact_display": 1.0,
    "exact_primary": 0.95,
    "prefix_display": 0.85,
    "prefix_primary": 0.80,
    "contains_display": 0.70,
    "contains_primary": 0.65,
}

# Edit-distance floors for the fuzzy tier: (max distance, minimum score)
DISTANCE_FLOORS = ((2, 0.75), (3, 0.60))

WINKLER_PREFIX_LIMIT = 4
WINKLER_SCALE = 0.1


def jaro_winkler(s1: str, s2: str) -> float:
    """
    Jaro-Winkler similarity in [0, 1].

    Characters match when equal and within half the longer string's length
    of each other. The Winkler boost rewards up to four leading characters
    that agree positionally.
    """
    if len(s1) > len(s2):
        longer, shorter = s1, s2
    else:
        longer, shorter = s2, s1

    if not longer:
        return 1.0

    window = max(0, len(longer) // 2 - 1)
    longer_matched = [False] * len(longer)
    shorter_matched = [False] * len(shorter)

    matches = 0
    for i, ch in enumerate(shorter):
        start = max(0, i - window)
        end = min(i + window + 1, len(longer))
        for j in range(start, end):
            if longer_matched[j] or longer[j] != ch:
                continue
            shorter_matched[i] = True
            longer_matched[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    transpositions = 0
    k = 0
    for i, ch in enumerate(shorter):
        if not shorter_matched[i]:
            continue
        while not longer_matched[k]:
            k += 1
        if ch != longer[k]:
            transpositions += 1
        k += 1

    jaro = (
        matches / len(shorter)
        + matches / len(longer)
        + (matches - transpositions / 2) / matches
    ) / 3

    prefix = 0
    for a, b in zip(s1[:WINKLER_PREFIX_LIMIT], s2[:WINKLER_PREFIX_LIMIT]):
        if a != b:
            break
        prefix += 1

    return min(jaro + prefix * WINKLER_SCALE * (1 - jaro), 1.0)


def levenshtein(s1: str, s2: str) -> int:
    """Minimum number of single-character edits turning s1 into s2."""
    return Levenshtein.distance(s1, s2)


def match_tier(query: str, candidate: Candidate) -> MatchTier:
    """Return which similarity tier a candidate falls into for a query."""
    q = normalize_name(query)
    if not q:
        return "empty_query"

    display = normalize_name(candidate.display_name)
    primary = normalize_name(candidate.primary_name)

    if display == q:
        return "exact_display"
    if primary == q:
        return "exact_primary"
    if display.startswith(q):
        return "prefix_display"
    if primary.startswith(q):
        return "prefix_primary"
    if q in display:
        return "contains_display"
    if q in primary:
        return "contains_primary"
    return "fuzzy"


def fuzzy_similarity(query: str, names: list[str]) -> float:
    """Best Jaro-Winkler score, floored by the closest edit distance."""
    jw = max(jaro_winkler(query, name) for name in names)
    dist = min(levenshtein(query, name) for name in names)

    for max_distance, floor in DISTANCE_FLOORS:
        if dist <= max_distance:
            return max(jw, floor)
    return jw


def name_similarity(query: str, candidate: Candidate) -> float:
    """
    Score how well a candidate's names match the query.

    Returns a float in [0, 1]. The first matching tier wins; an empty query
    scores 0.0 rather than trivially matching every prefix tier.
    """
    tier = match_tier(query, candidate)
    if tier == "empty_query":
        return 0.0
    if tier != "fuzzy":
        return TIER_SCORES[tier]

    # a missing display name must not count as a short edit distance
    names = [
        n
        for n in (normalize_name(candidate.display_name), normalize_name(candidate.primary_name))
        if n
    ]
    if not names:
        return 0.0
    return fuzzy_similarity(normalize_name(query), names)
