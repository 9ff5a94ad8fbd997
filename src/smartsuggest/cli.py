"""
SmartSuggest CLI - command line interface.
"""

import json
import sys
from collections import Counter
from pathlib import Path

import click
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@click.group()
@click.version_option(version="0.1.0", prog_name="smartsuggest")
def main() -> None:
    """SmartSuggest - rank ambiguous account lookups"""
    pass


@main.command()
@click.argument("query")
@click.option(
    "--candidates",
    "-c",
    "candidates_path",
    type=click.Path(dir_okay=False),
    required=True,
    help="JSON file of candidate records (list or {'data': [...]})",
)
@click.option("--keywords", "-k", default="", help="Comma-separated bio keywords")
@click.option("--groups", "-g", default="", help="Comma-separated group ids")
@click.option(
    "--limit",
    "-n",
    type=int,
    default=None,
    help="Number of suggestions (default: profile limit or $SMARTSUGGEST_DEFAULT_LIMIT)",
)
@click.option("--all", "show_all", is_flag=True, help="Show every candidate, not just the top")
@click.option("--profile", "-p", default=None, help="Use weights from a saved profile")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Show skipped records")
def rank(
    query: str,
    candidates_path: str,
    keywords: str,
    groups: str,
    limit: int | None,
    show_all: bool,
    profile: str | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Rank candidate records against QUERY."""
    from .logger import RankLogger
    from .models import RankingHints
    from .profiles import get_default_limit, load_profile
    from .ranking import rank as rank_candidates
    from .records import load_candidates

    if not query.strip():
        raise click.BadParameter("query must not be empty", param_hint="QUERY")

    log = RankLogger(query, verbose=verbose)

    weights = None
    try:
        default_limit = get_default_limit()
        if profile:
            loaded = load_profile(profile)
            weights = loaded.weights
            default_limit = loaded.limit
        candidates, errors = load_candidates(Path(candidates_path))
    except (FileNotFoundError, ValueError) as e:
        log.error(str(e))
        sys.exit(1)

    if not as_json:
        log.phase("Ranking", candidates_path)
        log.loaded(len(candidates), len(errors))
        for err in errors:
            log.skip("Invalid record", err)

    hints = RankingHints.from_text(keywords, groups)
    ranked = rank_candidates(query, candidates, hints, weights)

    count = len(ranked) if show_all else (limit if limit is not None else default_limit)
    shown = ranked[: max(count, 0)]

    if as_json:
        click.echo(json.dumps([s.model_dump(mode="json") for s in shown], indent=2))
        return

    log.ranked(len(ranked), len(shown))
    log.bands(dict(Counter(s.band for s in ranked)))

    if not shown:
        click.echo("\nNo candidates. Try refining the query or adding keyword hints.")
        return

    click.echo(f"\n{'#':<3} {'Conf':<6} {'Band':<7} {'Id':<12} {'Name':<24} {'Display'}")
    click.echo("-" * 80)
    for i, s in enumerate(shown, start=1):
        c = s.candidate
        click.echo(
            f"{i:<3} {s.confidence:<6} {s.band:<7} {c.id:<12} "
            f"{c.primary_name[:24]:<24} {c.display_name[:24]}"
        )
        if s.breakdown:
            click.echo(f"    {', '.join(s.breakdown)}")

    top = shown[0]
    log.finish(f"{top.candidate.primary_name} ({top.confidence}%)")


@main.command()
@click.argument("query")
@click.argument("name")
def similarity(query: str, name: str) -> None:
    """Show how QUERY compares to a single NAME."""
    from .models import Candidate
    from .normalize import normalize_name
    from .similarity import jaro_winkler, levenshtein, match_tier, name_similarity

    candidate = Candidate(id=0, primary_name=name, display_name=name)
    q = normalize_name(query)
    n = normalize_name(name)

    click.echo(f"Query:        {q}")
    click.echo(f"Name:         {n}")
    click.echo(f"Tier:         {match_tier(query, candidate)}")
    click.echo(f"Jaro-Winkler: {jaro_winkler(q, n):.4f}")
    click.echo(f"Edit dist:    {levenshtein(q, n)}")
    click.echo(f"Similarity:   {name_similarity(query, candidate):.4f}")


# =============================================================================
# PROFILE COMMANDS
# =============================================================================


@main.group()
def profile() -> None:
    """Manage saved weight profiles."""
    pass


@profile.command("list")
def profile_list() -> None:
    """List all saved profiles."""
    from .profiles import list_profiles

    profiles = list_profiles()

    if not profiles:
        click.echo("No profiles found. Create one with: smartsuggest profile create <slug>")
        return

    click.echo(f"{'Slug':<20} {'Limit':<6} {'Name'}")
    click.echo("-" * 60)
    for p in profiles:
        click.echo(f"{p.slug:<20} {p.limit:<6} {p.name}")


@profile.command("show")
@click.argument("slug")
def profile_show(slug: str) -> None:
    """Show a profile's weights."""
    from .logger import RankLogger
    from .profiles import load_profile

    try:
        p = load_profile(slug)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    w = p.weights
    click.echo(f"Profile: {p.name} ({p.slug})")
    if p.description:
        click.echo(f"  {p.description}")
    click.echo(f"  name:         {w.name:.2f}")
    click.echo(f"  account:      {w.account:.2f}")
    click.echo(f"  keyword:      {w.keyword:.2f}")
    click.echo(f"  group:        {w.group:.2f}")
    click.echo(f"  completeness: {w.completeness:.2f}")
    click.echo(f"  total:        {w.total:.2f}")
    click.echo(f"  limit:        {p.limit}")
    if abs(w.total - 1.0) > 1e-9:
        RankLogger(slug).warning("weights do not sum to 1.0; confidence may exceed 100")


@profile.command("create")
@click.argument("slug")
@click.option("--name", default="", help="Human-readable name")
@click.option("--description", default="", help="When to use this profile")
@click.option("--name-weight", type=float, default=0.40, help="Name similarity weight")
@click.option("--account-weight", type=float, default=0.25, help="Account trust weight")
@click.option("--keyword-weight", type=float, default=0.15, help="Keyword hit weight")
@click.option("--group-weight", type=float, default=0.10, help="Group overlap weight")
@click.option("--completeness-weight", type=float, default=0.10, help="Completeness weight")
@click.option("--normalize", is_flag=True, help="Scale weights to sum to 1.0")
@click.option("--limit", "-n", type=int, default=5, help="Default suggestion count")
def profile_create(
    slug: str,
    name: str,
    description: str,
    name_weight: float,
    account_weight: float,
    keyword_weight: float,
    group_weight: float,
    completeness_weight: float,
    normalize: bool,
    limit: int,
) -> None:
    """Create and save a weight profile."""
    from .models import WeightVector
    from .profiles import create_profile, save_profile

    try:
        weights = WeightVector(
            name=name_weight,
            account=account_weight,
            keyword=keyword_weight,
            group=group_weight,
            completeness=completeness_weight,
        )
        if normalize:
            weights = weights.normalized()
        p = create_profile(slug, name=name, description=description, weights=weights, limit=limit)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    path = save_profile(p)
    click.echo(f"Saved profile to {path}")


@profile.command("delete")
@click.argument("slug")
def profile_delete(slug: str) -> None:
    """Delete a saved profile."""
    from .profiles import delete_profile

    if delete_profile(slug):
        click.echo(f"Deleted profile: {slug}")
    else:
        click.echo(f"Profile not found: {slug}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
