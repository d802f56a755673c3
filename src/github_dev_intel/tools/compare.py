"""compare tool -- side-by-side comparison of 2-5 repositories."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import Annotated, TypeVar
from urllib.parse import quote

from mcp.server.fastmcp import Context
from pydantic import Field

from github_dev_intel.fanout import Settled, gather_required, gather_settled, optional
from github_dev_intel.models import CanonicalRepository, CompareOutcome, ComparisonSummary
from github_dev_intel.normalizer import normalize_languages, normalize_repository
from github_dev_intel.tools._helpers import envelope, get_context
from github_dev_intel.upstream.base import UpstreamClientPort

MIN_REPOS = 2
MAX_REPOS = 5

C = TypeVar("C", int, datetime)


async def compare(
    repos: Annotated[
        list[str],
        Field(
            min_length=MIN_REPOS,
            max_length=MAX_REPOS,
            description='Array of repo names: ["owner/repo1", "owner/repo2"]',
        ),
    ],
    ctx: Context,
) -> dict[str, object]:
    """Compare multiple repositories side-by-side.

    Each repository is fetched independently; one that cannot be fetched
    shows up as an entry with status "error" and does not fail the rest.
    The comparison block (mostStars, mostForks, mostRecent, avgStars) only
    counts successful entries and is all null when none succeeded.
    """
    app = get_context(ctx)
    outcomes = await fetch_outcomes(app.github, repos)
    failed = [o.requested for o in outcomes if not o.ok]
    if failed:
        await ctx.info(
            f"compare: {len(failed)} of {len(outcomes)} repos failed: {', '.join(failed)}"
        )

    return envelope(
        {
            "requestedRepos": list(repos),
            "count": len(outcomes),
            "repos": [outcome.to_dict() for outcome in outcomes],
            "comparison": summarize(outcomes).to_dict(),
        }
    )


async def fetch_outcomes(github: UpstreamClientPort, repos: Sequence[str]) -> list[CompareOutcome]:
    """Fetch repository + languages for every name, in request order."""

    async def _fetch_one(repo: str) -> tuple[object, object]:
        base = f"/repos/{quote(repo, safe='/')}"
        raw, languages = await gather_required(
            github.fetch(base),
            optional(github.fetch(f"{base}/languages"), {}),
        )
        return raw, languages

    settled = await gather_settled(repos, _fetch_one)
    return [_to_outcome(item) for item in settled]


def _to_outcome(item: Settled[str, tuple[object, object]]) -> CompareOutcome:
    if not item.ok:
        return CompareOutcome(requested=item.key, error=str(item.error))
    raw, languages = item.value  # type: ignore[misc]
    return CompareOutcome(
        requested=item.key,
        repository=normalize_repository(raw),
        languages=normalize_languages(languages),
    )


# ─── Comparison metrics ───────────────────────────────────────


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)


def _leader(
    repos: Sequence[CanonicalRepository],
    key: Callable[[CanonicalRepository], C | None],
) -> str | None:
    """Full name of the repo with the greatest key; the earliest wins ties.

    Repos whose key is None never take the lead from one that has a value.
    """
    if not repos:
        return None
    best = repos[0]
    best_key = key(best)
    for repo in repos[1:]:
        candidate = key(repo)
        if candidate is None:
            continue
        if best_key is None or candidate > best_key:
            best, best_key = repo, candidate
    return best.full_name


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def summarize(outcomes: Sequence[CompareOutcome]) -> ComparisonSummary:
    """Compute cross-repository metrics over successful outcomes only."""
    repos = [o.repository for o in outcomes if o.repository is not None]
    if not repos:
        return ComparisonSummary()
    return ComparisonSummary(
        most_stars=_leader(repos, lambda r: r.stars),
        most_forks=_leader(repos, lambda r: r.forks),
        most_recent=_leader(repos, lambda r: _parse_timestamp(r.pushed_at)),
        avg_stars=_round_half_up(sum(r.stars for r in repos) / len(repos)),
    )
