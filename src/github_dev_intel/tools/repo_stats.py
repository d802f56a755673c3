"""repo-stats tool -- detailed statistics for one repository."""

from __future__ import annotations

from typing import Annotated
from urllib.parse import quote

from mcp.server.fastmcp import Context
from pydantic import Field

from github_dev_intel.errors import UpstreamError
from github_dev_intel.fanout import gather_required, optional
from github_dev_intel.normalizer import normalize_repository_stats
from github_dev_intel.tools._helpers import envelope, get_context, upstream_failure

_CONTRIBUTORS_PAGE_SIZE = 10


async def repo_stats(
    repo: Annotated[str, Field(description="Full repo name: owner/repo")],
    ctx: Context,
) -> dict[str, object]:
    """Get detailed statistics for a specific repository.

    The repository record is required; contributors and languages are
    best-effort and fall back to empty values when GitHub refuses them.
    """
    app = get_context(ctx)
    base = f"/repos/{quote(repo, safe='/')}"
    contributors_path = f"{base}/contributors?per_page={_CONTRIBUTORS_PAGE_SIZE}"
    try:
        raw, contributors, languages = await gather_required(
            app.github.fetch(base),
            optional(app.github.fetch(contributors_path), []),
            optional(app.github.fetch(f"{base}/languages"), {}),
        )
    except UpstreamError as exc:
        raise await upstream_failure(ctx, "repo-stats", exc) from exc

    stats = normalize_repository_stats(raw, contributors=contributors, languages=languages)
    return envelope(stats.to_dict())
