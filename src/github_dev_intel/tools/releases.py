"""releases tool -- recent releases of a repository."""

from __future__ import annotations

from typing import Annotated
from urllib.parse import quote

from mcp.server.fastmcp import Context
from pydantic import Field

from github_dev_intel.errors import UpstreamError
from github_dev_intel.normalizer import normalize_releases
from github_dev_intel.queries import MAX_LIMIT, MIN_LIMIT, clamp_limit
from github_dev_intel.tools._helpers import envelope, get_context, upstream_failure


async def releases(
    repo: Annotated[str, Field(description="Full repo name: owner/repo")],
    ctx: Context,
    limit: Annotated[int, Field(ge=MIN_LIMIT, le=MAX_LIMIT)] = 10,
) -> dict[str, object]:
    """Get recent releases for a repository.

    The limit is passed to GitHub as the page size; results are not
    re-sliced locally.
    """
    app = get_context(ctx)
    path = f"/repos/{quote(repo, safe='/')}/releases?per_page={clamp_limit(limit)}"
    try:
        data = await app.github.fetch(path)
    except UpstreamError as exc:
        raise await upstream_failure(ctx, "releases", exc) from exc

    summaries = normalize_releases(data)
    return envelope(
        {
            "repo": repo,
            "count": len(summaries),
            "releases": [release.to_dict() for release in summaries],
        }
    )
