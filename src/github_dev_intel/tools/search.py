"""search tool -- repository search with language and star filters."""

from __future__ import annotations

from typing import Annotated

from mcp.server.fastmcp import Context
from pydantic import Field

from github_dev_intel.errors import UpstreamError
from github_dev_intel.models import SortKey
from github_dev_intel.normalizer import normalize_search_page
from github_dev_intel.queries import MAX_LIMIT, MIN_LIMIT, SearchQuery
from github_dev_intel.tools._helpers import envelope, get_context, upstream_failure


async def search(
    query: Annotated[str, Field(description="Search query")],
    ctx: Context,
    language: str | None = None,
    minStars: int | None = None,  # noqa: N803 - wire name of the input field
    sort: SortKey = "stars",
    limit: Annotated[int, Field(ge=MIN_LIMIT, le=MAX_LIMIT)] = 10,
) -> dict[str, object]:
    """Search repositories with advanced filters.

    Args:
        query: Free-text GitHub search query.
        language: Optional primary-language filter.
        minStars: Optional minimum star count (0 means no filter).
        sort: "stars" (default), "forks", "updated" or "help-wanted-issues".
        limit: Maximum repositories to return (1-30, default 10).
    """
    app = get_context(ctx)
    search_query = SearchQuery.create(
        query, language=language, min_stars=minStars, sort=sort, limit=limit
    )
    try:
        data = await app.github.fetch(search_query.path())
    except UpstreamError as exc:
        raise await upstream_failure(ctx, "search", exc) from exc

    page = normalize_search_page(data)
    return envelope(
        {
            "query": query,
            "filters": {"language": language, "minStars": minStars, "sort": sort},
            "count": len(page.items),
            "totalMatches": page.total_count,
            "repos": [repo.to_dict() for repo in page.items],
        }
    )
