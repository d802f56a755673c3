"""trending tool -- recently created repositories ranked by stars."""

from __future__ import annotations

from typing import Annotated

from mcp.server.fastmcp import Context
from pydantic import Field

from github_dev_intel.errors import UpstreamError
from github_dev_intel.models import Timeframe
from github_dev_intel.normalizer import normalize_search_page
from github_dev_intel.queries import MAX_LIMIT, MIN_LIMIT, SearchQuery
from github_dev_intel.tools._helpers import envelope, get_context, upstream_failure


async def trending(
    ctx: Context,
    timeframe: Timeframe = "week",
    language: str | None = None,
    limit: Annotated[int, Field(ge=MIN_LIMIT, le=MAX_LIMIT)] = 10,
) -> dict[str, object]:
    """Discover trending repositories by timeframe and language.

    Trending means created within the timeframe (day = 1, week = 7,
    month = 30 days) with more than 10 stars, sorted by stars.

    Args:
        timeframe: Lookback window: "day", "week" (default) or "month".
        language: Optional primary-language filter (e.g. "rust").
        limit: Maximum repositories to return (1-30, default 10).
    """
    app = get_context(ctx)
    query = SearchQuery.trending(timeframe, language, limit=limit)
    try:
        data = await app.github.fetch(query.path())
    except UpstreamError as exc:
        raise await upstream_failure(ctx, "trending", exc) from exc

    page = normalize_search_page(data)
    return envelope(
        {
            "timeframe": timeframe,
            "language": language or "all",
            "count": len(page.items),
            "totalMatches": page.total_count,
            "repos": [repo.to_dict() for repo in page.items],
        }
    )
