"""overview tool -- free teaser of trending repos plus the paid catalog."""

from __future__ import annotations

from mcp.server.fastmcp import Context

from github_dev_intel.catalog import paid_endpoint_catalog
from github_dev_intel.errors import UpstreamError
from github_dev_intel.normalizer import normalize_search_page
from github_dev_intel.settings import AGENT_NAME, AGENT_VERSION
from github_dev_intel.tools._helpers import envelope, get_context, upstream_failure

# Fixed reference date; the sample is "big repos created since launch".
_SAMPLE_PATH = (
    "/search/repositories?q=created:>2026-01-24+stars:>100&sort=stars&order=desc&per_page=5"
)
_SAMPLE_SIZE = 3
_SAMPLE_DESCRIPTION_CHARS = 100


async def overview(ctx: Context) -> dict[str, object]:
    """Free overview - see trending repos and agent capabilities.

    Returns:
        Agent identity, up to 3 sample trending repositories (name, stars,
        language, description), and the catalog of paid endpoints with
        their prices.
    """
    app = get_context(ctx)
    try:
        data = await app.github.fetch(_SAMPLE_PATH)
    except UpstreamError as exc:
        raise await upstream_failure(ctx, "overview", exc) from exc

    page = normalize_search_page(data, description_limit=_SAMPLE_DESCRIPTION_CHARS)
    return envelope(
        {
            "agent": AGENT_NAME,
            "version": AGENT_VERSION,
            "description": "GitHub intelligence for AI agents",
            "dataSource": "GitHub API (live)",
            "sampleTrending": [
                {
                    "name": repo.full_name,
                    "stars": repo.stars,
                    "language": repo.language,
                    "description": repo.description,
                }
                for repo in page.items[:_SAMPLE_SIZE]
            ],
            "endpoints": paid_endpoint_catalog(),
        }
    )
