"""MCP server exposing GitHub intelligence operations for AI agents."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from github_dev_intel.catalog import ENTRYPOINTS
from github_dev_intel.discovery import agent_card, icon_response, registration_document
from github_dev_intel.settings import AGENT_NAME, Settings
from github_dev_intel.tools.compare import compare
from github_dev_intel.tools.overview import overview
from github_dev_intel.tools.releases import releases
from github_dev_intel.tools.repo_stats import repo_stats
from github_dev_intel.tools.search import search
from github_dev_intel.tools.trending import trending
from github_dev_intel.upstream.base import UpstreamClientPort
from github_dev_intel.upstream.client import GitHubClient

settings = Settings.from_env()


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations."""

    http_client: httpx.AsyncClient
    github: UpstreamClientPort
    settings: Settings


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Manage the shared httpx client — the composition root.

    No retries and no timeout override: upstream failures surface immediately.
    """
    async with httpx.AsyncClient(follow_redirects=True) as http_client:
        github = GitHubClient(
            http_client,
            base_url=settings.github_api_url,
            user_agent=settings.user_agent,
            token=settings.github_token,
        )
        yield AppContext(http_client=http_client, github=github, settings=settings)


mcp = FastMCP(
    AGENT_NAME,
    instructions=(
        "github-dev-intel answers questions about GitHub repositories with live API data.\n\n"
        "- **overview** (free) — sample of trending repos and the list of paid operations.\n"
        "- **trending** — repos created in the last day/week/month, ranked by stars.\n"
        "- **repo-stats** — detailed stats, languages and top contributors of one repo.\n"
        "- **releases** — recent releases of one repo.\n"
        "- **search** — repository search with language / minimum-star filters.\n"
        "- **compare** — 2 to 5 repos side-by-side; repos that fail are reported "
        "per entry with status 'error' instead of failing the whole call.\n\n"
        "Repositories are named 'owner/repo'. Every result is wrapped in "
        "{'output': ...} and carries a fetchedAt timestamp."
    ),
    lifespan=app_lifespan,
    host=settings.host,
    port=settings.port,
)

HANDLERS: dict[str, Callable[..., Awaitable[dict[str, object]]]] = {
    "overview": overview,
    "trending": trending,
    "repo-stats": repo_stats,
    "releases": releases,
    "search": search,
    "compare": compare,
}

# ─── Read-only tools ──────────────────────────────────────────
for _spec in ENTRYPOINTS:
    mcp.tool(
        name=_spec.key,
        description=_spec.tool_description(),
        annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=True),
    )(HANDLERS[_spec.key])

# ─── Static routes ────────────────────────────────────────────


@mcp.custom_route("/icon.png", methods=["GET"])
async def icon(request: Request) -> Response:
    return await icon_response(settings.icon_path)


@mcp.custom_route("/.well-known/erc8004.json", methods=["GET"])
async def erc8004_registration(request: Request) -> Response:
    return JSONResponse(registration_document(settings))


@mcp.custom_route("/.well-known/agent.json", methods=["GET"])
async def agent_json(request: Request) -> Response:
    return JSONResponse(agent_card(settings))
