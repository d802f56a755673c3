"""Helpers shared by the tool handlers."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from mcp.server.fastmcp import Context
from mcp.server.fastmcp.exceptions import ToolError

from github_dev_intel.errors import UpstreamError

if TYPE_CHECKING:
    from github_dev_intel.server import AppContext


def get_context(ctx: Context) -> AppContext:
    """Extract AppContext from FastMCP's lifespan context.

    Raises TypeError if the lifespan context is not an AppContext instance.
    This catches misconfiguration early with a clear error message.
    """
    from github_dev_intel.server import AppContext

    app = ctx.request_context.lifespan_context
    if not isinstance(app, AppContext):
        msg = (
            f"Expected AppContext in lifespan_context, got {type(app).__name__}. "
            "Is the server configured with app_lifespan?"
        )
        raise TypeError(msg)
    return app


def fetched_at(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = now or datetime.now(tz=UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def envelope(payload: dict[str, object]) -> dict[str, object]:
    """Wrap a payload in the ``{"output": ...}`` envelope, stamping ``fetchedAt``."""
    payload["fetchedAt"] = fetched_at()
    return {"output": payload}


async def upstream_failure(ctx: Context, tool: str, exc: UpstreamError) -> ToolError:
    """Report an upstream failure on the context and build the tool error to raise."""
    await ctx.error(f"{tool} failed: {exc}")
    return ToolError(str(exc))
