"""github-dev-intel: GitHub intelligence for AI agents."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

_LOCAL_VERSION_FALLBACK = "0.0.0+local"


def _resolve_version() -> str:
    """Resolve package version from installed metadata with deterministic fallback."""
    try:
        return _distribution_version("github-dev-intel")
    except PackageNotFoundError:
        return _LOCAL_VERSION_FALLBACK


__version__ = _resolve_version()


def main() -> None:
    """Entry point for `github-dev-intel` CLI."""
    import logging

    from github_dev_intel.server import mcp, settings

    logging.getLogger(__name__).info("github-dev-intel agent running on port %d", settings.port)
    mcp.run(transport="streamable-http")
