"""Port: read-only access to the GitHub REST API."""

from __future__ import annotations

from typing import Any, Protocol


class UpstreamClientPort(Protocol):
    """Port for issuing GET requests against the GitHub REST API."""

    async def fetch(self, path: str) -> Any:
        """GET ``path`` (relative to the API base URL) and return decoded JSON.

        Raises UpstreamError on any non-success response.
        """
        ...
