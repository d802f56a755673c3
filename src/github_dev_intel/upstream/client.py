"""HTTP client for the GitHub REST API.

API docs: https://docs.github.com/en/rest
Base URL: https://api.github.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from github_dev_intel.errors import UpstreamError
from github_dev_intel.settings import GITHUB_API_URL, USER_AGENT

logger = logging.getLogger(__name__)

_ACCEPT = "application/vnd.github.v3+json"


@dataclass
class GitHubClient:
    """Async client for the GitHub REST API.

    Paths are appended verbatim to ``base_url`` so callers keep full
    control over query-string encoding (search qualifiers rely on it).
    """

    http: httpx.AsyncClient
    base_url: str = GITHUB_API_URL
    user_agent: str = USER_AGENT
    token: str | None = None

    def headers(self) -> dict[str, str]:
        headers = {"Accept": _ACCEPT, "User-Agent": self.user_agent}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def fetch(self, path: str) -> Any:
        """GET ``path`` and return the decoded JSON body.

        Raises:
            UpstreamError: non-2xx status (carrying the status and the first
                200 characters of the body), transport failure, or a body
                that is not JSON.
        """
        url = f"{self.base_url}{path}"
        try:
            response = await self.http.get(url, headers=self.headers())
        except httpx.HTTPError as exc:
            raise UpstreamError(f"GitHub API request failed for {path}: {exc}") from exc

        if not response.is_success:
            logger.debug("GitHub API %s returned %d", path, response.status_code)
            raise UpstreamError.from_status(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(
                f"GitHub API returned a non-JSON body for {path}",
                status=response.status_code,
                body=response.text,
            ) from exc
