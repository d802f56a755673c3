"""Exception hierarchy for github-dev-intel.

All exceptions inherit from GitHubDevIntelError (single catch point).
Messages are written for agent consumption -- short, no stack traces.
"""

from __future__ import annotations

# GitHub error bodies can be whole HTML pages; keep only the head.
MAX_BODY_CHARS = 200


class GitHubDevIntelError(Exception):
    """Base exception for all github-dev-intel errors."""


class ConfigError(GitHubDevIntelError):
    """Invalid process configuration."""


class UpstreamError(GitHubDevIntelError):
    """Error communicating with the GitHub REST API.

    ``status`` is the HTTP status code, or None when the request never
    produced a usable response (connection failure, undecodable body).
    """

    def __init__(self, message: str, *, status: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.body = body[:MAX_BODY_CHARS]

    @classmethod
    def from_status(cls, status: int, body: str) -> UpstreamError:
        truncated = body[:MAX_BODY_CHARS]
        return cls(f"GitHub API error: {status} - {truncated}", status=status, body=truncated)
