"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from github_dev_intel.errors import UpstreamError
from github_dev_intel.server import AppContext
from github_dev_intel.settings import Settings

_ENV_VARS = ("GITHUB_TOKEN", "RAILWAY_PUBLIC_DOMAIN", "PORT", "HOST", "ICON_PATH")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of settings-dependent tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class FakeGitHub:
    """In-memory UpstreamClientPort.

    Routes map a path to a JSON body or to an exception to raise. A key
    ending in ``*`` matches any path with that prefix (longest wins).
    Unknown paths raise a 404 UpstreamError.
    """

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = routes
        self.calls: list[str] = []

    def _resolve(self, path: str) -> Any:
        if path in self.routes:
            return self.routes[path]
        prefixes = [p for p in self.routes if p.endswith("*") and path.startswith(p[:-1])]
        if prefixes:
            return self.routes[max(prefixes, key=len)]
        return UpstreamError.from_status(404, '{"message":"Not Found"}')

    async def fetch(self, path: str) -> Any:
        self.calls.append(path)
        result = self._resolve(path)
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def make_ctx() -> Callable[[dict[str, Any]], tuple[MagicMock, FakeGitHub]]:
    """Build a mock FastMCP Context whose lifespan context holds a FakeGitHub."""

    def _make(routes: dict[str, Any]) -> tuple[MagicMock, FakeGitHub]:
        github = FakeGitHub(routes)
        ctx = MagicMock()
        ctx.info = AsyncMock()
        ctx.error = AsyncMock()
        app = MagicMock(spec=AppContext)
        app.github = github
        app.settings = Settings()
        ctx.request_context.lifespan_context = app
        return ctx, github

    return _make


def raw_repo(full_name: str = "octo/cat", **overrides: Any) -> dict[str, Any]:
    """A realistic /repos/{owner}/{repo} body."""
    owner, _, name = full_name.partition("/")
    data: dict[str, Any] = {
        "full_name": full_name,
        "name": name,
        "owner": {"login": owner},
        "description": "A repository",
        "stargazers_count": 100,
        "forks_count": 10,
        "watchers_count": 100,
        "open_issues_count": 3,
        "language": "Python",
        "topics": ["cli", "tools"],
        "license": {"spdx_id": "MIT"},
        "created_at": "2025-01-01T00:00:00Z",
        "updated_at": "2026-02-01T00:00:00Z",
        "pushed_at": "2026-02-01T00:00:00Z",
        "default_branch": "main",
        "homepage": "https://example.com",
        "html_url": f"https://github.com/{full_name}",
        "archived": False,
        "fork": False,
    }
    data.update(overrides)
    return data


@pytest.fixture
def repo_factory() -> Callable[..., dict[str, Any]]:
    return raw_repo
