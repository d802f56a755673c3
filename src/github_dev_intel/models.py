"""Domain models for github-dev-intel. All frozen dataclasses -- no mutation after creation.

Field names are snake_case; ``to_dict()`` emits the camelCase wire shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

# Untrusted JSON object as decoded from the GitHub API.
RawRecord = Mapping[str, Any]

SortKey = Literal["stars", "forks", "updated", "help-wanted-issues"]
Timeframe = Literal["day", "week", "month"]

# ─── Repository Models ────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CanonicalRepository:
    """Stable summary of a GitHub repository. Every key is always emitted."""

    full_name: str
    name: str
    owner: str | None = None
    description: str | None = None
    stars: int = 0
    forks: int = 0
    watchers: int = 0
    open_issues: int = 0
    language: str | None = None
    topics: list[str] = field(default_factory=list)
    license: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    pushed_at: str | None = None
    default_branch: str | None = None
    homepage: str | None = None
    url: str | None = None
    is_archived: bool = False
    is_fork: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "fullName": self.full_name,
            "name": self.name,
            "owner": self.owner,
            "description": self.description,
            "stars": self.stars,
            "forks": self.forks,
            "watchers": self.watchers,
            "openIssues": self.open_issues,
            "language": self.language,
            "topics": list(self.topics),
            "license": self.license,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "pushedAt": self.pushed_at,
            "defaultBranch": self.default_branch,
            "homepage": self.homepage,
            "url": self.url,
            "isArchived": self.is_archived,
            "isFork": self.is_fork,
        }


@dataclass(frozen=True, slots=True)
class Contributor:
    login: str | None
    contributions: int = 0
    profile_url: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "login": self.login,
            "contributions": self.contributions,
            "profileUrl": self.profile_url,
        }


@dataclass(frozen=True, slots=True)
class RepositoryStats:
    """A CanonicalRepository plus the detail fields only repo-stats reports."""

    repository: CanonicalRepository
    size: int = 0
    has_wiki: bool = False
    has_pages: bool = False
    has_downloads: bool = False
    subscribers_count: int = 0
    network_count: int = 0
    languages: dict[str, int] = field(default_factory=dict)
    top_contributors: list[Contributor] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        result = self.repository.to_dict()
        result.update(
            {
                "size": self.size,
                "hasWiki": self.has_wiki,
                "hasPages": self.has_pages,
                "hasDownloads": self.has_downloads,
                "subscribersCount": self.subscribers_count,
                "networkCount": self.network_count,
                "languages": dict(self.languages),
                "topContributors": [c.to_dict() for c in self.top_contributors],
            }
        )
        return result


# ─── Release Models ───────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ReleaseAsset:
    name: str | None
    download_count: int = 0
    size: int = 0

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "downloadCount": self.download_count, "size": self.size}


@dataclass(frozen=True, slots=True)
class ReleaseSummary:
    tag_name: str | None
    name: str | None = None
    is_draft: bool = False
    is_prerelease: bool = False
    published_at: str | None = None
    author: str | None = None
    body: str | None = None
    html_url: str | None = None
    assets: list[ReleaseAsset] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "tagName": self.tag_name,
            "name": self.name,
            "isDraft": self.is_draft,
            "isPrerelease": self.is_prerelease,
            "publishedAt": self.published_at,
            "author": self.author,
            "body": self.body,
            "htmlUrl": self.html_url,
            "assets": [a.to_dict() for a in self.assets],
        }


# ─── Search Models ────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SearchPage:
    """One page of ``/search/repositories`` results, already normalized."""

    items: list[CanonicalRepository]
    total_count: int = 0


# ─── Comparison Models ────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CompareOutcome:
    """Per-repository result of a comparison: success or error, never both."""

    requested: str
    repository: CanonicalRepository | None = None
    languages: dict[str, int] = field(default_factory=dict)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.repository is not None

    def to_dict(self) -> dict[str, object]:
        if self.repository is None:
            return {"fullName": self.requested, "status": "error", "error": self.error}
        result = self.repository.to_dict()
        result["languages"] = dict(self.languages)
        result["status"] = "success"
        return result


@dataclass(frozen=True, slots=True)
class ComparisonSummary:
    """Cross-repository metrics. All fields are None when nothing succeeded."""

    most_stars: str | None = None
    most_forks: str | None = None
    most_recent: str | None = None
    avg_stars: int | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "mostStars": self.most_stars,
            "mostForks": self.most_forks,
            "mostRecent": self.most_recent,
            "avgStars": self.avg_stars,
        }
