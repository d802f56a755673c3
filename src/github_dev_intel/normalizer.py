"""Map raw GitHub API records onto the canonical output models.

Every function here is total: upstream JSON is untrusted, so a missing key,
a null, or a value of the wrong type falls back to a default instead of
raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from github_dev_intel.models import (
    CanonicalRepository,
    Contributor,
    RawRecord,
    ReleaseAsset,
    ReleaseSummary,
    RepositoryStats,
    SearchPage,
)

MAX_RELEASE_BODY_CHARS = 500
MAX_TOP_CONTRIBUTORS = 5

# ─── Accessors ─────────────────────────────────────────────


def _record(value: Any) -> RawRecord:
    return value if isinstance(value, Mapping) else {}


def _str(raw: RawRecord, key: str) -> str | None:
    value = raw.get(key)
    return value if isinstance(value, str) else None


def _count(raw: RawRecord, key: str) -> int:
    """Non-negative integer, 0 when absent or malformed."""
    value = raw.get(key)
    # bool is an int subclass; a flag is never a count
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(value, 0)


def _flag(raw: RawRecord, key: str) -> bool:
    return raw.get(key) is True


def _truncate(text: str | None, limit: int | None) -> str | None:
    if text is None or limit is None:
        return text
    return text[:limit]


# ─── Repositories ──────────────────────────────────────────


def normalize_repository(raw: Any, *, description_limit: int | None = None) -> CanonicalRepository:
    """Build a CanonicalRepository from a raw ``/repos`` or search item.

    Missing owner or license objects map to None, missing topics to an
    empty list, and an empty homepage to None.
    """
    raw = _record(raw)
    topics = raw.get("topics")
    return CanonicalRepository(
        full_name=_str(raw, "full_name") or "",
        name=_str(raw, "name") or "",
        owner=_str(_record(raw.get("owner")), "login"),
        description=_truncate(_str(raw, "description"), description_limit),
        stars=_count(raw, "stargazers_count"),
        forks=_count(raw, "forks_count"),
        watchers=_count(raw, "watchers_count"),
        open_issues=_count(raw, "open_issues_count"),
        language=_str(raw, "language"),
        topics=[t for t in topics if isinstance(t, str)] if isinstance(topics, list) else [],
        license=_str(_record(raw.get("license")), "spdx_id") or None,
        created_at=_str(raw, "created_at"),
        updated_at=_str(raw, "updated_at"),
        pushed_at=_str(raw, "pushed_at"),
        default_branch=_str(raw, "default_branch"),
        homepage=_str(raw, "homepage") or None,
        url=_str(raw, "html_url"),
        is_archived=_flag(raw, "archived"),
        is_fork=_flag(raw, "fork"),
    )


def normalize_languages(raw: Any) -> dict[str, int]:
    """Keep only ``language -> byte count`` entries of a ``/languages`` body."""
    return {
        lang: size
        for lang, size in _record(raw).items()
        if isinstance(lang, str) and isinstance(size, int) and not isinstance(size, bool)
    }


def normalize_contributor(raw: Any) -> Contributor:
    raw = _record(raw)
    return Contributor(
        login=_str(raw, "login"),
        contributions=_count(raw, "contributions"),
        profile_url=_str(raw, "html_url"),
    )


def normalize_contributors(raw: Any, *, limit: int = MAX_TOP_CONTRIBUTORS) -> list[Contributor]:
    if not isinstance(raw, list):
        return []
    return [normalize_contributor(item) for item in raw[:limit]]


def normalize_repository_stats(
    raw: Any,
    *,
    contributors: Any = None,
    languages: Any = None,
) -> RepositoryStats:
    """Merge a full ``/repos/{repo}`` record with its contributors and languages."""
    record = _record(raw)
    return RepositoryStats(
        repository=normalize_repository(record),
        size=_count(record, "size"),
        has_wiki=_flag(record, "has_wiki"),
        has_pages=_flag(record, "has_pages"),
        has_downloads=_flag(record, "has_downloads"),
        subscribers_count=_count(record, "subscribers_count"),
        network_count=_count(record, "network_count"),
        languages=normalize_languages(languages),
        top_contributors=normalize_contributors(contributors),
    )


def normalize_search_page(raw: Any, *, description_limit: int | None = None) -> SearchPage:
    """Normalize a ``/search/repositories`` body into items plus total count."""
    raw = _record(raw)
    items = raw.get("items")
    if not isinstance(items, list):
        items = []
    return SearchPage(
        items=[normalize_repository(item, description_limit=description_limit) for item in items],
        total_count=_count(raw, "total_count"),
    )


# ─── Releases ──────────────────────────────────────────────


def _normalize_asset(raw: Any) -> ReleaseAsset:
    raw = _record(raw)
    return ReleaseAsset(
        name=_str(raw, "name"),
        download_count=_count(raw, "download_count"),
        size=_count(raw, "size"),
    )


def normalize_release(raw: Any) -> ReleaseSummary:
    """Build a ReleaseSummary; the body is cut to 500 characters."""
    raw = _record(raw)
    assets = raw.get("assets")
    return ReleaseSummary(
        tag_name=_str(raw, "tag_name"),
        name=_str(raw, "name"),
        is_draft=_flag(raw, "draft"),
        is_prerelease=_flag(raw, "prerelease"),
        published_at=_str(raw, "published_at"),
        author=_str(_record(raw.get("author")), "login"),
        body=_truncate(_str(raw, "body"), MAX_RELEASE_BODY_CHARS),
        html_url=_str(raw, "html_url"),
        assets=[_normalize_asset(a) for a in assets] if isinstance(assets, list) else [],
    )


def normalize_releases(raw: Any) -> list[ReleaseSummary]:
    if not isinstance(raw, list):
        return []
    return [normalize_release(item) for item in raw]
