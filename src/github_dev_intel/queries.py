"""Build GitHub repository-search query strings and request paths.

The two builders encode differently on purpose: the trending builder
percent-encodes only the language token, while the search builder encodes
the fully composed query (``+`` separators included).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from urllib.parse import quote

from github_dev_intel.models import SortKey

MIN_LIMIT = 1
MAX_LIMIT = 30
DEFAULT_LIMIT = 10

TRENDING_MIN_STARS = 10
DEFAULT_LOOKBACK_DAYS = 7

_LOOKBACK_DAYS: dict[str, int] = {
    "day": 1,
    "week": 7,
    "month": 30,
}

# Characters encodeURIComponent leaves alone on top of quote()'s own set.
_COMPONENT_SAFE = "!~*'()"


def encode_component(value: str) -> str:
    """Percent-encode ``value`` like JavaScript's ``encodeURIComponent``."""
    return quote(value, safe=_COMPONENT_SAFE)


def clamp_limit(limit: int) -> int:
    return max(MIN_LIMIT, min(limit, MAX_LIMIT))


def lookback_days(timeframe: str | None) -> int:
    """``day`` -> 1, ``month`` -> 30, anything else (``week``, None) -> 7."""
    if timeframe is None:
        return DEFAULT_LOOKBACK_DAYS
    return _LOOKBACK_DAYS.get(timeframe, DEFAULT_LOOKBACK_DAYS)


def cutoff_date(days: int, now: datetime | None = None) -> str:
    """Return ``now - days`` as a UTC ``YYYY-MM-DD`` date."""
    now = now or datetime.now(tz=UTC)
    if now.tzinfo is not None:
        now = now.astimezone(UTC)
    return (now - timedelta(days=days)).date().isoformat()


def build_trending_query(
    timeframe: str | None = None,
    language: str | None = None,
    *,
    now: datetime | None = None,
) -> str:
    """Repos created after the lookback cutoff with more than 10 stars."""
    return SearchQuery.trending(timeframe, language, now=now).trending_string()


def build_search_query(
    query: str,
    language: str | None = None,
    min_stars: int | None = None,
    *,
    created_after: str | None = None,
) -> str:
    """Compose free text with optional qualifiers, then encode the whole string.

    A ``min_stars`` of 0 adds no qualifier. ``created_after`` is a
    ``YYYY-MM-DD`` date.
    """
    composed = query
    if language:
        composed += f"+language:{encode_component(language)}"
    if min_stars:
        composed += f"+stars:>={min_stars}"
    if created_after:
        composed += f"+created:>{created_after}"
    return encode_component(composed)


def search_path(q: str, *, sort: str = "stars", limit: int = DEFAULT_LIMIT) -> str:
    """``/search/repositories`` path for an already-encoded ``q``."""
    return f"/search/repositories?q={q}&sort={sort}&order=desc&per_page={clamp_limit(limit)}"


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """Structured repository-search filter.

    ``limit`` is clamped to [1, 30]. When ``days`` is given the cutoff is
    fixed to an absolute date here, at construction, and used as-is later.
    A time window with neither free text nor a star filter renders in
    trending form; otherwise the cutoff joins the search qualifiers.
    """

    query: str = ""
    language: str | None = None
    min_stars: int | None = None
    sort: SortKey = "stars"
    limit: int = DEFAULT_LIMIT
    days: int | None = None
    cutoff: str | None = None

    @classmethod
    def create(
        cls,
        query: str = "",
        *,
        language: str | None = None,
        min_stars: int | None = None,
        sort: SortKey = "stars",
        limit: int = DEFAULT_LIMIT,
        days: int | None = None,
        now: datetime | None = None,
    ) -> SearchQuery:
        return cls(
            query=query,
            language=language,
            min_stars=min_stars,
            sort=sort,
            limit=clamp_limit(limit),
            days=days,
            cutoff=cutoff_date(days, now) if days is not None else None,
        )

    @classmethod
    def trending(
        cls,
        timeframe: str | None = None,
        language: str | None = None,
        *,
        limit: int = DEFAULT_LIMIT,
        now: datetime | None = None,
    ) -> SearchQuery:
        return cls.create(
            language=language,
            limit=limit,
            days=lookback_days(timeframe),
            now=now,
        )

    def trending_string(self) -> str:
        """Query string in trending form: cutoff, star floor, encoded language."""
        query = f"created:>{self.cutoff}+stars:>{TRENDING_MIN_STARS}"
        if self.language:
            query += f"+language:{encode_component(self.language)}"
        return query

    @property
    def is_trending(self) -> bool:
        return self.cutoff is not None and not self.query and self.min_stars is None

    def search_string(self) -> str:
        return build_search_query(
            self.query, self.language, self.min_stars, created_after=self.cutoff
        )

    def path(self) -> str:
        q = self.trending_string() if self.is_trending else self.search_string()
        return search_path(q, sort=self.sort, limit=self.limit)
