"""Tests for search query builders."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from github_dev_intel.queries import (
    SearchQuery,
    build_search_query,
    build_trending_query,
    clamp_limit,
    cutoff_date,
    encode_component,
    lookback_days,
    search_path,
)

_NOW = datetime(2026, 3, 15, 8, 30, tzinfo=UTC)


class TestLookback:
    @pytest.mark.parametrize(
        ("timeframe", "days"),
        [("day", 1), ("week", 7), ("month", 30), (None, 7), ("decade", 7)],
    )
    def test_lookback_days(self, timeframe, days):
        assert lookback_days(timeframe) == days

    def test_cutoff_is_date_only(self):
        assert cutoff_date(7, _NOW) == "2026-03-08"

    def test_cutoff_converts_to_utc(self):
        # 01:00 at UTC+3 is still the previous day in UTC
        now = datetime(2026, 3, 15, 1, 0, tzinfo=timezone(timedelta(hours=3)))
        assert cutoff_date(1, now) == "2026-03-13"

    def test_cutoff_defaults_to_current_time(self):
        expected = (datetime.now(tz=UTC) - timedelta(days=30)).date().isoformat()
        assert cutoff_date(30) == expected


class TestTrendingQuery:
    @pytest.mark.parametrize(
        ("timeframe", "since"),
        [
            ("day", "2026-03-14"),
            ("week", "2026-03-08"),
            ("month", "2026-02-13"),
            (None, "2026-03-08"),
        ],
    )
    def test_timeframe_cutoff(self, timeframe, since):
        assert build_trending_query(timeframe, now=_NOW) == f"created:>{since}+stars:>10"

    def test_language_token_encoded(self):
        query = build_trending_query("week", "c++", now=_NOW)
        assert query == "created:>2026-03-08+stars:>10+language:c%2B%2B"

    def test_only_language_is_encoded(self):
        query = build_trending_query("day", "c#", now=_NOW)
        assert query == "created:>2026-03-14+stars:>10+language:c%23"


class TestSearchQuery:
    def test_whole_string_encoded(self):
        assert build_search_query("foo", "go", 50) == encode_component("foo+language:go+stars:>=50")
        assert build_search_query("foo", "go", 50) == "foo%2Blanguage%3Ago%2Bstars%3A%3E%3D50"

    def test_plain_query(self):
        assert build_search_query("http client") == "http%20client"

    def test_zero_min_stars_adds_nothing(self):
        assert build_search_query("foo", None, 0) == "foo"

    def test_language_only(self):
        assert build_search_query("foo", "rust") == "foo%2Blanguage%3Arust"

    def test_created_after_qualifier(self):
        assert build_search_query("foo", created_after="2026-03-08") == (
            "foo%2Bcreated%3A%3E2026-03-08"
        )

    def test_encode_component_keeps_js_unreserved(self):
        assert encode_component("a-b_c.d!e~f*g'h(i)") == "a-b_c.d!e~f*g'h(i)"
        assert encode_component("a/b c") == "a%2Fb%20c"


class TestSearchPath:
    def test_path_shape(self):
        assert search_path("foo", sort="forks", limit=5) == (
            "/search/repositories?q=foo&sort=forks&order=desc&per_page=5"
        )

    @pytest.mark.parametrize(("limit", "clamped"), [(0, 1), (1, 1), (30, 30), (99, 30), (-3, 1)])
    def test_limit_clamped(self, limit, clamped):
        assert clamp_limit(limit) == clamped


class TestSearchQueryModel:
    def test_create_clamps_limit(self):
        assert SearchQuery.create("foo", limit=100).limit == 30

    def test_days_fixed_at_construction(self):
        query = SearchQuery.create(days=7, now=_NOW)
        assert query.cutoff == "2026-03-08"

    def test_no_days_no_cutoff(self):
        assert SearchQuery.create("foo").cutoff is None

    def test_search_path(self):
        query = SearchQuery.create("foo", language="go", min_stars=50, sort="updated", limit=3)
        assert query.path() == (
            "/search/repositories?q=foo%2Blanguage%3Ago%2Bstars%3A%3E%3D50"
            "&sort=updated&order=desc&per_page=3"
        )

    def test_trending_path(self):
        query = SearchQuery.trending("month", "python", limit=10, now=_NOW)
        assert query.path() == (
            "/search/repositories?q=created:>2026-02-13+stars:>10+language:python"
            "&sort=stars&order=desc&per_page=10"
        )

    def test_text_with_time_window_keeps_every_filter(self):
        query = SearchQuery.create("foo", language="go", min_stars=5, days=7, now=_NOW)
        assert not query.is_trending
        assert query.path() == (
            "/search/repositories?q=foo%2Blanguage%3Ago%2Bstars%3A%3E%3D5"
            "%2Bcreated%3A%3E2026-03-08&sort=stars&order=desc&per_page=10"
        )

    def test_text_with_time_window_without_star_filter(self):
        path = SearchQuery.create("foo", language="go", days=7, now=_NOW).path()
        assert "q=foo%2Blanguage%3Ago%2Bcreated%3A%3E2026-03-08&" in path

    def test_bare_time_window_is_trending(self):
        query = SearchQuery.create(days=1, now=_NOW)
        assert query.is_trending
        assert query.path().startswith("/search/repositories?q=created:>2026-03-14+stars:>10&")
