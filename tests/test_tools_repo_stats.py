"""Tests for the repo-stats tool (tools/repo_stats.py)."""

from __future__ import annotations

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from github_dev_intel.errors import UpstreamError
from github_dev_intel.tools.repo_stats import repo_stats


def _contributors(n: int) -> list[dict[str, object]]:
    return [
        {"login": f"dev{i}", "contributions": 50 - i, "html_url": f"https://github.com/dev{i}"}
        for i in range(n)
    ]


class TestRepoStats:
    async def test_merges_all_three_calls(self, make_ctx, repo_factory):
        ctx, github = make_ctx(
            {
                "/repos/octo/cat": repo_factory("octo/cat", size=321, subscribers_count=9),
                "/repos/octo/cat/contributors?per_page=10": _contributors(8),
                "/repos/octo/cat/languages": {"Python": 5000, "Shell": 20},
            }
        )
        output = (await repo_stats("octo/cat", ctx))["output"]

        assert sorted(github.calls) == [
            "/repos/octo/cat",
            "/repos/octo/cat/contributors?per_page=10",
            "/repos/octo/cat/languages",
        ]
        assert output["fullName"] == "octo/cat"
        assert output["size"] == 321
        assert output["subscribersCount"] == 9
        assert output["languages"] == {"Python": 5000, "Shell": 20}
        assert len(output["topContributors"]) == 5
        assert output["topContributors"][0] == {
            "login": "dev0",
            "contributions": 50,
            "profileUrl": "https://github.com/dev0",
        }
        assert "fetchedAt" in output

    async def test_optional_calls_fall_back(self, make_ctx, repo_factory):
        ctx, _ = make_ctx(
            {
                "/repos/octo/cat": repo_factory("octo/cat"),
                "/repos/octo/cat/contributors?per_page=10": UpstreamError.from_status(403, "big"),
                "/repos/octo/cat/languages": UpstreamError.from_status(500, "oops"),
            }
        )
        output = (await repo_stats("octo/cat", ctx))["output"]
        assert output["topContributors"] == []
        assert output["languages"] == {}

    async def test_required_call_failure_propagates(self, make_ctx):
        ctx, _ = make_ctx({})
        with pytest.raises(ToolError, match="404"):
            await repo_stats("nope/nope", ctx)
        ctx.error.assert_awaited_once()
