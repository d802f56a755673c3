"""Entrypoint catalog: keys, descriptions, and prices of every operation.

Prices are in minor currency units (micro-dollars, 6 decimals), so 1000 is
$0.001. Payment collection itself happens in front of the server.
"""

from __future__ import annotations

from dataclasses import dataclass

_MINOR_UNITS_PER_DOLLAR = 1_000_000


@dataclass(frozen=True, slots=True)
class EntrypointSpec:
    key: str
    description: str
    price: int
    summary: str = ""

    @property
    def is_free(self) -> bool:
        return self.price == 0

    @property
    def price_label(self) -> str:
        """Human-readable price, e.g. ``"$0.001"``."""
        return f"${self.price / _MINOR_UNITS_PER_DOLLAR:.3f}"

    def tool_description(self) -> str:
        if self.is_free:
            return f"{self.description} (free)"
        return f"{self.description} (price: {self.price_label})"


OVERVIEW = EntrypointSpec(
    key="overview",
    description="Free overview - see trending repos and agent capabilities",
    price=0,
)
TRENDING = EntrypointSpec(
    key="trending",
    description="Discover trending repositories by timeframe and language",
    price=1000,
    summary="Discover trending repos by timeframe/language",
)
REPO_STATS = EntrypointSpec(
    key="repo-stats",
    description="Get detailed statistics for a specific repository",
    price=2000,
    summary="Detailed stats for a specific repository",
)
RELEASES = EntrypointSpec(
    key="releases",
    description="Get recent releases for a repository",
    price=2000,
    summary="Recent releases for a repository",
)
SEARCH = EntrypointSpec(
    key="search",
    description="Search repositories with advanced filters",
    price=2000,
    summary="Search repositories with filters",
)
COMPARE = EntrypointSpec(
    key="compare",
    description="Compare multiple repositories side-by-side",
    price=5000,
    summary="Compare multiple repositories side-by-side",
)

ENTRYPOINTS: tuple[EntrypointSpec, ...] = (
    OVERVIEW,
    TRENDING,
    REPO_STATS,
    RELEASES,
    SEARCH,
    COMPARE,
)


def paid_endpoint_catalog() -> dict[str, dict[str, str]]:
    """``{key: {price, description}}`` for every paid entrypoint, in catalog order."""
    return {
        spec.key: {"price": spec.price_label, "description": spec.summary}
        for spec in ENTRYPOINTS
        if not spec.is_free
    }
