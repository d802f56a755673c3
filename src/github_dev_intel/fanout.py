"""Concurrency combinators for fanning out GitHub API calls.

Two policies, both built on ``asyncio.gather`` and both preserving input
order in their results:

- ``gather_required``: fail fast; the first failure propagates.
- ``gather_settled``: every item runs to completion and its failure is
  captured as a per-item ``Settled`` instead of failing the batch.

Neither cancels in-flight branches, throttles, or imposes a timeout.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from github_dev_intel.errors import GitHubDevIntelError, UpstreamError

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")


@dataclass(frozen=True, slots=True)
class Settled(Generic[K, T]):
    """Outcome of one branch of a settled fan-out."""

    key: K
    value: T | None = None
    error: GitHubDevIntelError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def optional(awaitable: Awaitable[T], default: T) -> T:
    """Await ``awaitable``; on UpstreamError return ``default`` instead."""
    try:
        return await awaitable
    except UpstreamError as exc:
        logger.debug("Optional GitHub call failed, using default: %s", exc)
        return default


async def gather_required(*awaitables: Awaitable[T]) -> list[T]:
    """Await all concurrently; the first exception propagates to the caller."""
    return list(await asyncio.gather(*awaitables))


async def gather_settled(
    keys: Sequence[K],
    fetch: Callable[[K], Awaitable[T]],
) -> list[Settled[K, T]]:
    """Run ``fetch(key)`` for every key concurrently, isolating failures.

    Only GitHubDevIntelError is captured; anything else is a bug and
    propagates.
    """

    async def _settle(key: K) -> Settled[K, T]:
        try:
            return Settled(key=key, value=await fetch(key))
        except GitHubDevIntelError as exc:
            logger.warning("Fan-out branch %r failed: %s", key, exc)
            return Settled(key=key, error=exc)

    return list(await asyncio.gather(*(_settle(key) for key in keys)))
