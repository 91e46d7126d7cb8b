"""Redis run cache tests."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from src.api.schemas import ScrapeSummary, SiteOutcome
from src.cache.redis import KEY_PREFIX, LOCK_KEY, RunCache


pytestmark = pytest.mark.asyncio


def _make_summary(run_id: str = "run-1", **overrides) -> ScrapeSummary:
    defaults = dict(
        run_id=run_id,
        started_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        finished_at=datetime(2026, 1, 1, 0, 1, tzinfo=timezone.utc),
        sites=[
            SiteOutcome(source="hotnews", ok=True, found=12, inserted=3),
            SiteOutcome(source="gsp", ok=False, error="TimeoutError: navigation"),
        ],
    )
    defaults.update(overrides)
    return ScrapeSummary(**defaults)


async def test_set_and_get(run_cache: RunCache):
    summary = _make_summary()
    assert await run_cache.set(summary) is True
    cached = await run_cache.get("run-1")
    assert cached == summary
    assert cached.inserted == 3
    assert cached.failed == ["gsp"]


async def test_get_missing_key(run_cache: RunCache):
    assert await run_cache.get("nonexistent") is None


async def test_ttl_is_set(run_cache: RunCache):
    await run_cache.set(_make_summary("run-ttl"))
    ttl = await run_cache._client.ttl(f"{KEY_PREFIX}run-ttl")
    assert 0 < ttl <= 3600


async def test_custom_ttl(run_cache: RunCache):
    await run_cache.set(_make_summary("run-custom"), ttl=120)
    ttl = await run_cache._client.ttl(f"{KEY_PREFIX}run-custom")
    assert 0 < ttl <= 120


async def test_lock_is_exclusive(run_cache: RunCache):
    assert await run_cache.acquire_lock("run-a", ttl=60) is True
    assert await run_cache.acquire_lock("run-b", ttl=60) is False


async def test_lock_release_allows_next_run(run_cache: RunCache):
    await run_cache.acquire_lock("run-a", ttl=60)
    await run_cache.release_lock("run-a")
    assert await run_cache.acquire_lock("run-b", ttl=60) is True


async def test_release_by_non_owner_keeps_lock(run_cache: RunCache):
    await run_cache.acquire_lock("run-a", ttl=60)
    await run_cache.release_lock("run-b")
    assert await run_cache._client.get(LOCK_KEY) == "run-a"


async def test_lock_expires(run_cache: RunCache):
    await run_cache.acquire_lock("run-a", ttl=30)
    ttl = await run_cache._client.ttl(LOCK_KEY)
    assert 0 < ttl <= 30


async def test_get_handles_connection_error(run_cache: RunCache):
    run_cache._client.get = AsyncMock(side_effect=redis.ConnectionError("down"))
    assert await run_cache.get("run-err") is None


async def test_set_handles_connection_error(run_cache: RunCache):
    run_cache._client.set = AsyncMock(side_effect=redis.ConnectionError("down"))
    assert await run_cache.set(_make_summary()) is False


async def test_lock_fails_open_on_connection_error(run_cache: RunCache):
    run_cache._client.set = AsyncMock(side_effect=redis.ConnectionError("down"))
    assert await run_cache.acquire_lock("run-a", ttl=60) is True
