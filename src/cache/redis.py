"""Redis client — scrape run summaries with TTL and the overlapping-run lock."""

from __future__ import annotations

import logging

import redis.asyncio as redis
from redis.backoff import ExponentialBackoff
from redis.retry import Retry

from src.api.schemas import ScrapeSummary

logger = logging.getLogger(__name__)

KEY_PREFIX = "scrape-run:"
LOCK_KEY = "scrape-run-lock"


class RunCache:
    """Thin async wrapper around Redis for scrape run bookkeeping."""

    def __init__(self, client: redis.Redis, default_ttl: int = 86400) -> None:
        self._client = client
        self._default_ttl = default_ttl

    async def acquire_lock(self, run_id: str, ttl: int) -> bool:
        """Claim the run lock for *run_id*. Returns ``False`` if another run holds it.

        Fails open: when Redis is unreachable the run is allowed to proceed.
        """
        try:
            if await self._client.set(LOCK_KEY, run_id, nx=True, ex=ttl):
                return True
            holder = await self._client.get(LOCK_KEY)
        except redis.RedisError:
            logger.warning("run lock unavailable, proceeding unguarded", extra={"run_id": run_id}, exc_info=True)
            return True
        logger.info("run lock held", extra={"run_id": run_id, "holder": holder})
        return False

    async def release_lock(self, run_id: str) -> None:
        """Release the run lock if *run_id* still owns it."""
        try:
            if await self._client.get(LOCK_KEY) == run_id:
                await self._client.delete(LOCK_KEY)
        except redis.RedisError:
            logger.warning("run lock release failed", extra={"run_id": run_id}, exc_info=True)

    async def get(self, run_id: str) -> ScrapeSummary | None:
        """Return the cached summary, or ``None`` on miss / error."""
        try:
            raw = await self._client.get(f"{KEY_PREFIX}{run_id}")
            if raw is None:
                logger.debug("cache miss", extra={"run_id": run_id})
                return None
            logger.debug("cache hit", extra={"run_id": run_id})
            return ScrapeSummary.model_validate_json(raw)
        except redis.RedisError:
            logger.warning("cache get failed", extra={"run_id": run_id}, exc_info=True)
            return None

    async def set(self, summary: ScrapeSummary, ttl: int | None = None) -> bool:
        """Store *summary* under its run id with a TTL. Returns ``False`` on error."""
        effective_ttl = ttl if ttl is not None else self._default_ttl
        try:
            await self._client.set(
                f"{KEY_PREFIX}{summary.run_id}",
                summary.model_dump_json(),
                ex=effective_ttl,
            )
            logger.debug("cache set", extra={"run_id": summary.run_id, "ttl": effective_ttl})
            return True
        except redis.RedisError:
            logger.warning("cache set failed", extra={"run_id": summary.run_id}, exc_info=True)
            return False


async def create_redis_client(redis_url: str) -> redis.Redis:
    # Strip credentials for logging (everything before @ if present)
    safe_url = redis_url.split("@")[-1] if "@" in redis_url else redis_url
    logger.info("connecting to redis", extra={"redis_url": safe_url})
    retry = Retry(ExponentialBackoff(), retries=3)
    return redis.from_url(
        redis_url,
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
        health_check_interval=30,
        retry=retry,
        retry_on_error=[redis.ConnectionError, redis.TimeoutError],
    )
