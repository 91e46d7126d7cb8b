"""Service layer — orchestrates scrape runs and article reads for the API routes."""

from __future__ import annotations

import logging

from src.api.schemas import Article, ScrapeSummary
from src.cache.redis import RunCache
from src.config import Settings
from src.scraper import ScrapeOrchestrator, generate_run_id
from src.store.articles import ArticleStore

logger = logging.getLogger(__name__)


class ScrapeInProgressError(RuntimeError):
    """Another scrape run currently holds the run lock."""


async def run_scrape(
    orchestrator: ScrapeOrchestrator,
    cache: RunCache,
    settings: Settings,
) -> ScrapeSummary:
    """Run one full scrape pass under the run lock and cache its summary.

    Raises ``ScrapeInProgressError`` when another run is active, and lets
    ``RendererLaunchError`` propagate to the caller.
    """
    run_id = generate_run_id()
    if not await cache.acquire_lock(run_id, ttl=settings.run_lock_ttl_seconds):
        raise ScrapeInProgressError(run_id)

    try:
        summary = await orchestrator.run_all(run_id=run_id)
    finally:
        await cache.release_lock(run_id)

    await cache.set(summary, ttl=settings.run_summary_ttl_seconds)
    return summary


async def list_articles(store: ArticleStore) -> list[Article]:
    articles = await store.list_all()
    logger.debug("articles fetched", extra={"count": len(articles)})
    return articles


async def get_run_summary(cache: RunCache, run_id: str) -> ScrapeSummary | None:
    """Retrieve a cached scrape summary by run_id."""
    return await cache.get(run_id)
