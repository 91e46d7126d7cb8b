"""Scrape orchestrator — visits every configured site and stores new headlines."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from src.api.schemas import ScrapeSummary, SiteOutcome

from .extract import extract
from .models import SiteConfig
from .render import PageRenderer, RenderSession
from .sites import SITES, iter_sites

if TYPE_CHECKING:
    from src.store.articles import ArticleStore

logger = logging.getLogger(__name__)


def generate_run_id() -> str:
    return uuid.uuid4().hex[:12]


class ScrapeOrchestrator:
    """Runs one sequential scrape pass over the site registry.

    A failing site is logged and recorded in the summary; the pass moves on
    to the next one. Only a renderer launch failure aborts the whole run.
    """

    def __init__(
        self,
        store: ArticleStore,
        renderer: PageRenderer,
        sites: dict[str, SiteConfig] | None = None,
    ) -> None:
        self._store = store
        self._renderer = renderer
        self._sites = sites if sites is not None else SITES

    async def run_all(self, run_id: str | None = None) -> ScrapeSummary:
        summary = ScrapeSummary(
            run_id=run_id or generate_run_id(),
            started_at=datetime.now(timezone.utc),
        )
        logger.info(
            "scrape run started",
            extra={"run_id": summary.run_id, "site_count": len(self._sites)},
        )

        async with self._renderer.session() as session:
            for site_id, site in iter_sites(self._sites):
                logger.info("scraping source", extra={"run_id": summary.run_id, "source": site_id})
                summary.sites.append(await self._scrape_site(session, site))

        summary.finished_at = datetime.now(timezone.utc)
        logger.info(
            "scrape run complete",
            extra={
                "run_id": summary.run_id,
                "found": summary.found,
                "inserted": summary.inserted,
                "failed": summary.failed,
            },
        )
        return summary

    async def _scrape_site(self, session: RenderSession, site: SiteConfig) -> SiteOutcome:
        found = 0
        inserted = 0
        try:
            async with session.open(site.url) as dom:
                items = await extract(dom, site.rules, site.id)
                found = len(items)
                for item in items:
                    if item.href is None:
                        continue
                    if await self._store.exists(item.href):
                        continue
                    logger.info("inserting article", extra={"source": site.id, "text": item.text})
                    await self._store.insert(item)
                    inserted += 1
        except Exception as exc:
            logger.exception("failed to scrape source", extra={"source": site.id, "url": site.url})
            return SiteOutcome(
                source=site.id,
                ok=False,
                found=found,
                inserted=inserted,
                error=f"{type(exc).__name__}: {exc}",
            )

        logger.debug(
            "source scraped",
            extra={"source": site.id, "found": found, "inserted": inserted},
        )
        return SiteOutcome(source=site.id, ok=True, found=found, inserted=inserted)
