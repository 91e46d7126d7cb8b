"""Headline scraping: site registry, renderers, extraction and orchestration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .dom import PageDom, PlaywrightDom, SoupDom
from .extract import extract
from .models import ExtractionRule, ScrapedItem, SiteConfig
from .orchestrator import ScrapeOrchestrator, generate_run_id
from .render import (
    PageRenderer,
    PlaywrightRenderer,
    RendererLaunchError,
    StaticRenderer,
)
from .sites import SITES, iter_sites

if TYPE_CHECKING:
    from src.config import Settings

__all__ = [
    "ExtractionRule",
    "PageDom",
    "PageRenderer",
    "PlaywrightDom",
    "PlaywrightRenderer",
    "RendererLaunchError",
    "SITES",
    "ScrapeOrchestrator",
    "ScrapedItem",
    "SiteConfig",
    "SoupDom",
    "StaticRenderer",
    "build_renderer",
    "extract",
    "generate_run_id",
    "iter_sites",
]

logger = logging.getLogger(__name__)


def build_renderer(settings: Settings) -> PageRenderer:
    """Build the page renderer selected by ``RENDERER``."""
    logger.debug(
        "renderer selected",
        extra={"renderer": settings.renderer, "timeout": settings.navigation_timeout_seconds},
    )
    if settings.renderer == "static":
        return StaticRenderer(
            navigation_timeout=settings.navigation_timeout_seconds,
            user_agent=settings.user_agent,
        )
    return PlaywrightRenderer(navigation_timeout=settings.navigation_timeout_seconds)
