"""Data models for the scraper package."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionRule:
    """A container selector plus the headline selector scoped inside it."""

    container_selector: str
    content_selector: str


@dataclass(frozen=True)
class SiteConfig:
    """One news website and the rules used to pull headlines off its front page."""

    id: str
    url: str
    rules: tuple[ExtractionRule, ...]


@dataclass
class ScrapedItem:
    """A single headline pulled off a page, before persistence."""

    source: str
    text: str | None = None
    href: str | None = None
    img_src: str | None = None
