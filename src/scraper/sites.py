"""Static registry of scraped news sites."""

from __future__ import annotations

from collections.abc import Iterator

from .models import ExtractionRule, SiteConfig


def _site(site_id: str, url: str, *rules: tuple[str, str]) -> SiteConfig:
    return SiteConfig(
        id=site_id,
        url=url,
        rules=tuple(ExtractionRule(container, content) for container, content in rules),
    )


SITES: dict[str, SiteConfig] = {
    site.id: site
    for site in (
        _site("g4media", "https://g4media.ro", ("div.post-review", "h3")),
        _site("hotnews", "https://hotnews.ro", ("article", "h2")),
        _site(
            "spotmedia",
            "https://spotmedia.ro",
            ("div.jet-smart-listing__post", "div.mbm-h6"),
        ),
        _site(
            "ziare",
            "https://ziare.com",
            ("div.spotlight__article", "h1.spotlight__article__title"),
            ("div.spotlight__article", "h2.spotlight__article__title"),
            ("div.news__article", "h3.news__article__title"),
        ),
        _site(
            "digi24",
            "https://digi24.ro",
            ("article.article-alt", "h3.article-title"),
            ("article", "h4.article-title"),
        ),
        _site(
            "libertatea",
            "https://libertatea.ro",
            ("div.news-item", "h3.article-title"),
            ("div.news-item", "h2.article-title"),
        ),
        _site("stirileprotv", "https://stirileprotv.ro", ("article.article", "h3.article-title-daily")),
        _site("news", "https://news.ro", ("article.article", "h2")),
        _site("gsp", "https://gsp.ro", ("div.news-item", "h2")),
        _site("prosport", "https://prosport.ro", ("div.article--wide", "h2.article__title")),
    )
}


def iter_sites(sites: dict[str, SiteConfig] | None = None) -> Iterator[tuple[str, SiteConfig]]:
    """Yield ``(id, SiteConfig)`` pairs in registration order."""
    yield from (sites if sites is not None else SITES).items()
