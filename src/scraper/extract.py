"""Headline extraction from a rendered page."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any
from urllib.parse import urljoin

from .dom import PageDom
from .models import ExtractionRule, ScrapedItem

logger = logging.getLogger(__name__)


async def _image_src(dom: PageDom, container: Any) -> str | None:
    img = await dom.query_first(container, "img")
    if img is None:
        return None
    # data-src is kept as written; src is resolved like the browser's img.src.
    lazy_src = await dom.attribute(img, "data-src")
    if lazy_src:
        return lazy_src
    src = await dom.attribute(img, "src")
    if not src:
        return None
    return urljoin(dom.url, src.strip())


async def _extract_container(dom: PageDom, container: Any, content_selector: str) -> ScrapedItem:
    item = ScrapedItem(source="", img_src=await _image_src(dom, container))

    content = await dom.query_first(container, content_selector)
    if content is None:
        return item

    item.text = (await dom.text(content)).strip()
    anchor = await dom.query_first(content, "a")
    if anchor is not None:
        item.href = await dom.absolute_href(anchor)
    return item


async def extract(
    dom: PageDom,
    rules: Iterable[ExtractionRule],
    source_id: str,
) -> list[ScrapedItem]:
    """Apply *rules* to *dom* and return headline items tagged with *source_id*.

    Items are deduplicated by ``href`` across the whole rule set, first
    occurrence winning. Items without an ``href`` are all kept.
    """
    items: list[ScrapedItem] = []
    seen: set[str] = set()

    for rule in rules:
        containers = await dom.query_all(rule.container_selector)
        logger.debug(
            "containers matched",
            extra={"source": source_id, "selector": rule.container_selector, "count": len(containers)},
        )
        for container in containers:
            item = await _extract_container(dom, container, rule.content_selector)
            if item.href is not None:
                if item.href in seen:
                    continue
                seen.add(item.href)
            item.source = source_id
            items.append(item)

    return items
