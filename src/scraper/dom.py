"""DOM query adapters: one interface, a Playwright and a BeautifulSoup backend."""

from __future__ import annotations

from typing import Any, Protocol
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from playwright.async_api import ElementHandle, Page


class PageDom(Protocol):
    """Read-only DOM access used by the extractor.

    Nodes are opaque to callers; they are only ever handed back to the
    adapter that produced them.
    """

    url: str

    async def query_all(self, selector: str) -> list[Any]: ...

    async def query_first(self, node: Any, selector: str) -> Any | None: ...

    async def attribute(self, node: Any, name: str) -> str | None: ...

    async def text(self, node: Any) -> str: ...

    async def absolute_href(self, node: Any) -> str | None: ...


class PlaywrightDom:
    """DOM adapter over a live Playwright page."""

    def __init__(self, page: Page) -> None:
        self._page = page

    @property
    def url(self) -> str:
        return self._page.url

    async def query_all(self, selector: str) -> list[ElementHandle]:
        return await self._page.query_selector_all(selector)

    async def query_first(self, node: ElementHandle, selector: str) -> ElementHandle | None:
        return await node.query_selector(selector)

    async def attribute(self, node: ElementHandle, name: str) -> str | None:
        return await node.get_attribute(name)

    async def text(self, node: ElementHandle) -> str:
        return await node.text_content() or ""

    async def absolute_href(self, node: ElementHandle) -> str | None:
        # The href property is already resolved against the document base.
        href = await node.evaluate("el => el.href")
        return href or None


class SoupDom:
    """DOM adapter over a parsed HTML document (no JavaScript)."""

    def __init__(self, html: str, url: str) -> None:
        self._soup = BeautifulSoup(html, "html.parser")
        self.url = url

    async def query_all(self, selector: str) -> list[Tag]:
        return self._soup.select(selector)

    async def query_first(self, node: Tag, selector: str) -> Tag | None:
        return node.select_one(selector)

    async def attribute(self, node: Tag, name: str) -> str | None:
        value = node.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    async def text(self, node: Tag) -> str:
        return node.get_text()

    async def absolute_href(self, node: Tag) -> str | None:
        href = await self.attribute(node, "href")
        if not href:
            return None
        return urljoin(self.url, href.strip())
