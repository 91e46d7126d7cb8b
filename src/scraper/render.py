"""Page renderers — open a browsing context per URL and hand back a DOM adapter."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Protocol

import httpx
from playwright.async_api import Browser, Error as PlaywrightError, async_playwright

from .dom import PageDom, PlaywrightDom, SoupDom

logger = logging.getLogger(__name__)

CHROMIUM_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")


class RendererLaunchError(RuntimeError):
    """The rendering engine could not be started; no site can be scraped."""


class RenderSession(Protocol):
    """A started renderer that can open pages one at a time."""

    def open(self, url: str) -> AbstractAsyncContextManager[PageDom]: ...


class PageRenderer(Protocol):
    """Protocol for page renderers."""

    def session(self) -> AbstractAsyncContextManager[RenderSession]: ...


class _PlaywrightSession:
    def __init__(self, browser: Browser, navigation_timeout: float) -> None:
        self._browser = browser
        self._timeout_ms = navigation_timeout * 1000

    @asynccontextmanager
    async def open(self, url: str) -> AsyncIterator[PageDom]:
        page = await self._browser.new_page()
        page.set_default_navigation_timeout(self._timeout_ms)
        try:
            logger.debug("navigating", extra={"url": url})
            await page.goto(url, wait_until="domcontentloaded")
            yield PlaywrightDom(page)
        finally:
            await page.close()


class PlaywrightRenderer:
    """Renders pages in headless Chromium; one browser per session, one page per site."""

    def __init__(self, navigation_timeout: float = 30.0, headless: bool = True) -> None:
        self._navigation_timeout = navigation_timeout
        self._headless = headless

    @asynccontextmanager
    async def session(self) -> AsyncIterator[RenderSession]:
        try:
            playwright = await async_playwright().start()
        except PlaywrightError as exc:
            raise RendererLaunchError("could not start playwright") from exc

        try:
            browser = await playwright.chromium.launch(
                headless=self._headless,
                args=list(CHROMIUM_ARGS),
            )
        except PlaywrightError as exc:
            await playwright.stop()
            raise RendererLaunchError("could not launch chromium") from exc

        logger.info("browser launched", extra={"browser_version": browser.version})
        try:
            yield _PlaywrightSession(browser, self._navigation_timeout)
        finally:
            try:
                await browser.close()
            finally:
                await playwright.stop()


class _StaticSession:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @asynccontextmanager
    async def open(self, url: str) -> AsyncIterator[PageDom]:
        logger.debug("fetching", extra={"url": url})
        resp = await self._client.get(url)
        resp.raise_for_status()
        yield SoupDom(resp.text, str(resp.url))


class StaticRenderer:
    """Fetches raw HTML over HTTP; no JavaScript is executed."""

    def __init__(
        self,
        navigation_timeout: float = 30.0,
        user_agent: str = "headline-scraper/0.1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._navigation_timeout = navigation_timeout
        self._user_agent = user_agent
        self._transport = transport

    @asynccontextmanager
    async def session(self) -> AsyncIterator[RenderSession]:
        async with httpx.AsyncClient(
            follow_redirects=True,
            headers={"User-Agent": self._user_agent},
            timeout=self._navigation_timeout,
            transport=self._transport,
        ) as client:
            yield _StaticSession(client)
