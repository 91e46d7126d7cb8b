"""Fixtures — fake Redis, SQLite-backed article store, in-memory renderer."""

from __future__ import annotations

from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from fakeredis import FakeServer
from fakeredis.aioredis import FakeRedis
from sqlalchemy.ext.asyncio import create_async_engine

from src.cache.redis import RunCache
from src.scraper import SoupDom
from src.store.articles import ArticleStore


class FakeRenderer:
    """Serves canned HTML per URL through ``SoupDom``; an Exception value makes navigation fail."""

    def __init__(
        self,
        pages: dict[str, str | Exception],
        launch_error: Exception | None = None,
    ) -> None:
        self.pages = pages
        self.launch_error = launch_error
        self.opened: list[str] = []
        self.closed: list[str] = []

    @asynccontextmanager
    async def session(self):
        if self.launch_error is not None:
            raise self.launch_error
        yield self

    @asynccontextmanager
    async def open(self, url: str):
        self.opened.append(url)
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        try:
            yield SoupDom(page, url)
        finally:
            self.closed.append(url)


@pytest.fixture
def make_renderer():
    return FakeRenderer


@pytest_asyncio.fixture
async def run_cache():
    """RunCache backed by an in-memory FakeRedis instance."""
    client = FakeRedis(server=FakeServer(), decode_responses=True)
    cache = RunCache(client, default_ttl=3600)
    yield cache
    await client.aclose()


@pytest_asyncio.fixture
async def article_store(tmp_path):
    """ArticleStore on a throwaway SQLite file with the schema in place."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'articles.db'}")
    store = ArticleStore(engine)
    await store.ensure_schema()
    yield store
    await engine.dispose()
