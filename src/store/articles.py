"""Article table access — schema, existence check, insert, listing."""

from __future__ import annotations

import logging

from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    TIMESTAMP,
    insert,
    select,
    text,
)
from sqlalchemy.ext.asyncio import AsyncEngine

from src.api.schemas import Article
from src.scraper.models import ScrapedItem

logger = logging.getLogger(__name__)

metadata = MetaData()

# href is not unique at the schema level; callers check exists() before insert().
articles = Table(
    "articles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("source", String(50)),
    Column("text", Text),
    Column("href", Text),
    Column("imgSrc", Text, nullable=True),
    Column("date", TIMESTAMP, server_default=text("CURRENT_TIMESTAMP")),
)


class ArticleStore:
    """Thin async wrapper around the ``articles`` table."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def ensure_schema(self) -> None:
        """Create the articles table if it does not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(metadata.create_all, checkfirst=True)
        logger.info("database initialized")

    async def exists(self, href: str) -> bool:
        async with self._engine.connect() as conn:
            result = await conn.execute(
                select(articles.c.id).where(articles.c.href == href).limit(1)
            )
            return result.first() is not None

    async def insert(self, item: ScrapedItem) -> None:
        """Append *item* as a new row. Does not check for an existing href."""
        async with self._engine.begin() as conn:
            await conn.execute(
                insert(articles).values(
                    source=item.source,
                    text=item.text,
                    href=item.href,
                    imgSrc=item.img_src,
                )
            )
        logger.debug("article inserted", extra={"source": item.source, "href": item.href})

    async def list_all(self) -> list[Article]:
        """Return every article, newest first."""
        async with self._engine.connect() as conn:
            result = await conn.execute(
                select(articles).order_by(articles.c.date.desc(), articles.c.id.desc())
            )
            return [Article.model_validate(dict(row)) for row in result.mappings()]
