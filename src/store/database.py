"""Async SQLAlchemy engine factory."""

from __future__ import annotations

import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.config import Settings

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> AsyncEngine:
    url = make_url(settings.sqlalchemy_url())
    logger.info(
        "connecting to database",
        extra={"database_url": url.render_as_string(hide_password=True)},
    )

    kwargs: dict = {}
    # SQLite picks its own pool (StaticPool for :memory:), which rejects sizing args.
    if url.get_backend_name() != "sqlite":
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=0,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return create_async_engine(url, **kwargs)
