"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import router
from src.cache.redis import RunCache, create_redis_client
from src.config import get_settings
from src.logging_config import setup_logging
from src.scraper import SITES, ScrapeOrchestrator, build_renderer
from src.store.articles import ArticleStore
from src.store.database import create_db_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting headline scraper")

    db_engine = create_db_engine(settings)
    store = ArticleStore(db_engine)
    await store.ensure_schema()

    redis_client = await create_redis_client(settings.redis_url)
    cache = RunCache(redis_client, default_ttl=settings.run_summary_ttl_seconds)

    orchestrator = ScrapeOrchestrator(store, build_renderer(settings), SITES)

    # Attach to app state for dependency injection
    app.state.settings = settings
    app.state.store = store
    app.state.cache = cache
    app.state.orchestrator = orchestrator

    logger.info(
        "headline scraper ready",
        extra={
            "renderer": settings.renderer,
            "navigation_timeout": settings.navigation_timeout_seconds,
            "sites": list(SITES),
        },
    )

    yield

    # Cleanup
    logger.info("shutting down headline scraper")
    await redis_client.aclose()
    await db_engine.dispose()


app = FastAPI(title="Headline Scraper", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in get_settings().cors_allow_origins.split(",") if o.strip()],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
