"""GET /scrape-all, GET /articles, GET /scrape-runs/{run_id} endpoint handlers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.api.schemas import ArticleList, ScrapeResponse, ScrapeSummary
from src.api.service import (
    ScrapeInProgressError,
    get_run_summary,
    list_articles,
    run_scrape,
)
from src.cache.redis import RunCache
from src.config import Settings
from src.scraper import RendererLaunchError, ScrapeOrchestrator
from src.store.articles import ArticleStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_orchestrator(request: Request) -> ScrapeOrchestrator:
    return request.app.state.orchestrator


def _get_store(request: Request) -> ArticleStore:
    return request.app.state.store


def _get_cache(request: Request) -> RunCache:
    return request.app.state.cache


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/scrape-all", response_model=ScrapeResponse)
async def scrape_all(
    orchestrator: ScrapeOrchestrator = Depends(_get_orchestrator),
    cache: RunCache = Depends(_get_cache),
    settings: Settings = Depends(_get_settings),
):
    logger.info("scrape-all endpoint accessed")
    try:
        summary = await run_scrape(orchestrator, cache, settings)
    except ScrapeInProgressError:
        return JSONResponse(status_code=409, content={"error": "Scrape already in progress"})
    except RendererLaunchError:
        logger.exception("renderer launch failed")
        return JSONResponse(status_code=500, content={"error": "Scraping failed"})
    except Exception:
        logger.exception("error in scrape-all")
        return JSONResponse(status_code=500, content={"error": "Scraping failed"})

    return ScrapeResponse(
        message="Scraping completed and data saved to MySQL",
        run_id=summary.run_id,
        summary=summary,
    )


@router.get("/articles", response_model=ArticleList)
async def get_articles(store: ArticleStore = Depends(_get_store)):
    try:
        articles = await list_articles(store)
    except SQLAlchemyError:
        logger.exception("error fetching articles")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch articles"})
    return ArticleList(data=articles)


@router.get("/scrape-runs/{run_id}", response_model=ScrapeSummary)
async def get_scrape_run(run_id: str, cache: RunCache = Depends(_get_cache)):
    summary = await get_run_summary(cache, run_id)
    if summary is None:
        return JSONResponse(status_code=404, content={"error": "Run not found or expired"})
    return summary
