"""Request/response Pydantic models."""

from datetime import datetime

from pydantic import BaseModel, computed_field


class Article(BaseModel):
    id: int
    source: str | None = None
    text: str | None = None
    href: str | None = None
    imgSrc: str | None = None
    date: datetime


class ArticleList(BaseModel):
    data: list[Article] = []


class SiteOutcome(BaseModel):
    """Per-site result: ``ok`` with counts, or failed with an ``error`` reason."""

    source: str
    ok: bool
    found: int = 0
    inserted: int = 0
    error: str | None = None


class ScrapeSummary(BaseModel):
    run_id: str
    started_at: datetime
    finished_at: datetime | None = None
    sites: list[SiteOutcome] = []

    @computed_field
    @property
    def found(self) -> int:
        return sum(s.found for s in self.sites)

    @computed_field
    @property
    def inserted(self) -> int:
        return sum(s.inserted for s in self.sites)

    @computed_field
    @property
    def failed(self) -> list[str]:
        return [s.source for s in self.sites if not s.ok]


class ScrapeResponse(BaseModel):
    message: str
    run_id: str
    summary: ScrapeSummary
