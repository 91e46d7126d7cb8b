"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    database_url: str = ""
    mysql_addon_host: str = "localhost"
    mysql_addon_user: str = "root"
    mysql_addon_password: str = ""
    mysql_addon_db: str = "news"
    mysql_addon_port: int = 3306
    db_pool_size: int = 5

    redis_url: str = "redis://localhost:6379"
    run_summary_ttl_seconds: int = 86400
    run_lock_ttl_seconds: int = 900

    renderer: Literal["playwright", "static"] = "playwright"
    navigation_timeout_seconds: float = 30.0
    user_agent: str = "headline-scraper/0.1.0"

    cors_allow_origins: str = "*"
    log_level: str = "INFO"

    def sqlalchemy_url(self) -> str | URL:
        """Return DATABASE_URL if set, else a MySQL URL built from the MYSQL_ADDON_* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "mysql+aiomysql",
            username=self.mysql_addon_user,
            password=self.mysql_addon_password or None,
            host=self.mysql_addon_host,
            port=self.mysql_addon_port,
            database=self.mysql_addon_db,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
