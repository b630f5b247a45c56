"""Application configuration management."""
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from sqlalchemy.engine.url import make_url, URL
from typing import Optional
import logging

SQLITE_LOCAL_URL = "sqlite+aiosqlite:///./eveapi.db"

KNOWN_ENVIRONMENTS = ("development", "testing", "production")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = SQLITE_LOCAL_URL
    db_pool_size: int = 5
    db_max_overflow: int = 10
    sql_echo: bool = False

    # Application
    environment: str = "development"
    log_dir: str = "logs"

    # Label rendered for entities the API has not resolved yet (CEO, etc.)
    unknown_entity_name: str = "Unknown"

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, value):
        """Lower-case the environment name and reject unknown ones."""
        if value is None:
            return "development"
        normalized = str(value).strip().lower()
        if normalized not in KNOWN_ENVIRONMENTS:
            raise ValueError(
                f"Unsupported environment: {value}. Use one of {', '.join(KNOWN_ENVIRONMENTS)}."
            )
        return normalized

    @model_validator(mode="after")
    def validate_all_config(self):
        """Validate pool sizing and normalize database URLs to async drivers."""
        logger = logging.getLogger(__name__)

        if self.db_pool_size < 1:
            raise ValueError("db_pool_size must be at least 1")

        if self.db_max_overflow < 0:
            raise ValueError("db_max_overflow must not be negative")

        url = self.database_url
        if not url:
            logger.warning("Empty DATABASE_URL, using SQLite fallback")
            self.database_url = SQLITE_LOCAL_URL
            return self

        parsed: Optional[URL] = None
        try:
            parsed = make_url(url)
        except Exception as e:
            logger.error(f"Failed to parse DATABASE_URL: {e}")
            logger.warning("Invalid DATABASE_URL; falling back to default sqlite database.")
            self.database_url = SQLITE_LOCAL_URL
            return self

        drivername = parsed.drivername
        if drivername.startswith("postgres") and "+asyncpg" not in drivername:
            parsed = parsed.set(drivername="postgresql+asyncpg")
            logger.info(f"Driver normalized: {drivername} -> {parsed.drivername}")
        elif drivername == "sqlite":
            parsed = parsed.set(drivername="sqlite+aiosqlite")
            logger.info(f"Driver normalized: {drivername} -> {parsed.drivername}")

        # render_as_string re-encodes special characters in the password
        self.database_url = parsed.render_as_string(hide_password=False)
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
