"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_sql: Echo every SQL statement at INFO. Parameters are never logged.
        storage_backend: "postgres" for the real store, "memory" for a
            process-local store (local runs and tests).
        database_url: Explicit SQLAlchemy URL. Built from postgres_* when unset.
        db_pool_size: Persistent connections kept by the pool.
        db_max_overflow: Extra connections allowed above db_pool_size.
        db_pool_pre_ping: Check connections before handing them out.
        db_bootstrap_schema: Create extension, table and indexes at startup.
        search_limit: Maximum number of persons returned by a term search.
        rate_limit_enabled: Turn the per-client rate limiter on.
        rate_limit_default: Per-client limit applied to each endpoint path.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Person Registry"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_sql: bool = False
    storage_backend: Literal["postgres", "memory"] = "postgres"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "persons"

    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_pre_ping: bool = True
    db_bootstrap_schema: bool = True

    search_limit: int = 50

    rate_limit_enabled: bool = False
    rate_limit_default: str = "600/minute"

    def get_database_url(self) -> str:
        """Return the effective SQLAlchemy URL for the person store.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build the URL from postgres_* values (Docker Compose or local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
