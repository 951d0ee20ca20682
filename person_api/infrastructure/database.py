"""
Database engine factory.

Builds the single SQLAlchemy engine (and its connection pool) shared by
every request. Pool sizing comes from application settings.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from person_api.core.config import Settings
from person_api.domain.persons.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Build a pooled SQLAlchemy engine from application settings."""
    return create_engine(
        settings.get_database_url(),
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        # Statement logging must never echo person data
        hide_parameters=True,
    )


def check_connection(engine: Engine) -> None:
    """Run a trivial statement to prove the store is reachable.

    Raises:
        StoreUnavailableError: If no connection can be established.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(
            "Database unreachable at %s",
            engine.url.render_as_string(hide_password=True),
        )
        raise StoreUnavailableError(type(exc).__name__) from exc
