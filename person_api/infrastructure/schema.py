"""
Schema bootstrap for the person store.

Creates the trigram extension, the searchable-text function, the persons
table with its generated search column, and its indexes. Every statement
is idempotent, so running it on each startup is safe.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from person_api.domain.persons.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

DDL_STATEMENTS = [
    "CREATE EXTENSION IF NOT EXISTS pg_trgm",
    # Must be IMMUTABLE to back a generated column
    """
    CREATE OR REPLACE FUNCTION generate_searchable(_name TEXT, _nickname TEXT, _stack JSON)
    RETURNS TEXT AS $$
        SELECT _name || _nickname || COALESCE(CAST(_stack AS TEXT), '')
    $$ LANGUAGE sql IMMUTABLE
    """,
    """
    CREATE TABLE IF NOT EXISTS persons (
        id          UUID PRIMARY KEY,
        nickname    TEXT NOT NULL UNIQUE,
        name        TEXT NOT NULL,
        birth_date  DATE NOT NULL,
        stack       JSON,
        searchable  TEXT GENERATED ALWAYS AS (
            generate_searchable(name, nickname, stack)
        ) STORED
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_persons_searchable
        ON persons USING gist (searchable gist_trgm_ops (siglen = 64))
    """,
    "CREATE UNIQUE INDEX IF NOT EXISTS idx_persons_nickname ON persons USING btree (nickname)",
]


def ensure_schema(engine: Engine) -> None:
    """Create missing schema objects in a single transaction.

    Raises:
        StoreUnavailableError: If any statement fails.
    """
    try:
        with engine.begin() as conn:
            for ddl in DDL_STATEMENTS:
                conn.execute(text(ddl))
    except SQLAlchemyError as exc:
        logger.exception("Failed to create person store schema.")
        raise StoreUnavailableError("schema bootstrap failed") from exc

    logger.info("Person store schema verified/created.")
