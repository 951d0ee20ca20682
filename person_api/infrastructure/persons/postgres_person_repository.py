"""
Adapter: PostgreSQL person repository.

Implements PersonRepository port.
Each operation is a single parameterized statement on a pooled connection.
"""

import json
import logging
from datetime import date
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from person_api.domain.persons.entities import Person
from person_api.domain.persons.errors import (
    DuplicateNicknameError,
    StoreUnavailableError,
)
from person_api.domain.persons.ports import DEFAULT_SEARCH_LIMIT, PersonRepository

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"

_INSERT = text(
    """
    INSERT INTO persons (id, nickname, name, birth_date, stack)
    VALUES (
        CAST(:id AS uuid),
        :nickname,
        :name,
        :birth_date,
        CAST(:stack AS json)
    )
    """
)

_SELECT_BY_ID = text(
    """
    SELECT
        id,
        nickname,
        name,
        to_char(birth_date, 'YYYY-MM-DD') AS birth_date,
        stack
    FROM persons
    WHERE id = CAST(:id AS uuid)
    """
)

# No ORDER BY: the trigram index decides the order
_SEARCH = text(
    """
    SELECT
        id,
        nickname,
        name,
        to_char(birth_date, 'YYYY-MM-DD') AS birth_date,
        stack
    FROM persons
    WHERE searchable ILIKE :pattern
    LIMIT :limit
    """
)

_COUNT = text("SELECT COUNT(1) FROM persons")


def like_pattern(term: str) -> str:
    """Wrap term for a substring ILIKE with its wildcards escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _is_unique_violation(exc: IntegrityError) -> bool:
    return getattr(exc.orig, "pgcode", None) == UNIQUE_VIOLATION


def _row_to_person(row: Any) -> Person:
    stack = row.stack
    if isinstance(stack, str):
        stack = json.loads(stack)
    return Person(
        id=row.id if isinstance(row.id, UUID) else UUID(str(row.id)),
        nickname=row.nickname,
        name=row.name,
        birth_date=date.fromisoformat(row.birth_date),
        stack=stack,
    )


class PostgresPersonRepository(PersonRepository):
    """Concrete adapter for person persistence in PostgreSQL.

    Implements the PersonRepository port defined in the domain layer.
    Search relies on the store-generated `searchable` column and its
    trigram index.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def save(self, person: Person) -> None:
        """Insert a new person row.

        Args:
            person: Person entity to insert.

        Raises:
            DuplicateNicknameError: On a uniqueness violation.
            StoreUnavailableError: On any other store failure.
        """
        params = {
            "id": str(person.id),
            "nickname": person.nickname,
            "name": person.name,
            "birth_date": person.birth_date,
            "stack": (
                json.dumps(person.stack, ensure_ascii=False)
                if person.stack is not None
                else None
            ),
        }
        try:
            with self._engine.begin() as conn:
                conn.execute(_INSERT, params)
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                raise DuplicateNicknameError(person.nickname) from exc
            raise StoreUnavailableError(type(exc).__name__) from exc
        except SQLAlchemyError as exc:
            logger.error("Insert failed: %s", type(exc).__name__)
            raise StoreUnavailableError(type(exc).__name__) from exc

    def get_by_id(self, person_id: UUID) -> Optional[Person]:
        """Return a person by its id, or None if not found.

        Args:
            person_id: UUID of the person to retrieve.

        Returns:
            Person entity or None.
        """
        try:
            with self._engine.connect() as conn:
                row = conn.execute(_SELECT_BY_ID, {"id": str(person_id)}).first()
        except SQLAlchemyError as exc:
            logger.error("Lookup failed: %s", type(exc).__name__)
            raise StoreUnavailableError(type(exc).__name__) from exc

        return _row_to_person(row) if row is not None else None

    def search_by_term(
        self, term: str, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> list[Person]:
        """Return up to limit persons whose searchable text contains term.

        Args:
            term: Case-insensitive substring. Empty matches nothing.
            limit: Maximum number of rows.

        Returns:
            Matching persons in store order.
        """
        if not term:
            return []

        try:
            with self._engine.connect() as conn:
                rows = conn.execute(
                    _SEARCH, {"pattern": like_pattern(term), "limit": limit}
                ).fetchall()
        except SQLAlchemyError as exc:
            logger.error("Search failed: %s", type(exc).__name__)
            raise StoreUnavailableError(type(exc).__name__) from exc

        return [_row_to_person(row) for row in rows]

    def count(self) -> int:
        """Return the total number of persons."""
        try:
            with self._engine.connect() as conn:
                return int(conn.execute(_COUNT).scalar_one())
        except SQLAlchemyError as exc:
            logger.error("Count failed: %s", type(exc).__name__)
            raise StoreUnavailableError(type(exc).__name__) from exc
