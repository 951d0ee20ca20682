"""
Port interfaces (ABCs) for the persons bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from person_api.domain.persons.entities import Person

DEFAULT_SEARCH_LIMIT = 50


class PersonRepository(ABC):
    """Port for persisting and querying persons."""

    @abstractmethod
    def save(self, person: Person) -> None:
        """Persist a new person.

        Args:
            person: Person entity with a freshly generated id.

        Raises:
            DuplicateNicknameError: If the nickname is already stored.
            StoreUnavailableError: If the store fails for any other reason.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, person_id: UUID) -> Optional[Person]:
        """Return a person by id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def search_by_term(
        self, term: str, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> list[Person]:
        """Return persons whose searchable text contains term.

        Matching is a case-insensitive substring test. Result order is
        whatever the store yields. An empty term matches nothing.

        Args:
            term: Substring to look for.
            limit: Maximum number of persons to return.

        Returns:
            Up to limit matching persons, possibly empty.
        """
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """Return the total number of stored persons."""
        raise NotImplementedError
