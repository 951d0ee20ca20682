"""
Adapter: In-memory person repository.

Implements PersonRepository port without a database. Keeps the same
guarantees as the PostgreSQL adapter: unique nicknames and a searchable
text column computed once at insert time.
"""

import threading
from typing import Optional
from uuid import UUID

from person_api.domain.persons.entities import Person, searchable_text
from person_api.domain.persons.errors import DuplicateNicknameError
from person_api.domain.persons.ports import DEFAULT_SEARCH_LIMIT, PersonRepository


class InMemoryPersonRepository(PersonRepository):
    """Process-local person store guarded by a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._persons: dict[UUID, Person] = {}
        self._nicknames: set[str] = set()
        self._searchable: dict[UUID, str] = {}

    def save(self, person: Person) -> None:
        with self._lock:
            if person.nickname in self._nicknames:
                raise DuplicateNicknameError(person.nickname)
            self._persons[person.id] = person
            self._nicknames.add(person.nickname)
            self._searchable[person.id] = searchable_text(
                person.name, person.nickname, person.stack
            )

    def get_by_id(self, person_id: UUID) -> Optional[Person]:
        with self._lock:
            return self._persons.get(person_id)

    def search_by_term(
        self, term: str, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> list[Person]:
        if not term:
            return []

        needle = term.lower()
        matches: list[Person] = []
        with self._lock:
            for person_id, haystack in self._searchable.items():
                if len(matches) >= limit:
                    break
                if needle in haystack:
                    matches.append(self._persons[person_id])
        return matches

    def count(self) -> int:
        with self._lock:
            return len(self._persons)
