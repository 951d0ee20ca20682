"""
Data Transfer Objects for the persons application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import UUID

from person_api.domain.persons.entities import PersonPayload
from person_api.domain.persons.ports import DEFAULT_SEARCH_LIMIT


@dataclass(frozen=True)
class CreatePersonCommand:
    """Input DTO for creating a person.

    Attributes:
        payload: Raw fields as received, absent and null kept apart.
    """

    payload: PersonPayload


@dataclass(frozen=True)
class GetPersonQuery:
    """Input DTO for fetching one person.

    Attributes:
        person_id: Identifier as received in the URL, not yet parsed.
    """

    person_id: str


@dataclass(frozen=True)
class SearchPersonsQuery:
    """Input DTO for a term search.

    Attributes:
        term: Case-insensitive substring to match.
        limit: Maximum number of results.
    """

    term: str
    limit: int = DEFAULT_SEARCH_LIMIT


@dataclass(frozen=True)
class PersonResult:
    """Output DTO for a single person.

    Attributes:
        id: Person identifier.
        nickname: Unique nickname.
        name: Full name.
        birth_date: Date of birth.
        stack: Technology tags, None for rows without a stack.
    """

    id: UUID
    nickname: str
    name: str
    birth_date: date
    stack: Optional[list[str]]
