"""
Domain entities for the persons bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

import json
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional
from uuid import UUID


class _Missing:
    """Marker for a field that was not present in the input at all."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True)
class PersonPayload:
    """Unvalidated creation input.

    Each field is MISSING when absent from the request, None when sent
    as null, and the raw value otherwise.
    """

    nickname: Any = MISSING
    name: Any = MISSING
    birth_date: Any = MISSING
    stack: Any = MISSING


@dataclass(frozen=True)
class NewPerson:
    """A creation payload that passed validation."""

    nickname: str
    name: str
    birth_date: date
    stack: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Person:
    """A stored person.

    stack is None only for rows written outside this service.
    """

    id: UUID
    nickname: str
    name: str
    birth_date: date
    stack: Optional[list[str]] = None

    @classmethod
    def create(cls, person_id: UUID, new_person: NewPerson) -> "Person":
        """Build a Person from validated input and a freshly generated id."""
        return cls(
            id=person_id,
            nickname=new_person.nickname,
            name=new_person.name,
            birth_date=new_person.birth_date,
            stack=list(new_person.stack),
        )


def searchable_text(name: str, nickname: str, stack: Optional[list[str]]) -> str:
    """Return the text a term search matches against.

    Mirrors the store's generated column: name, nickname and the JSON text
    of the stack concatenated, lower-cased for case-insensitive matching.
    """
    stack_text = json.dumps(stack, ensure_ascii=False) if stack is not None else ""
    return f"{name}{nickname}{stack_text}".lower()
