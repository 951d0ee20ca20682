"""Entity-to-DTO mapping shared by the persons use cases."""

from person_api.application.persons.dtos import PersonResult
from person_api.domain.persons.entities import Person


def to_result(person: Person) -> PersonResult:
    return PersonResult(
        id=person.id,
        nickname=person.nickname,
        name=person.name,
        birth_date=person.birth_date,
        stack=list(person.stack) if person.stack is not None else None,
    )
