"""
Use case: Create a person.

Input: CreatePersonCommand (raw payload)
Output: PersonResult
Side effects: Inserts one row in the person store.
Failure cases: ValidationError subclasses, DuplicateNicknameError,
StoreUnavailableError.
"""

import logging
from datetime import date
from typing import Callable
from uuid import UUID, uuid4

from person_api.application.persons.dtos import CreatePersonCommand, PersonResult
from person_api.application.persons.mapping import to_result
from person_api.domain.persons.entities import Person
from person_api.domain.persons.ports import PersonRepository
from person_api.domain.persons.validation import validate_create

logger = logging.getLogger(__name__)


class CreatePersonUseCase:
    """Validates a creation payload and stores the new person.

    Validation runs before any store access. The id is generated here,
    never taken from the client.
    """

    def __init__(
        self,
        person_repo: PersonRepository,
        id_factory: Callable[[], UUID] = uuid4,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._person_repo = person_repo
        self._id_factory = id_factory
        self._clock = clock

    def execute(self, command: CreatePersonCommand) -> PersonResult:
        """Run the create use case.

        Args:
            command: The raw creation payload.

        Returns:
            The stored person.

        Raises:
            ValidationError: If the payload is rejected.
            DuplicateNicknameError: If the nickname is already taken.
        """
        new_person = validate_create(command.payload, today=self._clock())
        person = Person.create(self._id_factory(), new_person)

        self._person_repo.save(person)
        logger.info("Created person id=%s", person.id)

        return to_result(person)
