"""
Use case: Fetch a person by id.

Input: GetPersonQuery (raw id text)
Output: PersonResult
Side effects: None.
Failure cases: PersonNotFoundError, StoreUnavailableError.
"""

import logging
from uuid import UUID

from person_api.application.persons.dtos import GetPersonQuery, PersonResult
from person_api.application.persons.mapping import to_result
from person_api.domain.persons.errors import PersonNotFoundError
from person_api.domain.persons.ports import PersonRepository

logger = logging.getLogger(__name__)


class GetPersonUseCase:
    """Looks up a single person.

    An id that is not a UUID cannot exist in the store, so it is
    reported as not found without a round-trip.
    """

    def __init__(self, person_repo: PersonRepository) -> None:
        self._person_repo = person_repo

    def execute(self, query: GetPersonQuery) -> PersonResult:
        """Run the lookup.

        Raises:
            PersonNotFoundError: If no person has this id.
        """
        try:
            person_id = UUID(query.person_id)
        except ValueError as exc:
            raise PersonNotFoundError(query.person_id) from exc

        person = self._person_repo.get_by_id(person_id)
        if person is None:
            raise PersonNotFoundError(query.person_id)

        logger.debug("Fetched person id=%s", person_id)
        return to_result(person)
