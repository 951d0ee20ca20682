"""
Use case: Search persons by term.

Input: SearchPersonsQuery (term, limit)
Output: list[PersonResult], possibly empty
Side effects: None.
Failure cases: StoreUnavailableError.
"""

import logging

from person_api.application.persons.dtos import PersonResult, SearchPersonsQuery
from person_api.application.persons.mapping import to_result
from person_api.domain.persons.ports import PersonRepository

logger = logging.getLogger(__name__)


class SearchPersonsUseCase:
    """Runs a case-insensitive substring search over name, nickname and stack."""

    def __init__(self, person_repo: PersonRepository) -> None:
        self._person_repo = person_repo

    def execute(self, query: SearchPersonsQuery) -> list[PersonResult]:
        """Run the search. No match is an empty list, not an error."""
        if not query.term:
            return []

        persons = self._person_repo.search_by_term(query.term, limit=query.limit)
        logger.debug("Search matched %d persons", len(persons))
        return [to_result(p) for p in persons]
