"""
Use case: Count stored persons.

Input: None
Output: int
Side effects: None.
Failure cases: StoreUnavailableError.
"""

from person_api.domain.persons.ports import PersonRepository


class CountPersonsUseCase:
    """Returns the total number of persons in the store."""

    def __init__(self, person_repo: PersonRepository) -> None:
        self._person_repo = person_repo

    def execute(self) -> int:
        return self._person_repo.count()
