"""
Dependency injection for the persons bounded context.

Provides FastAPI dependency functions that wire the repository built at
startup into use cases via constructor injection.
"""

from fastapi import Depends, Request

from person_api.application.persons.count_persons import CountPersonsUseCase
from person_api.application.persons.create_person import CreatePersonUseCase
from person_api.application.persons.get_person import GetPersonUseCase
from person_api.application.persons.search_persons import SearchPersonsUseCase
from person_api.core.config import Settings
from person_api.domain.persons.ports import PersonRepository


def get_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_person_repository(request: Request) -> PersonRepository:
    """Return the repository built once at application startup."""
    return request.app.state.person_repository


def get_create_person_use_case(
    person_repo: PersonRepository = Depends(get_person_repository),
) -> CreatePersonUseCase:
    """Build CreatePersonUseCase with its infrastructure dependencies."""
    return CreatePersonUseCase(person_repo=person_repo)


def get_get_person_use_case(
    person_repo: PersonRepository = Depends(get_person_repository),
) -> GetPersonUseCase:
    """Build GetPersonUseCase with its infrastructure dependencies."""
    return GetPersonUseCase(person_repo=person_repo)


def get_search_persons_use_case(
    person_repo: PersonRepository = Depends(get_person_repository),
) -> SearchPersonsUseCase:
    """Build SearchPersonsUseCase with its infrastructure dependencies."""
    return SearchPersonsUseCase(person_repo=person_repo)


def get_count_persons_use_case(
    person_repo: PersonRepository = Depends(get_person_repository),
) -> CountPersonsUseCase:
    """Build CountPersonsUseCase with its infrastructure dependencies."""
    return CountPersonsUseCase(person_repo=person_repo)
