"""
FastAPI router for the persons bounded context.

All routes delegate to use cases. No business logic here.
Domain errors are mapped by the centralized error handlers; read routes
additionally pin the status used when the store fails.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse, Response

from person_api.application.persons.count_persons import CountPersonsUseCase
from person_api.application.persons.create_person import CreatePersonUseCase
from person_api.application.persons.dtos import (
    CreatePersonCommand,
    GetPersonQuery,
    SearchPersonsQuery,
)
from person_api.application.persons.get_person import GetPersonUseCase
from person_api.application.persons.search_persons import SearchPersonsUseCase
from person_api.core.config import Settings
from person_api.domain.persons.errors import StoreUnavailableError
from person_api.interfaces.persons.dependencies import (
    get_count_persons_use_case,
    get_create_person_use_case,
    get_get_person_use_case,
    get_search_persons_use_case,
    get_settings,
)
from person_api.interfaces.persons.schemas import (
    CreatePersonRequest,
    PersonResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/persons", tags=["persons"])


@contextmanager
def store_failure_status(status_code: int) -> Iterator[None]:
    """Report a store failure inside the block as a bare status code."""
    try:
        yield
    except StoreUnavailableError as exc:
        logger.error("Store failure answered with %d: %s", status_code, exc.reason)
        raise HTTPException(status_code=status_code) from exc


@router.post(
    "",
    status_code=201,
    response_class=Response,
    responses={400: {}, 422: {}},
    summary="Create a person",
    description="Validate and store a person. The new resource is in the Location header.",
)
def create_person(
    request: CreatePersonRequest,
    use_case: CreatePersonUseCase = Depends(get_create_person_use_case),
) -> Response:
    """Create a person and point the client at it."""
    result = use_case.execute(CreatePersonCommand(payload=request.to_payload()))
    return Response(status_code=201, headers={"Location": f"/persons/{result.id}"})


@router.get(
    "/count",
    response_class=PlainTextResponse,
    summary="Count persons",
    description="Total number of stored persons, as plain text.",
)
def count_persons(
    use_case: CountPersonsUseCase = Depends(get_count_persons_use_case),
) -> PlainTextResponse:
    """Return the person count."""
    with store_failure_status(400):
        total = use_case.execute()
    return PlainTextResponse(str(total))


@router.get(
    "/{person_id}",
    response_model=PersonResponse,
    responses={404: {}},
    summary="Get a person",
)
def get_person(
    person_id: str,
    use_case: GetPersonUseCase = Depends(get_get_person_use_case),
) -> PersonResponse:
    """Fetch a single person by id."""
    with store_failure_status(404):
        result = use_case.execute(GetPersonQuery(person_id=person_id))
    return PersonResponse.from_result(result)


@router.get(
    "",
    response_model=list[PersonResponse],
    responses={400: {}},
    summary="Search persons",
    description="Case-insensitive substring search over name, nickname and stack.",
)
def search_persons(
    t: str = Query(..., description="Search term"),
    settings: Settings = Depends(get_settings),
    use_case: SearchPersonsUseCase = Depends(get_search_persons_use_case),
) -> list[PersonResponse]:
    """Search persons by term."""
    with store_failure_status(400):
        results = use_case.execute(
            SearchPersonsQuery(term=t, limit=settings.search_limit)
        )
    return [PersonResponse.from_result(r) for r in results]
