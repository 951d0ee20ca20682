"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
Error responses are bare status codes: no body, no internal details.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from person_api.domain.persons.errors import (
    DuplicateNicknameError,
    MalformedDateError,
    MissingFieldError,
    PersonDomainError,
    PersonNotFoundError,
    StoreUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500
HTTP_503 = 503

# A missing stack is a malformed request, other missing fields are not
MALFORMED_WHEN_MISSING = frozenset({"stack"})


def _status_response(status_code: int, headers: dict[str, str] | None = None) -> Response:
    """Build an empty response carrying only a status code."""
    return Response(status_code=status_code, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> Response:
        """Unparseable bodies, wrong JSON types and missing query params."""
        logger.warning("Malformed request: %d schema errors", len(exc.errors()))
        return _status_response(HTTP_400)

    @app.exception_handler(MissingFieldError)
    async def handle_missing_field(
        _request: Request, exc: MissingFieldError
    ) -> Response:
        """Handle absent or null required fields."""
        logger.warning("Missing field: %s", exc.field)
        if exc.field in MALFORMED_WHEN_MISSING:
            return _status_response(HTTP_400)
        return _status_response(HTTP_422)

    @app.exception_handler(MalformedDateError)
    async def handle_malformed_date(
        _request: Request, exc: MalformedDateError
    ) -> Response:
        """Handle birth dates not shaped like YYYY-MM-DD."""
        logger.warning("Malformed birth date")
        return _status_response(HTTP_400)

    @app.exception_handler(ValidationError)
    async def handle_validation(
        _request: Request, exc: ValidationError
    ) -> Response:
        """Handle semantically invalid payloads."""
        logger.warning("Rejected payload: %s", type(exc).__name__)
        return _status_response(HTTP_422)

    @app.exception_handler(DuplicateNicknameError)
    async def handle_duplicate_nickname(
        _request: Request, exc: DuplicateNicknameError
    ) -> Response:
        """Handle nickname uniqueness violations."""
        logger.warning("Duplicate nickname rejected")
        return _status_response(HTTP_422)

    @app.exception_handler(PersonNotFoundError)
    async def handle_person_not_found(
        _request: Request, exc: PersonNotFoundError
    ) -> Response:
        """Handle missing persons."""
        logger.info("Person not found: %s", exc.person_id)
        return _status_response(HTTP_404)

    @app.exception_handler(StoreUnavailableError)
    async def handle_store_unavailable(
        _request: Request, exc: StoreUnavailableError
    ) -> Response:
        """Handle store failures on routes that do not pin their own status."""
        logger.error("Person store unavailable: %s", exc.reason)
        return _status_response(HTTP_503)

    @app.exception_handler(PersonDomainError)
    async def handle_person_domain(
        _request: Request, exc: PersonDomainError
    ) -> Response:
        """Catch-all for unhandled persons domain errors."""
        logger.error("Unhandled persons domain error: %s", exc.message)
        return _status_response(HTTP_500)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Strip the default JSON detail from framework HTTP errors."""
        return _status_response(exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> Response:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _status_response(HTTP_500)
