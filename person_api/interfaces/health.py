"""
Health check router.

Provides a simple health endpoint for liveness and readiness checks.
No business logic. Returns application status and version.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from person_api.core.config import Settings
from person_api.interfaces.persons.dependencies import get_settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)
