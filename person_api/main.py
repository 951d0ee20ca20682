"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Rate limiting
- Logging configuration
- The person repository, built once at startup and shared by all requests

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from slowapi.errors import RateLimitExceeded

from person_api.core.config import Settings, settings as default_settings
from person_api.domain.persons.ports import PersonRepository
from person_api.infrastructure.database import build_engine, check_connection
from person_api.infrastructure.persons.in_memory_person_repository import (
    InMemoryPersonRepository,
)
from person_api.infrastructure.persons.postgres_person_repository import (
    PostgresPersonRepository,
)
from person_api.infrastructure.schema import ensure_schema
from person_api.interfaces.health import router as health_router
from person_api.interfaces.persons.router import router as persons_router
from person_api.shared.errors.handlers import register_error_handlers
from person_api.shared.logging import configure_logging
from person_api.shared.security.rate_limiting import (
    build_limiter,
    build_rate_limit_dependency,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open and close the person store.

    A repository injected through create_app is used as-is. Otherwise
    the configured backend is built here; an unreachable database
    aborts startup.
    """
    app_settings: Settings = app.state.settings
    engine = None

    if getattr(app.state, "person_repository", None) is None:
        if app_settings.storage_backend == "memory":
            logger.warning("Using the in-memory person store. Data is not persisted.")
            app.state.person_repository = InMemoryPersonRepository()
        else:
            engine = build_engine(app_settings)
            check_connection(engine)
            if app_settings.db_bootstrap_schema:
                ensure_schema(engine)
            app.state.person_repository = PostgresPersonRepository(engine)
            logger.info("Person store ready.")

    yield

    if engine is not None:
        engine.dispose()


def create_app(
    settings: Optional[Settings] = None,
    person_repository: Optional[PersonRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and rate limiting.
    This is the composition root of the application.

    Args:
        settings: Settings to use. Defaults to the environment-loaded ones.
        person_repository: Repository to use instead of building one.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, log_sql=settings.log_sql)
    limiter = build_limiter(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
        dependencies=[
            Depends(build_rate_limit_dependency(limiter, settings.rate_limit_default))
        ],
    )
    app.state.settings = settings
    app.state.person_repository = person_repository

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(persons_router)

    return app


app = create_app()
