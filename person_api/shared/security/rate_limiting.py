"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client limit on every endpoint.
The limit runs as an application-wide dependency, so it applies to
every route no matter how routers are mounted.
Disabled unless settings turn it on.
"""

import logging
from typing import Awaitable, Callable

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import Response

from person_api.core.config import Settings

logger = logging.getLogger(__name__)


def build_limiter(settings: Settings) -> Limiter:
    """Build the application limiter, keyed by client address.

    Args:
        settings: Application settings carrying the on/off switch.

    Returns:
        A Limiter with its own in-memory counters.
    """
    return Limiter(
        key_func=get_remote_address,
        enabled=settings.rate_limit_enabled,
    )


def build_rate_limit_dependency(
    limiter: Limiter, limit: str
) -> Callable[[Request, Response], Awaitable[None]]:
    """Build a dependency that charges each request against limit.

    Counters are kept per client address and per request path.

    Args:
        limiter: The application limiter.
        limit: A slowapi limit string such as "600/minute".

    Returns:
        An async callable for FastAPI's app-level dependencies.
    """

    @limiter.limit(limit)
    async def enforce_rate_limit(request: Request, response: Response) -> None:
        return None

    return enforce_rate_limit


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> Response:
    """Answer a client over its limit with a bare 429."""
    logger.warning("Rate limit exceeded: %s", exc.detail)
    return Response(status_code=429)
