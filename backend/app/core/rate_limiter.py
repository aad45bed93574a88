"""
Rate Limiting for Country Explorer API
======================================
Implements a process-wide request limit using slowapi.

Every route shares the default limit (RATE_LIMIT, 100 requests per 15
minutes unless configured). The limit is applied by SlowAPIMiddleware ahead
of routing, so it also guards the auth endpoints against brute force.
Counters live in RATE_LIMIT_STORAGE_URI (in-memory by default, any
`limits` storage URI such as redis:// works).
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.logging_config import logger

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."


def get_client_identifier(request: Request) -> str:
    """Rate limit key: the client IP. Limits run before authentication, so no user is known yet"""
    return f"ip:{get_remote_address(request)}"


# Create limiter instance
limiter = Limiter(
    key_func=get_client_identifier,
    default_limits=[settings.RATE_LIMIT],
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Return the standard error envelope with a Retry-After header"""
    logger.warning(
        f"[RateLimit] Exceeded for {get_client_identifier(request)}: {exc.detail}"
    )

    window_seconds = 60
    limit = getattr(exc, "limit", None)
    if limit is not None and getattr(limit, "limit", None) is not None:
        window_seconds = limit.limit.get_expiry()

    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "message": RATE_LIMIT_MESSAGE,
            "error": "RATE_LIMIT_EXCEEDED",
        },
        headers={"Retry-After": str(window_seconds)},
    )
