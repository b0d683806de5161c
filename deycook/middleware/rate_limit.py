"""Rate limiting using slowapi."""

from fastapi import Request
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address

from deycook.config import get_settings


def create_limiter(rate_limit_per_hour: int) -> Limiter:
    """Build an in-memory limiter keyed by client address."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[f"{rate_limit_per_hour}/hour"],
        storage_uri="memory://",
    )


limiter = create_limiter(get_settings().rate_limit_per_hour)


def get_rate_limit_exceeded_handler():
    """Get rate limit exceeded handler."""
    return _rate_limit_exceeded_handler


def rate_limit_dependency(request: Request) -> None:
    """
    Rate limit dependency for FastAPI.

    Raises:
        RateLimitExceeded: If rate limit is exceeded
    """
    # slowapi exposes no public check; `_check_request_limit` raises when the limit is hit
    limiter._check_request_limit(request, endpoint_func=None)
