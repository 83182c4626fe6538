"""Rate limiting for endpoints that call paid services."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from structlog import get_logger

logger = get_logger()


def get_limiter() -> Limiter:
    """Limiter keyed by client IP address."""
    return Limiter(key_func=get_remote_address)


# Shared instance; routes decorate with @limiter.limit(...)
limiter = get_limiter()


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Render a rate-limit rejection in the standard error envelope."""
    request_id = getattr(request.state, "request_id", None)
    logger.warning("rate_limit_exceeded", path=request.url.path, limit=str(exc.detail))
    return JSONResponse(
        status_code=429,
        content={
            "error": {
                "code": "RATE_LIMITED",
                "message": f"Rate limit exceeded: {exc.detail}",
                "request_id": request_id,
            }
        },
    )


def setup_rate_limiting(app: FastAPI) -> Limiter:
    """Attach the shared limiter to the app and register its error handler."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)  # type: ignore[arg-type]
    return limiter
