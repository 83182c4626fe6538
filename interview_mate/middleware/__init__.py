"""HTTP middleware for cross-cutting concerns."""

from interview_mate.middleware.cors import setup_cors
from interview_mate.middleware.errors import error_response, setup_exception_handlers
from interview_mate.middleware.logging import LoggingMiddleware
from interview_mate.middleware.rate_limit import limiter, setup_rate_limiting
from interview_mate.middleware.request_id import RequestIDMiddleware

__all__ = [
    "RequestIDMiddleware",
    "LoggingMiddleware",
    "error_response",
    "setup_exception_handlers",
    "setup_cors",
    "setup_rate_limiting",
    "limiter",
]
