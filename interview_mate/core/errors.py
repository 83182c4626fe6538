"""
Errors raised by services, and the decorator that produces them from
driver and HTTP client failures.

Every error carries a stable `code` (used in the API error envelope) and a
`context` dict for structured logs.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

import aiohttp
import asyncpg
from structlog import get_logger

logger = get_logger()

P = ParamSpec("P")
T = TypeVar("T")


class DomainError(Exception):
    """Base class; unknown failures surface with this code."""

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class NotFoundError(DomainError):
    """Record or form session does not exist for this caller."""

    code = "NOT_FOUND"


class ValidationError(DomainError):
    """Rejected input, e.g. saving without a candidate name."""

    code = "VALIDATION_ERROR"


class AuthenticationError(DomainError):
    code = "AUTHENTICATION_ERROR"


class PermissionDeniedError(DomainError):
    """Caller is signed in but does not own the record or session."""

    code = "PERMISSION_DENIED"


class ExternalServiceError(DomainError):
    """Supabase Auth or the Gemini API failed or answered unexpectedly."""

    code = "EXTERNAL_SERVICE_ERROR"

    def __init__(
        self,
        message: str,
        service: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context)
        self.service = service
        if service:
            self.context["service"] = service


class DatabaseError(DomainError):
    code = "DATABASE_ERROR"


def service_boundary(func: Callable[P, T]) -> Callable[P, T]:
    """
    Wrap an async service function so callers only ever see DomainError.

    - DomainError subclasses pass through untouched
    - aiohttp.ClientError becomes ExternalServiceError
    - asyncpg errors and socket errors become DatabaseError
    - anything else is logged with its traceback and becomes DomainError
    """

    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        name = func.__name__
        try:
            return await func(*args, **kwargs)  # type: ignore[misc]
        except DomainError:
            raise
        except aiohttp.ClientError as e:
            # Checked before OSError: aiohttp connection errors subclass it
            logger.error("external_call_failed", function=name, error=str(e))
            raise ExternalServiceError(str(e), context={"function": name}) from e
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error("record_store_failed", function=name, error=str(e))
            raise DatabaseError(str(e), context={"function": name}) from e
        except Exception as e:
            logger.exception("service_failed", function=name)
            raise DomainError(str(e), context={"function": name, "type": type(e).__name__}) from e

    return wrapper  # type: ignore[return-value]
