"""Resolve the authenticated user and role for a request."""

from __future__ import annotations

from structlog import get_logger

from interview_mate.clients.supabase_auth import supabase_auth
from interview_mate.core.database import db
from interview_mate.core.errors import AuthenticationError, service_boundary
from interview_mate.models.auth import AuthContext
from interview_mate.models.interview import Role

logger = get_logger()


def parse_bearer_token(authorization: str | None) -> str:
    """
    Extract the token from an Authorization header.

    Raises:
        AuthenticationError: If the header is missing or not a bearer token
    """
    if not authorization:
        raise AuthenticationError("Missing Authorization header")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Authorization header must be a bearer token")

    return token.strip()


@service_boundary
async def fetch_role(user_id: str) -> Role:
    """Role from the profiles table; users without a profile are managers."""
    value = await db.fetchval("SELECT role FROM profiles WHERE id = $1", user_id)
    if value is None:
        logger.info("profile_missing_default_role", user_id=user_id)
        return Role.MANAGER

    try:
        return Role(value)
    except ValueError:
        logger.warning("profile_role_unknown", user_id=user_id, role=value)
        return Role.MANAGER


@service_boundary
async def resolve_auth_context(authorization: str | None) -> AuthContext:
    """
    Validate the bearer token with Supabase Auth and load the user's role.

    Raises:
        AuthenticationError: If the token is missing or rejected
    """
    token = parse_bearer_token(authorization)

    user = await supabase_auth.get_user(token)
    if not user or not user.get("id"):
        raise AuthenticationError("Invalid or expired access token")

    user_id = str(user["id"])
    role = await fetch_role(user_id)

    return AuthContext(user_id=user_id, email=user.get("email"), role=role)
