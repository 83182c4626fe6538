"""FastAPI dependencies shared by the routers."""

from typing import Annotated

from fastapi import Depends, Header

from interview_mate.models.auth import AuthContext
from interview_mate.services.auth import resolve_auth_context
from interview_mate.services.form_sessions import FormSessionManager, form_sessions
from interview_mate.services.records import RecordStore, record_store


async def get_auth_context(
    authorization: Annotated[str | None, Header()] = None,
) -> AuthContext:
    """Authenticated caller; raises AuthenticationError (401) without a valid token."""
    return await resolve_auth_context(authorization)


def get_record_store() -> RecordStore:
    return record_store


def get_form_sessions() -> FormSessionManager:
    return form_sessions


Auth = Annotated[AuthContext, Depends(get_auth_context)]
Store = Annotated[RecordStore, Depends(get_record_store)]
Sessions = Annotated[FormSessionManager, Depends(get_form_sessions)]
