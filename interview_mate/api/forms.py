"""Interview form endpoints: open, edit through events, save, analyze, cancel."""

from typing import Annotated

from fastapi import APIRouter, Body, Request, status
from structlog import get_logger

from interview_mate.api.deps import Auth, Sessions
from interview_mate.core.config import settings
from interview_mate.middleware.rate_limit import limiter
from interview_mate.models.api import (
    CreateFormRequest,
    EventResponse,
    FormView,
    SaveFormRequest,
    SaveResponse,
)
from interview_mate.models.form import FormEventUnion
from interview_mate.services.form_view import build_form_view

logger = get_logger()
router = APIRouter(prefix="/forms", tags=["forms"])

EventBody = Annotated[FormEventUnion, Body(discriminator="type")]


@router.post("", response_model=FormView, status_code=status.HTTP_201_CREATED)
async def create_form(body: CreateFormRequest, auth: Auth, sessions: Sessions) -> FormView:
    """Open a blank form for a new interview."""
    session = sessions.open_new(auth, body.interview_type)
    return build_form_view(session)


@router.post(
    "/from-record/{record_id}", response_model=FormView, status_code=status.HTTP_201_CREATED
)
async def open_record(record_id: str, auth: Auth, sessions: Sessions) -> FormView:
    """
    Open a stored record for editing.

    Raises:
        NotFoundError: 404 if the record is missing or belongs to another manager
    """
    session = await sessions.open_existing(auth, record_id)
    return build_form_view(session)


@router.get("/{session_id}", response_model=FormView)
async def get_form(session_id: str, auth: Auth, sessions: Sessions) -> FormView:
    return build_form_view(sessions.get(auth, session_id))


@router.post("/{session_id}/events", response_model=EventResponse)
async def apply_event(
    session_id: str, event: EventBody, auth: Auth, sessions: Sessions
) -> EventResponse:
    """
    Apply one form event.

    An `advance` on the last stage saves the record and closes the form; the
    response then carries the stored record instead of the form view.
    """
    result = await sessions.apply(auth, session_id, event)

    if result.closed:
        return EventResponse(closed=True, record=result.saved.record if result.saved else None)

    return EventResponse(closed=False, form=build_form_view(sessions.get(auth, session_id)))


@router.post("/{session_id}/save", response_model=SaveResponse)
async def save_form(
    session_id: str, body: SaveFormRequest, auth: Auth, sessions: Sessions
) -> SaveResponse:
    """Save the form; with `close` the session ends after a successful write."""
    result = await sessions.save(auth, session_id, close=body.close)
    return SaveResponse(closed=result.closed, message=result.message, record=result.record)


@router.post("/{session_id}/analyze", response_model=FormView)
@limiter.limit(settings.analyze_rate_limit)
async def analyze_form(
    request: Request, session_id: str, auth: Auth, sessions: Sessions
) -> FormView:
    """Generate the AI summary, store it on the form and save the record."""
    session = await sessions.analyze(auth, session_id)
    return build_form_view(session)


@router.delete("/{session_id}")
async def cancel_form(session_id: str, auth: Auth, sessions: Sessions) -> dict[str, str]:
    """Discard the form without writing anything."""
    sessions.cancel(auth, session_id)
    return {"status": "cancelled", "session_id": session_id}
