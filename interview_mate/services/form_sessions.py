"""Open interview forms and their save / analyze side effects."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Any
from uuid import uuid4

from pydantic import BaseModel
from structlog import get_logger

from interview_mate.core.config import settings
from interview_mate.core.errors import NotFoundError, PermissionDeniedError, ValidationError
from interview_mate.models.auth import AuthContext
from interview_mate.models.form import FormState
from interview_mate.models.interview import BasicInfo, InterviewRecord, InterviewType
from interview_mate.questionnaire import Questionnaire, get_questionnaire
from interview_mate.services.form import FormEffect, build_record, initial_state, transition
from interview_mate.services.records import RecordStore, record_store
from interview_mate.services.summary import summarize_interview

logger = get_logger()

SAVED_MESSAGE = "임시 저장되었습니다."
ANALYZE_MISSING_NAME_MESSAGE = "분석을 위해 기본 정보를 먼저 입력해주세요."

Summarizer = Callable[[BasicInfo, dict[str, str], Questionnaire], Awaitable[str]]


class FormSession:
    """One open form: its state, questionnaire and owner."""

    def __init__(
        self,
        session_id: str,
        owner: AuthContext,
        questionnaire: Questionnaire,
        state: FormState,
        now: float,
    ) -> None:
        self.session_id = session_id
        self.owner = owner
        self.questionnaire = questionnaire
        self.state = state
        self.last_activity = now
        self.lock = asyncio.Lock()


class SaveResult(BaseModel):
    """Outcome of a save request."""

    record: InterviewRecord
    closed: bool
    message: str | None = None


class EventResult(BaseModel):
    """Outcome of applying one event; `saved` is set when it triggered save-and-close."""

    state: FormState
    closed: bool = False
    saved: SaveResult | None = None


class FormSessionManager:
    """
    Registry of open forms.

    Requests for one session are serialized by its lock; each save or analyze
    is a single sequential store call.
    """

    def __init__(
        self,
        store: RecordStore,
        summarizer: Summarizer = summarize_interview,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.store = store
        self.summarizer = summarizer
        self.clock = clock
        self.sessions: dict[str, FormSession] = {}

    # ----------------------------------------
    # Lifecycle
    # ----------------------------------------

    def open_new(self, auth: AuthContext, interview_type: InterviewType) -> FormSession:
        """Start a blank form for a new interview."""
        questionnaire = get_questionnaire(interview_type)
        return self._register(auth, questionnaire, initial_state(questionnaire))

    async def open_existing(self, auth: AuthContext, record_id: str) -> FormSession:
        """
        Open a stored record for editing.

        Raises:
            NotFoundError: If the record is missing or not visible to the user
        """
        record = await self.store.get(auth, record_id)
        if record is None:
            logger.warning("form_open_record_missing", record_id=record_id)
            raise NotFoundError("기록을 불러올 수 없습니다.", context={"record_id": record_id})

        questionnaire = get_questionnaire(record.basic_info.interview_type)
        return self._register(auth, questionnaire, initial_state(questionnaire, record))

    def _register(
        self, auth: AuthContext, questionnaire: Questionnaire, state: FormState
    ) -> FormSession:
        session = FormSession(str(uuid4()), auth, questionnaire, state, self.clock())
        self.sessions[session.session_id] = session
        logger.info(
            "form_opened",
            session_id=session.session_id,
            record_id=state.record_id,
            interview_type=questionnaire.interview_type,
            user_id=auth.user_id,
        )
        return session

    def get(self, auth: AuthContext, session_id: str) -> FormSession:
        """
        Look up an open form owned by the caller.

        Raises:
            NotFoundError: If no such session is open
            PermissionDeniedError: If the session belongs to another user
        """
        session = self.sessions.get(session_id)
        if session is None:
            raise NotFoundError(
                f"Form session {session_id} not found", context={"session_id": session_id}
            )
        if session.owner.user_id != auth.user_id:
            raise PermissionDeniedError(
                "Form session belongs to another user", context={"session_id": session_id}
            )
        return session

    def cancel(self, auth: AuthContext, session_id: str) -> None:
        """Close a form without writing anything."""
        self.get(auth, session_id)
        self.sessions.pop(session_id, None)
        logger.info("form_cancelled", session_id=session_id)

    def purge_idle(self, max_idle_seconds: float) -> int:
        """Drop sessions idle for longer than max_idle_seconds."""
        cutoff = self.clock() - max_idle_seconds
        stale = [sid for sid, s in self.sessions.items() if s.last_activity < cutoff]
        for sid in stale:
            del self.sessions[sid]

        if stale:
            logger.info("form_sessions_purged", count=len(stale))
        return len(stale)

    # ----------------------------------------
    # Actions
    # ----------------------------------------

    async def apply(self, auth: AuthContext, session_id: str, event: Any) -> EventResult:
        """Apply one event; advancing past the last stage saves and closes."""
        session = self.get(auth, session_id)

        async with session.lock:
            session.last_activity = self.clock()
            new_state, effect = transition(session.state, event, session.questionnaire)
            session.state = new_state

        if effect is FormEffect.SAVE_AND_CLOSE:
            saved = await self.save(auth, session_id, close=True)
            return EventResult(state=new_state, closed=True, saved=saved)

        return EventResult(state=new_state)

    async def save(self, auth: AuthContext, session_id: str, close: bool) -> SaveResult:
        """
        Persist the form as a record.

        The record id is fixed for the session, so repeated saves update the
        same row.

        Raises:
            ValidationError: If the candidate name is blank (nothing is stored)
            DatabaseError: If the store rejects the write (state is kept)
        """
        session = self.get(auth, session_id)

        async with session.lock:
            session.last_activity = self.clock()
            stored = await self._persist(session)

            if close:
                self.sessions.pop(session_id, None)

        logger.info("form_saved", session_id=session_id, record_id=stored.id, closed=close)
        return SaveResult(record=stored, closed=close, message=None if close else SAVED_MESSAGE)

    async def analyze(self, auth: AuthContext, session_id: str) -> FormSession:
        """
        Request an AI summary, store it on the form and save the record.

        Raises:
            ValidationError: If the candidate name is blank
            DatabaseError: If the store rejects the write. The summary stays
                in the form state so a retried save needs no new AI call.
        """
        session = self.get(auth, session_id)

        async with session.lock:
            session.last_activity = self.clock()
            state = session.state

            if not state.basic_info.name.strip():
                raise ValidationError(ANALYZE_MISSING_NAME_MESSAGE, context={"field": "name"})

            summary = await self.summarizer(
                state.basic_info, dict(state.answers), session.questionnaire
            )
            session.state = session.state.model_copy(update={"ai_summary": summary})

            await self._persist(session)

        logger.info("form_analyzed", session_id=session_id, record_id=state.record_id)
        return session

    async def _persist(self, session: FormSession) -> InterviewRecord:
        record = build_record(session.state)
        stored = await self.store.upsert(session.owner, record)
        session.state = session.state.model_copy(update={"created_at": stored.created_at})
        return stored


# Shared registry used by the API
form_sessions = FormSessionManager(record_store)


async def purge_idle_form_sessions() -> None:
    """Scheduled job: drop forms idle longer than the configured TTL."""
    form_sessions.purge_idle(settings.form_session_ttl_minutes * 60)
