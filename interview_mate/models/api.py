"""Pydantic request and response models for the HTTP API."""

from __future__ import annotations

from pydantic import Field

from interview_mate.models.form import FormState
from interview_mate.models.interview import CamelModel, InterviewRecord, InterviewType, Role
from interview_mate.services.summary_format import SummaryBlock

# ============================================
# Session display
# ============================================


class MeResponse(CamelModel):
    user_id: str
    email: str | None
    display_name: str  # local part of the email
    role: Role


# ============================================
# List view
# ============================================


class RecordSummary(CamelModel):
    """One row of the records list."""

    id: str
    name: str
    position: str
    store: str
    date: str
    interview_type: InterviewType
    answered_count: int
    has_ai_summary: bool
    created_at: int

    @classmethod
    def from_record(cls, record: InterviewRecord) -> RecordSummary:
        info = record.basic_info
        return cls(
            id=record.id,
            name=info.name,
            position=info.position,
            store=info.store,
            date=info.date,
            interview_type=info.interview_type,
            answered_count=record.answered_count,
            has_ai_summary=bool(record.ai_summary),
            created_at=record.created_at,
        )


class RecordListResponse(CamelModel):
    query: str
    total: int  # records visible to the caller before filtering
    records: list[RecordSummary]


class RecordDeleteResponse(CamelModel):
    status: str
    record_id: str


# ============================================
# Form view
# ============================================


class CreateFormRequest(CamelModel):
    interview_type: InterviewType = InterviewType.STANDARD


class SaveFormRequest(CamelModel):
    close: bool = False


class StageTab(CamelModel):
    id: str
    title: str
    step: int  # 1-based
    active: bool


class QuestionView(CamelModel):
    id: str
    text: str
    checkpoints: list[str]
    answer: str
    answered: bool
    expanded: bool
    focused: bool


class SectionView(CamelModel):
    id: str
    title: str
    questions: list[QuestionView] = Field(default_factory=list)
    notices: list[str] = Field(default_factory=list)
    notice_checks: list[bool] = Field(default_factory=list)
    consent: bool | None = None  # None when the section has no notices


class FormView(CamelModel):
    """Everything the form screen renders for one open session."""

    session_id: str
    closed: bool = False
    state: FormState
    stages: list[StageTab]
    step_label: str  # e.g. "Step 2 of 4"
    is_first_stage: bool
    is_last_stage: bool
    sections: list[SectionView]
    ai_summary_blocks: list[SummaryBlock]


class EventResponse(CamelModel):
    """Result of an event; `form` is None once the session closed."""

    closed: bool
    form: FormView | None = None
    record: InterviewRecord | None = None


class SaveResponse(CamelModel):
    closed: bool
    message: str | None
    record: InterviewRecord
