"""Pydantic models for interview form state and events."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import ConfigDict, Field

from interview_mate.models.interview import (
    Acknowledgement,
    BasicInfo,
    CamelModel,
    InterviewType,
    ResumeAttachment,
)

# ============================================
# State
# ============================================


class FormState(CamelModel):
    """Immutable snapshot of an open interview form."""

    model_config = ConfigDict(frozen=True)

    record_id: str
    interview_type: InterviewType
    active_stage_id: str
    basic_info: BasicInfo
    answers: dict[str, str] = Field(default_factory=dict)
    acknowledgements: dict[str, Acknowledgement] = Field(default_factory=dict)
    expanded_questions: tuple[str, ...] = ()
    focused_question_id: str | None = None
    resume: ResumeAttachment | None = None
    ai_summary: str = ""
    created_at: int | None = None  # pinned on first save


class BasicInfoUpdate(CamelModel):
    """Partial basic-info change; unset fields are left untouched."""

    name: str | None = None
    position: str | None = None
    store: str | None = None
    date: str | None = None
    interviewer: str | None = None
    visa_status: str | None = None
    visa_expiry: str | None = None
    contact: str | None = None
    has_sushi_experience: bool | None = None


# ============================================
# Events
# ============================================


class Advance(CamelModel):
    type: Literal["advance"] = "advance"


class Retreat(CamelModel):
    type: Literal["retreat"] = "retreat"


class Jump(CamelModel):
    type: Literal["jump"] = "jump"
    stage_id: str


class EditAnswer(CamelModel):
    type: Literal["edit_answer"] = "edit_answer"
    question_id: str
    text: str


class ToggleExpand(CamelModel):
    type: Literal["toggle_expand"] = "toggle_expand"
    question_id: str


class SetNotice(CamelModel):
    type: Literal["set_notice"] = "set_notice"
    section_id: str
    index: int
    checked: bool


class SetConsent(CamelModel):
    type: Literal["set_consent"] = "set_consent"
    section_id: str
    checked: bool


class UpdateBasicInfo(CamelModel):
    type: Literal["update_basic_info"] = "update_basic_info"
    changes: BasicInfoUpdate


class SetResume(CamelModel):
    type: Literal["set_resume"] = "set_resume"
    resume: ResumeAttachment


class ClearResume(CamelModel):
    type: Literal["clear_resume"] = "clear_resume"


class Focus(CamelModel):
    type: Literal["focus"] = "focus"
    question_id: str | None


class FocusNext(CamelModel):
    """Forward-navigation key pressed in an answer field."""

    type: Literal["focus_next"] = "focus_next"
    question_id: str | None = None  # defaults to the focused question


class FocusPrevious(CamelModel):
    """Reverse-navigation key pressed in an answer field."""

    type: Literal["focus_previous"] = "focus_previous"
    question_id: str | None = None


FormEventUnion = (
    Advance
    | Retreat
    | Jump
    | EditAnswer
    | ToggleExpand
    | SetNotice
    | SetConsent
    | UpdateBasicInfo
    | SetResume
    | ClearResume
    | Focus
    | FocusNext
    | FocusPrevious
)

FormEvent = Annotated[FormEventUnion, Field(discriminator="type")]
