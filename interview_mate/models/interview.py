"""Pydantic models for interview records."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InterviewType(StrEnum):
    """Questionnaire variant used for an interview."""

    STANDARD = "STANDARD"
    DEPTH = "DEPTH"


class Role(StrEnum):
    """Access role stored in the profiles table."""

    ADMIN = "admin"
    MANAGER = "manager"


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================
# Record Models
# ============================================


class BasicInfo(CamelModel):
    """Candidate and interview header fields."""

    name: str = ""
    position: str = ""
    store: str = ""
    date: str = ""  # ISO YYYY-MM-DD
    interviewer: str = ""
    interview_type: InterviewType = InterviewType.STANDARD
    visa_status: str | None = None
    visa_expiry: str | None = None
    contact: str | None = None
    has_sushi_experience: bool = False


class ResumeAttachment(CamelModel):
    """Resume stored inline as a data URL."""

    file_name: str
    file_data: str  # data:<mime>;base64,<payload>


class Acknowledgement(CamelModel):
    """Consent flag plus one flag per notice of a section."""

    consent: bool = False
    notices: list[bool] = Field(default_factory=list)


class InterviewRecord(CamelModel):
    """A candidate interview record."""

    id: str
    basic_info: BasicInfo
    answers: dict[str, str] = Field(default_factory=dict)
    acknowledgements: dict[str, Acknowledgement] = Field(default_factory=dict)
    resume: ResumeAttachment | None = None
    ai_summary: str | None = None
    created_at: int  # epoch milliseconds
    user_id: str | None = None

    @property
    def answered_count(self) -> int:
        """Number of non-blank answers."""
        return sum(1 for value in self.answers.values() if value.strip())
