"""Test fixtures and factories."""

from interview_mate.models.auth import AuthContext
from interview_mate.models.interview import (
    Acknowledgement,
    BasicInfo,
    InterviewRecord,
    InterviewType,
    ResumeAttachment,
    Role,
)

MANAGER_ID = "11111111-1111-1111-1111-111111111111"
OTHER_MANAGER_ID = "22222222-2222-2222-2222-222222222222"
ADMIN_ID = "99999999-9999-9999-9999-999999999999"

RESUME_DATA_URL = "data:application/pdf;base64,JVBERi0xLjQK"


def create_auth_context(
    user_id: str = MANAGER_ID,
    email: str | None = "manager@elleo.kr",
    role: Role = Role.MANAGER,
) -> AuthContext:
    return AuthContext(user_id=user_id, email=email, role=role)


def create_basic_info(
    name: str = "김민수",
    position: str = "Kitchen Staff",
    store: str = "Gangnam",
    date: str = "2024-05-01",
    interview_type: InterviewType = InterviewType.STANDARD,
    has_sushi_experience: bool = False,
    **extra,
) -> BasicInfo:
    return BasicInfo(
        name=name,
        position=position,
        store=store,
        date=date,
        interviewer="박지훈",
        interview_type=interview_type,
        has_sushi_experience=has_sushi_experience,
        **extra,
    )


def create_record(
    record_id: str = "rec-1",
    name: str = "김민수",
    answers: dict[str, str] | None = None,
    user_id: str | None = MANAGER_ID,
    created_at: int = 1_714_521_600_000,
    ai_summary: str | None = None,
    acknowledgements: dict[str, Acknowledgement] | None = None,
    with_resume: bool = False,
    **basic_info,
) -> InterviewRecord:
    """Create a test interview record."""
    return InterviewRecord(
        id=record_id,
        basic_info=create_basic_info(name=name, **basic_info),
        answers=answers or {},
        acknowledgements=acknowledgements or {},
        resume=(
            ResumeAttachment(file_name="resume.pdf", file_data=RESUME_DATA_URL)
            if with_resume
            else None
        ),
        ai_summary=ai_summary,
        created_at=created_at,
        user_id=user_id,
    )


def create_record_row(**overrides) -> dict:
    """Row shaped like an interview_records SELECT result (nested JSON in camelCase)."""
    row = {
        "id": "rec-1",
        "user_id": MANAGER_ID,
        "basic_info": {
            "name": "김민수",
            "position": "Kitchen Staff",
            "store": "Gangnam",
            "date": "2024-05-01",
            "interviewer": "박지훈",
            "interviewType": "STANDARD",
            "hasSushiExperience": False,
        },
        "answers": {"s-q-intro-1": "Hello"},
        "acknowledgements": {},
        "resume": None,
        "ai_summary": None,
        "created_at": 1_714_521_600_000,
    }
    row.update(overrides)
    return row
