"""Interview questionnaire catalogs."""

from interview_mate.models.interview import InterviewType
from interview_mate.questionnaire.depth import DEPTH_QUESTIONNAIRE
from interview_mate.questionnaire.models import (
    Condition,
    ConditionContext,
    Question,
    Questionnaire,
    Section,
    Stage,
)
from interview_mate.questionnaire.standard import STANDARD_QUESTIONNAIRE

QUESTIONNAIRES: dict[InterviewType, Questionnaire] = {
    InterviewType.STANDARD: STANDARD_QUESTIONNAIRE,
    InterviewType.DEPTH: DEPTH_QUESTIONNAIRE,
}


def get_questionnaire(interview_type: InterviewType) -> Questionnaire:
    """Return the questionnaire for an interview type."""
    return QUESTIONNAIRES[interview_type]


__all__ = [
    "Condition",
    "ConditionContext",
    "DEPTH_QUESTIONNAIRE",
    "QUESTIONNAIRES",
    "Question",
    "Questionnaire",
    "STANDARD_QUESTIONNAIRE",
    "Section",
    "Stage",
    "get_questionnaire",
]
