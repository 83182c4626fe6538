"""AI interview summary requests."""

from __future__ import annotations

from pydantic import BaseModel
from structlog import get_logger

from interview_mate.clients.gemini import GeminiClient, gemini_client
from interview_mate.models.interview import BasicInfo
from interview_mate.questionnaire import Questionnaire

logger = get_logger()

NOTHING_TO_ANALYZE = "No interview notes recorded to analyze."
MISSING_API_KEY_MESSAGE = "API Key is missing. Please configure your environment."
SUMMARY_FAILED_MESSAGE = "An error occurred while communicating with the AI assistant."
EMPTY_SUMMARY_MESSAGE = "Could not generate summary."

PROMPT_TEMPLATE = """You are an expert HR Interviewer for the Elleo Group (a premium food & beverage hospitality group).
Analyze the following interview notes for a candidate.

Please provide a structured summary in Korean (Markdown format):
1. **핵심 강점 (Key Strengths)**: Highlight positive traits based on the notes.
2. **우려 사항 (Areas of Concern)**: Highlight any red flags or areas needing improvement.
3. **조직 적합성 (Cultural Fit)**: Assess alignment with teamwork and organizational values.
4. **종합 의견 (Overall Recommendation)**: A brief conclusion on whether they seem like a strong candidate (추천 / 보류 / 비추천) and why.

Keep it professional, concise, and objective.

{context}"""


class AnsweredQuestion(BaseModel):
    """Question text, checkpoint hints and the interviewer's note."""

    question: str
    checkpoints: tuple[str, ...]
    answer: str


def build_candidate_context(
    answers: dict[str, str], questionnaire: Questionnaire
) -> list[AnsweredQuestion]:
    """Answered questions in questionnaire order; blank and unknown answers are skipped."""
    return [
        AnsweredQuestion(
            question=question.text,
            checkpoints=question.checkpoints,
            answer=answers[question.id],
        )
        for question in questionnaire.all_questions()
        if answers.get(question.id, "").strip()
    ]


def build_prompt(basic_info: BasicInfo, answered: list[AnsweredQuestion]) -> str:
    context = f"Candidate Name: {basic_info.name}\n"
    context += f"Position: {basic_info.position}\n"
    context += "Interview Content:\n\n"

    for item in answered:
        context += f"Q: {item.question}\n"
        context += f"Checkpoints: {', '.join(item.checkpoints)}\n"
        context += f"Interviewer Note/Answer: {item.answer}\n\n"

    return PROMPT_TEMPLATE.format(context=context)


async def summarize_interview(
    basic_info: BasicInfo,
    answers: dict[str, str],
    questionnaire: Questionnaire,
    client: GeminiClient | None = None,
) -> str:
    """
    Request an AI summary of the interview notes.

    Never raises: a missing API key, an empty response or a failed request
    each produce a fixed message in place of the summary.

    Args:
        basic_info: Candidate header fields
        answers: Question id -> interviewer note
        questionnaire: Questionnaire the answers belong to
        client: Gemini client (defaults to the module singleton)

    Returns:
        Summary text or one of the fixed fallback messages
    """
    client = client or gemini_client

    answered = build_candidate_context(answers, questionnaire)
    if not answered:
        logger.info("summary_skipped_no_answers", candidate=basic_info.name)
        return NOTHING_TO_ANALYZE

    if not client.is_configured:
        logger.warning("summary_skipped_missing_api_key")
        return MISSING_API_KEY_MESSAGE

    try:
        text = await client.generate(build_prompt(basic_info, answered))
    except Exception:
        logger.exception("summary_request_failed", candidate=basic_info.name)
        return SUMMARY_FAILED_MESSAGE

    logger.info("summary_generated", candidate=basic_info.name, chars=len(text))
    return text or EMPTY_SUMMARY_MESSAGE
