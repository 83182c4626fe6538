"""Interview form state machine.

Every transition is a pure function of the current state and one event:

    state, effect = transition(state, event, questionnaire)

The only effect is SAVE_AND_CLOSE, requested by advancing past the last
stage; persisting the record is left to the caller (see form_sessions).
"""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import date
from enum import StrEnum
from typing import Any, NamedTuple
from uuid import uuid4

from interview_mate.core.errors import ValidationError
from interview_mate.models.form import (
    Advance,
    ClearResume,
    EditAnswer,
    Focus,
    FocusNext,
    FocusPrevious,
    FormState,
    Jump,
    Retreat,
    SetConsent,
    SetNotice,
    SetResume,
    ToggleExpand,
    UpdateBasicInfo,
)
from interview_mate.models.interview import (
    Acknowledgement,
    BasicInfo,
    InterviewRecord,
)
from interview_mate.questionnaire import ConditionContext, Questionnaire, Section

MISSING_NAME_MESSAGE = "지원자명을 입력해주세요."


class FormEffect(StrEnum):
    """Side effects a transition can request."""

    SAVE_AND_CLOSE = "save_and_close"


class Transition(NamedTuple):
    state: FormState
    effect: FormEffect | None = None


# ============================================
# Queries
# ============================================


def visible_sections(
    questionnaire: Questionnaire, stage_id: str, basic_info: BasicInfo
) -> list[Section]:
    """Sections of a stage whose condition holds for the candidate."""
    stage = questionnaire.get_stage(stage_id)
    if stage is None:
        return []

    context = ConditionContext.from_basic_info(basic_info)
    return [section for section in stage.sections if section.is_visible(context)]


def visible_question_ids(
    questionnaire: Questionnaire, stage_id: str, basic_info: BasicInfo
) -> list[str]:
    """Visible question ids of a stage in document order."""
    return [
        question.id
        for section in visible_sections(questionnaire, stage_id, basic_info)
        for question in section.questions
    ]


def section_acknowledgement(state: FormState, section: Section) -> Acknowledgement:
    """Stored acknowledgement for a section, padded to its notice count."""
    stored = state.acknowledgements.get(section.id, Acknowledgement())
    notices = list(stored.notices[: len(section.notices)])
    notices += [False] * (len(section.notices) - len(notices))
    return Acknowledgement(consent=stored.consent, notices=notices)


# ============================================
# Construction
# ============================================


def initial_state(
    questionnaire: Questionnaire,
    record: InterviewRecord | None = None,
    today: date | None = None,
) -> FormState:
    """
    Build the state for a new form, or for editing an existing record.

    The first stage is active and questions with answers in it start expanded.
    """
    if record is not None:
        state = FormState(
            record_id=record.id,
            interview_type=questionnaire.interview_type,
            active_stage_id=questionnaire.first_stage.id,
            basic_info=record.basic_info,
            answers=dict(record.answers),
            acknowledgements=dict(record.acknowledgements),
            resume=record.resume,
            ai_summary=record.ai_summary or "",
            created_at=record.created_at,
        )
    else:
        state = FormState(
            record_id=str(uuid4()),
            interview_type=questionnaire.interview_type,
            active_stage_id=questionnaire.first_stage.id,
            basic_info=BasicInfo(
                date=(today or date.today()).isoformat(),
                interview_type=questionnaire.interview_type,
            ),
        )

    return _enter_stage(state, questionnaire, state.active_stage_id)


def build_record(state: FormState, now_ms: int | None = None) -> InterviewRecord:
    """
    Produce the persistable record for the current state.

    Raises:
        ValidationError: If the candidate name is blank
    """
    if not state.basic_info.name.strip():
        raise ValidationError(MISSING_NAME_MESSAGE, context={"field": "name"})

    created_at = state.created_at
    if created_at is None:
        created_at = now_ms if now_ms is not None else int(time.time() * 1000)

    return InterviewRecord(
        id=state.record_id,
        basic_info=state.basic_info,
        answers=dict(state.answers),
        acknowledgements=dict(state.acknowledgements),
        resume=state.resume,
        ai_summary=state.ai_summary or None,
        created_at=created_at,
    )


# ============================================
# Transitions
# ============================================


def _enter_stage(state: FormState, questionnaire: Questionnaire, stage_id: str) -> FormState:
    """Activate a stage and auto-expand its answered questions (never collapses)."""
    stage = questionnaire.get_stage(stage_id)
    if stage is None:
        raise ValidationError(f"Unknown stage: {stage_id}", context={"stage_id": stage_id})

    expanded = list(state.expanded_questions)
    for section in stage.sections:
        for question in section.questions:
            if state.answers.get(question.id) and question.id not in expanded:
                expanded.append(question.id)

    return state.model_copy(
        update={
            "active_stage_id": stage_id,
            "expanded_questions": tuple(expanded),
            "focused_question_id": None,
        }
    )


def _require_question(questionnaire: Questionnaire, question_id: str) -> None:
    if not any(q.id == question_id for q in questionnaire.all_questions()):
        raise ValidationError(
            f"Unknown question: {question_id}", context={"question_id": question_id}
        )


def _require_consent_section(questionnaire: Questionnaire, section_id: str) -> Section:
    section = questionnaire.find_section(section_id)
    if section is None or not section.has_consent:
        raise ValidationError(
            f"Section has no notices: {section_id}", context={"section_id": section_id}
        )
    return section


def _advance(state: FormState, event: Advance, questionnaire: Questionnaire) -> Transition:
    index = questionnaire.stage_index(state.active_stage_id)
    if index >= len(questionnaire.stages) - 1:
        return Transition(state, FormEffect.SAVE_AND_CLOSE)
    return Transition(_enter_stage(state, questionnaire, questionnaire.stages[index + 1].id))


def _retreat(state: FormState, event: Retreat, questionnaire: Questionnaire) -> Transition:
    index = questionnaire.stage_index(state.active_stage_id)
    if index <= 0:
        return Transition(state)
    return Transition(_enter_stage(state, questionnaire, questionnaire.stages[index - 1].id))


def _jump(state: FormState, event: Jump, questionnaire: Questionnaire) -> Transition:
    return Transition(_enter_stage(state, questionnaire, event.stage_id))


def _edit_answer(state: FormState, event: EditAnswer, questionnaire: Questionnaire) -> Transition:
    _require_question(questionnaire, event.question_id)
    answers = {**state.answers, event.question_id: event.text}
    return Transition(state.model_copy(update={"answers": answers}))


def _toggle_expand(
    state: FormState, event: ToggleExpand, questionnaire: Questionnaire
) -> Transition:
    _require_question(questionnaire, event.question_id)
    if event.question_id in state.expanded_questions:
        expanded = tuple(q for q in state.expanded_questions if q != event.question_id)
    else:
        expanded = (*state.expanded_questions, event.question_id)
    return Transition(state.model_copy(update={"expanded_questions": expanded}))


def _set_notice(state: FormState, event: SetNotice, questionnaire: Questionnaire) -> Transition:
    section = _require_consent_section(questionnaire, event.section_id)
    if not 0 <= event.index < len(section.notices):
        raise ValidationError(
            f"Notice index out of range: {event.index}",
            context={"section_id": section.id, "index": event.index},
        )

    current = section_acknowledgement(state, section)
    notices = list(current.notices)
    notices[event.index] = event.checked
    # Unchecking any notice withdraws the section consent
    consent = current.consent if event.checked else False

    acknowledgements = {
        **state.acknowledgements,
        section.id: Acknowledgement(consent=consent, notices=notices),
    }
    return Transition(state.model_copy(update={"acknowledgements": acknowledgements}))


def _set_consent(state: FormState, event: SetConsent, questionnaire: Questionnaire) -> Transition:
    section = _require_consent_section(questionnaire, event.section_id)
    acknowledgements = {
        **state.acknowledgements,
        section.id: Acknowledgement(
            consent=event.checked, notices=[event.checked] * len(section.notices)
        ),
    }
    return Transition(state.model_copy(update={"acknowledgements": acknowledgements}))


def _update_basic_info(
    state: FormState, event: UpdateBasicInfo, questionnaire: Questionnaire
) -> Transition:
    changes = event.changes.model_dump(exclude_unset=True, exclude_none=True)
    basic_info = state.basic_info.model_copy(update=changes)

    focused = state.focused_question_id
    if focused and focused not in visible_question_ids(
        questionnaire, state.active_stage_id, basic_info
    ):
        focused = None

    return Transition(
        state.model_copy(update={"basic_info": basic_info, "focused_question_id": focused})
    )


def _set_resume(state: FormState, event: SetResume, questionnaire: Questionnaire) -> Transition:
    return Transition(state.model_copy(update={"resume": event.resume}))


def _clear_resume(
    state: FormState, event: ClearResume, questionnaire: Questionnaire
) -> Transition:
    return Transition(state.model_copy(update={"resume": None}))


def _focus(state: FormState, event: Focus, questionnaire: Questionnaire) -> Transition:
    if event.question_id is not None and event.question_id not in visible_question_ids(
        questionnaire, state.active_stage_id, state.basic_info
    ):
        raise ValidationError(
            f"Question not visible in active stage: {event.question_id}",
            context={"question_id": event.question_id},
        )
    return Transition(state.model_copy(update={"focused_question_id": event.question_id}))


def _move_focus(
    state: FormState, questionnaire: Questionnaire, from_question_id: str | None, step: int
) -> Transition:
    ids = visible_question_ids(questionnaire, state.active_stage_id, state.basic_info)
    current = from_question_id or state.focused_question_id
    if current not in ids:
        return Transition(state)

    target_index = ids.index(current) + step
    if not 0 <= target_index < len(ids):
        return Transition(state)

    target = ids[target_index]
    expanded = state.expanded_questions
    if target not in expanded:
        expanded = (*expanded, target)

    return Transition(
        state.model_copy(update={"focused_question_id": target, "expanded_questions": expanded})
    )


def _focus_next(state: FormState, event: FocusNext, questionnaire: Questionnaire) -> Transition:
    return _move_focus(state, questionnaire, event.question_id, 1)


def _focus_previous(
    state: FormState, event: FocusPrevious, questionnaire: Questionnaire
) -> Transition:
    return _move_focus(state, questionnaire, event.question_id, -1)


_HANDLERS: dict[type, Callable[[FormState, Any, Questionnaire], Transition]] = {
    Advance: _advance,
    Retreat: _retreat,
    Jump: _jump,
    EditAnswer: _edit_answer,
    ToggleExpand: _toggle_expand,
    SetNotice: _set_notice,
    SetConsent: _set_consent,
    UpdateBasicInfo: _update_basic_info,
    SetResume: _set_resume,
    ClearResume: _clear_resume,
    Focus: _focus,
    FocusNext: _focus_next,
    FocusPrevious: _focus_previous,
}


def transition(state: FormState, event: Any, questionnaire: Questionnaire) -> Transition:
    """
    Apply one event to the form state.

    Args:
        state: Current form state
        event: One of the events in interview_mate.models.form
        questionnaire: Questionnaire the form was opened with

    Returns:
        The new state and an optional effect for the caller

    Raises:
        ValidationError: If the event references unknown stages, questions or notices
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise ValidationError(f"Unsupported form event: {type(event).__name__}")
    return handler(state, event, questionnaire)
