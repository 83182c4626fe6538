"""Render an open form session into the view model the client draws."""

from __future__ import annotations

from interview_mate.models.api import FormView, QuestionView, SectionView, StageTab
from interview_mate.services.form import section_acknowledgement, visible_sections
from interview_mate.services.form_sessions import FormSession
from interview_mate.services.summary_format import parse_summary


def build_form_view(session: FormSession) -> FormView:
    """Stage tabs, visible sections of the active stage and parsed summary."""
    state = session.state
    questionnaire = session.questionnaire
    stage_count = len(questionnaire.stages)
    active_index = questionnaire.stage_index(state.active_stage_id)

    tabs = [
        StageTab(id=stage.id, title=stage.title, step=i + 1, active=i == active_index)
        for i, stage in enumerate(questionnaire.stages)
    ]

    expanded = set(state.expanded_questions)
    sections = []
    for section in visible_sections(questionnaire, state.active_stage_id, state.basic_info):
        questions = []
        for question in section.questions:
            answer = state.answers.get(question.id, "")
            questions.append(
                QuestionView(
                    id=question.id,
                    text=question.text,
                    checkpoints=list(question.checkpoints),
                    answer=answer,
                    answered=bool(answer.strip()),
                    expanded=question.id in expanded,
                    focused=question.id == state.focused_question_id,
                )
            )

        view = SectionView(id=section.id, title=section.title, questions=questions)
        if section.has_consent:
            ack = section_acknowledgement(state, section)
            view.notices = list(section.notices)
            view.notice_checks = ack.notices
            view.consent = ack.consent
        sections.append(view)

    return FormView(
        session_id=session.session_id,
        state=state,
        stages=tabs,
        step_label=f"Step {active_index + 1} of {stage_count}",
        is_first_stage=active_index == 0,
        is_last_stage=active_index == stage_count - 1,
        sections=sections,
        ai_summary_blocks=parse_summary(state.ai_summary),
    )
