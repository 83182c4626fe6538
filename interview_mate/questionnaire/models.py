"""Static questionnaire configuration types."""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator
from structlog import get_logger

from interview_mate.models.interview import BasicInfo, InterviewType

logger = get_logger()

_CONDITION_PATTERN = re.compile(r"^\s*hasSushiExperience\s*===?\s*(true|false)\s*$")


class ConditionContext(BaseModel):
    """Values a section condition is evaluated against."""

    model_config = ConfigDict(frozen=True)

    has_sushi_experience: bool = False

    @classmethod
    def from_basic_info(cls, basic_info: BasicInfo) -> ConditionContext:
        return cls(has_sushi_experience=basic_info.has_sushi_experience)


class Condition(StrEnum):
    """Supported section visibility conditions."""

    HAS_SUSHI_EXPERIENCE = "has_sushi_experience"
    NO_SUSHI_EXPERIENCE = "no_sushi_experience"

    def evaluate(self, context: ConditionContext) -> bool:
        if self is Condition.HAS_SUSHI_EXPERIENCE:
            return context.has_sushi_experience
        return not context.has_sushi_experience

    @classmethod
    def parse(cls, expression: str | None) -> Condition | None:
        """
        Parse a condition expression such as "hasSushiExperience === true".

        Unrecognized expressions yield None (section always visible).
        """
        if expression is None:
            return None

        match = _CONDITION_PATTERN.match(expression)
        if not match:
            logger.warning("unrecognized_section_condition", expression=expression)
            return None

        if match.group(1) == "true":
            return cls.HAS_SUSHI_EXPERIENCE
        return cls.NO_SUSHI_EXPERIENCE


class Question(BaseModel):
    """A single interview question with evaluation checkpoints."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    checkpoints: tuple[str, ...] = ()


class Section(BaseModel):
    """Group of questions and/or notices inside a stage."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    questions: tuple[Question, ...] = ()
    notices: tuple[str, ...] = ()
    condition: Condition | None = None

    @field_validator("condition", mode="before")
    @classmethod
    def parse_condition(cls, value: object) -> Condition | None:
        """Accept a Condition or an expression string like "hasSushiExperience === true"."""
        if value is None or isinstance(value, Condition):
            return value
        if isinstance(value, str) and value in {c.value for c in Condition}:
            return Condition(value)
        return Condition.parse(str(value))

    @property
    def has_consent(self) -> bool:
        return bool(self.notices)

    def is_visible(self, context: ConditionContext) -> bool:
        return self.condition is None or self.condition.evaluate(context)


class Stage(BaseModel):
    """Top-level questionnaire phase, shown as a tab."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    sections: tuple[Section, ...] = ()


class Questionnaire(BaseModel):
    """Ordered stages for one interview type."""

    model_config = ConfigDict(frozen=True)

    interview_type: InterviewType
    stages: tuple[Stage, ...]

    @property
    def first_stage(self) -> Stage:
        return self.stages[0]

    def stage_index(self, stage_id: str) -> int:
        """Return the index of a stage, or -1 if unknown."""
        for index, stage in enumerate(self.stages):
            if stage.id == stage_id:
                return index
        return -1

    def get_stage(self, stage_id: str) -> Stage | None:
        index = self.stage_index(stage_id)
        return self.stages[index] if index >= 0 else None

    def find_section(self, section_id: str) -> Section | None:
        for stage in self.stages:
            for section in stage.sections:
                if section.id == section_id:
                    return section
        return None

    def all_questions(self) -> list[Question]:
        """Every question in document order."""
        return [
            question
            for stage in self.stages
            for section in stage.sections
            for question in section.questions
        ]
