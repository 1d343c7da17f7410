"""Stage rubric, record and submission schemas."""

from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

StageKey = Literal["psychometric", "technical", "final"]

STAGE_KEYS: tuple[StageKey, ...] = ("psychometric", "technical", "final")

MIN_SCORE = 1
MAX_SCORE = 5

NOTICE_PERIOD_OPTIONS: tuple[str, ...] = (
    "",
    "Immediate",
    "2 weeks",
    "1 month",
    "2 months",
    "3 months",
)


class Criterion(BaseModel):
    """Single rubric criterion."""

    id: str
    label: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class StageRecord(BaseModel):
    """Evaluation state for one interview stage.

    A record is either empty (``completed`` false, no average) or fully scored:
    every criterion carries a score between 1 and 5 and ``average`` is set.
    """

    stage: StageKey
    criteria: tuple[Criterion, ...]
    scores: dict[str, int] = Field(default_factory=dict)
    comments: dict[str, str] = Field(default_factory=dict)
    average: float | None = None
    completed: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _check_completion(self) -> "StageRecord":
        fully_scored = all(
            MIN_SCORE <= self.scores.get(criterion.id, 0) <= MAX_SCORE
            for criterion in self.criteria
        )
        if self.completed != fully_scored:
            raise ValueError("completed must be set exactly when every criterion is scored")
        if self.completed != (self.average is not None):
            raise ValueError("average must be set exactly when the stage is completed")
        return self

    def comment_for(self, criterion_id: str) -> str:
        return self.comments.get(criterion_id, "")


class FinalStageRecord(StageRecord):
    """Final interview record with hiring logistics."""

    stage: Literal["final"] = "final"
    salary_range: str = ""
    notice_period: str = ""
    final_comments: str = ""


class CriterionInput(BaseModel):
    """Raw score and comment for one criterion, as entered by the operator."""

    score: Any = None
    comment: str | None = None

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)


class StageSubmission(BaseModel):
    """Typed input for a stage submission."""

    criteria: dict[str, CriterionInput] = Field(default_factory=dict)
    salary_range: str | None = Field(default=None, alias="salaryRange")
    notice_period: str | None = Field(default=None, alias="noticePeriod")
    final_comments: str | None = Field(default=None, alias="finalComments")

    model_config = ConfigDict(extra="forbid", populate_by_name=True, coerce_numbers_to_str=True)

    @staticmethod
    def is_flat_form(payload: Any) -> bool:
        return isinstance(payload, Mapping) and any(
            str(key).startswith("score-") for key in payload
        )

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "StageSubmission":
        """Build a submission from flat ``score-{id}``/``comment-{id}`` form fields."""
        criteria: dict[str, dict[str, Any]] = {}
        for key, value in form.items():
            prefix, sep, criterion_id = str(key).partition("-")
            if not sep or prefix not in ("score", "comment"):
                continue
            criteria.setdefault(criterion_id, {})[prefix] = value
        return cls(
            criteria=criteria,
            salary_range=form.get("salaryRange"),
            notice_period=form.get("noticePeriod"),
            final_comments=form.get("finalComments"),
        )
