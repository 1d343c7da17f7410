"""Evaluation session state and confidence aggregation."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..schemas import (
    STAGE_KEYS,
    CandidateProfile,
    FinalStageRecord,
    StageKey,
    StageRecord,
    StageSubmission,
    WeightConfiguration,
)
from ..schemas.stage import MAX_SCORE
from .errors import CandidateValidationError, NavigationBlocked
from .navigation import Screen, can_access
from .stages import empty_record, round_half_up, score_stage

RecommendationTier = Literal["Highly Recommend", "Recommend", "Borderline", "Not Recommended"]

_BLANK_ERROR_TYPES = frozenset({"missing", "string_too_short"})

RECOMMENDATION_THRESHOLDS: tuple[tuple[int, RecommendationTier], ...] = (
    (85, "Highly Recommend"),
    (70, "Recommend"),
    (55, "Borderline"),
)


class SessionStages(BaseModel):
    """The three stage records of a session."""

    psychometric: StageRecord
    technical: StageRecord
    final: FinalStageRecord

    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty(cls) -> "SessionStages":
        return cls(**{stage: empty_record(stage) for stage in STAGE_KEYS})

    def get(self, stage: str) -> StageRecord:
        if stage not in STAGE_KEYS:
            raise KeyError(f"Unknown stage: {stage!r}")
        return getattr(self, stage)

    def items(self) -> list[tuple[StageKey, StageRecord]]:
        return [(stage, getattr(self, stage)) for stage in STAGE_KEYS]

    def replace(self, record: StageRecord) -> "SessionStages":
        return self.model_copy(update={record.stage: record})


class EvaluationSession(BaseModel):
    """Immutable snapshot of one candidate evaluation.

    Every transition returns a new session; the previous snapshot stays valid,
    so a rejected transition leaves the caller holding the last good state.
    """

    candidate: CandidateProfile | None = None
    stages: SessionStages = Field(default_factory=SessionStages.empty)
    weights: WeightConfiguration = Field(default_factory=WeightConfiguration)
    current_screen: Screen = "candidate"

    model_config = ConfigDict(frozen=True)

    @classmethod
    def start(cls, weights: WeightConfiguration | None = None) -> "EvaluationSession":
        return cls(weights=weights or WeightConfiguration())

    def with_candidate(
        self, form: CandidateProfile | Mapping[str, Any]
    ) -> "EvaluationSession":
        if isinstance(form, CandidateProfile):
            candidate = form
        else:
            try:
                candidate = CandidateProfile.model_validate(dict(form))
            except ValidationError as exc:
                fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
                if all(error["type"] in _BLANK_ERROR_TYPES for error in exc.errors()):
                    raise CandidateValidationError(fields) from exc
                raise CandidateValidationError(
                    fields, f"Please check the candidate details: {', '.join(fields)}"
                ) from exc
        return self.model_copy(update={"candidate": candidate})

    def with_stage(self, stage: str, submission: StageSubmission) -> "EvaluationSession":
        record = score_stage(stage, submission)
        return self.model_copy(update={"stages": self.stages.replace(record)})

    def with_weights(self, weights: WeightConfiguration) -> "EvaluationSession":
        return self.model_copy(update={"weights": weights})

    def with_screen(self, screen: str) -> "EvaluationSession":
        if not can_access(screen, self):
            raise NavigationBlocked(screen)
        return self.model_copy(update={"current_screen": screen})

    @property
    def all_stages_completed(self) -> bool:
        return all(record.completed for _, record in self.stages.items())


def normalized_score(record: StageRecord) -> Decimal | None:
    """Stage average on a 0-100 scale; ``None`` for an incomplete stage."""
    if not record.completed or record.average is None:
        return None
    return Decimal(str(record.average)) / MAX_SCORE * 100


def compute_confidence_score(session: EvaluationSession) -> int | None:
    """Weighted 0-100 confidence; ``None`` until every stage is completed."""
    if not session.all_stages_completed:
        return None
    weighted = sum(
        (
            normalized_score(record) * session.weights.for_stage(stage) / 100
            for stage, record in session.stages.items()
        ),
        Decimal(0),
    )
    return int(round_half_up(weighted))


def recommendation_tier(score: int | float) -> RecommendationTier:
    for threshold, tier in RECOMMENDATION_THRESHOLDS:
        if score >= threshold:
            return tier
    return "Not Recommended"
