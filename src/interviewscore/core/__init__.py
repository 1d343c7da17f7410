"""Core evaluation engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .errors import (
    CandidateValidationError,
    EvaluationError,
    EvaluationValidationError,
    NavigationBlocked,
    StageValidationError,
    WeightValidationError,
)
from .navigation import NEXT_SCREEN, SCREENS, Screen, can_access
from .rubrics import RUBRICS, StageRubric, get_rubric
from .session import (
    EvaluationSession,
    RecommendationTier,
    SessionStages,
    compute_confidence_score,
    normalized_score,
    recommendation_tier,
)
from .stages import empty_record, parse_score, score_stage
from .weights import WEIGHTS_KEY, WeightStore
from .workflow import EvaluationWorkflow, TransitionResult

__all__ = [
    "CandidateValidationError",
    "EvaluationError",
    "EvaluationSession",
    "EvaluationValidationError",
    "EvaluationWorkflow",
    "NEXT_SCREEN",
    "NavigationBlocked",
    "RUBRICS",
    "RecommendationTier",
    "SCREENS",
    "Screen",
    "SessionStages",
    "StageRubric",
    "StageValidationError",
    "TransitionResult",
    "WEIGHTS_KEY",
    "WeightStore",
    "WeightValidationError",
    "can_access",
    "compute_confidence_score",
    "empty_record",
    "get_rubric",
    "normalized_score",
    "parse_score",
    "recommendation_tier",
    "score_stage",
]
