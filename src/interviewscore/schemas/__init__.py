"""Pydantic schema definitions for evaluation state and operator input."""

from __future__ import annotations

from .candidate import CandidateProfile
from .stage import (
    NOTICE_PERIOD_OPTIONS,
    STAGE_KEYS,
    Criterion,
    CriterionInput,
    FinalStageRecord,
    StageKey,
    StageRecord,
    StageSubmission,
)
from .weights import DEFAULT_WEIGHTS, WeightConfiguration

__all__ = [
    "CandidateProfile",
    "Criterion",
    "CriterionInput",
    "DEFAULT_WEIGHTS",
    "FinalStageRecord",
    "NOTICE_PERIOD_OPTIONS",
    "STAGE_KEYS",
    "StageKey",
    "StageRecord",
    "StageSubmission",
    "WeightConfiguration",
]
