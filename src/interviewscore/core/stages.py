"""Stage scoring transition."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import structlog

from ..schemas import (
    NOTICE_PERIOD_OPTIONS,
    FinalStageRecord,
    StageRecord,
    StageSubmission,
)
from ..schemas.stage import MAX_SCORE, MIN_SCORE
from .errors import StageValidationError
from .rubrics import get_rubric

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")

logger = structlog.get_logger(__name__)


def round_half_up(value: Decimal | float, places: int = 0) -> Decimal:
    """Round to ``places`` decimals with ties going away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def parse_score(raw: Any) -> int | None:
    """Read the leading integer of a submitted score.

    Trailing text is ignored, so ``"4.5"`` and ``"4abc"`` both read as 4.
    Returns ``None`` when no integer can be read.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if isinstance(raw, str):
        match = _LEADING_INTEGER.match(raw)
        if match:
            return int(match.group(1))
    return None


def empty_record(stage: str) -> StageRecord:
    """Return the unscored record a session starts with."""
    rubric = get_rubric(stage)
    if rubric.key == "final":
        return FinalStageRecord(criteria=rubric.criteria)
    return StageRecord(stage=rubric.key, criteria=rubric.criteria)


def score_stage(stage: str, submission: StageSubmission) -> StageRecord:
    """Validate every criterion and build a completed record.

    Criteria are checked in rubric order and the first missing or
    out-of-range score aborts the whole submission.
    """
    rubric = get_rubric(stage)
    scores: dict[str, int] = {}
    comments: dict[str, str] = {}

    for criterion in rubric.criteria:
        entry = submission.criteria.get(criterion.id)
        score = parse_score(entry.score) if entry is not None else None
        if score is None or not MIN_SCORE <= score <= MAX_SCORE:
            raise StageValidationError(criterion.id, criterion.label)
        scores[criterion.id] = score
        comments[criterion.id] = (entry.comment if entry is not None else None) or ""

    average = float(round_half_up(Decimal(sum(scores.values())) / len(scores), 2))

    if rubric.key == "final":
        notice_period = submission.notice_period or ""
        if notice_period not in NOTICE_PERIOD_OPTIONS:
            logger.warning("stage.unknown_notice_period", notice_period=notice_period)
        return FinalStageRecord(
            criteria=rubric.criteria,
            scores=scores,
            comments=comments,
            average=average,
            completed=True,
            salary_range=submission.salary_range or "",
            notice_period=notice_period,
            final_comments=submission.final_comments or "",
        )

    return StageRecord(
        stage=rubric.key,
        criteria=rubric.criteria,
        scores=scores,
        comments=comments,
        average=average,
        completed=True,
    )

