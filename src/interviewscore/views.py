"""Derived display values for rendering layers.

Everything here is a pure function of an :class:`EvaluationSession`; nothing
is cached on the session itself.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

import pendulum

from . import __version__
from .core import (
    EvaluationSession,
    can_access,
    compute_confidence_score,
    normalized_score,
    recommendation_tier,
)
from .core.navigation import Screen
from .schemas import FinalStageRecord, StageKey, StageRecord

STAGE_LABELS: dict[StageKey, str] = {
    "psychometric": "Psychometric",
    "technical": "Technical",
    "final": "Final Interview",
}

_WORKFLOW_LABELS: tuple[tuple[Screen, str], ...] = (
    ("candidate", "1. Candidate Details"),
    ("psychometric", "2. Psychometric Stage"),
    ("technical", "3. Technical Stage"),
    ("final", "4. Final Interview"),
    ("confidence", "5. Confidence Score"),
)


@dataclass(slots=True)
class StageBreakdown:
    stage: StageKey
    label: str
    average: float | None
    weight: int
    contribution: float | None


@dataclass(slots=True)
class WorkflowItem:
    screen: Screen
    label: str
    accessible: bool
    completed: bool
    current: bool


def stage_bar_height(record: StageRecord) -> float | None:
    """Bar height as a percentage of the chart."""
    normalized = normalized_score(record)
    return float(normalized) if normalized is not None else None


def stage_contribution(record: StageRecord, weight: int) -> float | None:
    """Points a stage adds to the confidence score."""
    normalized = normalized_score(record)
    if normalized is None:
        return None
    return float(normalized * weight / 100)


def score_breakdown(session: EvaluationSession) -> list[StageBreakdown]:
    breakdown: list[StageBreakdown] = []
    for stage, record in session.stages.items():
        weight = session.weights.for_stage(stage)
        breakdown.append(
            StageBreakdown(
                stage=stage,
                label=STAGE_LABELS[stage],
                average=record.average,
                weight=weight,
                contribution=stage_contribution(record, weight),
            )
        )
    return breakdown


def feedback_summary(session: EvaluationSession) -> dict[StageKey, list[str]]:
    """Non-empty comments per stage, with final-interview logistics appended."""
    summary: dict[StageKey, list[str]] = {}
    for stage, record in session.stages.items():
        comments = [
            record.comment_for(criterion.id)
            for criterion in record.criteria
            if record.comment_for(criterion.id)
        ]
        if isinstance(record, FinalStageRecord):
            if record.salary_range:
                comments.append(f"Expected Salary: {record.salary_range}")
            if record.notice_period:
                comments.append(f"Notice Period: {record.notice_period}")
            if record.final_comments:
                comments.append(record.final_comments)
        summary[stage] = comments
    return summary


def workflow_items(session: EvaluationSession) -> list[WorkflowItem]:
    items: list[WorkflowItem] = []
    for screen, label in _WORKFLOW_LABELS:
        completed = (
            session.stages.get(screen).completed
            if screen in STAGE_LABELS
            else False
        )
        items.append(
            WorkflowItem(
                screen=screen,
                label=label,
                accessible=can_access(screen, session),
                completed=completed,
                current=session.current_screen == screen,
            )
        )
    return items


def confidence_report(session: EvaluationSession) -> dict[str, Any]:
    """JSON-ready summary of the evaluation."""
    score = compute_confidence_score(session)
    candidate = session.candidate
    return {
        "metadata": {
            "generated_at": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        },
        "candidate": candidate.model_dump(by_alias=True) if candidate else None,
        "weights": session.weights.model_dump(),
        "stages": [asdict(entry) for entry in score_breakdown(session)],
        "confidence_score": score,
        "recommendation": recommendation_tier(score) if score is not None else None,
        "feedback": feedback_summary(session),
    }
