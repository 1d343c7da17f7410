from __future__ import annotations

from decimal import Decimal

import pytest

from interviewscore.core import (
    EvaluationSession,
    compute_confidence_score,
    get_rubric,
    recommendation_tier,
)
from interviewscore.core.stages import round_half_up
from interviewscore.schemas import StageSubmission, WeightConfiguration


def uniform_submission(stage: str, score: int) -> StageSubmission:
    rubric = get_rubric(stage)
    return StageSubmission(criteria={c.id: {"score": score} for c in rubric.criteria})


def scored_session(
    psychometric: int | None,
    technical: int | None,
    final: int | None,
    weights: WeightConfiguration | None = None,
) -> EvaluationSession:
    session = EvaluationSession.start(weights=weights)
    for stage, score in (
        ("psychometric", psychometric),
        ("technical", technical),
        ("final", final),
    ):
        if score is not None:
            session = session.with_stage(stage, uniform_submission(stage, score))
    return session


def test_confidence_score_worked_example():
    session = scored_session(4, 3, 5)

    score = compute_confidence_score(session)

    assert score == 80
    assert recommendation_tier(score) == "Recommend"


def test_confidence_score_all_top_marks():
    score = compute_confidence_score(scored_session(5, 5, 5))

    assert score == 100
    assert recommendation_tier(score) == "Highly Recommend"


def test_confidence_score_all_twos():
    score = compute_confidence_score(scored_session(2, 2, 2))

    assert score == 40
    assert recommendation_tier(score) == "Not Recommended"


@pytest.mark.parametrize(
    ("psychometric", "technical", "final"),
    [(None, None, None), (5, 5, None), (None, 5, 5), (5, None, 5)],
)
def test_confidence_score_requires_all_stages(psychometric, technical, final):
    assert compute_confidence_score(scored_session(psychometric, technical, final)) is None


def test_confidence_score_uses_custom_weights():
    weights = WeightConfiguration(psychometric=0, technical=0, final=100)

    assert compute_confidence_score(scored_session(1, 1, 4, weights)) == 80


def test_confidence_score_rounds_to_nearest_integer():
    # 80 * 0.33 + 60 * 0.33 + 100 * 0.34 = 80.2
    weights = WeightConfiguration(psychometric=33, technical=33, final=34)

    assert compute_confidence_score(scored_session(4, 3, 5, weights)) == 80


@pytest.mark.parametrize(
    ("value", "places", "expected"),
    [(2.5, 0, "3"), (60.5, 0, "61"), (3.125, 2, "3.13"), (4.2, 2, "4.20")],
)
def test_round_half_up(value: float, places: int, expected: str):
    assert round_half_up(value, places) == Decimal(expected)


def test_confidence_score_is_pure():
    session = scored_session(3, 4, 5)

    first = compute_confidence_score(session)
    second = compute_confidence_score(session)

    assert first == second
    assert session == scored_session(3, 4, 5)


@pytest.mark.parametrize(
    ("score", "tier"),
    [
        (100, "Highly Recommend"),
        (85, "Highly Recommend"),
        (84, "Recommend"),
        (70, "Recommend"),
        (69, "Borderline"),
        (55, "Borderline"),
        (54, "Not Recommended"),
        (0, "Not Recommended"),
    ],
)
def test_recommendation_tier_thresholds(score: int, tier: str):
    assert recommendation_tier(score) == tier
