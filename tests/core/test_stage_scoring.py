from __future__ import annotations

from typing import Any

import pytest

from interviewscore.core import (
    StageValidationError,
    empty_record,
    get_rubric,
    parse_score,
    score_stage,
)
from interviewscore.schemas import FinalStageRecord, StageSubmission


def build_submission(stage: str, scores: list[Any], **extras: Any) -> StageSubmission:
    rubric = get_rubric(stage)
    criteria = {
        criterion.id: {"score": score, "comment": f"note {criterion.id}"}
        for criterion, score in zip(rubric.criteria, scores)
    }
    return StageSubmission(criteria=criteria, **extras)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (4, 4),
        ("5", 5),
        (" 2 ", 2),
        (3.0, 3),
        (3.5, 3),
        ("4.5", 4),
        ("4abc", 4),
        ("-2", -2),
        ("x4", None),
        (float("nan"), None),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
    ],
)
def test_parse_score(raw: Any, expected: int | None):
    assert parse_score(raw) == expected


def test_score_stage_computes_average_and_completes():
    record = score_stage("psychometric", build_submission("psychometric", [4, 4, 3, 5, 5]))

    assert record.completed is True
    assert record.average == pytest.approx(4.2)
    assert record.scores["problemSolving"] == 4
    assert record.comments["motivation"] == "note motivation"


def test_score_stage_rounds_average_to_two_places():
    record = score_stage("technical", build_submission("technical", [1, 2, 2, 2, 2]))

    assert record.average == pytest.approx(1.8)


def test_score_stage_defaults_missing_comments():
    rubric = get_rubric("technical")
    submission = StageSubmission(
        criteria={criterion.id: {"score": "3"} for criterion in rubric.criteria}
    )

    record = score_stage("technical", submission)

    assert set(record.comments.values()) == {""}
    assert record.average == pytest.approx(3.0)


@pytest.mark.parametrize("bad_score", [0, 6, "", None, "x"])
def test_score_stage_names_offending_criterion(bad_score: Any):
    submission = build_submission("psychometric", [5, 5, bad_score, 5, 5])

    with pytest.raises(StageValidationError) as excinfo:
        score_stage("psychometric", submission)

    assert excinfo.value.criterion_id == "teamwork"
    assert str(excinfo.value) == "Please provide a score (1-5) for Teamwork & Collaboration"


def test_score_stage_reports_first_invalid_in_rubric_order():
    submission = build_submission("technical", [5, 9, 5, 0, 5])

    with pytest.raises(StageValidationError) as excinfo:
        score_stage("technical", submission)

    assert excinfo.value.criterion_id == "codingQuality"


def test_score_stage_missing_criterion_fails():
    submission = build_submission("final", [5, 5, 5, 5])

    with pytest.raises(StageValidationError) as excinfo:
        score_stage("final", submission)

    assert excinfo.value.label == "Overall Impression"


def test_final_stage_copies_logistics():
    submission = build_submission(
        "final",
        [4, 4, 4, 4, 4],
        salary_range="80-90k",
        notice_period="2 weeks",
        final_comments="Strong hire",
    )

    record = score_stage("final", submission)

    assert isinstance(record, FinalStageRecord)
    assert record.salary_range == "80-90k"
    assert record.notice_period == "2 weeks"
    assert record.final_comments == "Strong hire"


def test_final_stage_logistics_default_to_empty():
    record = score_stage("final", build_submission("final", [3, 3, 3, 3, 3]))

    assert isinstance(record, FinalStageRecord)
    assert (record.salary_range, record.notice_period, record.final_comments) == ("", "", "")


def test_empty_record_is_incomplete():
    record = empty_record("technical")

    assert record.completed is False
    assert record.average is None
    assert record.scores == {}
    assert isinstance(empty_record("final"), FinalStageRecord)


def test_score_stage_reads_leading_integer_of_form_text():
    record = score_stage("psychometric", build_submission("psychometric", ["4.5", "4abc", 4, 4, " 4"]))

    assert set(record.scores.values()) == {4}
    assert record.average == pytest.approx(4.0)
