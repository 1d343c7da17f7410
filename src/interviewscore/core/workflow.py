"""Evaluation workflow orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import structlog
from pydantic import ValidationError

from ..adapters import Notifier
from ..schemas import CandidateProfile, StageSubmission, WeightConfiguration
from .errors import EvaluationValidationError, NavigationBlocked
from .navigation import NEXT_SCREEN, Screen
from .rubrics import get_rubric
from .session import (
    EvaluationSession,
    RecommendationTier,
    compute_confidence_score,
    recommendation_tier,
)
from .weights import WeightStore


@dataclass(slots=True)
class TransitionResult:
    """Outcome of one operator action."""

    accepted: bool
    screen: Screen
    message: str | None = None


class EvaluationWorkflow:
    """Applies operator actions to the session and reports every outcome.

    Rejected operator input never raises: it is reported through the
    notifier and the session keeps its last valid state. An unknown stage
    key is a caller error and raises ``KeyError``.
    """

    def __init__(
        self,
        *,
        weight_store: WeightStore,
        notifier: Notifier,
        session: EvaluationSession | None = None,
    ) -> None:
        self._weights = weight_store
        self._notifier = notifier
        self._session = session or EvaluationSession.start(weights=weight_store.load())
        self._logger = structlog.get_logger(__name__)

    @property
    def session(self) -> EvaluationSession:
        return self._session

    @property
    def current_screen(self) -> Screen:
        return self._session.current_screen

    def navigate_to(self, screen: Screen) -> TransitionResult:
        try:
            self._session = self._session.with_screen(screen)
        except NavigationBlocked as exc:
            self._logger.info(
                "navigation.blocked",
                screen=screen,
                current_screen=self._session.current_screen,
            )
            self._notifier.notify(str(exc), "warning")
            return self._result(False, str(exc))
        return self._result(True)

    def submit_candidate(
        self, form: CandidateProfile | Mapping[str, Any]
    ) -> TransitionResult:
        try:
            self._session = self._session.with_candidate(form)
        except EvaluationValidationError as exc:
            return self._reject("candidate.rejected", exc)
        self._logger.info("candidate.saved")
        self._notifier.notify("Candidate information saved successfully", "success")
        return self.navigate_to("psychometric")

    def submit_stage(
        self, stage: str, submission: StageSubmission | Mapping[str, Any]
    ) -> TransitionResult:
        rubric = get_rubric(stage)
        try:
            if not isinstance(submission, StageSubmission):
                submission = self._read_submission(submission)
            self._session = self._session.with_stage(rubric.key, submission)
        except EvaluationValidationError as exc:
            return self._reject("stage.rejected", exc, stage=rubric.key)
        except ValidationError as exc:
            self._logger.warning("stage.malformed_submission", stage=rubric.key, error=str(exc))
            return self._reject(
                "stage.rejected",
                EvaluationValidationError("Stage submission could not be read"),
                stage=rubric.key,
            )

        record = self._session.stages.get(rubric.key)
        self._logger.info("stage.submitted", stage=rubric.key, average=record.average)
        self._notifier.notify(f"{rubric.title} stage saved successfully", "success")
        return self.navigate_to(NEXT_SCREEN[rubric.key])

    def submit_weights(
        self, weights: WeightConfiguration | Mapping[str, Any]
    ) -> TransitionResult:
        try:
            active = self._weights.validate_and_set(weights)
        except EvaluationValidationError as exc:
            return self._reject("weights.rejected", exc)
        self._session = self._session.with_weights(active)
        self._notifier.notify("Weights updated successfully", "success")
        return self.navigate_to("candidate")

    def cancel_weights(self) -> TransitionResult:
        return self.navigate_to("candidate")

    def confidence_score(self) -> int | None:
        return compute_confidence_score(self._session)

    def recommendation(self) -> RecommendationTier | None:
        score = self.confidence_score()
        if score is None:
            return None
        return recommendation_tier(score)

    @staticmethod
    def _read_submission(payload: Mapping[str, Any]) -> StageSubmission:
        if StageSubmission.is_flat_form(payload):
            return StageSubmission.from_form(payload)
        return StageSubmission.model_validate(payload)

    def _reject(self, event: str, exc: Exception, **context: Any) -> TransitionResult:
        self._logger.info(event, reason=str(exc), **context)
        self._notifier.notify(str(exc), "danger")
        return self._result(False, str(exc))

    def _result(self, accepted: bool, message: str | None = None) -> TransitionResult:
        return TransitionResult(
            accepted=accepted,
            screen=self._session.current_screen,
            message=message,
        )
