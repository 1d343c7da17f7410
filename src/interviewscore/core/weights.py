"""Persisted stage weight configuration."""

from __future__ import annotations

import json
from typing import Any, Mapping

import structlog
from pydantic import ValidationError

from ..adapters import KeyValueStore
from ..schemas import WeightConfiguration
from ..schemas.weights import WEIGHT_TOTAL
from .errors import WeightValidationError

WEIGHTS_KEY = "evaluatorWeights"


class WeightStore:
    """Holds the active weights and keeps them in sync with persistence."""

    def __init__(self, persistence: KeyValueStore, *, key: str = WEIGHTS_KEY) -> None:
        self._persistence = persistence
        self._key = key
        self._active = WeightConfiguration()
        self._logger = structlog.get_logger(__name__)

    @property
    def active(self) -> WeightConfiguration:
        return self._active

    def load(self) -> WeightConfiguration:
        """Read stored weights, falling back to defaults on any problem."""
        stored = self._persistence.get(self._key)
        if stored is None:
            self._active = WeightConfiguration()
            return self._active
        try:
            parsed = json.loads(stored)
            if not isinstance(parsed, dict):
                raise TypeError("stored weights must be a JSON object")
            # Missing fields must not be filled from the model defaults.
            self._active = self._validate(parsed)
        except (ValueError, TypeError) as exc:
            # json.JSONDecodeError and WeightValidationError are both ValueErrors.
            self._logger.debug("weights.load_fallback", key=self._key, error=str(exc))
            self._active = WeightConfiguration()
        else:
            self._logger.info("weights.loaded", **self._active.model_dump())
        return self._active

    def validate_and_set(
        self, candidate: WeightConfiguration | Mapping[str, Any]
    ) -> WeightConfiguration:
        """Replace and persist the active weights, or raise without changes."""
        if isinstance(candidate, WeightConfiguration):
            weights = candidate
        else:
            weights = self._validate(candidate)
        self._persistence.set(self._key, json.dumps(weights.model_dump()))
        self._active = weights
        self._logger.info("weights.saved", **weights.model_dump())
        return weights

    @staticmethod
    def _validate(raw: Mapping[str, Any]) -> WeightConfiguration:
        fields = ("psychometric", "technical", "final")
        try:
            return WeightConfiguration.model_validate({name: raw.get(name) for name in fields})
        except ValidationError as exc:
            if all(error["type"] == "value_error" for error in exc.errors()):
                raise WeightValidationError(f"Weights must total {WEIGHT_TOTAL}%") from exc
            raise WeightValidationError("Weights must be whole percentages") from exc
