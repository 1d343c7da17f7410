"""Exceptions raised by the evaluation core."""

from __future__ import annotations


class EvaluationError(Exception):
    """Base class for recoverable evaluation failures."""


class EvaluationValidationError(EvaluationError, ValueError):
    """Raised when operator input fails validation."""


class CandidateValidationError(EvaluationValidationError):
    """Raised when a candidate form has blank or unreadable fields."""

    def __init__(self, missing: list[str], message: str = "Please fill all required fields"):
        super().__init__(message)
        self.missing = missing


class StageValidationError(EvaluationValidationError):
    """Raised when a criterion score is missing or outside 1-5."""

    def __init__(self, criterion_id: str, label: str):
        super().__init__(f"Please provide a score (1-5) for {label}")
        self.criterion_id = criterion_id
        self.label = label


class WeightValidationError(EvaluationValidationError):
    """Raised when submitted stage weights are rejected."""


class NavigationBlocked(EvaluationError):
    """Raised when the navigation guard denies a screen change."""

    def __init__(self, screen: str):
        super().__init__("Please complete the previous stages first")
        self.screen = screen


__all__ = [
    "EvaluationError",
    "EvaluationValidationError",
    "CandidateValidationError",
    "StageValidationError",
    "WeightValidationError",
    "NavigationBlocked",
]
