"""Screen reachability rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Mapping

if TYPE_CHECKING:
    from .session import EvaluationSession

Screen = Literal["candidate", "psychometric", "technical", "final", "confidence", "weights"]

SCREENS: tuple[Screen, ...] = (
    "candidate",
    "psychometric",
    "technical",
    "final",
    "confidence",
    "weights",
)

NEXT_SCREEN: Mapping[str, Screen] = {
    "psychometric": "technical",
    "technical": "final",
    "final": "confidence",
}


def can_access(screen: str, session: "EvaluationSession") -> bool:
    """Return whether ``screen`` is reachable from the current session state.

    Interview stages open as soon as a candidate exists, in any order. The
    confidence screen depends on the final stage alone.
    """
    if screen in ("candidate", "weights"):
        return True
    if screen in ("psychometric", "technical", "final"):
        return session.candidate is not None
    if screen == "confidence":
        return session.stages.final.completed
    return False
