"""Static interview rubrics."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..schemas import Criterion, StageKey


@dataclass(frozen=True, slots=True)
class StageRubric:
    """Ordered criteria evaluated during one interview stage."""

    key: StageKey
    title: str
    criteria: tuple[Criterion, ...]

    @property
    def criterion_ids(self) -> list[str]:
        return [criterion.id for criterion in self.criteria]


def _criteria(*pairs: tuple[str, str]) -> tuple[Criterion, ...]:
    return tuple(Criterion(id=criterion_id, label=label) for criterion_id, label in pairs)


RUBRICS: Mapping[StageKey, StageRubric] = MappingProxyType(
    {
        "psychometric": StageRubric(
            key="psychometric",
            title="Psychometric",
            criteria=_criteria(
                ("communication", "Communication Skills"),
                ("problemSolving", "Problem Solving"),
                ("teamwork", "Teamwork & Collaboration"),
                ("adaptability", "Adaptability"),
                ("motivation", "Motivation & Drive"),
            ),
        ),
        "technical": StageRubric(
            key="technical",
            title="Technical",
            criteria=_criteria(
                ("technicalKnowledge", "Technical Knowledge"),
                ("codingQuality", "Coding Quality"),
                ("systemDesign", "System Design"),
                ("bestPractices", "Best Practices"),
                ("toolsProficiency", "Tools Proficiency"),
            ),
        ),
        "final": StageRubric(
            key="final",
            title="Final",
            criteria=_criteria(
                ("cultureFit", "Culture Fit"),
                ("leadership", "Leadership Potential"),
                ("longTermVision", "Long-term Vision"),
                ("professionalism", "Professionalism"),
                ("overallImpression", "Overall Impression"),
            ),
        ),
    }
)


def get_rubric(stage: str) -> StageRubric:
    """Return the rubric for ``stage``; unknown keys raise ``KeyError``."""
    try:
        return RUBRICS[stage]  # type: ignore[index]
    except KeyError as exc:
        raise KeyError(f"Unknown stage: {stage!r}") from exc
