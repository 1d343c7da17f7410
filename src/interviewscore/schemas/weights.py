"""Stage weighting schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

WEIGHT_TOTAL = 100


class WeightConfiguration(BaseModel):
    """Per-stage percentage weights; the three values always total 100."""

    psychometric: int = 20
    technical: int = 40
    final: int = 40

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="after")
    def _check_total(self) -> "WeightConfiguration":
        if self.total != WEIGHT_TOTAL:
            raise ValueError("Weights must total 100%")
        return self

    @property
    def total(self) -> int:
        return self.psychometric + self.technical + self.final

    def for_stage(self, stage: str) -> int:
        return getattr(self, stage)


DEFAULT_WEIGHTS = WeightConfiguration()
