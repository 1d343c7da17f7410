from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CandidateProfile(BaseModel):
    """Contact details captured on the candidate screen."""

    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)
    email: str = Field(min_length=1)
    phone: str = Field(min_length=1)

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
