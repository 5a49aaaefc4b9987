"""Pydantic models for API request bodies."""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from wellness_log.domain.estimation import MealEstimate

Slider = Annotated[float, Field(ge=1.0, le=10.0, multiple_of=0.5)]


class CheckInRequest(BaseModel):
    """Slider values for a daily check-in."""

    moods: dict[str, Slider]
    social: bool = False
    work_hours: float = Field(default=8.0, ge=0.0, le=24.0)
    sleep_hours: float = Field(default=7.5, ge=0.0, le=24.0)
    stress_level: Slider = 5.0
    energy_level: Slider = 5.0
    wheel: dict[str, Slider]
    notes: str = ""
    day: date | None = None


class EstimateRequest(BaseModel):
    """A meal photo (base64) or a free-text description, not both."""

    image_base64: str | None = None
    description: str | None = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def _one_source(self) -> "EstimateRequest":
        has_image = bool(self.image_base64)
        has_text = bool(self.description and self.description.strip())
        if has_image == has_text:
            raise ValueError("Provide exactly one of image_base64 or description")
        return self


class MealRequest(BaseModel):
    """An estimate the user accepted for logging."""

    estimate: MealEstimate
    day: date | None = None
    image: str | None = None
