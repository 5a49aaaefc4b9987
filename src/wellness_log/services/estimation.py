"""Nutrition estimation service using LLMs."""

import base64
from dataclasses import dataclass
from typing import Protocol

from wellness_log.domain.estimation import MealEstimate
from wellness_log.domain.records import NUTRIENT_FIELDS

_NUMBER = {"type": "number", "minimum": 0}

ESTIMATE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "meal_name": {"type": "string"},
        **{name: dict(_NUMBER) for name in NUTRIENT_FIELDS},
        "confidence_score": {"type": "integer", "minimum": 1, "maximum": 100},
        "quality_score": {"type": "number", "minimum": 1, "maximum": 10},
        "quality_label": {
            "type": "string",
            "enum": ["Excellent", "Good", "Average", "Poor"],
        },
        "main_ingredients": {"type": "array", "items": {"type": "string"}},
        "notes": {"type": "string"},
    },
    "required": [
        "meal_name",
        *NUTRIENT_FIELDS,
        "confidence_score",
        "quality_score",
        "quality_label",
        "main_ingredients",
        "notes",
    ],
    "additionalProperties": False,
}

_PHOTO_PROMPT = (
    "You are an expert nutritionist. Analyse this meal photo carefully, "
    "considering visible portion sizes. Estimate every nutrient, a confidence "
    "score (1-100), a quality score (1-10) with its label, the main "
    "ingredients, and one sentence about nutritional value and suggestions."
)

_TEXT_PROMPT = (
    "You are an expert nutritionist. The user ate: \"{description}\". "
    "Estimate the nutrition carefully based on typical portion sizes. Estimate "
    "every nutrient, a confidence score (1-100), a quality score (1-10) with "
    "its label, the main ingredients, and one sentence about nutritional value "
    "and suggestions."
)


class EstimationClient(Protocol):
    """Interface for LLM nutrition estimation."""

    async def estimate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema: dict[str, object],
        image_data_url: str | None = None,
    ) -> dict[str, object]:
        """Return structured estimation data."""


@dataclass
class EstimationService:
    """Service that prepares estimation prompts and validates results."""

    client: EstimationClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def estimate_photo(self, image_bytes: bytes) -> MealEstimate:
        """Estimate nutrition for a meal photo."""
        raw = await self.client.estimate(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            prompt=_PHOTO_PROMPT,
            schema=ESTIMATE_SCHEMA,
            image_data_url=_to_data_url(image_bytes),
        )
        return MealEstimate.model_validate(raw)

    async def estimate_text(self, description: str) -> MealEstimate:
        """Estimate nutrition for a free-text meal description."""
        cleaned = description.strip()
        if not cleaned:
            raise ValueError("Meal description is empty")
        raw = await self.client.estimate(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            prompt=_TEXT_PROMPT.format(description=cleaned),
            schema=ESTIMATE_SCHEMA,
        )
        return MealEstimate.model_validate(raw)


_IMAGE_SIGNATURES: tuple[tuple[int, bytes, str], ...] = (
    (0, b"\xff\xd8\xff", "image/jpeg"),
    (0, b"\x89PNG\r\n\x1a\n", "image/png"),
    (8, b"WEBP", "image/webp"),
)


def _to_data_url(image_bytes: bytes) -> str:
    """Encode a meal photo as a base64 data URL."""
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{_sniff_mime_type(image_bytes)};base64,{encoded}"


def _sniff_mime_type(image_bytes: bytes) -> str:
    """Match the photo against known image signatures; phones default to JPEG."""
    for offset, signature, mime_type in _IMAGE_SIGNATURES:
        if image_bytes[offset : offset + len(signature)] == signature:
            return mime_type
    return "image/jpeg"
