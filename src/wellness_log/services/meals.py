"""Meal logging service."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Protocol

from wellness_log.domain.estimation import MealEstimate
from wellness_log.domain.records import MealLog
from wellness_log.services.banding import classify_quality
from wellness_log.services.windows import recent_meals

_logger = logging.getLogger(__name__)


class MealLogRepository(Protocol):
    """Persistence interface for meal logs."""

    def append_meal_log(self, entry: MealLog) -> MealLog:
        """Store a new meal log and return it with its storage id."""

    def list_meal_logs(self) -> list[MealLog]:
        """Return every stored meal log in insertion order."""


@dataclass
class MealLogService:
    """Service that turns accepted estimates into meal logs."""

    repository: MealLogRepository

    def accept(
        self,
        estimate: MealEstimate,
        day: date | None = None,
        source_image: str | None = None,
    ) -> MealLog:
        """Persist an estimate, with its label re-derived from the score."""
        label = classify_quality(estimate.quality_score)
        if label != estimate.quality_label:
            _logger.warning(
                "Quality label %s disagrees with score %s; using %s",
                estimate.quality_label,
                estimate.quality_score,
                label,
            )
        now = datetime.now()
        entry = MealLog(
            date=day or now.date(),
            time=time(now.hour, now.minute),
            meal_name=estimate.meal_name,
            quality_score=estimate.quality_score,
            quality_label=label,
            confidence_score=estimate.confidence_score,
            nutrients=estimate.nutrients(),
            main_ingredients=tuple(estimate.main_ingredients),
            notes=estimate.notes,
            source_image=source_image,
        )
        return self.repository.append_meal_log(entry)

    def list_recent(self, limit: int | None = None) -> list[MealLog]:
        """Return meal logs newest first."""
        return recent_meals(self.repository.list_meal_logs(), limit=limit)
