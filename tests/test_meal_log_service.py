"""Tests for the meal log service."""

import logging
from datetime import date

from wellness_log.domain.estimation import MealEstimate
from wellness_log.domain.records import QualityLabel
from wellness_log.services.meals import MealLogService
from tests.conftest import (
    InMemoryMealLogRepository,
    estimate_payload,
    make_meal,
)


def test_accept_stores_estimate_with_id() -> None:
    repository = InMemoryMealLogRepository()
    service = MealLogService(repository)
    estimate = MealEstimate.model_validate(estimate_payload())

    meal = service.accept(estimate, day=date(2024, 2, 1), source_image="data:x")

    assert meal.id == 1
    assert meal.date == date(2024, 2, 1)
    assert meal.quality_label is QualityLabel.EXCELLENT
    assert meal.nutrients.protein_g == 35
    assert meal.main_ingredients == ("chicken", "lettuce", "olive oil")
    assert meal.source_image == "data:x"
    assert repository.meals == [meal]


def test_accept_rederives_mismatched_label(monkeypatch, caplog) -> None:
    monkeypatch.setattr(logging.getLogger("wellness_log"), "propagate", True)
    service = MealLogService(InMemoryMealLogRepository())
    estimate = MealEstimate.model_validate(
        estimate_payload(quality_score=5.0, quality_label="Excellent")
    )

    with caplog.at_level(logging.WARNING, logger="wellness_log.services.meals"):
        meal = service.accept(estimate)

    assert meal.quality_label is QualityLabel.AVERAGE
    assert meal.date == date.today()
    assert "disagrees" in caplog.text


def test_list_recent_orders_ties_by_insertion() -> None:
    repository = InMemoryMealLogRepository()
    repository.append_meal_log(make_meal("2024-02-01", 5.0, "breakfast"))
    repository.append_meal_log(make_meal("2024-02-02", 6.0, "lunch"))
    repository.append_meal_log(make_meal("2024-02-02", 7.0, "dinner"))
    service = MealLogService(repository)

    recent = service.list_recent()

    assert [meal.meal_name for meal in recent] == ["dinner", "lunch", "breakfast"]
    assert [meal.id for meal in recent] == [3, 2, 1]
