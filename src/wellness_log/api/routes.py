"""Wellness log API endpoints with simple token auth."""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from wellness_log.api.schemas import CheckInRequest, EstimateRequest, MealRequest
from wellness_log.domain.records import CheckIn, MealLog
from wellness_log.domain.scores import Score
from wellness_log.services.banding import (
    confidence_color,
    score_background,
    score_color,
    stress_color,
)

if TYPE_CHECKING:
    from wellness_log.containers import AppContainer
    from wellness_log.domain.estimation import MealEstimate
    from wellness_log.domain.insights import InsightReport

logger = logging.getLogger(__name__)


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


router = APIRouter(dependencies=[Depends(require_token)])


@router.get("/scores")
async def scores(request: Request) -> dict[str, object]:
    """Return the category scores and the aggregate wellness score."""
    container: AppContainer = request.app.state.container
    card = container.analytics_service.scores()
    payload = {
        name: _score_payload(score) for name, score in card.categories().items()
    }
    payload["aggregate"] = _score_payload(card.aggregate)
    return payload


@router.get("/insights")
async def insights(request: Request) -> dict[str, object]:
    """Return correlational insights, or a not-ready status."""
    container: AppContainer = request.app.state.container
    return _insight_payload(container.analytics_service.insights())


@router.get("/check-ins")
async def list_check_ins(request: Request, limit: int = 30) -> dict[str, object]:
    """Return recent check-ins, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.check_in_service.list_recent(limit)
    return {"check_ins": [_check_in_payload(entry) for entry in entries]}


@router.post("/check-ins", status_code=status.HTTP_201_CREATED)
async def save_check_in(body: CheckInRequest, request: Request) -> dict[str, object]:
    """Save today's check-in, replacing any earlier one for the same day."""
    container: AppContainer = request.app.state.container
    try:
        entry = container.check_in_service.save(
            moods=body.moods,
            social=body.social,
            work_hours=body.work_hours,
            sleep_hours=body.sleep_hours,
            stress_level=body.stress_level,
            energy_level=body.energy_level,
            wheel=body.wheel,
            notes=body.notes,
            day=body.day,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _check_in_payload(entry)


@router.get("/meals")
async def list_meals(request: Request, limit: int = 30) -> dict[str, object]:
    """Return recent meal logs, newest first."""
    container: AppContainer = request.app.state.container
    meals = container.meal_log_service.list_recent(limit)
    return {"meals": [_meal_payload(meal) for meal in meals]}


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def save_meal(body: MealRequest, request: Request) -> dict[str, object]:
    """Log an accepted estimate."""
    container: AppContainer = request.app.state.container
    meal = container.meal_log_service.accept(
        body.estimate, day=body.day, source_image=body.image
    )
    return _meal_payload(meal)


@router.post("/meals/estimate")
async def estimate_meal(body: EstimateRequest, request: Request) -> dict[str, object]:
    """Estimate nutrition for a photo or a description without logging it."""
    container: AppContainer = request.app.state.container
    image_bytes = None
    if body.image_base64:
        try:
            image_bytes = base64.b64decode(body.image_base64, validate=True)
        except binascii.Error as exc:
            raise HTTPException(
                status_code=422,
                detail="image_base64 is not valid base64",
            ) from exc
    try:
        if image_bytes is not None:
            estimate = await container.estimation_service.estimate_photo(image_bytes)
        else:
            estimate = await container.estimation_service.estimate_text(
                body.description or ""
            )
    except Exception as exc:
        logger.exception("Nutrition estimation failed")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Analysis failed. Try a clearer photo or try again.",
        ) from exc
    return _estimate_payload(estimate)


def _score_payload(score: Score) -> dict[str, object]:
    return {
        "available": score.available,
        "value": score.value,
        "display": score.display,
    }


def _insight_payload(report: InsightReport) -> dict[str, object]:
    return {
        "ready": report.ready,
        "check_in_count": report.check_in_count,
        "meal_count": report.meal_count,
        "overall_mood": report.overall_mood,
        "message": report.message,
        "advisory": report.advisory,
        "findings": [asdict(finding) for finding in report.findings],
    }


def _check_in_payload(entry: CheckIn) -> dict[str, object]:
    return {
        "date": entry.date.isoformat(),
        "time": entry.time.strftime("%H:%M") if entry.time else None,
        "moods": dict(entry.moods),
        "social": entry.social,
        "work_hours": entry.work_hours,
        "sleep_hours": entry.sleep_hours,
        "stress_level": entry.stress_level,
        "stress_color": stress_color(entry.stress_level),
        "energy_level": entry.energy_level,
        "wheel": dict(entry.wheel),
        "avg_mood": entry.avg_mood,
        "avg_mood_color": score_color(entry.avg_mood),
        "wheel_avg": entry.wheel_avg,
        "notes": entry.notes,
    }


def _meal_payload(meal: MealLog) -> dict[str, object]:
    return {
        "id": meal.id,
        "date": meal.date.isoformat(),
        "time": meal.time.strftime("%H:%M") if meal.time else None,
        "meal_name": meal.meal_name,
        "nutrients": asdict(meal.nutrients),
        "confidence_score": meal.confidence_score,
        "confidence_color": confidence_color(meal.confidence_score),
        "quality_score": meal.quality_score,
        "quality_label": str(meal.quality_label),
        "quality_color": score_color(meal.quality_score),
        "quality_background": score_background(meal.quality_score),
        "main_ingredients": list(meal.main_ingredients),
        "notes": meal.notes,
        "image": meal.source_image,
    }


def _estimate_payload(estimate: MealEstimate) -> dict[str, object]:
    payload = estimate.model_dump()
    payload["confidence_color"] = confidence_color(estimate.confidence_score)
    payload["quality_color"] = score_color(estimate.quality_score)
    payload["quality_background"] = score_background(estimate.quality_score)
    return payload
