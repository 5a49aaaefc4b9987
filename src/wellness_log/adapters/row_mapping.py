"""Mapping between storage rows and domain records.

Schema version 1 is the ``mental_logs`` / ``food_logs`` layout: check-ins keep
period moods in ``moods`` and wheel scores in ``wol`` (with the short keys
``env`` and ``spirit``), meals keep one flat column per nutrient. Rows may
carry a ``schema_version`` column; rows without one are read as version 1 and
rows from any other version are rejected.
"""

from datetime import date, time

from wellness_log.domain.records import (
    MOOD_PERIODS,
    NUTRIENT_FIELDS,
    WHEEL_DIMENSIONS,
    CheckIn,
    MealLog,
    Nutrients,
)
from wellness_log.services.banding import classify_quality

ROW_SCHEMA_VERSION = 1

# Slider position used when a stored row predates a field.
DEFAULT_SLIDER = 5.0
DEFAULT_CONFIDENCE = 50

_WHEEL_COLUMN_KEYS = {"environment": "env", "spirituality": "spirit"}


def _wheel_key(dimension: str) -> str:
    return _WHEEL_COLUMN_KEYS.get(dimension, dimension)


def _parse_time(raw: object) -> time | None:
    if isinstance(raw, str) and raw:
        return time.fromisoformat(raw)
    return None


def _format_time(value: time | None) -> str | None:
    return value.strftime("%H:%M") if value else None


def _check_schema_version(row: dict[str, object]) -> None:
    version = row.get("schema_version") or ROW_SCHEMA_VERSION
    if int(version) != ROW_SCHEMA_VERSION:
        raise ValueError(f"Unsupported row schema version: {version}")


def check_in_to_row(entry: CheckIn) -> dict[str, object]:
    """Serialize a check-in for the ``mental_logs`` table."""
    return {
        "date": entry.date.isoformat(),
        "time": _format_time(entry.time),
        "moods": dict(entry.moods),
        "social": entry.social,
        "work_hours": entry.work_hours,
        "sleep_hours": entry.sleep_hours,
        "stress_level": entry.stress_level,
        "energy_level": entry.energy_level,
        "notes": entry.notes,
        "wol": {_wheel_key(dim): entry.wheel[dim] for dim in WHEEL_DIMENSIONS},
        "avg_mood": entry.avg_mood,
        "wol_avg": entry.wheel_avg,
    }


def check_in_from_row(row: dict[str, object]) -> CheckIn:
    """Rebuild a check-in, re-deriving its averages from the stored sliders."""
    _check_schema_version(row)
    moods = row.get("moods") or {}
    wol = row.get("wol") or {}
    return CheckIn.create(
        day=date.fromisoformat(str(row["date"])),
        moods={
            period: float(moods.get(period, DEFAULT_SLIDER)) for period in MOOD_PERIODS
        },
        social=bool(row.get("social", False)),
        work_hours=float(row.get("work_hours") or 0.0),
        sleep_hours=float(row.get("sleep_hours") or 0.0),
        stress_level=float(row.get("stress_level") or DEFAULT_SLIDER),
        energy_level=float(row.get("energy_level") or DEFAULT_SLIDER),
        wheel={
            dim: float(wol.get(_wheel_key(dim), DEFAULT_SLIDER))
            for dim in WHEEL_DIMENSIONS
        },
        notes=str(row.get("notes") or ""),
        saved_at=_parse_time(row.get("time")),
    )


def meal_log_to_row(entry: MealLog) -> dict[str, object]:
    """Serialize a meal log for the ``food_logs`` table."""
    row: dict[str, object] = {
        "date": entry.date.isoformat(),
        "time": _format_time(entry.time),
        "meal_name": entry.meal_name,
    }
    for name in NUTRIENT_FIELDS:
        row[name] = getattr(entry.nutrients, name)
    row.update(
        {
            "confidence_score": entry.confidence_score,
            "quality_score": entry.quality_score,
            "quality_label": str(entry.quality_label),
            "main_ingredients": list(entry.main_ingredients),
            "notes": entry.notes,
            "image": entry.source_image,
        }
    )
    return row


def meal_log_from_row(row: dict[str, object]) -> MealLog:
    """Rebuild a meal log; the label is re-derived from the quality score."""
    _check_schema_version(row)
    quality_score = float(row.get("quality_score") or DEFAULT_SLIDER)
    return MealLog(
        id=int(row["id"]) if row.get("id") is not None else None,
        date=date.fromisoformat(str(row["date"])),
        time=_parse_time(row.get("time")),
        meal_name=str(row.get("meal_name") or ""),
        quality_score=quality_score,
        quality_label=classify_quality(quality_score),
        confidence_score=int(row.get("confidence_score") or DEFAULT_CONFIDENCE),
        nutrients=Nutrients(
            **{name: float(row.get(name) or 0.0) for name in NUTRIENT_FIELDS}
        ),
        main_ingredients=tuple(str(item) for item in row.get("main_ingredients") or []),
        notes=str(row.get("notes") or ""),
        source_image=row.get("image") or None,
    )
