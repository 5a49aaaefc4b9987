"""Ordering and windowing over a history snapshot."""

from collections.abc import Iterable
from datetime import date

from wellness_log.domain.records import CheckIn, MealLog

INSIGHT_WINDOW = 30
NUTRITION_WINDOW = 7


def recent_check_ins(
    check_ins: Iterable[CheckIn], limit: int | None = None
) -> list[CheckIn]:
    """Return check-ins newest first, one per date.

    A later entry for the same date replaces an earlier one, as the storage
    upsert does.
    """
    by_date: dict[date, CheckIn] = {}
    for entry in check_ins:
        by_date[entry.date] = entry
    ordered = sorted(by_date.values(), key=lambda entry: entry.date, reverse=True)
    return ordered if limit is None else ordered[:limit]


def latest_check_in(check_ins: Iterable[CheckIn]) -> CheckIn | None:
    """Return the check-in with the most recent date."""
    recent = recent_check_ins(check_ins, limit=1)
    return recent[0] if recent else None


def recent_meals(meals: Iterable[MealLog], limit: int | None = None) -> list[MealLog]:
    """Return meals by date descending, later insertions first on ties."""
    positioned = sorted(
        enumerate(meals),
        key=lambda pair: (pair[1].date, pair[0]),
        reverse=True,
    )
    ordered = [meal for _, meal in positioned]
    return ordered if limit is None else ordered[:limit]


def mean(values: list[float]) -> float | None:
    """Arithmetic mean, or None for an empty list."""
    if not values:
        return None
    return sum(values) / len(values)
