"""Domain models for check-ins and meal logs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import date, time
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from types import MappingProxyType

MOOD_PERIODS = ("Morning", "Afternoon", "Evening")

WHEEL_DIMENSIONS = (
    "health",
    "career",
    "money",
    "fun",
    "environment",
    "community",
    "family",
    "love",
    "growth",
    "spirituality",
)


class QualityLabel(StrEnum):
    """Overall nutritional quality label for a meal."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    POOR = "Poor"


def round_half_up(value: float, places: int = 1) -> float:
    """Round away from zero on ties, the way stored averages are rounded."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class CheckIn:
    """One day's mood and lifestyle self-report.

    ``avg_mood`` and ``wheel_avg`` are derived from the period moods and wheel
    scores on construction and cannot be passed in. The sources are kept as
    read-only mappings so the averages always match them.
    """

    date: date
    moods: Mapping[str, float] = field(hash=False)
    social: bool
    work_hours: float
    sleep_hours: float
    stress_level: float
    energy_level: float
    wheel: Mapping[str, float] = field(hash=False)
    notes: str = ""
    time: time | None = None
    avg_mood: float = field(init=False)
    wheel_avg: float = field(init=False)

    def __post_init__(self) -> None:
        missing_periods = [p for p in MOOD_PERIODS if p not in self.moods]
        if missing_periods:
            raise ValueError(f"Missing mood periods: {', '.join(missing_periods)}")
        missing_dims = [dim for dim in WHEEL_DIMENSIONS if dim not in self.wheel]
        if missing_dims:
            raise ValueError(f"Missing wheel dimensions: {', '.join(missing_dims)}")

        moods = {period: float(self.moods[period]) for period in MOOD_PERIODS}
        wheel = {dim: float(self.wheel[dim]) for dim in WHEEL_DIMENSIONS}
        object.__setattr__(self, "moods", MappingProxyType(moods))
        object.__setattr__(self, "wheel", MappingProxyType(wheel))
        object.__setattr__(
            self, "avg_mood", round_half_up(sum(moods.values()) / len(MOOD_PERIODS))
        )
        object.__setattr__(
            self,
            "wheel_avg",
            round_half_up(sum(wheel.values()) / len(WHEEL_DIMENSIONS)),
        )

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        *,
        day: date,
        moods: Mapping[str, float],
        social: bool,
        work_hours: float,
        sleep_hours: float,
        stress_level: float,
        energy_level: float,
        wheel: Mapping[str, float],
        notes: str = "",
        saved_at: time | None = None,
    ) -> CheckIn:
        """Create the check-in for ``day``, saved at ``saved_at``."""
        return cls(
            date=day,
            moods=moods,
            social=social,
            work_hours=work_hours,
            sleep_hours=sleep_hours,
            stress_level=stress_level,
            energy_level=energy_level,
            wheel=wheel,
            notes=notes,
            time=saved_at,
        )


@dataclass(frozen=True)
class Nutrients:
    """Estimated nutrient quantities for a meal; units are in the field suffix."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fibre_g: float = 0.0
    sugar_g: float = 0.0
    saturated_fat_g: float = 0.0
    trans_fat_g: float = 0.0
    cholesterol_mg: float = 0.0
    sodium_mg: float = 0.0
    potassium_mg: float = 0.0
    calcium_mg: float = 0.0
    iron_mg: float = 0.0
    magnesium_mg: float = 0.0
    phosphorus_mg: float = 0.0
    zinc_mg: float = 0.0
    vitamin_a_ug: float = 0.0
    vitamin_c_mg: float = 0.0
    vitamin_d_ug: float = 0.0
    vitamin_e_mg: float = 0.0
    vitamin_k_ug: float = 0.0
    vitamin_b12_ug: float = 0.0
    vitamin_b6_mg: float = 0.0
    folate_ug: float = 0.0


NUTRIENT_FIELDS = tuple(item.name for item in fields(Nutrients))


@dataclass(frozen=True)
class MealLog:
    """One accepted nutrition estimate for a single eating event."""

    date: date
    meal_name: str
    quality_score: float
    quality_label: QualityLabel
    confidence_score: int = 50
    nutrients: Nutrients = field(default_factory=Nutrients)
    main_ingredients: tuple[str, ...] = ()
    notes: str = ""
    time: time | None = None
    source_image: str | None = None
    id: int | None = None


@dataclass(frozen=True)
class History:
    """Immutable snapshot of a user's full log history in insertion order."""

    check_ins: tuple[CheckIn, ...] = ()
    meals: tuple[MealLog, ...] = ()

    @classmethod
    def of(
        cls,
        check_ins: list[CheckIn] | tuple[CheckIn, ...] = (),
        meals: list[MealLog] | tuple[MealLog, ...] = (),
    ) -> History:
        """Snapshot the given record lists."""
        return cls(check_ins=tuple(check_ins), meals=tuple(meals))
