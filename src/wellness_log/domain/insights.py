"""Domain models for correlational insights."""

from dataclasses import dataclass, field
from enum import StrEnum


class Direction(StrEnum):
    """Qualitative direction of a finding."""

    IMPROVES = "improves"
    COSTS = "costs"
    UNCLEAR = "unclear"


@dataclass(frozen=True)
class MoodComparison:
    """Mean mood of two check-in groups split by a predicate."""

    key: str
    mean_a: float | None
    mean_b: float | None
    size_a: int
    size_b: int
    diff: float | None
    eligible: bool


@dataclass(frozen=True)
class FoodQualitySummary:
    """Mean meal quality over the recent window."""

    mean_quality: float | None
    meal_count: int


@dataclass(frozen=True)
class Finding:
    """Human-readable insight with a direction and a display color."""

    key: str
    title: str
    icon: str
    text: str
    direction: Direction
    color: str


@dataclass(frozen=True)
class Readiness:
    """Whether enough check-ins exist to show insights."""

    ready: bool
    check_in_count: int
    remaining_for_reliability: int
    message: str | None = None
    advisory: str | None = None


@dataclass(frozen=True)
class InsightReport:
    """Insights page payload."""

    ready: bool
    check_in_count: int
    meal_count: int
    overall_mood: float | None = None
    message: str | None = None
    advisory: str | None = None
    findings: list[Finding] = field(default_factory=list)
