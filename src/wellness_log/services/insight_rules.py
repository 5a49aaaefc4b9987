"""Predicate, threshold and phrasing table for mood insights.

Every cutoff is a fixed constant. Comparison verdicts use a strict ``>``
against the cutoff; food-quality bands use inclusive lower bounds.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from wellness_log.domain.insights import Direction
from wellness_log.domain.records import CheckIn
from wellness_log.services.banding import GREEN, RED, YELLOW

PURPLE = "#a78bfa"
INDIGO = "#a5b4fc"

MIN_GROUP_SIZE = 2
MIN_MEALS_FOR_SUMMARY = 1


class Signal(StrEnum):
    """Which number a comparison verdict is decided on."""

    DIFFERENCE = "difference"
    GROUP_A_MEAN = "group_a_mean"


@dataclass(frozen=True)
class Verdict:
    """Direction, color and phrasing for one side of a cutoff."""

    direction: Direction
    color: str
    template: str


@dataclass(frozen=True)
class MoodComparisonRule:
    """Splits check-ins into two groups and compares their mean mood.

    Templates may reference ``mean_a``, ``mean_b``, ``diff``, ``size_a`` and
    ``size_b``, each rendered with one decimal (sizes as integers).
    """

    key: str
    title: str
    icon: str
    in_group_a: Callable[[CheckIn], bool]
    in_group_b: Callable[[CheckIn], bool]
    signal: Signal
    cutoff: float
    above: Verdict
    otherwise: Verdict
    min_group_size: int = MIN_GROUP_SIZE


@dataclass(frozen=True)
class QualityBand:
    floor: float
    direction: Direction
    verdict: str


@dataclass(frozen=True)
class FoodQualityRule:
    """Summarizes mean meal quality; not a group comparison."""

    key: str
    title: str
    icon: str
    template: str
    bands: tuple[QualityBand, ...]
    fallback: QualityBand
    min_meals: int = MIN_MEALS_FOR_SUMMARY


LONG_WORK_HOURS = 9.0
SHORT_WORK_HOURS = 8.0
GOOD_SLEEP_HOURS = 7.5
POOR_SLEEP_HOURS = 6.5

_WORK_TEMPLATE = (
    "Short days (≤8h): mood {mean_a}. Long days (>9h): mood {mean_b}. "
    "Working long costs you {diff} mood points."
)
_SLEEP_TEMPLATE = "7.5h+ sleep: mood {mean_a} vs short sleep: {mean_b}. "

SOCIAL_RULE = MoodComparisonRule(
    key="social",
    title="Social Activity & Mood",
    icon="🤝",
    in_group_a=lambda entry: entry.social,
    in_group_b=lambda entry: not entry.social,
    signal=Signal.DIFFERENCE,
    cutoff=0.0,
    above=Verdict(
        direction=Direction.IMPROVES,
        color=GREEN,
        template=(
            "Social days: mood {mean_a} vs solo days: {mean_b} (+{diff} pts). "
            "Social connection is lifting your mood."
        ),
    ),
    otherwise=Verdict(
        direction=Direction.UNCLEAR,
        color=PURPLE,
        template=(
            "Solo days score slightly higher ({mean_b} vs {mean_a}). "
            "You may recharge best alone."
        ),
    ),
)

# Hours in (8, 9] belong to neither group.
WORK_RULE = MoodComparisonRule(
    key="work",
    title="Work Hours & Mood",
    icon="💼",
    in_group_a=lambda entry: entry.work_hours <= SHORT_WORK_HOURS,
    in_group_b=lambda entry: entry.work_hours > LONG_WORK_HOURS,
    signal=Signal.DIFFERENCE,
    cutoff=0.3,
    above=Verdict(direction=Direction.COSTS, color=RED, template=_WORK_TEMPLATE),
    otherwise=Verdict(
        direction=Direction.UNCLEAR, color=YELLOW, template=_WORK_TEMPLATE
    ),
)

# Sleep in (6.5, 7.5) belongs to neither group.
SLEEP_RULE = MoodComparisonRule(
    key="sleep",
    title="Sleep & Mood",
    icon="🌙",
    in_group_a=lambda entry: entry.sleep_hours >= GOOD_SLEEP_HOURS,
    in_group_b=lambda entry: entry.sleep_hours < POOR_SLEEP_HOURS,
    signal=Signal.GROUP_A_MEAN,
    cutoff=6.5,
    above=Verdict(
        direction=Direction.IMPROVES,
        color=INDIGO,
        template=_SLEEP_TEMPLATE + "Sleep is a clear mood booster for you.",
    ),
    otherwise=Verdict(
        direction=Direction.UNCLEAR,
        color=INDIGO,
        template=(
            _SLEEP_TEMPLATE
            + "Other factors may be driving your mood more than sleep."
        ),
    ),
)

FOOD_RULE = FoodQualityRule(
    key="food",
    title="Food Quality",
    icon="🥗",
    template="Average food quality: {mean}/10 across {count} meals. {verdict}",
    bands=(
        QualityBand(7.0, Direction.IMPROVES, "Strong foundation."),
        QualityBand(
            5.0,
            Direction.UNCLEAR,
            "Room to improve — better food days likely lift energy and mood.",
        ),
    ),
    fallback=QualityBand(
        float("-inf"), Direction.COSTS, "Food quality is a key area to focus on."
    ),
)

COMPARISON_RULES: tuple[MoodComparisonRule, ...] = (
    SOCIAL_RULE,
    WORK_RULE,
    SLEEP_RULE,
)
