"""Score banding shared by labels and display colors."""

from dataclasses import dataclass

from wellness_log.domain.records import QualityLabel

GREEN = "#4ade80"
YELLOW = "#facc15"
ORANGE = "#fb923c"
RED = "#f87171"


@dataclass(frozen=True)
class Tier:
    """One band of a 1-10 score scale."""

    floor: float
    label: QualityLabel
    color: str
    background: str


# Ordered high to low; each floor is an inclusive lower bound.
QUALITY_TIERS = (
    Tier(8.0, QualityLabel.EXCELLENT, GREEN, "rgba(74,222,128,0.12)"),
    Tier(6.0, QualityLabel.GOOD, YELLOW, "rgba(250,204,21,0.12)"),
    Tier(4.0, QualityLabel.AVERAGE, ORANGE, "rgba(251,146,60,0.12)"),
)
POOR_TIER = Tier(float("-inf"), QualityLabel.POOR, RED, "rgba(248,113,113,0.12)")

CONFIDENCE_BANDS = ((80, GREEN), (60, YELLOW))
STRESS_BANDS = ((4.0, GREEN), (6.0, YELLOW))


def tier_for(score: float) -> Tier:
    """Return the band a 1-10 score falls into."""
    for tier in QUALITY_TIERS:
        if score >= tier.floor:
            return tier
    return POOR_TIER


def classify_quality(score: float) -> QualityLabel:
    """Return the quality label for a 1-10 quality score."""
    return tier_for(score).label


def score_color(score: float) -> str:
    """Return the display color for a 1-10 score."""
    return tier_for(score).color


def score_background(score: float) -> str:
    """Return the translucent badge background for a 1-10 score."""
    return tier_for(score).background


def confidence_color(confidence: int) -> str:
    """Return the display color for an estimator confidence percentage."""
    for floor, color in CONFIDENCE_BANDS:
        if confidence >= floor:
            return color
    return RED


def stress_color(stress_level: float) -> str:
    """Return the display color for a stress level, where lower is better."""
    for ceiling, color in STRESS_BANDS:
        if stress_level <= ceiling:
            return color
    return RED
