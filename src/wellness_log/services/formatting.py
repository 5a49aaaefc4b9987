"""Turns comparison results into finding strings."""

from wellness_log.domain.insights import (
    Finding,
    FoodQualitySummary,
    MoodComparison,
)
from wellness_log.domain.scores import UNAVAILABLE
from wellness_log.services.banding import score_color
from wellness_log.services.insight_rules import (
    FoodQualityRule,
    MoodComparisonRule,
    QualityBand,
    Signal,
    Verdict,
)


def _one_decimal(value: float | None) -> str:
    return UNAVAILABLE if value is None else f"{value:.1f}"


def choose_verdict(rule: MoodComparisonRule, comparison: MoodComparison) -> Verdict:
    """Pick the verdict by comparing the rule's signal against its cutoff."""
    if rule.signal is Signal.DIFFERENCE:
        signal = comparison.diff
    else:
        signal = comparison.mean_a
    if signal is not None and signal > rule.cutoff:
        return rule.above
    return rule.otherwise


def format_comparison(
    rule: MoodComparisonRule, comparison: MoodComparison
) -> Finding:
    """Render an eligible mood comparison as a finding."""
    verdict = choose_verdict(rule, comparison)
    text = verdict.template.format(
        mean_a=_one_decimal(comparison.mean_a),
        mean_b=_one_decimal(comparison.mean_b),
        diff=_one_decimal(comparison.diff),
        size_a=comparison.size_a,
        size_b=comparison.size_b,
    )
    return Finding(
        key=rule.key,
        title=rule.title,
        icon=rule.icon,
        text=text,
        direction=verdict.direction,
        color=verdict.color,
    )


def choose_quality_band(rule: FoodQualityRule, mean_quality: float) -> QualityBand:
    for band in rule.bands:
        if mean_quality >= band.floor:
            return band
    return rule.fallback


def format_food_summary(
    rule: FoodQualityRule, summary: FoodQualitySummary
) -> Finding:
    """Render the food-quality summary; the color follows quality banding."""
    if summary.mean_quality is None:
        raise ValueError("Food summary needs at least one meal")
    band = choose_quality_band(rule, summary.mean_quality)
    text = rule.template.format(
        mean=_one_decimal(summary.mean_quality),
        count=summary.meal_count,
        verdict=band.verdict,
    )
    return Finding(
        key=rule.key,
        title=rule.title,
        icon=rule.icon,
        text=text,
        direction=band.direction,
        color=score_color(summary.mean_quality),
    )
