"""Group comparisons of mood across check-in predicates."""

from wellness_log.domain.insights import FoodQualitySummary, MoodComparison
from wellness_log.domain.records import CheckIn, MealLog, round_half_up
from wellness_log.services.insight_rules import MoodComparisonRule
from wellness_log.services.windows import mean


def group_mood(group: list[CheckIn]) -> float | None:
    """Mean ``avg_mood`` of a group to one decimal, None when empty."""
    value = mean([entry.avg_mood for entry in group])
    return None if value is None else round_half_up(value)


def compare_mood(rule: MoodComparisonRule, window: list[CheckIn]) -> MoodComparison:
    """Partition the window with the rule's predicates and compare mean mood.

    The difference is taken between the rounded group means and rounded
    again. Eligibility requires ``rule.min_group_size`` entries in each group.
    """
    group_a = [entry for entry in window if rule.in_group_a(entry)]
    group_b = [entry for entry in window if rule.in_group_b(entry)]
    mean_a = group_mood(group_a)
    mean_b = group_mood(group_b)
    diff = None
    if mean_a is not None and mean_b is not None:
        diff = round_half_up(mean_a - mean_b)
    eligible = (
        len(group_a) >= rule.min_group_size and len(group_b) >= rule.min_group_size
    )
    return MoodComparison(
        key=rule.key,
        mean_a=mean_a,
        mean_b=mean_b,
        size_a=len(group_a),
        size_b=len(group_b),
        diff=diff,
        eligible=eligible,
    )


def summarize_food_quality(meals: list[MealLog]) -> FoodQualitySummary:
    """Mean meal quality to one decimal, None when there are no meals."""
    value = mean([meal.quality_score for meal in meals])
    return FoodQualitySummary(
        mean_quality=None if value is None else round_half_up(value),
        meal_count=len(meals),
    )
