"""Correlational insights over a history snapshot."""

from wellness_log.domain.insights import Finding, InsightReport
from wellness_log.domain.records import History
from wellness_log.services.correlations import (
    compare_mood,
    group_mood,
    summarize_food_quality,
)
from wellness_log.services.formatting import format_comparison, format_food_summary
from wellness_log.services.insight_rules import (
    COMPARISON_RULES,
    FOOD_RULE,
    FoodQualityRule,
    MoodComparisonRule,
)
from wellness_log.services.readiness import assess_readiness
from wellness_log.services.windows import (
    INSIGHT_WINDOW,
    recent_check_ins,
    recent_meals,
)


def compute_insights(
    history: History,
    rules: tuple[MoodComparisonRule, ...] = COMPARISON_RULES,
    food_rule: FoodQualityRule = FOOD_RULE,
) -> InsightReport:
    """Build the insights report for the most recent check-ins and meals.

    Findings come out in rule order followed by the food summary; any
    comparison without enough entries in both groups is left out.
    """
    window = recent_check_ins(history.check_ins, limit=INSIGHT_WINDOW)
    meals = recent_meals(history.meals, limit=INSIGHT_WINDOW)
    readiness = assess_readiness(len(window))
    if not readiness.ready:
        return InsightReport(
            ready=False,
            check_in_count=readiness.check_in_count,
            meal_count=len(meals),
            message=readiness.message,
        )

    findings: list[Finding] = []
    for rule in rules:
        comparison = compare_mood(rule, window)
        if comparison.eligible:
            findings.append(format_comparison(rule, comparison))

    if len(meals) >= food_rule.min_meals:
        summary = summarize_food_quality(meals)
        findings.append(format_food_summary(food_rule, summary))

    return InsightReport(
        ready=True,
        check_in_count=readiness.check_in_count,
        meal_count=len(meals),
        overall_mood=group_mood(window),
        advisory=readiness.advisory,
        findings=findings,
    )
