"""Point-in-time wellness scores from the latest records."""

from wellness_log.domain.records import CheckIn, History
from wellness_log.domain.scores import Score, ScoreCard
from wellness_log.services.windows import (
    NUTRITION_WINDOW,
    latest_check_in,
    mean,
    recent_meals,
)

FULL_SLEEP_HOURS = 9.0
SOCIAL_DAY_SCORE = 85.0
SOLO_DAY_SCORE = 55.0
MIN_SCORES_FOR_AGGREGATE = 2


def fitness_score(latest: CheckIn | None) -> Score:
    if latest is None:
        return Score()
    return Score(latest.energy_level * 10)


def sleep_score(latest: CheckIn | None) -> Score:
    if latest is None:
        return Score()
    return Score(min(100.0, latest.sleep_hours / FULL_SLEEP_HOURS * 100))


def social_score(latest: CheckIn | None) -> Score:
    if latest is None:
        return Score()
    return Score(SOCIAL_DAY_SCORE if latest.social else SOLO_DAY_SCORE)


def nutrition_score(history: History) -> Score:
    """Mean quality of the most recent meals on a 0-100 scale."""
    meals = recent_meals(history.meals, limit=NUTRITION_WINDOW)
    return Score(mean([meal.quality_score * 10 for meal in meals]))


def aggregate_score(categories: list[Score]) -> Score:
    """Mean of the available category scores.

    Unavailable unless at least two categories have a value.
    """
    values = [score.value for score in categories if score.value is not None]
    if len(values) < MIN_SCORES_FOR_AGGREGATE:
        return Score()
    return Score(mean(values))


def compute_scores(history: History) -> ScoreCard:
    """Compute category scores and the aggregate wellness score."""
    latest = latest_check_in(history.check_ins)
    fitness = fitness_score(latest)
    sleep = sleep_score(latest)
    nutrition = nutrition_score(history)
    social = social_score(latest)
    return ScoreCard(
        fitness=fitness,
        sleep=sleep,
        nutrition=nutrition,
        social=social,
        aggregate=aggregate_score([fitness, sleep, nutrition, social]),
    )
