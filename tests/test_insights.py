"""Tests for the insights report."""

from datetime import timedelta

from wellness_log.domain.insights import Direction
from wellness_log.domain.records import History
from wellness_log.services.insights import compute_insights
from tests.conftest import START, make_check_in, make_check_ins, make_meal


def _contrasting_week() -> list:
    """Good days are social, short and well slept; bad days are the opposite."""
    good = dict(social=True, work_hours=7.0, sleep_hours=8.0)
    bad = dict(social=False, work_hours=10.0, sleep_hours=6.0)
    return [
        make_check_in("2024-01-01", 8.0, **good),
        make_check_in("2024-01-02", 5.0, **bad),
        make_check_in("2024-01-03", 8.0, **good),
        make_check_in("2024-01-04", 5.0, **bad),
    ]


def test_not_ready_with_two_check_ins() -> None:
    history = History.of(
        check_ins=make_check_ins([6.0, 7.0]), meals=[make_meal(START, 8)]
    )

    report = compute_insights(history)

    assert not report.ready
    assert report.check_in_count == 2
    assert report.meal_count == 1
    assert report.findings == []
    assert report.message is not None


def test_findings_follow_rule_order_with_food_last() -> None:
    history = History.of(check_ins=_contrasting_week(), meals=[make_meal(START, 8)])

    report = compute_insights(history)

    assert report.ready
    assert [finding.key for finding in report.findings] == [
        "social",
        "work",
        "sleep",
        "food",
    ]
    assert [finding.direction for finding in report.findings] == [
        Direction.IMPROVES,
        Direction.COSTS,
        Direction.IMPROVES,
        Direction.IMPROVES,
    ]
    assert report.overall_mood == 6.5
    assert report.advisory == (
        "Keep going. 3 more check-ins until your insights become reliable."
    )


def test_food_summary_omitted_without_meals() -> None:
    report = compute_insights(History.of(check_ins=_contrasting_week()))

    assert "food" not in [finding.key for finding in report.findings]
    assert report.meal_count == 0


def test_ineligible_comparisons_are_left_out() -> None:
    check_ins = [
        make_check_in("2024-01-01", 9.0, social=True),
        make_check_in("2024-01-02", 5.0),
        make_check_in("2024-01-03", 5.0),
        make_check_in("2024-01-04", 5.0),
    ]

    report = compute_insights(History.of(check_ins=check_ins))

    assert report.ready
    assert report.findings == []


def test_window_keeps_thirty_most_recent_check_ins() -> None:
    history = History.of(check_ins=make_check_ins([1.0] * 5 + [7.0] * 30))

    report = compute_insights(history)

    assert report.check_in_count == 30
    assert report.overall_mood == 7.0
    assert report.advisory is None


def test_duplicate_dates_keep_the_last_entry() -> None:
    check_ins = [
        make_check_in("2024-01-01", 2.0),
        make_check_in("2024-01-02", 6.0),
        make_check_in("2024-01-03", 6.0),
        make_check_in("2024-01-01", 6.0),
    ]

    report = compute_insights(History.of(check_ins=check_ins))

    assert report.check_in_count == 3
    assert report.overall_mood == 6.0


def test_meal_window_counts_recent_meals() -> None:
    meals = [make_meal(START + timedelta(days=day), 6.0) for day in range(35)]

    report = compute_insights(
        History.of(check_ins=_contrasting_week(), meals=meals)
    )

    assert report.meal_count == 30
    assert report.findings[-1].text.startswith(
        "Average food quality: 6.0/10 across 30 meals."
    )
