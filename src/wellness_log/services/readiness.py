"""Minimum-history gate for showing insights."""

from wellness_log.domain.insights import Readiness

MIN_CHECK_INS = 3
RELIABLE_CHECK_INS = 7

NOT_READY_MESSAGE = (
    "Not enough data yet. Complete at least 3 daily check-ins to see your "
    "first personal insights."
)


def assess_readiness(check_in_count: int) -> Readiness:
    """Gate insights on the number of check-ins in the analysis window.

    Below ``MIN_CHECK_INS`` insights are withheld. Below
    ``RELIABLE_CHECK_INS`` they are shown with an advisory naming how many
    more check-ins are needed.
    """
    remaining = max(RELIABLE_CHECK_INS - check_in_count, 0)
    if check_in_count < MIN_CHECK_INS:
        return Readiness(
            ready=False,
            check_in_count=check_in_count,
            remaining_for_reliability=remaining,
            message=NOT_READY_MESSAGE,
        )
    advisory = None
    if remaining:
        advisory = (
            f"Keep going. {remaining} more check-ins until your insights "
            "become reliable."
        )
    return Readiness(
        ready=True,
        check_in_count=check_in_count,
        remaining_for_reliability=remaining,
        advisory=advisory,
    )
