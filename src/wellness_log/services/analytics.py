"""Analytics over the stored history."""

import logging
from dataclasses import dataclass

from wellness_log.domain.insights import InsightReport
from wellness_log.domain.records import History
from wellness_log.domain.scores import ScoreCard
from wellness_log.services.check_ins import CheckInRepository
from wellness_log.services.insights import compute_insights
from wellness_log.services.meals import MealLogRepository
from wellness_log.services.scores import compute_scores

_logger = logging.getLogger(__name__)


@dataclass
class AnalyticsService:
    """Loads a history snapshot and runs the pure analytics on it."""

    check_in_repository: CheckInRepository
    meal_log_repository: MealLogRepository

    def snapshot(self) -> History:
        """Read the full history from storage."""
        return History.of(
            check_ins=self.check_in_repository.list_check_ins(),
            meals=self.meal_log_repository.list_meal_logs(),
        )

    def scores(self) -> ScoreCard:
        card = compute_scores(self.snapshot())
        _logger.info(
            "Computed scores: aggregate=%s available=%s",
            card.aggregate.display,
            sum(score.available for score in card.categories().values()),
        )
        return card

    def insights(self) -> InsightReport:
        report = compute_insights(self.snapshot())
        _logger.info(
            "Computed insights: ready=%s check_ins=%s findings=%s",
            report.ready,
            report.check_in_count,
            len(report.findings),
        )
        return report
