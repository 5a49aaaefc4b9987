"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from wellness_log.adapters.openai_estimation_client import OpenAIEstimationClient
from wellness_log.adapters.supabase_check_in_repository import (
    SupabaseCheckInRepository,
)
from wellness_log.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from wellness_log.config import Settings
from wellness_log.services.analytics import AnalyticsService
from wellness_log.services.check_ins import CheckInService
from wellness_log.services.estimation import EstimationService
from wellness_log.services.meals import MealLogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    check_in_service: CheckInService
    meal_log_service: MealLogService
    estimation_service: EstimationService
    analytics_service: AnalyticsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    check_in_repository = SupabaseCheckInRepository(
        supabase_client, table=resolved_settings.check_in_table
    )
    meal_log_repository = SupabaseMealLogRepository(
        supabase_client, table=resolved_settings.meal_log_table
    )
    openai_client = OpenAIEstimationClient.create(resolved_settings.openai_api_key)
    estimation_service = EstimationService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )

    async def close_resources() -> None:
        await openai_client.client.close()

    return AppContainer(
        settings=resolved_settings,
        check_in_service=CheckInService(check_in_repository),
        meal_log_service=MealLogService(meal_log_repository),
        estimation_service=estimation_service,
        analytics_service=AnalyticsService(
            check_in_repository=check_in_repository,
            meal_log_repository=meal_log_repository,
        ),
        close_resources=close_resources,
    )
