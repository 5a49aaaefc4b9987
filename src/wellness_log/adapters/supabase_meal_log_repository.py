"""Supabase repository for meal logs."""

from dataclasses import dataclass, replace

from supabase import Client

from wellness_log.adapters.row_mapping import meal_log_from_row, meal_log_to_row
from wellness_log.domain.records import MealLog
from wellness_log.services.meals import MealLogRepository


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for append-only meal logs."""

    client: Client
    table: str = "food_logs"

    def append_meal_log(self, entry: MealLog) -> MealLog:
        """Insert a meal log row and return the entry with its id."""
        response = (
            self.client.table(self.table).insert(meal_log_to_row(entry)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return replace(entry, id=int(response.data[0]["id"]))

    def list_meal_logs(self) -> list[MealLog]:
        """Return all meal logs in insertion order."""
        response = (
            self.client.table(self.table)
            .select("*")
            .order("id", desc=False)
            .execute()
        )
        return [meal_log_from_row(row) for row in response.data or []]
