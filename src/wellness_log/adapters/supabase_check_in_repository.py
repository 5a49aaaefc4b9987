"""Supabase repository for check-ins."""

from dataclasses import dataclass

from supabase import Client

from wellness_log.adapters.row_mapping import check_in_from_row, check_in_to_row
from wellness_log.domain.records import CheckIn
from wellness_log.services.check_ins import CheckInRepository


@dataclass
class SupabaseCheckInRepository(CheckInRepository):
    """Supabase implementation for check-ins, one row per date."""

    client: Client
    table: str = "mental_logs"

    def upsert_check_in(self, entry: CheckIn) -> None:
        """Insert or replace the row for the entry's date."""
        self.client.table(self.table).upsert(
            check_in_to_row(entry), on_conflict="date"
        ).execute()

    def list_check_ins(self) -> list[CheckIn]:
        """Return all check-ins ordered by date."""
        response = (
            self.client.table(self.table)
            .select("*")
            .order("date", desc=False)
            .execute()
        )
        return [check_in_from_row(row) for row in response.data or []]
