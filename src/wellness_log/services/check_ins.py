"""Daily check-in service."""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Protocol

from wellness_log.domain.records import CheckIn
from wellness_log.services.windows import recent_check_ins


class CheckInRepository(Protocol):
    """Persistence interface for check-ins."""

    def upsert_check_in(self, entry: CheckIn) -> None:
        """Insert or replace the check-in for ``entry.date``."""

    def list_check_ins(self) -> list[CheckIn]:
        """Return every stored check-in in insertion order."""


@dataclass
class CheckInService:
    """Service that builds check-ins from slider values and stores them."""

    repository: CheckInRepository

    def save(  # noqa: PLR0913
        self,
        *,
        moods: dict[str, float],
        social: bool,
        work_hours: float,
        sleep_hours: float,
        stress_level: float,
        energy_level: float,
        wheel: dict[str, float],
        notes: str = "",
        day: date | None = None,
    ) -> CheckIn:
        """Derive averages, then upsert the check-in for the given day."""
        now = datetime.now()
        entry = CheckIn.create(
            day=day or now.date(),
            moods=moods,
            social=social,
            work_hours=work_hours,
            sleep_hours=sleep_hours,
            stress_level=stress_level,
            energy_level=energy_level,
            wheel=wheel,
            notes=notes,
            saved_at=time(now.hour, now.minute),
        )
        self.repository.upsert_check_in(entry)
        return entry

    def list_recent(self, limit: int | None = None) -> list[CheckIn]:
        """Return check-ins newest first."""
        return recent_check_ins(self.repository.list_check_ins(), limit=limit)
