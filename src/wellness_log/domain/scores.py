"""Domain models for wellness scores."""

from dataclasses import dataclass

from wellness_log.domain.records import round_half_up

UNAVAILABLE = "—"


@dataclass(frozen=True)
class Score:
    """A 0-100 score, or unavailable when there is no evidence for it."""

    value: float | None = None

    @property
    def available(self) -> bool:
        return self.value is not None

    @property
    def display(self) -> str:
        """Two-decimal rendering with ties rounded up, or a dash when unavailable."""
        if self.value is None:
            return UNAVAILABLE
        return f"{round_half_up(self.value, 2):.2f}"


@dataclass(frozen=True)
class ScoreCard:
    """Category scores plus the aggregate wellness score."""

    fitness: Score
    sleep: Score
    nutrition: Score
    social: Score
    aggregate: Score

    def categories(self) -> dict[str, Score]:
        """Return the four category scores keyed by name."""
        return {
            "fitness": self.fitness,
            "sleep": self.sleep,
            "nutrition": self.nutrition,
            "social": self.social,
        }
