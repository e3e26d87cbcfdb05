"""Sowing evaluation models."""

from dataclasses import dataclass
from enum import StrEnum


class Recommendation(StrEnum):
    GO = "GO"
    NO_GO = "NO_GO"


class Rating(StrEnum):
    POOR = "POOR"
    MARGINAL = "MARGINAL"
    GOOD = "GOOD"
    EXCELLENT = "EXCELLENT"

    @property
    def rank(self) -> int:
        """Position on the ladder, POOR lowest."""
        return list(Rating).index(self)


@dataclass(frozen=True)
class EvaluationResult:
    days_above_threshold: int
    frost_days: int
    recommendation: Recommendation
    rating: Rating
