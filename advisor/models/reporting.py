"""Advisory report and outcome models."""

from dataclasses import dataclass

from advisor.models.evaluation import EvaluationResult


@dataclass(frozen=True)
class AdvisoryReport:
    postcode: str
    latitude: float
    longitude: float
    days_evaluated: int
    evaluation: EvaluationResult


@dataclass(frozen=True)
class AdvisoryOutcome:
    postcode: str
    report: AdvisoryReport | None = None
    error: str | None = None
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.report is not None and self.error is None
