"""Request lifecycle state for a single input surface."""

from dataclasses import dataclass
from enum import StrEnum

from advisor.models.reporting import AdvisoryReport


class RequestStatus(StrEnum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestState:
    status: RequestStatus = RequestStatus.IDLE
    request_id: int = 0
    postcode: str = ""
    report: AdvisoryReport | None = None
    error: str | None = None
    updated_at: str = ""

    @property
    def busy(self) -> bool:
        return self.status == RequestStatus.IN_FLIGHT
