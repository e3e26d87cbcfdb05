"""Request state machine for one input surface.

    IDLE | SUCCEEDED | FAILED --begin--> IN_FLIGHT
    IN_FLIGHT --finish(ok)--> SUCCEEDED
    IN_FLIGHT --finish(error)--> FAILED

A begin while IN_FLIGHT is refused. A finish carrying a request id other
than the current one is ignored.
"""

import logging
import threading
from dataclasses import replace

from advisor.models.common import utc_now_iso
from advisor.models.reporting import AdvisoryOutcome
from advisor.models.request import RequestState, RequestStatus

logger = logging.getLogger(__name__)


class RequestTracker:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = RequestState(updated_at=utc_now_iso())
        self._next_id = 1

    @property
    def state(self) -> RequestState:
        with self._lock:
            return self._state

    def begin(self, postcode: str) -> int | None:
        """Move to IN_FLIGHT. Returns the new request id, or None if busy."""
        with self._lock:
            if self._state.busy:
                logger.info(
                    "Request %d still in flight, refusing %r",
                    self._state.request_id, postcode,
                )
                return None
            request_id = self._next_id
            self._next_id += 1
            self._state = RequestState(
                status=RequestStatus.IN_FLIGHT,
                request_id=request_id,
                postcode=postcode,
                updated_at=utc_now_iso(),
            )
            return request_id

    def finish(self, request_id: int, outcome: AdvisoryOutcome) -> bool:
        """Apply an outcome if it belongs to the current in-flight request."""
        with self._lock:
            if not self._state.busy or self._state.request_id != request_id:
                logger.info("Discarding outcome of stale request %d", request_id)
                return False
            if outcome.ok:
                self._state = replace(
                    self._state,
                    status=RequestStatus.SUCCEEDED,
                    report=outcome.report,
                    updated_at=utc_now_iso(),
                )
            else:
                self._state = replace(
                    self._state,
                    status=RequestStatus.FAILED,
                    error=outcome.error,
                    updated_at=utc_now_iso(),
                )
            return True
