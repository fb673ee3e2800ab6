"""
Exchange Models

Every HTTP exchange the client performs is described by one of these
and written to the structured log.

DESIGN DECISION: Exchange events are records, not control flow.
Failures are raised to the caller, never recorded here and swallowed.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class ExchangeEvent(BaseModel):
    """One request/response round trip."""

    request_id: UUID = Field(
        default_factory=uuid4,
        description="Unique identifier for this exchange"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the request was sent (UTC)"
    )
    method: str = Field(
        ...,
        description="HTTP method"
    )
    path: str = Field(
        ...,
        description="Resource path relative to the base URL (e.g. /expenses/3)"
    )
    status_code: Optional[int] = Field(
        default=None,
        description="HTTP status, None if the transport gave no usable response"
    )
    elapsed_ms: Optional[float] = Field(
        default=None,
        ge=0.0,
        description="Wall-clock duration of the exchange"
    )

    @property
    def succeeded(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code <= 299

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "request_id": str(self.request_id),
            "timestamp": self.timestamp.isoformat(),
            "method": self.method,
            "path": self.path,
            "status_code": self.status_code,
            "succeeded": self.succeeded,
            "elapsed_ms": round(self.elapsed_ms, 2) if self.elapsed_ms is not None else None,
        }
