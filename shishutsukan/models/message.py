"""
API Response Envelope

Every mutating endpoint answers with ``{"message": ..., "error": ...}``.

CRITICAL: The server reports application-level failures (duplicate genre,
genre in use) with a 2xx status and a populated ``error``. The status code
alone does NOT tell you whether a mutation worked.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class APIMessage(BaseModel):
    """
    Generic response envelope.

    Neither field is guaranteed. When both are present, ``error`` wins.
    """
    model_config = ConfigDict(frozen=True)

    message: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """Whether the server flagged this response as a failure."""
        return self.error is not None
