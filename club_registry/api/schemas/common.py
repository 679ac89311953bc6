# This file defines shared schema pieces reused by multiple API endpoints.
# It exists so acknowledgement and error payloads stay consistent across resources.

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(MessageResponse):
    id: int


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Any | None = None
    request_id: str
    timestamp: datetime


def coerce_text(value: Any) -> Any:
    """Accept bare numbers for free-text fields such as grade level or phone."""

    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value
