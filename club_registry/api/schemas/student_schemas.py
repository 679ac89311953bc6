# This file defines request and response schemas for student endpoints.
# It exists so student payloads are validated before reaching the service layer.
# The club selection on registration is checked separately so a bad value maps to a 400 response.

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

from club_registry.api.schemas.common import coerce_text


class StudentFields(BaseModel):
    fname: str
    grlev: str | None = None
    maill: str | None = None
    phno: str | None = None

    @field_validator("grlev", "phno", mode="before")
    @classmethod
    def accept_numbers_as_text(cls, value: Any) -> Any:
        return coerce_text(value)


class StudentRegistrationRequest(StudentFields):
    studid: str
    club_id: Any = None
    consent: bool = False

    @field_validator("studid", mode="before")
    @classmethod
    def accept_numeric_studid(cls, value: Any) -> Any:
        return coerce_text(value)


class StudentUpdateRequest(StudentFields):
    pass


class StudentRow(BaseModel):
    id: int
    fname: str
    studid: str
    grlev: str | None = None
    maill: str | None = None
    phno: str | None = None

    @field_validator("studid", "grlev", "phno", mode="before")
    @classmethod
    def accept_numeric_columns(cls, value: Any) -> Any:
        return coerce_text(value)


class StudentDetail(StudentRow):
    registration_id: int | None = None
    club_id: int | None = None


def parse_club_selection(value: Any) -> int:
    """Return the club id from a raw selection, or raise ValueError.

    Positive integers and strings of ASCII digits are accepted. Missing values,
    booleans, zero, and anything non-numeric are rejected.
    """

    candidate: int | None = None
    if isinstance(value, bool) or value is None:
        candidate = None
    elif isinstance(value, int):
        candidate = value
    elif isinstance(value, float) and value.is_integer():
        candidate = int(value)
    elif isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.isdigit():
            candidate = int(stripped)

    if candidate is None or candidate <= 0:
        raise ValueError("Invalid club selection.")
    return candidate
