# This file defines request and response schemas for registration endpoints.
# It exists so registration writes carry typed ids and a boolean consent flag.
# Listing rows flatten the student fields and the resolved club name into one object.

from __future__ import annotations

from pydantic import BaseModel

from club_registry.api.schemas.student_schemas import StudentFields, StudentRow


class RegistrationCreateRequest(BaseModel):
    student_id: int
    club_id: int | None = None
    consent: bool = False


class RegistrationUpdateRequest(StudentFields):
    club_id: int | None = None


class RegistrationRow(StudentRow):
    club_name: str
