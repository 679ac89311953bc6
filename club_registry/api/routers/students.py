# This file defines student endpoints: registration, listing, lookup by external id, and updates.
# Registration validates the club selection before any write and returns 201 on success.
# Database failures are logged here and surfaced as generic 500 messages.

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.exc import SQLAlchemyError

from club_registry.api.dependencies import get_student_service
from club_registry.api.error_handlers import APIError, database_failure
from club_registry.api.schemas.common import ErrorResponse, MessageResponse
from club_registry.api.schemas.student_schemas import (
    StudentDetail,
    StudentRegistrationRequest,
    StudentRow,
    StudentUpdateRequest,
    parse_club_selection,
)
from club_registry.api.services.student_service import StudentService

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["students"])
StudentServiceDep = Annotated[StudentService, Depends(get_student_service)]


@router.post(
    "",
    status_code=201,
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def register_student(
    payload: StudentRegistrationRequest,
    service: StudentServiceDep,
) -> dict[str, str]:
    try:
        club_id = parse_club_selection(payload.club_id)
    except ValueError as exc:
        raise APIError(
            status_code=400,
            error_code="INVALID_CLUB_SELECTION",
            message=str(exc),
        ) from exc

    try:
        service.register_student(
            fname=payload.fname,
            studid=payload.studid,
            grlev=payload.grlev,
            maill=payload.maill,
            phno=payload.phno,
            club_id=club_id,
            consent=payload.consent,
        )
    except SQLAlchemyError as exc:
        LOGGER.exception("student registration failed studid=%s club_id=%s", payload.studid, club_id)
        raise database_failure("Failed to register student.") from exc

    return {"message": "Student registered successfully!"}


@router.get("", response_model=list[StudentRow])
def list_students(service: StudentServiceDep) -> list[dict[str, object]]:
    try:
        return service.list_students()
    except SQLAlchemyError as exc:
        LOGGER.exception("student listing failed")
        raise database_failure("Failed to retrieve students.") from exc


@router.get(
    "/{studid}",
    response_model=StudentDetail,
    responses={404: {"model": ErrorResponse}},
)
def get_student(
    service: StudentServiceDep,
    studid: str = Path(description="External student identifier."),
) -> dict[str, object]:
    try:
        return service.get_student_by_studid(studid)
    except SQLAlchemyError as exc:
        LOGGER.exception("student lookup failed studid=%s", studid)
        raise database_failure("Failed to retrieve student details.") from exc


@router.put("/{student_id}", response_model=MessageResponse)
def update_student(
    payload: StudentUpdateRequest,
    service: StudentServiceDep,
    student_id: int = Path(description="Internal student id."),
) -> dict[str, str]:
    try:
        updated = service.update_student(
            student_id=student_id,
            fname=payload.fname,
            grlev=payload.grlev,
            maill=payload.maill,
            phno=payload.phno,
        )
    except SQLAlchemyError as exc:
        LOGGER.exception("student update failed id=%s", student_id)
        raise database_failure("Failed to update student.") from exc

    if updated == 0:
        LOGGER.info("student update matched no rows id=%s", student_id)
    return {"message": "Student updated"}
