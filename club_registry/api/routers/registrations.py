# This file defines registration endpoints: create, list, update, and the two delete forms.
# A plain DELETE removes the owning student, which cascades to its registrations.
# Passing `keep_student=true` removes only the registration row and leaves the student in place.
# Database failures are logged here and surfaced as generic 500 messages.

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.exc import SQLAlchemyError

from club_registry.api.dependencies import get_registration_service
from club_registry.api.error_handlers import database_failure
from club_registry.api.schemas.common import CreatedResponse, ErrorResponse, MessageResponse
from club_registry.api.schemas.registration_schemas import (
    RegistrationCreateRequest,
    RegistrationRow,
    RegistrationUpdateRequest,
)
from club_registry.api.services.registration_service import RegistrationService

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/registrations", tags=["registrations"])
RegistrationServiceDep = Annotated[RegistrationService, Depends(get_registration_service)]


@router.post("", response_model=CreatedResponse)
def create_registration(
    payload: RegistrationCreateRequest,
    service: RegistrationServiceDep,
) -> dict[str, object]:
    try:
        registration_id = service.create_registration(
            student_id=payload.student_id,
            club_id=payload.club_id,
            consent=payload.consent,
        )
    except SQLAlchemyError as exc:
        LOGGER.exception(
            "registration insert failed student_id=%s club_id=%s",
            payload.student_id,
            payload.club_id,
        )
        raise database_failure("Failed to create registration.") from exc
    return {"message": "Registration successful", "id": registration_id}


@router.get("", response_model=list[RegistrationRow])
def list_registrations(service: RegistrationServiceDep) -> list[dict[str, object]]:
    try:
        return service.list_registrations()
    except SQLAlchemyError as exc:
        LOGGER.exception("registration listing failed")
        raise database_failure("Failed to retrieve registrations.") from exc


@router.put("/{registration_id}", response_model=MessageResponse)
def update_registration(
    payload: RegistrationUpdateRequest,
    service: RegistrationServiceDep,
    registration_id: int = Path(),
) -> dict[str, str]:
    try:
        service.update_registration(
            registration_id=registration_id,
            fname=payload.fname,
            grlev=payload.grlev,
            maill=payload.maill,
            phno=payload.phno,
            club_id=payload.club_id,
        )
    except SQLAlchemyError as exc:
        LOGGER.exception("registration update failed id=%s", registration_id)
        raise database_failure("Failed to update registration.") from exc
    return {"message": "Registration updated successfully"}


@router.delete(
    "/{registration_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_registration(
    service: RegistrationServiceDep,
    registration_id: int = Path(),
    keep_student: bool = Query(
        default=False,
        description="Delete only the registration row instead of the owning student.",
    ),
) -> dict[str, str]:
    if keep_student:
        LOGGER.info("deleting registration row id=%s", registration_id)
        try:
            service.delete_registration(registration_id)
        except SQLAlchemyError as exc:
            LOGGER.exception("registration delete failed id=%s", registration_id)
            raise database_failure("Failed to delete registration.") from exc
        return {"message": "Registration deleted"}

    try:
        student_id = service.delete_student_by_registration(registration_id)
    except SQLAlchemyError as exc:
        LOGGER.exception("student delete via registration failed id=%s", registration_id)
        raise database_failure("Failed to delete student and registration.") from exc

    LOGGER.info("deleted student id=%s via registration id=%s", student_id, registration_id)
    return {"message": "Student and associated registration deleted successfully"}
