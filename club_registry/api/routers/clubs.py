# This file defines club endpoints for creating and listing clubs.

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from club_registry.api.dependencies import get_club_service
from club_registry.api.error_handlers import database_failure
from club_registry.api.schemas.club_schemas import ClubCreateRequest, ClubRow
from club_registry.api.schemas.common import CreatedResponse
from club_registry.api.services.club_service import ClubService

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/clubs", tags=["clubs"])
ClubServiceDep = Annotated[ClubService, Depends(get_club_service)]


@router.post("", response_model=CreatedResponse)
def create_club(payload: ClubCreateRequest, service: ClubServiceDep) -> dict[str, object]:
    try:
        club_id = service.create_club(club_name=payload.club_name)
    except SQLAlchemyError as exc:
        LOGGER.exception("club creation failed club_name=%s", payload.club_name)
        raise database_failure("Failed to add club.") from exc
    return {"message": "Club added", "id": club_id}


@router.get("", response_model=list[ClubRow])
def list_clubs(service: ClubServiceDep) -> list[dict[str, object]]:
    try:
        return service.list_clubs()
    except SQLAlchemyError as exc:
        LOGGER.exception("club listing failed")
        raise database_failure("Failed to retrieve clubs.") from exc
