# This file provides dependency factories for FastAPI routes and middleware.
# The database client (and its connection pool) is created once; services receive it through injection.
# Tests override `get_database_client` to point every route at a disposable database.

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from club_registry.api.api_config import ApiConfig, get_api_config
from club_registry.api.db_access import DatabaseClient
from club_registry.api.services.club_service import ClubService
from club_registry.api.services.registration_service import RegistrationService
from club_registry.api.services.student_service import StudentService


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


DatabaseClientDep = Annotated[DatabaseClient, Depends(get_database_client)]


def get_student_service(db: DatabaseClientDep) -> StudentService:
    return StudentService(db=db)


def get_club_service(db: DatabaseClientDep) -> ClubService:
    return ClubService(db=db)


def get_registration_service(db: DatabaseClientDep) -> RegistrationService:
    return RegistrationService(db=db)


def get_config() -> ApiConfig:
    return get_api_config()
