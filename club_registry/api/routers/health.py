# This file defines liveness, readiness, and version endpoints for API operations.
# It exists so orchestration and monitoring systems can verify service health quickly.
# The readiness check confirms database connectivity and that the registry tables exist.

from __future__ import annotations

import subprocess
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from club_registry.api.api_config import ApiConfig
from club_registry.api.dependencies import DatabaseClientDep, get_config
from club_registry.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse
from club_registry.common.ddl import TABLE_NAMES

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    return completed.stdout.strip() or None


@router.get("/health", response_model=HealthResponse)
def health(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(
    request: Request,
    db: DatabaseClientDep,
) -> dict[str, object]:
    db_connected = db.can_connect()
    missing_tables = (
        [name for name in TABLE_NAMES if not db.table_exists(name)] if db_connected else list(TABLE_NAMES)
    )
    schema_ready = db_connected and not missing_tables

    return {
        "request_id": request.state.request_id,
        "db_connected": db_connected,
        "schema_ready": schema_ready,
        "missing_tables": missing_tables,
        "ready": schema_ready,
        "database": "reachable" if db_connected else "unreachable",
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": config.api_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
