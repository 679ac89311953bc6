# This file provides shared helpers for API endpoint tests.
# It exists so tests can override the database client or individual services per test.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from club_registry.api.api_config import ApiConfig
from club_registry.api.app import app
from club_registry.api.dependencies import (
    get_club_service,
    get_config,
    get_database_client,
    get_registration_service,
    get_student_service,
)


def build_test_config() -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Club Registry",
        host="0.0.0.0",
        port=5000,
        environment="test",
        log_level="INFO",
        app_version="0.1.0",
        allowed_origins=["*"],
        database_url_override="sqlite+pysqlite:///:memory:",
    )


def database_down() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("connection refused: secret-host:5432"))


class FakeDBClient:
    """Simple fake DB dependency for readiness endpoint tests."""

    def __init__(self, *, connected: bool = True, existing_tables: set[str] | None = None) -> None:
        self._connected = connected
        self._tables = existing_tables if existing_tables is not None else {
            "students",
            "clubs",
            "registrations",
        }

    def can_connect(self) -> bool:
        return self._connected

    def table_exists(self, table_name: str) -> bool:
        return self._connected and table_name in self._tables


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    student_service: Any | None = None,
    club_service: Any | None = None,
    registration_service: Any | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()

    app.dependency_overrides[get_config] = lambda: resolved_config
    if db_client is not None:
        app.dependency_overrides[get_database_client] = lambda: db_client
    if student_service is not None:
        app.dependency_overrides[get_student_service] = lambda: student_service
    if club_service is not None:
        app.dependency_overrides[get_club_service] = lambda: club_service
    if registration_service is not None:
        app.dependency_overrides[get_registration_service] = lambda: registration_service

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


def register_student(client: TestClient, **overrides: Any) -> Any:
    payload: dict[str, Any] = {
        "fname": "A",
        "studid": "S1",
        "grlev": "10",
        "maill": "a@x.com",
        "phno": "123",
        "club_id": 1,
        "consent": True,
    }
    payload.update(overrides)
    return client.post("/students", json=payload)
