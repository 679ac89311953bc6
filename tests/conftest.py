"""
Shared test configuration.
Environment defaults are applied at import time so the application module can be imported without a live database.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("ENV", "test")
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from club_registry.api.db_access import DatabaseClient  # noqa: E402
from club_registry.common.ddl import create_schema  # noqa: E402


@pytest.fixture
def registry_db(tmp_path: Path) -> Iterator[DatabaseClient]:
    """A DatabaseClient on a throwaway SQLite file with the registry tables created."""

    client = DatabaseClient(database_url=f"sqlite+pysqlite:///{tmp_path / 'registry.db'}")
    create_schema(client.engine)
    try:
        yield client
    finally:
        client.dispose()
