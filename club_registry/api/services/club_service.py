# This file implements club creation and listing for the /clubs routes.

from __future__ import annotations

from typing import Any

from club_registry.api.db_access import DatabaseClient


class ClubService:
    """Data access for club routes."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def create_club(self, *, club_name: str) -> int:
        query = "INSERT INTO clubs (club_name) VALUES (:club_name) RETURNING id"
        return self.db.insert_returning_id(query, {"club_name": club_name})

    def list_clubs(self) -> list[dict[str, Any]]:
        return self.db.fetch_all("SELECT id, club_name FROM clubs ORDER BY id ASC")
