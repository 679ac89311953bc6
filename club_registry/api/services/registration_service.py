# This file implements registration services behind the /registrations routes.
# It exists so routers stay transport-focused while SQL and row shaping live in one layer.
# Listing resolves club names with a placeholder for unassigned registrations.
# Deletion comes in two forms: removing the owning student (cascading) or only the registration row.

from __future__ import annotations

from typing import Any

from sqlalchemy import text

from club_registry.api.db_access import DatabaseClient
from club_registry.api.error_handlers import not_found

UNASSIGNED_CLUB_LABEL = "Not Assigned"


class RegistrationService:
    """Data access and shaping for registration routes."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def create_registration(self, *, student_id: int, club_id: int | None, consent: bool) -> int:
        query = """
        INSERT INTO registrations (student_id, club_id, consent)
        VALUES (:student_id, :club_id, :consent)
        RETURNING id
        """
        return self.db.insert_returning_id(
            query,
            {"student_id": student_id, "club_id": club_id, "consent": 1 if consent else 0},
        )

    def list_registrations(self) -> list[dict[str, Any]]:
        # Inner join on students: a student without a registration is not listed here.
        query = """
        SELECT
            r.id,
            s.fname,
            s.studid,
            s.grlev,
            s.maill,
            s.phno,
            COALESCE(c.club_name, :unassigned) AS club_name
        FROM registrations r
        JOIN students s ON r.student_id = s.id
        LEFT JOIN clubs c ON r.club_id = c.id
        ORDER BY r.id ASC
        """
        return self.db.fetch_all(query, {"unassigned": UNASSIGNED_CLUB_LABEL})

    def update_registration(
        self,
        *,
        registration_id: int,
        fname: str,
        grlev: str | None,
        maill: str | None,
        phno: str | None,
        club_id: int | None,
    ) -> None:
        """Overwrite the owning student's fields and the club, together or not at all."""

        update_student = """
        UPDATE students
        SET fname = :fname, grlev = :grlev, maill = :maill, phno = :phno
        WHERE id = (SELECT student_id FROM registrations WHERE id = :registration_id)
        """
        update_club = "UPDATE registrations SET club_id = :club_id WHERE id = :registration_id"
        with self.db.transaction() as connection:
            connection.execute(
                text(update_student),
                {
                    "fname": fname,
                    "grlev": grlev,
                    "maill": maill,
                    "phno": phno,
                    "registration_id": registration_id,
                },
            )
            connection.execute(
                text(update_club),
                {"club_id": club_id, "registration_id": registration_id},
            )

    def delete_student_by_registration(self, registration_id: int) -> int:
        """Delete the student owning a registration; the store cascades the registration rows."""

        row = self.db.fetch_one(
            "SELECT student_id FROM registrations WHERE id = :registration_id",
            {"registration_id": registration_id},
        )
        if row is None:
            raise not_found("Registration not found.")

        student_id = int(row["student_id"])
        deleted = self.db.execute(
            "DELETE FROM students WHERE id = :student_id",
            {"student_id": student_id},
        )
        if deleted == 0:
            raise not_found("Student not found.")
        return student_id

    def delete_registration(self, registration_id: int) -> None:
        deleted = self.db.execute(
            "DELETE FROM registrations WHERE id = :registration_id",
            {"registration_id": registration_id},
        )
        if deleted == 0:
            raise not_found("Registration not found.")
