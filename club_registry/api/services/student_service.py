# This file implements the student services behind the /students routes.
# It exists so routers stay transport-focused while SQL and row shaping live in one layer.
# Registering a student writes the student and its first registration inside one transaction.
# Updates overwrite the editable fields in place and do not check that the row exists.

from __future__ import annotations

from typing import Any

from sqlalchemy import text

from club_registry.api.db_access import DatabaseClient
from club_registry.api.error_handlers import not_found


class StudentService:
    """Data access and shaping for student routes."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def register_student(
        self,
        *,
        fname: str,
        studid: str,
        grlev: str | None,
        maill: str | None,
        phno: str | None,
        club_id: int,
        consent: bool,
    ) -> int:
        """Insert a student and its registration; return the new student id."""

        insert_student = """
        INSERT INTO students (fname, studid, grlev, maill, phno)
        VALUES (:fname, :studid, :grlev, :maill, :phno)
        RETURNING id
        """
        insert_registration = """
        INSERT INTO registrations (student_id, club_id, consent)
        VALUES (:student_id, :club_id, :consent)
        """
        with self.db.transaction() as connection:
            student_id = int(
                connection.execute(
                    text(insert_student),
                    {
                        "fname": fname,
                        "studid": studid,
                        "grlev": grlev,
                        "maill": maill,
                        "phno": phno,
                    },
                ).scalar_one()
            )
            connection.execute(
                text(insert_registration),
                {"student_id": student_id, "club_id": club_id, "consent": 1 if consent else 0},
            )
        return student_id

    def list_students(self) -> list[dict[str, Any]]:
        query = """
        SELECT id, fname, studid, grlev, maill, phno
        FROM students
        ORDER BY id ASC
        """
        return self.db.fetch_all(query)

    def get_student_by_studid(self, studid: str) -> dict[str, Any]:
        # Several registrations (or duplicate studids) fan out; the first joined row wins.
        query = """
        SELECT
            s.id,
            s.fname,
            s.studid,
            s.grlev,
            s.maill,
            s.phno,
            r.id AS registration_id,
            r.club_id
        FROM students s
        LEFT JOIN registrations r ON s.id = r.student_id
        WHERE s.studid = :studid
        ORDER BY s.id ASC, r.id ASC
        LIMIT 1
        """
        row = self.db.fetch_one(query, {"studid": studid})
        if row is None:
            raise not_found("Student not found.")
        return row

    def update_student(
        self,
        *,
        student_id: int,
        fname: str,
        grlev: str | None,
        maill: str | None,
        phno: str | None,
    ) -> int:
        """Overwrite a student's editable fields; return the affected row count."""

        query = """
        UPDATE students
        SET fname = :fname, grlev = :grlev, maill = :maill, phno = :phno
        WHERE id = :student_id
        """
        return self.db.execute(
            query,
            {
                "fname": fname,
                "grlev": grlev,
                "maill": maill,
                "phno": phno,
                "student_id": student_id,
            },
        )
