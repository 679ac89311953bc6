# This file tests registration endpoints: create, list, update, and both delete forms.
# The database is a real SQLite file with foreign keys enabled, so cascades and rollbacks are exercised.

from __future__ import annotations

from tests.api.support import api_test_client, database_down, register_student


def _seed(client) -> None:
    client.post("/clubs", json={"club_name": "Chess"})
    client.post("/clubs", json={"club_name": "Drama"})
    register_student(client)


def test_create_registration_returns_new_id(registry_db) -> None:
    with api_test_client(db_client=registry_db) as client:
        _seed(client)
        response = client.post(
            "/registrations",
            json={"student_id": 1, "club_id": 2, "consent": True},
        )

    assert response.status_code == 200
    assert response.json() == {"message": "Registration successful", "id": 2}


def test_registration_listing_uses_placeholder_for_missing_club(registry_db) -> None:
    with api_test_client(db_client=registry_db) as client:
        _seed(client)
        client.post("/registrations", json={"student_id": 1, "club_id": None, "consent": False})
        response = client.get("/registrations")

    assert response.status_code == 200
    rows = response.json()
    assert [row["club_name"] for row in rows] == ["Chess", "Not Assigned"]
    assert rows[0] == {
        "id": 1,
        "fname": "A",
        "studid": "S1",
        "grlev": "10",
        "maill": "a@x.com",
        "phno": "123",
        "club_name": "Chess",
    }


def test_student_without_registration_is_excluded_from_registration_listing(registry_db) -> None:
    registry_db.execute(
        "INSERT INTO students (fname, studid, grlev, maill, phno) VALUES ('B', 'S2', '9', 'b@x.com', '456')"
    )
    with api_test_client(db_client=registry_db) as client:
        registrations = client.get("/registrations")
        students = client.get("/students")

    assert registrations.json() == []
    assert [row["studid"] for row in students.json()] == ["S2"]


def test_create_registration_for_unknown_student_fails(registry_db) -> None:
    with api_test_client(db_client=registry_db) as client:
        response = client.post("/registrations", json={"student_id": 77, "club_id": None})

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to create registration."


def test_update_registration_changes_student_and_club(registry_db) -> None:
    with api_test_client(db_client=registry_db) as client:
        _seed(client)
        response = client.put(
            "/registrations/1",
            json={"fname": "Alice", "grlev": "12", "maill": "al@x.com", "phno": "321", "club_id": 2},
        )
        lookup = client.get("/students/S1")
        listing = client.get("/registrations")

    assert response.status_code == 200
    assert response.json() == {"message": "Registration updated successfully"}
    assert lookup.json()["fname"] == "Alice"
    assert lookup.json()["club_id"] == 2
    assert listing.json()[0]["club_name"] == "Drama"


def test_update_registration_is_atomic(registry_db) -> None:
    with api_test_client(db_client=registry_db) as client:
        _seed(client)
        response = client.put(
            "/registrations/1",
            json={"fname": "Alice", "grlev": "12", "maill": "al@x.com", "phno": "321", "club_id": 99},
        )
        lookup = client.get("/students/S1")

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to update registration."
    assert lookup.json()["fname"] == "A"
    assert lookup.json()["club_id"] == 1


def test_delete_registration_removes_student_and_registration(registry_db) -> None:
    with api_test_client(db_client=registry_db) as client:
        _seed(client)
        response = client.delete("/registrations/1")
        lookup = client.get("/students/S1")
        registrations = client.get("/registrations")

    assert response.status_code == 200
    assert response.json() == {"message": "Student and associated registration deleted successfully"}
    assert lookup.status_code == 404
    assert registrations.json() == []
    assert registry_db.fetch_all("SELECT id FROM registrations") == []


def test_delete_unknown_registration_returns_404(registry_db) -> None:
    with api_test_client(db_client=registry_db) as client:
        response = client.delete("/registrations/5")
        row_only = client.delete("/registrations/5?keep_student=true")

    assert response.status_code == 404
    assert response.json()["message"] == "Registration not found."
    assert row_only.status_code == 404
    assert row_only.json()["message"] == "Registration not found."


def test_delete_registration_row_keeps_student(registry_db) -> None:
    with api_test_client(db_client=registry_db) as client:
        _seed(client)
        response = client.delete("/registrations/1", params={"keep_student": "true"})
        registrations = client.get("/registrations")
        lookup = client.get("/students/S1")

    assert response.status_code == 200
    assert response.json() == {"message": "Registration deleted"}
    assert registrations.json() == []
    assert lookup.status_code == 200
    assert lookup.json()["registration_id"] is None


class FailingRegistrationService:
    def delete_student_by_registration(self, registration_id: int) -> int:
        raise database_down()

    def delete_registration(self, registration_id: int) -> None:
        raise database_down()


def test_delete_failures_return_generic_messages() -> None:
    with api_test_client(registration_service=FailingRegistrationService()) as client:
        cascading = client.delete("/registrations/1")
        row_only = client.delete("/registrations/1?keep_student=true")

    assert cascading.status_code == 500
    assert cascading.json()["message"] == "Failed to delete student and registration."
    assert cascading.json()["error_code"] == "DATABASE_ERROR"
    assert row_only.status_code == 500
    assert row_only.json()["message"] == "Failed to delete registration."
    assert "secret-host" not in cascading.text + row_only.text
