from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from mis_backend.database.repositories import ComplaintRepository

if TYPE_CHECKING:
    from fastapi.testclient import TestClient

    from mis_backend.database import DatabaseService

PNG_DATA_URL = "data:image/png;base64,iVBORw0KGgo="


def test_complaint_is_recorded(auth_client: TestClient, database: DatabaseService) -> None:
    response = auth_client.post(
        "/api/complaints",
        json={
            "fullName": "Test User",
            "email": "test@example.com",
            "message": "This is a test complaint.",
        },
    )

    assert response.status_code == 201
    assert response.json() == {"message": "Complaint recorded"}
    with database.session() as session:
        (complaint,) = ComplaintRepository(session).list_all()
        assert complaint.full_name == "Test User"


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"email": "a@example.org", "message": "Hi"}, "Full name is required."),
        ({"fullName": "A", "message": "Hi"}, "Email is required."),
        ({"fullName": "A", "email": "a@example.org", "message": "  "}, "Complaint message is required."),
    ],
)
def test_complaint_requires_fields(
    auth_client: TestClient, payload: dict[str, str], message: str
) -> None:
    response = auth_client.post("/api/complaints", json=payload)

    assert response.status_code == 400
    assert response.json() == {"message": message}


@pytest.mark.parametrize(
    ("content", "message"),
    [
        (b"{broken", "Request body must be valid JSON."),
        (b"[1, 2]", "Request body must be a JSON object."),
    ],
)
def test_malformed_body_is_rejected(
    auth_client: TestClient, content: bytes, message: str
) -> None:
    response = auth_client.post(
        "/api/complaints",
        content=content,
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": message}


def test_complaint_delete_is_idempotent(auth_client: TestClient) -> None:
    response = auth_client.delete("/api/complaints/999")

    assert response.status_code == 200
    assert response.json() == {"message": "Complaint archived"}


def test_reporting_years_add_and_remove(auth_client: TestClient) -> None:
    assert auth_client.post("/api/reporting-years", json={"year": 2023}).status_code == 201
    added = auth_client.post("/api/reporting-years", json={"year": "2024"})
    assert added.status_code == 201
    assert added.json() == {"message": "Year added"}

    filters = auth_client.get("/api/v2/dashboard/filters").json()
    assert filters["years"] == [2024, 2023]

    removed = auth_client.delete("/api/reporting-years/2023")
    assert removed.status_code == 200
    assert removed.json() == {"message": "Year removed"}
    assert auth_client.get("/api/v2/dashboard/filters").json()["years"] == [2024]


@pytest.mark.parametrize("year", ["soon", None, True, [2024]])
def test_reporting_year_must_be_numeric(auth_client: TestClient, year: object) -> None:
    response = auth_client.post("/api/reporting-years", json={"year": year})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid year"}


def test_reporting_year_delete_rejects_non_numeric_path(auth_client: TestClient) -> None:
    response = auth_client.delete("/api/reporting-years/next")

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid year"}


def test_user_is_saved_and_can_sign_in(auth_client: TestClient) -> None:
    response = auth_client.post(
        "/api/users",
        json={
            "name": "Jane Editor",
            "email": "Jane@Example.org",
            "role": "Editor",
            "organization": "NSDO",
            "password": "s3cret-pass",
        },
    )
    assert response.status_code == 201
    assert response.json() == {"message": "User saved"}

    login = auth_client.post(
        "/api/auth/login",
        json={"email": "jane@example.org", "password": "s3cret-pass"},
    )
    assert login.status_code == 200
    assert login.json()["user"]["role"] == "Editor"


def test_user_role_must_be_known(auth_client: TestClient) -> None:
    response = auth_client.post(
        "/api/users",
        json={"name": "Jane", "email": "jane@example.org", "role": "Overlord"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "message": "Role must be one of Administrator, Editor, Viewer."
    }


def test_removing_a_user_ends_their_sessions(auth_client: TestClient, admin_user) -> None:
    response = auth_client.delete(f"/api/users/{admin_user.id}")

    assert response.status_code == 200
    assert response.json() == {"message": "User removed"}
    assert auth_client.get("/api/auth/session").status_code == 401


def test_branding_update_keeps_unspecified_values(auth_client: TestClient) -> None:
    first = auth_client.patch(
        "/api/branding",
        json={"companyName": "Acme Relief", "logoDataUrl": PNG_DATA_URL},
    )
    assert first.status_code == 200
    assert first.json() == {"message": "Branding updated"}

    second = auth_client.patch("/api/branding", json={"companyName": ""})
    assert second.status_code == 200

    branding = auth_client.get("/api/branding").json()
    assert branding["companyName"] == "Acme Relief"
    assert branding["logoDataUrl"] == PNG_DATA_URL
    assert branding["faviconDataUrl"] is None


def test_sector_update_feeds_dashboard_state(auth_client: TestClient) -> None:
    response = auth_client.put(
        "/api/sectors/WASH",
        json={
            "provinces": ["Kabul", "Balkh"],
            "beneficiaries": {"direct": {"households": 12}, "indirect": {"households": 3}},
            "projects": 2,
            "start": "2024-01-01",
            "end": "",
            "fieldActivity": "Water trucking",
            "staff": 5,
        },
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Sector updated"}

    state = auth_client.get("/api/dashboard/state").json()
    wash = state["sectors"]["WASH"]
    assert wash["provinces"] == ["Balkh", "Kabul"]
    assert wash["beneficiaries"]["direct"]["households"] == 12
    assert wash["start"] == "2024-01-01"
    assert wash["end"] == ""
    all_sectors = state["sectors"]["All Sectors"]
    assert all_sectors["fieldActivity"] == "Joint multi-sector coordination"
    assert all_sectors["projects"] == 2
    assert all_sectors["staff"] == 5


def test_dev_session_is_hidden_outside_development(client: TestClient) -> None:
    response = client.post("/api/test-auth")

    assert response.status_code == 404
    assert response.json() == {"message": "Not found"}


def test_dev_session_signs_in_seed_user(
    client: TestClient, admin_user, monkeypatch: pytest.MonkeyPatch
) -> None:
    from mis_backend.settings import get_settings

    monkeypatch.setenv("ENVIRONMENT", "development")
    get_settings.cache_clear()

    response = client.post("/api/test-auth")

    assert response.status_code == 200
    assert response.json() == {"message": "Session created"}
    assert client.get("/api/auth/session").json()["user"]["email"] == "admin@example.org"


def test_dev_session_requires_seed_user(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    from mis_backend.settings import get_settings

    monkeypatch.setenv("ENVIRONMENT", "development")
    get_settings.cache_clear()

    response = client.post("/api/test-auth")

    assert response.status_code == 500
    assert response.json() == {
        "message": "Default admin user not found. Did you seed the database?"
    }


def test_oversized_complaint_id_is_rejected(auth_client: TestClient) -> None:
    response = auth_client.delete("/api/complaints/99999999999999999999")

    assert response.status_code == 400
    assert response.json() == {"message": "A valid complaint id is required."}


@pytest.mark.parametrize("year", [1e30, 10000, 0, "99999999999999999999"])
def test_reporting_year_outside_calendar_is_invalid(
    auth_client: TestClient, year: object
) -> None:
    response = auth_client.post("/api/reporting-years", json={"year": year})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid year"}


def test_reporting_year_delete_rejects_oversized_path(auth_client: TestClient) -> None:
    response = auth_client.delete("/api/reporting-years/99999999999999999999")

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid year"}


def test_oversized_user_id_is_rejected(auth_client: TestClient) -> None:
    response = auth_client.delete(f"/api/users/{2**31}")

    assert response.status_code == 400
    assert response.json() == {"message": "A valid user id is required."}
