from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from mis_backend.api.services import SESSION_COOKIE_NAME, SessionService
from mis_backend.database import SessionRepository

ADMIN_EMAIL = "admin@example.org"
ADMIN_PASSWORD = "Password123"  # noqa: S105

if TYPE_CHECKING:
    from fastapi.testclient import TestClient

    from mis_backend.database import DatabaseService, UserSchema


def test_login_sets_session_cookie(client: TestClient, admin_user: UserSchema) -> None:
    response = client.post(
        "/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Authenticated"
    assert data["user"] == {
        "id": str(admin_user.id),
        "name": "Admin",
        "email": ADMIN_EMAIL,
        "role": "Administrator",
        "organization": "NSDO",
    }
    set_cookie = response.headers["set-cookie"]
    assert f"{SESSION_COOKIE_NAME}=" in set_cookie
    assert "HttpOnly" in set_cookie
    assert "samesite=lax" in set_cookie.lower()


def test_login_email_is_case_insensitive(
    client: TestClient, admin_user: UserSchema
) -> None:
    response = client.post(
        "/api/auth/login",
        json={"email": "  ADMIN@example.org ", "password": ADMIN_PASSWORD},
    )

    assert response.status_code == 200


def test_login_requires_email_and_password(client: TestClient) -> None:
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL})

    assert response.status_code == 400
    assert response.json() == {"message": "Email and password are required."}


def test_login_rejects_wrong_password(
    client: TestClient, admin_user: UserSchema
) -> None:
    response = client.post(
        "/api/auth/login", json={"email": ADMIN_EMAIL, "password": "not-it"}
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials."}


def test_login_rejects_unknown_user(client: TestClient) -> None:
    response = client.post(
        "/api/auth/login",
        json={"email": "nobody@example.org", "password": ADMIN_PASSWORD},
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials."}


def test_session_round_trip(client: TestClient, admin_user: UserSchema) -> None:
    login = client.post(
        "/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert login.status_code == 200

    session = client.get("/api/auth/session")
    assert session.status_code == 200
    body = session.json()
    assert body["user"]["email"] == ADMIN_EMAIL
    assert body["sessionId"]
    assert body["expiresAt"]

    logout = client.post("/api/auth/logout")
    assert logout.status_code == 200
    assert logout.json() == {"message": "Signed out"}

    after = client.get("/api/auth/session")
    assert after.status_code == 401
    assert after.json() == {"message": "Unauthorized"}


def test_session_without_cookie_is_unauthorized(client: TestClient) -> None:
    response = client.get("/api/auth/session")

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


def test_unknown_session_cookie_is_cleared(client: TestClient) -> None:
    client.cookies.set(SESSION_COOKIE_NAME, "deadbeef")

    response = client.get("/api/auth/session")

    assert response.status_code == 401
    set_cookie = response.headers["set-cookie"]
    assert f"{SESSION_COOKIE_NAME}=" in set_cookie
    assert "Max-Age=0" in set_cookie


def test_expired_session_is_rejected(
    client: TestClient, database: DatabaseService, admin_user: UserSchema
) -> None:
    token = "expired-token"  # noqa: S105
    with database.session() as session:
        SessionRepository(session).add(
            user_id=admin_user.id,
            token_hash=SessionService.hash_token(token),
            expires_at=datetime.now(UTC) - timedelta(minutes=1),
        )
    client.cookies.set(SESSION_COOKIE_NAME, token)

    response = client.get("/api/dashboard/state")

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


def test_logout_without_session_still_signs_out(client: TestClient) -> None:
    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Signed out"}
