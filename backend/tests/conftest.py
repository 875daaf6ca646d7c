"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from mis_backend.api import create_api
from mis_backend.api.services import SESSION_COOKIE_NAME, SessionService
from mis_backend.database import (
    BaseSchema,
    DatabaseService,
    UserRepository,
    UserSchema,
    get_database,
)
from mis_backend.database.repositories import ProjectFields, ProjectRepository
from mis_backend.settings import get_settings
from mis_backend.shared import UserRole

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from fastapi import FastAPI

ADMIN_EMAIL = "admin@example.org"
ADMIN_PASSWORD = "Password123"  # noqa: S105


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'mis.db'}")
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LOG_FORMAT", "text")
    monkeypatch.setenv("DEV_SEED_USER_EMAIL", ADMIN_EMAIL)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    service = DatabaseService(get_settings().database_url)
    BaseSchema.metadata.create_all(service.engine)
    yield service
    service.dispose()


@pytest.fixture
def app(database: DatabaseService) -> Iterator[FastAPI]:
    application = create_api()
    application.dependency_overrides[get_database] = lambda: database
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    # Session cookies are Secure outside development.
    with TestClient(app, base_url="https://testserver") as test_client:
        yield test_client


@pytest.fixture
def admin_user(database: DatabaseService) -> UserSchema:
    with database.session() as session:
        return UserRepository(session).upsert(
            name="Admin",
            email=ADMIN_EMAIL,
            role=UserRole.ADMINISTRATOR,
            organization="NSDO",
            password_hash=SessionService().hash_password(ADMIN_PASSWORD),
        )


@pytest.fixture
def session_token(database: DatabaseService, admin_user: UserSchema) -> str:
    with database.session() as session:
        user = session.get(UserSchema, admin_user.id)
        assert user is not None
        _, token = SessionService().create_session(session=session, user=user)
    return token


@pytest.fixture
def auth_client(client: TestClient, session_token: str) -> TestClient:
    client.cookies.set(SESSION_COOKIE_NAME, session_token)
    return client


@pytest.fixture
def project_id(database: DatabaseService) -> int:
    with database.session() as session:
        project = ProjectRepository(session).create(
            ProjectFields(
                name="Water for Kandahar",
                code="WASH-01",
                sector="WASH",
                start=date(2023, 1, 1),
                end=date(2030, 12, 31),
                staff=4,
                provinces=["Kandahar"],
            )
        )
        return project.id
