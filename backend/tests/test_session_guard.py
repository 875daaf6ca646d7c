"""Protected routes must reject callers before touching the data layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from mis_backend.api.services import SESSION_COOKIE_NAME

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


class SpyRepository:
    """Records every construction; any attribute access is a failure."""

    created: list[str] = []  # noqa: RUF012

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        type(self).created.append(type(self).__name__)

    def __getattr__(self, name: str) -> Any:
        raise AssertionError(f"repository method {name!r} was reached")


PATCHED_TARGETS = (
    "mis_backend.api.routers.branding.BrandingRepository",
    "mis_backend.api.routers.catalog.SubSectorRepository",
    "mis_backend.api.routers.complaints.ComplaintRepository",
    "mis_backend.api.routers.dashboard.DashboardService",
    "mis_backend.api.routers.data_entry.DataEntryRepository",
    "mis_backend.api.routers.data_entry.ProjectRepository",
    "mis_backend.api.routers.projects.ProjectRepository",
    "mis_backend.api.routers.reporting_years.ReportingYearRepository",
    "mis_backend.api.routers.sectors.SectorRepository",
    "mis_backend.api.routers.users.UserRepository",
)

PROTECTED_ROUTES: list[tuple[str, str, dict[str, Any] | None]] = [
    ("PATCH", "/api/branding", {"companyName": "Acme"}),
    ("GET", "/api/catalog/clusters", None),
    ("POST", "/api/catalog/clusters", {"name": "Health"}),
    ("PATCH", "/api/catalog/sectors/1", {"name": "Education"}),
    ("DELETE", "/api/catalog/main-sectors/1", None),
    ("POST", "/api/catalog/main-sectors", {"name": "Livelihoods"}),
    ("POST", "/api/catalog/sub-sectors", {"mainSectorId": "1", "name": "Cash"}),
    ("DELETE", "/api/catalog/sub-sectors/1", None),
    (
        "POST",
        "/api/complaints",
        {
            "fullName": "Test User",
            "email": "test@example.com",
            "message": "This is a test complaint.",
        },
    ),
    ("DELETE", "/api/complaints/1", None),
    ("GET", "/api/dashboard/state", None),
    ("POST", "/api/data-entry/beneficiaries", {"projectId": "1", "beneficiaries": []}),
    ("POST", "/api/data-entry/monitoring/baseline-surveys", {"projectId": "1"}),
    ("POST", "/api/data-entry/monitoring/enumerators", {"fullName": "A"}),
    ("POST", "/api/data-entry/evaluation/stories", {"title": "A"}),
    ("POST", "/api/data-entry/accountability/findings", {}),
    ("POST", "/api/data-entry/lesson-learns/pdm/reports", {}),
    ("GET", "/api/projects", None),
    ("POST", "/api/projects", {"name": "New project"}),
    ("PUT", "/api/projects/1", {"name": "Renamed"}),
    ("DELETE", "/api/projects/1", None),
    ("POST", "/api/reporting-years", {"year": 2024}),
    ("DELETE", "/api/reporting-years/2024", None),
    ("PUT", "/api/sectors/WASH", {"projects": 3}),
    ("POST", "/api/users", {"name": "A", "email": "a@example.org", "role": "Viewer"}),
    ("DELETE", "/api/users/1", None),
]


@pytest.fixture(autouse=True)
def spy_repositories(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    SpyRepository.created = []
    for target in PATCHED_TARGETS:
        monkeypatch.setattr(target, SpyRepository)
    return SpyRepository.created


@pytest.mark.parametrize(("method", "path", "body"), PROTECTED_ROUTES)
def test_missing_session_is_unauthorized(
    client: TestClient,
    spy_repositories: list[str],
    method: str,
    path: str,
    body: dict[str, Any] | None,
) -> None:
    response = client.request(method, path, json=body)

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}
    assert spy_repositories == []


@pytest.mark.parametrize(("method", "path", "body"), PROTECTED_ROUTES)
def test_unknown_session_is_unauthorized(
    client: TestClient,
    spy_repositories: list[str],
    method: str,
    path: str,
    body: dict[str, Any] | None,
) -> None:
    client.cookies.set(SESSION_COOKIE_NAME, "not-a-real-token")

    response = client.request(method, path, json=body)

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}
    assert spy_repositories == []


def test_session_is_checked_before_the_body_is_parsed(
    client: TestClient, spy_repositories: list[str]
) -> None:
    response = client.post(
        "/api/complaints",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


def test_users_scenario_without_cookie(client: TestClient) -> None:
    response = client.post(
        "/api/users",
        json={"name": "Jane", "email": "jane@example.org", "role": "Editor"},
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


def test_public_branding_needs_no_session(client: TestClient) -> None:
    response = client.get("/api/branding")

    assert response.status_code == 200
    assert response.json()["companyName"] == "NSDO"
