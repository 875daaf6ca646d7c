from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


def test_baseline_survey_is_created(auth_client: TestClient, project_id: int) -> None:
    response = auth_client.post(
        "/api/data-entry/monitoring/baseline-surveys",
        json={
            "projectId": str(project_id),
            "title": "Kandahar baseline",
            "tool": "KOBO",
            "status": "something-else",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["projectId"] == str(project_id)
    assert body["tool"] == "kobo"
    assert body["status"] == "draft"


def test_baseline_survey_requires_known_project(auth_client: TestClient) -> None:
    missing = auth_client.post(
        "/api/data-entry/monitoring/baseline-surveys", json={"title": "Baseline"}
    )
    assert missing.status_code == 400
    assert missing.json() == {"message": "A valid project id is required."}

    unknown = auth_client.post(
        "/api/data-entry/monitoring/baseline-surveys",
        json={"projectId": 404, "title": "Baseline"},
    )
    assert unknown.status_code == 400
    assert unknown.json() == {"message": "Project selection is invalid."}


def test_field_visit_date_must_be_a_date(auth_client: TestClient, project_id: int) -> None:
    response = auth_client.post(
        "/api/data-entry/monitoring/field-visits",
        json={"projectId": project_id, "visitDate": "yesterday-ish"},
    )

    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid value for 'visitDate'")


def test_optional_project_may_be_blank(auth_client: TestClient) -> None:
    response = auth_client.post(
        "/api/data-entry/evaluation/stories",
        json={"projectId": "", "title": "A new well", "storyType": "Success"},
    )

    assert response.status_code == 201
    assert response.json()["projectId"] is None
    assert response.json()["storyType"] == "success"


@pytest.mark.parametrize(
    ("path", "payload", "message"),
    [
        ("/monitoring/enumerators", {"phone": "0700"}, "Enumerator name is required."),
        ("/lesson-learns/lessons", {"theme": "WASH"}, "Lesson description is required."),
        ("/lesson-learns/pdm/distributions", {}, "Assistance type is required."),
    ],
)
def test_record_requires_mandatory_field(
    auth_client: TestClient, path: str, payload: dict, message: str
) -> None:
    response = auth_client.post(f"/api/data-entry{path}", json=payload)

    assert response.status_code == 400
    assert response.json() == {"message": message}


def test_beneficiaries_replace_project_reach(
    auth_client: TestClient, project_id: int
) -> None:
    response = auth_client.post(
        "/api/data-entry/beneficiaries",
        json={
            "projectId": project_id,
            "beneficiaries": [
                {"type": "households", "direct": 10.7, "indirect": 5},
                {"type": "idps", "direct": -3, "indirect": "many", "include": False},
                {"type": "aliens", "direct": 99},
                "not-an-object",
            ],
        },
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}

    (project,) = auth_client.get("/api/projects").json()
    reach = {row["typeKey"]: row for row in project["beneficiaries"]}
    assert len(reach) == 8
    assert reach["households"]["direct"] == 10
    assert reach["households"]["indirect"] == 5
    assert reach["idps"] == {
        "typeKey": "idps",
        "direct": 0,
        "indirect": 0,
        "includeInTotals": False,
    }
    assert reach["returnees"]["includeInTotals"] is True


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"beneficiaries": [{"type": "idps"}]}, "A valid project id is required."),
        ({"projectId": "1", "beneficiaries": {"type": "idps"}}, "Beneficiary payload must be an array."),
        ({"projectId": "1", "beneficiaries": [{"type": "aliens"}]}, "At least one beneficiary entry is required."),
    ],
)
def test_beneficiaries_payload_is_screened(
    auth_client: TestClient, project_id: int, payload: dict, message: str
) -> None:
    response = auth_client.post("/api/data-entry/beneficiaries", json=payload)

    assert response.status_code == 400
    assert response.json() == {"message": message}


def test_beneficiaries_for_unknown_project(auth_client: TestClient) -> None:
    response = auth_client.post(
        "/api/data-entry/beneficiaries",
        json={"projectId": 77, "beneficiaries": [{"type": "idps", "direct": 1}]},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Project selection is invalid."}


def test_project_lifecycle(auth_client: TestClient) -> None:
    created = auth_client.post(
        "/api/projects",
        json={
            "name": "  Schools for Herat ",
            "code": "EDU-7",
            "sector": "Education",
            "start": "2024-03-01",
            "end": "",
            "staff": "6",
            "provinces": ["Herat", "Herat", " "],
            "clusters": ["Education"],
            "beneficiaries": {"direct": {"childrenGirls": 40}, "include": {"pwds": False}},
        },
    )
    assert created.status_code == 201
    project = created.json()
    assert project["name"] == "Schools for Herat"
    assert project["end"] is None
    assert project["staff"] == 6
    assert project["provinces"] == ["Herat"]
    girls = next(row for row in project["beneficiaries"] if row["typeKey"] == "childrenGirls")
    assert girls["direct"] == 40

    updated = auth_client.put(
        f"/api/projects/{project['id']}",
        json={"name": "Schools for Herat II", "provinces": ["Herat", "Ghor"]},
    )
    assert updated.status_code == 200
    assert updated.json() == {"message": "Project updated"}
    (listed,) = auth_client.get("/api/projects").json()
    assert listed["name"] == "Schools for Herat II"
    assert listed["provinces"] == ["Herat", "Ghor"]
    assert len(listed["beneficiaries"]) == 8

    removed = auth_client.delete(f"/api/projects/{project['id']}")
    assert removed.status_code == 200
    assert removed.json() == {"message": "Project removed"}
    assert auth_client.get("/api/projects").json() == []


def test_project_validation(auth_client: TestClient) -> None:
    nameless = auth_client.post("/api/projects", json={"code": "X"})
    assert nameless.status_code == 400
    assert nameless.json() == {"message": "Project name is required."}

    backwards = auth_client.post(
        "/api/projects",
        json={"name": "Backwards", "start": "2025-01-01", "end": "2024-01-01"},
    )
    assert backwards.status_code == 400
    assert backwards.json() == {
        "message": "Project end date cannot be before its start date."
    }


def test_updating_missing_project_is_not_found(auth_client: TestClient) -> None:
    response = auth_client.put("/api/projects/31", json={"name": "Ghost"})

    assert response.status_code == 404
    assert response.json() == {"message": "Project not found."}
