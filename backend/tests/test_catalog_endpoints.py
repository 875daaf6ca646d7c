from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


def _create(client: TestClient, path: str, **payload: object) -> dict:
    response = client.post(f"/api/catalog/{path}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_main_sector_names_are_unique_ignoring_case(auth_client: TestClient) -> None:
    created = _create(auth_client, "main-sectors", name="Health")
    assert created["name"] == "Health"
    assert created["id"].isdigit()

    response = auth_client.post("/api/catalog/main-sectors", json={"name": "  health "})

    assert response.status_code == 409
    assert response.json() == {"message": "A main sector with this name already exists."}


@pytest.mark.parametrize(
    ("path", "label"),
    [("clusters", "cluster"), ("sectors", "sector"), ("main-sectors", "main sector")],
)
def test_catalog_entry_lifecycle(auth_client: TestClient, path: str, label: str) -> None:
    first = _create(auth_client, path, name="Protection", description="  ")
    _create(auth_client, path, name="education")
    assert first["description"] is None

    listed = auth_client.get(f"/api/catalog/{path}").json()
    assert [entry["name"] for entry in listed] == ["education", "Protection"]

    renamed = auth_client.patch(
        f"/api/catalog/{path}/{first['id']}",
        json={"name": "Child Protection", "description": "GBV and CP"},
    )
    assert renamed.status_code == 200
    assert renamed.json()["description"] == "GBV and CP"

    deleted = auth_client.delete(f"/api/catalog/{path}/{first['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True}

    missing = auth_client.delete(f"/api/catalog/{path}/{first['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"message": f"{label.capitalize()} entry not found."}


def test_catalog_entry_requires_name(auth_client: TestClient) -> None:
    response = auth_client.post("/api/catalog/clusters", json={"description": "x"})

    assert response.status_code == 400
    assert response.json() == {"message": "Cluster name is required."}


def test_renaming_onto_an_existing_name_conflicts(auth_client: TestClient) -> None:
    _create(auth_client, "sectors", name="Nutrition")
    other = _create(auth_client, "sectors", name="Shelter")

    response = auth_client.patch(
        f"/api/catalog/sectors/{other['id']}", json={"name": "NUTRITION"}
    )

    assert response.status_code == 409
    assert response.json() == {"message": "A sector with this name already exists."}


def test_sub_sector_names_are_unique_per_main_sector(auth_client: TestClient) -> None:
    health = _create(auth_client, "main-sectors", name="Health")
    wash = _create(auth_client, "main-sectors", name="WASH")
    _create(auth_client, "sub-sectors", mainSectorId=health["id"], name="Vaccination")

    duplicate = auth_client.post(
        "/api/catalog/sub-sectors",
        json={"mainSectorId": int(health["id"]), "name": "vaccination"},
    )
    assert duplicate.status_code == 409
    assert duplicate.json() == {
        "message": "A sub-sector with this name already exists for the selected main sector."
    }

    elsewhere = _create(auth_client, "sub-sectors", mainSectorId=wash["id"], name="Vaccination")
    assert elsewhere["mainSectorId"] == wash["id"]


def test_sub_sector_requires_existing_main_sector(auth_client: TestClient) -> None:
    missing_id = auth_client.post(
        "/api/catalog/sub-sectors", json={"mainSectorId": "", "name": "Cash"}
    )
    assert missing_id.status_code == 400
    assert missing_id.json() == {"message": "A valid main sector id is required."}

    unknown = auth_client.post(
        "/api/catalog/sub-sectors", json={"mainSectorId": "42", "name": "Cash"}
    )
    assert unknown.status_code == 400
    assert unknown.json() == {"message": "Selected main sector does not exist."}


def test_deleting_main_sector_removes_its_sub_sectors(auth_client: TestClient) -> None:
    health = _create(auth_client, "main-sectors", name="Health")
    _create(auth_client, "sub-sectors", mainSectorId=health["id"], name="Nutrition")

    assert auth_client.delete(f"/api/catalog/main-sectors/{health['id']}").status_code == 200

    assert auth_client.get("/api/catalog/sub-sectors").json() == []


def test_missing_sub_sector_delete_is_not_found(auth_client: TestClient) -> None:
    response = auth_client.delete("/api/catalog/sub-sectors/7")

    assert response.status_code == 404
    assert response.json() == {"message": "Sub-sector entry not found."}
