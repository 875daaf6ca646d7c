from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest

from mis_backend.database.repositories import (
    BeneficiaryEntry,
    DataEntryRepository,
    ProjectFields,
    ProjectRepository,
    ReportingYearRepository,
    SectorFields,
    SectorRepository,
)

if TYPE_CHECKING:
    from fastapi.testclient import TestClient

    from mis_backend.database import DatabaseService


@pytest.fixture
def portfolio(database: DatabaseService) -> dict[str, int]:
    with database.session() as session:
        projects = ProjectRepository(session)
        kabul = projects.create(
            ProjectFields(
                name="Kabul Water",
                sector="WASH",
                start=date(2022, 1, 1),
                end=date(2022, 12, 31),
                staff=3,
                provinces=["Kabul"],
                beneficiaries=[BeneficiaryEntry("households", direct=20, indirect=10)],
            )
        )
        herat = projects.create(
            ProjectFields(
                name="Herat Clinics",
                sector="Health",
                standard_sectors=["WASH"],
                start=date(2024, 1, 1),
                staff=7,
                provinces=["Herat"],
                beneficiaries=[BeneficiaryEntry("adultsWomen", direct=5, indirect=0)],
            )
        )
        SectorRepository(session).upsert("WASH", SectorFields(projects=9))
        SectorRepository(session).upsert("Health", SectorFields())
        for year in (2022, 2024):
            ReportingYearRepository(session).add(year)

        records = DataEntryRepository(session)
        records.create_baseline_survey(project_id=kabul.id, title="Kabul baseline")
        records.create_baseline_survey(
            project_id=herat.id, title="Herat baseline", status="completed"
        )
        records.create_enumerator(full_name="Zahra", province="Herat")
        records.create_finding(project_id=herat.id, status="solved", severity="major")
        records.create_finding(finding_type="positive")
        records.create_pdm_survey(project_id=kabul.id, quality_score=4, quantity_score=3)
        records.create_pdm_survey(project_id=herat.id, quality_score=3)
        records.create_distribution(
            assistance_type="Cash", project_id=herat.id, target_beneficiaries=120
        )
        return {"kabul": kabul.id, "herat": herat.id}


def test_overview_without_filters(client: TestClient, portfolio: dict[str, int]) -> None:
    response = client.get("/api/v2/dashboard/overview")

    assert response.status_code == 200
    stats = response.json()
    assert stats["totalProjects"] == 2
    assert stats["totalBeneficiaries"] == 35
    assert stats["coveredProvinces"] == ["Herat", "Kabul"]
    assert stats["sectors"]["WASH"]["projects"] == 2
    assert stats["sectors"]["Health"]["projects"] == 1
    assert stats["sectors"]["All Sectors"]["staff"] == 10
    assert stats["projectStatusCounts"]["completed"] == 1


def test_overview_year_filter(client: TestClient, portfolio: dict[str, int]) -> None:
    stats = client.get("/api/v2/dashboard/overview", params={"year": "2023abc"}).json()

    assert stats["totalProjects"] == 0
    assert stats["sectors"]["All Sectors"]["projects"] == 0


def test_blank_filters_are_ignored(client: TestClient, portfolio: dict[str, int]) -> None:
    response = client.get(
        "/api/v2/dashboard/projects", params={"year": "", "province": " ", "sector": ""}
    )

    assert [item["name"] for item in response.json()] == ["Herat Clinics", "Kabul Water"]


def test_projects_list_by_sector(client: TestClient, portfolio: dict[str, int]) -> None:
    response = client.get("/api/v2/dashboard/projects", params={"sector": "wash"})

    assert response.status_code == 200
    items = {item["name"]: item for item in response.json()}
    assert set(items) == {"Herat Clinics", "Kabul Water"}
    assert items["Kabul Water"]["status"] == "completed"
    assert items["Kabul Water"]["totalBeneficiaries"] == 30
    assert items["Herat Clinics"]["end"] == ""


def test_sectors_list_skips_the_aggregate(
    client: TestClient, portfolio: dict[str, int]
) -> None:
    response = client.get("/api/v2/dashboard/sectors", params={"province": "Kabul"})

    sectors = {item["name"]: item for item in response.json()}
    assert set(sectors) == {"Health", "WASH"}
    assert sectors["WASH"]["projects"] == 1
    assert sectors["Health"]["projects"] == 0


def test_monitoring_is_scoped_to_filtered_projects(
    client: TestClient, portfolio: dict[str, int]
) -> None:
    everything = client.get("/api/v2/dashboard/monitoring").json()
    assert everything["baselineSurveys"] == 2
    assert everything["enumerators"] == 1
    assert everything["baselineStatusCounts"]["completed"] == 1

    kabul = client.get("/api/v2/dashboard/monitoring", params={"province": "Kabul"}).json()
    assert kabul["baselineSurveys"] == 1
    assert kabul["enumerators"] == 0
    assert kabul["baselineStatusCounts"]["draft"] == 1


def test_accountability_counts_unlinked_findings_only_unfiltered(
    client: TestClient, portfolio: dict[str, int]
) -> None:
    everything = client.get("/api/v2/dashboard/accountability").json()
    assert everything["findings"] == 2
    assert everything["openFindings"] == 1
    assert everything["findingTypeCounts"] == {"negative": 1, "positive": 1}

    herat = client.get(
        "/api/v2/dashboard/accountability", params={"province": "Herat"}
    ).json()
    assert herat["findings"] == 1
    assert herat["severityCounts"]["major"] == 1


def test_knowledge_averages_pdm_scores(
    client: TestClient, portfolio: dict[str, int]
) -> None:
    knowledge = client.get("/api/v2/dashboard/knowledge").json()

    assert knowledge["pdmSurveys"] == 2
    assert knowledge["targetBeneficiaries"] == 120
    assert knowledge["averageScores"] == {
        "quality": 3.5,
        "quantity": 3.0,
        "satisfaction": None,
        "protection": None,
    }


def test_filters_list_years_and_project_provinces(
    client: TestClient, portfolio: dict[str, int]
) -> None:
    response = client.get("/api/v2/dashboard/filters")

    assert response.json() == {"years": [2024, 2022], "provinces": ["Herat", "Kabul"]}


def test_dashboard_state_for_signed_in_user(
    auth_client: TestClient, portfolio: dict[str, int]
) -> None:
    response = auth_client.get("/api/dashboard/state")

    assert response.status_code == 200
    state = response.json()
    assert state["reportingYears"] == [2022, 2024]
    assert state["sectors"]["WASH"]["projects"] == 9
    assert state["sectors"]["All Sectors"]["projects"] == 9
    assert [project["name"] for project in state["projects"]] == [
        "Herat Clinics",
        "Kabul Water",
    ]
    assert [user["email"] for user in state["users"]] == ["admin@example.org"]
    assert len(state["monitoring"]["baselineSurveys"]) == 2
    assert len(state["knowledge"]["pdmSurveys"]) == 2


@pytest.mark.parametrize("year", ["0", "10000", "-3"])
def test_non_calendar_year_filter_is_ignored(
    client: TestClient, portfolio: dict[str, int], year: str
) -> None:
    unfiltered = client.get("/api/v2/dashboard/overview").json()

    for path in ("overview", "projects", "monitoring", "knowledge"):
        response = client.get(f"/api/v2/dashboard/{path}", params={"year": year})
        assert response.status_code == 200, response.text

    filtered = client.get("/api/v2/dashboard/overview", params={"year": year}).json()
    assert filtered["totalProjects"] == unfiltered["totalProjects"] == 2
