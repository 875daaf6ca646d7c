from __future__ import annotations

from datetime import date

import pytest

from mis_backend.api.services import (
    DashboardFilters,
    ProjectSnapshot,
    ProjectStatus,
    aggregate_overview,
    filter_projects,
    matches_filters,
    project_status,
)
from mis_backend.database.repositories import BeneficiaryEntry

TODAY = date(2025, 6, 15)


def _project(project_id: int, **overrides) -> ProjectSnapshot:
    return ProjectSnapshot(id=project_id, name=f"Project {project_id}", **overrides)


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (date(2020, 1, 1), date(2024, 12, 31), ProjectStatus.COMPLETED),
        (date(2025, 1, 1), date(2025, 6, 15), ProjectStatus.ONGOING),
        (date(2025, 6, 15), None, ProjectStatus.ONGOING),
        (date(2025, 7, 1), date(2026, 1, 1), ProjectStatus.ACTIVE),
        (None, None, ProjectStatus.ACTIVE),
    ],
)
def test_project_status(start: date | None, end: date | None, expected: ProjectStatus) -> None:
    assert project_status(_project(1, start=start, end=end), TODAY) is expected


@pytest.mark.parametrize(
    ("start", "end", "year", "expected"),
    [
        (date(2023, 5, 1), date(2024, 2, 1), 2024, True),
        (date(2023, 5, 1), date(2024, 2, 1), 2022, False),
        (date(2025, 1, 1), None, 2030, True),
        (None, date(2020, 12, 31), 2021, False),
        (None, None, 1999, True),
    ],
)
def test_year_filter_uses_overlap(
    start: date | None, end: date | None, year: int, expected: bool
) -> None:
    project = _project(1, start=start, end=end)

    assert matches_filters(project, DashboardFilters(year=year)) is expected


def test_sector_filter_checks_standard_sectors_ignoring_case() -> None:
    projects = [
        _project(1, sector="WASH"),
        _project(2, sector="Health", standard_sectors=["wash"]),
        _project(3, sector="Education"),
    ]

    matched = filter_projects(projects, DashboardFilters(sector="Wash"))

    assert [project.id for project in matched] == [1, 2]


def test_province_filter_is_exact() -> None:
    projects = [_project(1, provinces=["Kabul"]), _project(2, provinces=["kabul"])]

    matched = filter_projects(projects, DashboardFilters(province="Kabul"))

    assert [project.id for project in matched] == [1]


def test_aggregate_overview_totals() -> None:
    projects = [
        _project(
            1,
            sector="WASH",
            start=date(2024, 1, 1),
            end=date(2026, 1, 1),
            staff=3,
            provinces=["Kabul", "Balkh"],
            beneficiaries=[
                BeneficiaryEntry("households", direct=10, indirect=5),
                BeneficiaryEntry("idps", direct=100, indirect=0, include_in_totals=False),
            ],
        ),
        _project(
            2,
            sector="Health",
            standard_sectors=["WASH"],
            start=date(2020, 1, 1),
            end=date(2021, 1, 1),
            staff=2,
            provinces=["Kabul"],
            beneficiaries=[BeneficiaryEntry("households", direct=1, indirect=1)],
        ),
        _project(3, sector="Nutrition", start=date(2026, 1, 1), provinces=["Herat"]),
    ]

    stats = aggregate_overview(["Health", "WASH"], projects, DashboardFilters(), TODAY)

    assert stats.total_projects == 3
    assert stats.active_projects == 2
    assert stats.project_status_counts.ongoing == 1
    assert stats.project_status_counts.completed == 1
    assert stats.total_beneficiaries == 17
    assert stats.covered_provinces == ["Balkh", "Herat", "Kabul"]
    assert list(stats.sectors) == ["Health", "WASH", "All Sectors"]
    assert stats.sectors["WASH"].projects == 2
    assert stats.sectors["WASH"].staff == 5
    assert stats.sectors["WASH"].beneficiaries.direct["households"] == 11
    assert stats.sectors["WASH"].beneficiaries.include["idps"] is False
    assert stats.sectors["Health"].projects == 1
    assert stats.sectors["All Sectors"].field_activity == "Joint multi-sector coordination"


def test_aggregate_overview_with_filters_keeps_configured_sectors() -> None:
    projects = [
        _project(1, sector="WASH", provinces=["Kabul"]),
        _project(2, sector="WASH", provinces=["Herat"]),
    ]

    stats = aggregate_overview(
        ["WASH", "Health"], projects, DashboardFilters(province="Herat"), TODAY
    )

    assert stats.total_projects == 1
    assert stats.covered_provinces == ["Herat"]
    assert stats.sectors["Health"].projects == 0
    assert stats.sectors["Health"].provinces == []
