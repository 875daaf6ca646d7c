"""Read-only reporting endpoints behind the public dashboard."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from mis_backend.api.dependencies import DbSession
from mis_backend.api.errors import translate_errors
from mis_backend.api.models import (
    AccountabilityOverviewResponse,
    AvailableFiltersResponse,
    EvaluationOverviewResponse,
    KnowledgeOverviewResponse,
    MonitoringOverviewResponse,
    OverviewStatsResponse,
    ProjectListItemResponse,
    SectorListItemResponse,
)
from mis_backend.api.services import DashboardFilters, DashboardService
from mis_backend.shared import clean_text, parse_year_filter

router = APIRouter(prefix="/v2/dashboard", tags=["dashboard-v2"])


def get_filters(
    year: Annotated[str | None, Query()] = None,
    province: Annotated[str | None, Query()] = None,
    sector: Annotated[str | None, Query()] = None,
) -> DashboardFilters:
    """Read the optional filters.

    Blank or unparsable values are ignored, as are years outside the calendar.
    """

    return DashboardFilters(
        year=parse_year_filter(year),
        province=clean_text(province),
        sector=clean_text(sector),
    )


Filters = Annotated[DashboardFilters, Depends(get_filters)]


@router.get("/overview", response_model=OverviewStatsResponse)
def read_overview(filters: Filters, session: DbSession) -> OverviewStatsResponse:
    with translate_errors(
        "load overview stats", failure_message="Failed to load dashboard overview stats"
    ):
        return DashboardService(session).fetch_overview_stats(filters)


@router.get("/sectors", response_model=list[SectorListItemResponse])
def read_sectors(filters: Filters, session: DbSession) -> list[SectorListItemResponse]:
    with translate_errors("load sectors list", failure_message="Failed to load sectors list"):
        return DashboardService(session).fetch_sectors_list(filters)


@router.get("/projects", response_model=list[ProjectListItemResponse])
def read_projects(
    filters: Filters, session: DbSession
) -> list[ProjectListItemResponse]:
    with translate_errors("load projects list", failure_message="Failed to load projects list"):
        return DashboardService(session).fetch_projects_list(filters)


@router.get("/monitoring", response_model=MonitoringOverviewResponse)
def read_monitoring(filters: Filters, session: DbSession) -> MonitoringOverviewResponse:
    with translate_errors(
        "load monitoring overview", failure_message="Failed to load monitoring overview"
    ):
        return DashboardService(session).fetch_monitoring_overview(filters)


@router.get("/evaluation", response_model=EvaluationOverviewResponse)
def read_evaluation(filters: Filters, session: DbSession) -> EvaluationOverviewResponse:
    with translate_errors(
        "load evaluation overview", failure_message="Failed to load evaluation overview"
    ):
        return DashboardService(session).fetch_evaluation_overview(filters)


@router.get("/accountability", response_model=AccountabilityOverviewResponse)
def read_accountability(
    filters: Filters, session: DbSession
) -> AccountabilityOverviewResponse:
    with translate_errors(
        "load accountability overview",
        failure_message="Failed to load accountability overview",
    ):
        return DashboardService(session).fetch_accountability_overview(filters)


@router.get("/knowledge", response_model=KnowledgeOverviewResponse)
def read_knowledge(filters: Filters, session: DbSession) -> KnowledgeOverviewResponse:
    with translate_errors(
        "load knowledge overview", failure_message="Failed to load knowledge overview"
    ):
        return DashboardService(session).fetch_knowledge_overview(filters)


@router.get("/filters", response_model=AvailableFiltersResponse)
def read_filters(session: DbSession) -> AvailableFiltersResponse:
    """Reporting years (newest first) and the provinces projects cover."""

    with translate_errors("load dashboard filters", failure_message="Failed to load dashboard filters"):
        return DashboardService(session).fetch_available_filters()
