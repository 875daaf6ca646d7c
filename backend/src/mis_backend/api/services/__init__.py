"""Service layer for API-specific business logic."""

from mis_backend.api.services.auth import (
    SESSION_COOKIE_NAME,
    InvalidCredentialsError,
    SessionInfo,
    SessionService,
    SessionUser,
)
from mis_backend.api.services.dashboard import (
    DashboardFilters,
    DashboardService,
    ProjectSnapshot,
    ProjectStatus,
    aggregate_overview,
    filter_projects,
    matches_filters,
    project_status,
    summarise_configured_sectors,
)

__all__ = [
    "SESSION_COOKIE_NAME",
    "DashboardFilters",
    "DashboardService",
    "InvalidCredentialsError",
    "ProjectSnapshot",
    "ProjectStatus",
    "SessionInfo",
    "SessionService",
    "SessionUser",
    "aggregate_overview",
    "filter_projects",
    "matches_filters",
    "project_status",
    "summarise_configured_sectors",
]
