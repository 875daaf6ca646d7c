"""Dashboard bootstrap endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from mis_backend.api.dependencies import DbSession, require_session
from mis_backend.api.errors import translate_errors
from mis_backend.api.models import DashboardStateResponse
from mis_backend.api.services import DashboardService

router = APIRouter(
    prefix="/dashboard", tags=["dashboard"], dependencies=[Depends(require_session)]
)


@router.get("/state", response_model=DashboardStateResponse)
def read_dashboard_state(session: DbSession) -> DashboardStateResponse:
    """Return everything the dashboard renders on first load."""

    with translate_errors(
        "load dashboard state", failure_message="Failed to load dashboard state"
    ):
        return DashboardService(session).fetch_dashboard_state()
