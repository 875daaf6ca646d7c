"""Organisation branding endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from mis_backend.api.dependencies import DbSession, json_body, require_session
from mis_backend.api.errors import translate_errors
from mis_backend.api.models import (
    BrandingResponse,
    BrandingUpdateRequest,
    MessageResponse,
)
from mis_backend.api.services import DashboardService
from mis_backend.database.repositories import BrandingRepository

router = APIRouter(prefix="/branding", tags=["branding"])


@router.get("", response_model=BrandingResponse)
def read_branding(session: DbSession) -> BrandingResponse:
    """Public: the login page renders the company name and logo."""

    with translate_errors("load branding", failure_message="Failed to load branding"):
        return DashboardService(session).fetch_branding()


@router.patch(
    "",
    response_model=MessageResponse,
    dependencies=[Depends(require_session)],
)
def update_branding(
    payload: Annotated[BrandingUpdateRequest, Depends(json_body(BrandingUpdateRequest))],
    session: DbSession,
) -> MessageResponse:
    with translate_errors("update branding", failure_message="Failed to update branding"):
        BrandingRepository(session).update(
            company_name=payload.company_name,
            logo_data_url=payload.logo_data_url,
            favicon_data_url=payload.favicon_data_url,
        )
    return MessageResponse(message="Branding updated")
