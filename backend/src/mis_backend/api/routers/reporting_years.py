"""Reporting year endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from mis_backend.api.dependencies import DbSession, json_body, require_session
from mis_backend.api.errors import ApiError, translate_errors
from mis_backend.api.models import MessageResponse, ReportingYearRequest
from mis_backend.database.repositories import ReportingYearRepository
from mis_backend.shared import parse_year

router = APIRouter(
    prefix="/reporting-years",
    tags=["reporting-years"],
    dependencies=[Depends(require_session)],
)

INVALID_YEAR = "Invalid year"


def _require_year(value: object) -> int:
    year = parse_year(value)
    if year is None:
        raise ApiError(status.HTTP_400_BAD_REQUEST, INVALID_YEAR)
    return year


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_reporting_year(
    payload: Annotated[ReportingYearRequest, Depends(json_body(ReportingYearRequest))],
    session: DbSession,
) -> MessageResponse:
    """Adding a year that already exists is acknowledged all the same."""

    year = _require_year(payload.year)
    with translate_errors("add reporting year", failure_message="Failed to add reporting year"):
        ReportingYearRepository(session).add(year)
    return MessageResponse(message="Year added")


@router.delete("/{year}", response_model=MessageResponse)
def remove_reporting_year(year: str, session: DbSession) -> MessageResponse:
    numeric_year = _require_year(year)
    with translate_errors(
        "remove reporting year", failure_message="Failed to remove reporting year"
    ):
        ReportingYearRepository(session).delete(numeric_year)
    return MessageResponse(message="Year removed")
