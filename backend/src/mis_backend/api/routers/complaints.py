"""Complaint intake endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from mis_backend.api.dependencies import DbSession, json_body, require_session
from mis_backend.api.errors import translate_errors
from mis_backend.api.models import ComplaintRequest, MessageResponse
from mis_backend.database.repositories import ComplaintRepository
from mis_backend.shared import parse_identifier

router = APIRouter(
    prefix="/complaints", tags=["complaints"], dependencies=[Depends(require_session)]
)


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def record_complaint(
    payload: Annotated[ComplaintRequest, Depends(json_body(ComplaintRequest))],
    session: DbSession,
) -> MessageResponse:
    with translate_errors("record complaint", failure_message="Failed to record complaint"):
        ComplaintRepository(session).add(
            full_name=payload.full_name,
            email=payload.email,
            phone=payload.phone,
            message=payload.message,
        )
    return MessageResponse(message="Complaint recorded")


@router.delete("/{complaint_id}", response_model=MessageResponse)
def archive_complaint(complaint_id: str, session: DbSession) -> MessageResponse:
    """Complaints are removed outright; unknown ids still acknowledge."""

    with translate_errors("delete complaint", failure_message="Failed to delete complaint"):
        numeric_id = parse_identifier(complaint_id, "A valid complaint id is required.")
        ComplaintRepository(session).delete(numeric_id)
    return MessageResponse(message="Complaint archived")
