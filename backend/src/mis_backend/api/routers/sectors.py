"""Sector summary endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from mis_backend.api.dependencies import DbSession, json_body, require_session
from mis_backend.api.errors import translate_errors
from mis_backend.api.models import MessageResponse, SectorUpdateRequest
from mis_backend.database.repositories import SectorFields, SectorRepository
from mis_backend.shared import BENEFICIARY_TYPE_KEYS, BeneficiaryBreakdown, normalize_count

router = APIRouter(
    prefix="/sectors", tags=["sectors"], dependencies=[Depends(require_session)]
)


def _to_fields(payload: SectorUpdateRequest) -> SectorFields:
    beneficiaries = BeneficiaryBreakdown()
    for type_key in BENEFICIARY_TYPE_KEYS:
        beneficiaries.add(
            type_key,
            normalize_count(payload.beneficiaries.direct.get(type_key, 0)),
            normalize_count(payload.beneficiaries.indirect.get(type_key, 0)),
        )
    return SectorFields(
        projects=normalize_count(payload.projects),
        start=payload.start,
        end=payload.end,
        field_activity=payload.field_activity,
        staff=normalize_count(payload.staff),
        provinces=payload.provinces,
        beneficiaries=beneficiaries,
    )


@router.put("/{sector_key}", response_model=MessageResponse)
def update_sector(
    sector_key: str,
    payload: Annotated[SectorUpdateRequest, Depends(json_body(SectorUpdateRequest))],
    session: DbSession,
) -> MessageResponse:
    """Create or overwrite the summary stored for ``sector_key``."""

    with translate_errors("update sector", failure_message="Failed to update sector"):
        SectorRepository(session).upsert(sector_key, _to_fields(payload))
    return MessageResponse(message="Sector updated")
