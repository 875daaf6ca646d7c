"""Models for catalog endpoints."""

from __future__ import annotations

from mis_backend.api.models.common import RawIdentifier, RequestModel, ResponseModel


class CatalogEntryRequest(RequestModel):
    name: str | None = None
    description: str | None = None


class CatalogEntryResponse(ResponseModel):
    id: str
    name: str
    description: str | None = None


class SubSectorRequest(RequestModel):
    main_sector_id: RawIdentifier = None
    name: str | None = None
    description: str | None = None


class SubSectorResponse(ResponseModel):
    id: str
    main_sector_id: str
    name: str
    description: str | None = None
