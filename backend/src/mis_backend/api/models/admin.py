"""Models for branding, complaints, reporting years, sectors and users."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from mis_backend.api.models.common import OptionalDate, RequestModel, ResponseModel
from mis_backend.shared import UserRole


class BrandingResponse(ResponseModel):
    company_name: str
    logo_data_url: str | None = None
    favicon_data_url: str | None = None


class BrandingUpdateRequest(RequestModel):
    company_name: str | None = None
    logo_data_url: str | None = None
    favicon_data_url: str | None = None


class ComplaintRequest(RequestModel):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    message: str | None = None


class ComplaintResponse(ResponseModel):
    id: str
    full_name: str
    email: str
    phone: str | None = None
    message: str
    submitted_at: datetime


class ReportingYearRequest(RequestModel):
    """``year`` stays untyped here; numeric coercion happens in the route."""

    year: Any = None


class UserRequest(RequestModel):
    name: str | None = None
    email: str | None = None
    role: str | None = None
    organization: str | None = None
    password: str | None = None


class UserResponse(ResponseModel):
    id: str
    name: str
    email: str
    role: UserRole
    organization: str | None = None


class BeneficiaryCountsRequest(RequestModel):
    direct: dict[str, float] = Field(default_factory=dict)
    indirect: dict[str, float] = Field(default_factory=dict)


class SectorUpdateRequest(RequestModel):
    """Summary values for one sector, as edited on the admin page."""

    provinces: list[str] = Field(default_factory=list)
    beneficiaries: BeneficiaryCountsRequest = Field(
        default_factory=BeneficiaryCountsRequest
    )
    projects: int = 0
    start: OptionalDate = None
    end: OptionalDate = None
    field_activity: str | None = None
    staff: int = 0
