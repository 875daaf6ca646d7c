"""Models for project and beneficiary endpoints."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import Field

from mis_backend.api.models.common import (
    OptionalDate,
    OptionalFloat,
    RawIdentifier,
    RequestModel,
    ResponseModel,
)
from mis_backend.database.repositories import BeneficiaryEntry, ProjectFields
from mis_backend.database.schemas import ProjectSchema
from mis_backend.shared import BENEFICIARY_TYPE_KEYS, normalize_count


class ProjectBeneficiariesRequest(RequestModel):
    """Per-type counts; types missing from ``include`` count toward totals."""

    direct: dict[str, Any] = Field(default_factory=dict)
    indirect: dict[str, Any] = Field(default_factory=dict)
    include: dict[str, bool] = Field(default_factory=dict)

    def to_entries(self) -> list[BeneficiaryEntry]:
        return [
            BeneficiaryEntry(
                type_key=type_key,
                direct=normalize_count(self.direct.get(type_key)),
                indirect=normalize_count(self.indirect.get(type_key)),
                include_in_totals=self.include.get(type_key, True),
            )
            for type_key in BENEFICIARY_TYPE_KEYS
        ]


class ProjectRequest(RequestModel):
    name: str | None = None
    code: str | None = None
    sector: str | None = None
    donor: str | None = None
    country: str | None = None
    start: OptionalDate = None
    end: OptionalDate = None
    budget: OptionalFloat = None
    focal_point: str | None = None
    goal: str | None = None
    objectives: str | None = None
    major_achievements: str | None = None
    staff: Any = 0
    provinces: list[str] = Field(default_factory=list)
    districts: list[str] = Field(default_factory=list)
    communities: list[str] = Field(default_factory=list)
    clusters: list[str] = Field(default_factory=list)
    standard_sectors: list[str] = Field(default_factory=list)
    beneficiaries: ProjectBeneficiariesRequest | None = None

    def to_fields(self) -> ProjectFields:
        return ProjectFields(
            name=self.name,
            code=self.code,
            sector=self.sector,
            donor=self.donor,
            country=self.country,
            start=self.start,
            end=self.end,
            budget=self.budget,
            focal_point=self.focal_point,
            goal=self.goal,
            objectives=self.objectives,
            major_achievements=self.major_achievements,
            staff=_coerce_staff(self.staff),
            provinces=self.provinces,
            districts=self.districts,
            communities=self.communities,
            clusters=self.clusters,
            standard_sectors=self.standard_sectors,
            beneficiaries=(
                self.beneficiaries.to_entries() if self.beneficiaries else None
            ),
        )


def _coerce_staff(value: Any) -> int:
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return 0
    return normalize_count(value)


class BeneficiaryUpdateRequest(RequestModel):
    """Raw form payload; entries are screened one by one in the route."""

    project_id: RawIdentifier = None
    beneficiaries: Any = None


class ProjectBeneficiaryResponse(ResponseModel):
    type_key: str
    direct: int
    indirect: int
    include_in_totals: bool


class ProjectResponse(ResponseModel):
    id: str
    code: str | None = None
    name: str
    donor: str | None = None
    sector: str | None = None
    country: str | None = None
    start: date | None = None
    end: date | None = None
    budget: float | None = None
    focal_point: str | None = None
    goal: str | None = None
    objectives: str | None = None
    major_achievements: str | None = None
    staff: int = 0
    provinces: list[str] = Field(default_factory=list)
    districts: list[str] = Field(default_factory=list)
    communities: list[str] = Field(default_factory=list)
    clusters: list[str] = Field(default_factory=list)
    standard_sectors: list[str] = Field(default_factory=list)
    beneficiaries: list[ProjectBeneficiaryResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_schema(cls, project: ProjectSchema) -> ProjectResponse:
        """Flatten a project row and its child tables."""
        return cls(
            id=str(project.id),
            code=project.code,
            name=project.title,
            donor=project.donor,
            sector=project.sector,
            country=project.country,
            start=project.start_date,
            end=project.end_date,
            budget=project.budget,
            focal_point=project.focal_point,
            goal=project.goal,
            objectives=project.objectives,
            major_achievements=project.major_achievements,
            staff=project.staff,
            provinces=[row.province for row in project.provinces],
            districts=[row.district for row in project.districts],
            communities=[row.community for row in project.communities],
            clusters=[row.cluster for row in project.clusters],
            standard_sectors=[row.standard_sector for row in project.standard_sectors],
            beneficiaries=[
                ProjectBeneficiaryResponse.model_validate(row)
                for row in project.beneficiaries
            ],
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
