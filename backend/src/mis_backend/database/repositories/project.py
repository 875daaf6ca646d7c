"""Repository for projects and their per-type beneficiary reach."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from mis_backend.database.schemas import (
    ProjectBeneficiarySchema,
    ProjectClusterSchema,
    ProjectCommunitySchema,
    ProjectDistrictSchema,
    ProjectProvinceSchema,
    ProjectSchema,
    ProjectStandardSectorSchema,
)
from mis_backend.shared import (
    BENEFICIARY_TYPE_KEYS,
    NotFoundError,
    ValidationError,
    clean_text,
)


@dataclass(slots=True)
class BeneficiaryEntry:
    type_key: str
    direct: int = 0
    indirect: int = 0
    include_in_totals: bool = True


@dataclass(slots=True)
class ProjectFields:
    """Values accepted when a project is created or replaced."""

    name: str | None
    code: str | None = None
    sector: str | None = None
    donor: str | None = None
    country: str | None = None
    start: date | None = None
    end: date | None = None
    budget: float | None = None
    focal_point: str | None = None
    goal: str | None = None
    objectives: str | None = None
    major_achievements: str | None = None
    staff: int = 0
    provinces: list[str] = field(default_factory=list)
    districts: list[str] = field(default_factory=list)
    communities: list[str] = field(default_factory=list)
    clusters: list[str] = field(default_factory=list)
    standard_sectors: list[str] = field(default_factory=list)
    beneficiaries: list[BeneficiaryEntry] | None = None


def _distinct(values: list[str]) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        text = clean_text(value)
        if text:
            seen.setdefault(text, None)
    return list(seen)


def complete_beneficiaries(entries: list[BeneficiaryEntry]) -> list[BeneficiaryEntry]:
    """Return one entry per beneficiary type, zero-filling the missing ones."""

    by_type = {entry.type_key: entry for entry in entries}
    return [
        by_type.get(type_key, BeneficiaryEntry(type_key=type_key))
        for type_key in BENEFICIARY_TYPE_KEYS
    ]


class ProjectRepository:
    """Encapsulates persistence operations for :class:`ProjectSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[ProjectSchema]:
        stmt = (
            select(ProjectSchema)
            .options(
                selectinload(ProjectSchema.provinces),
                selectinload(ProjectSchema.districts),
                selectinload(ProjectSchema.communities),
                selectinload(ProjectSchema.clusters),
                selectinload(ProjectSchema.standard_sectors),
                selectinload(ProjectSchema.beneficiaries),
            )
            .order_by(ProjectSchema.title, ProjectSchema.id)
        )
        return list(self._session.scalars(stmt))

    def get(self, project_id: int) -> ProjectSchema | None:
        return self._session.get(ProjectSchema, project_id)

    def exists(self, project_id: int) -> bool:
        stmt = select(ProjectSchema.id).where(ProjectSchema.id == project_id)
        return self._session.scalar(stmt) is not None

    def create(self, fields: ProjectFields) -> ProjectSchema:
        project = ProjectSchema()
        self._apply(project, fields)
        self._session.add(project)
        self._session.flush()
        self._session.refresh(project)
        return project

    def update(self, project_id: int, fields: ProjectFields) -> ProjectSchema:
        project = self.get(project_id)
        if project is None:
            raise NotFoundError("Project not found.")
        self._apply(project, fields)
        self._session.flush()
        self._session.refresh(project)
        return project

    def delete(self, project_id: int) -> None:
        """Delete a project with its child rows; unknown ids are ignored."""
        project = self.get(project_id)
        if project is not None:
            self._session.delete(project)
            self._session.flush()

    def replace_beneficiaries(
        self, project_id: int, entries: list[BeneficiaryEntry]
    ) -> None:
        """Overwrite the beneficiary reach of a project for every type."""
        if not self.exists(project_id):
            raise ValidationError("Project selection is invalid.")
        self._session.execute(
            delete(ProjectBeneficiarySchema).where(
                ProjectBeneficiarySchema.project_id == project_id
            )
        )
        self._session.add_all(
            ProjectBeneficiarySchema(
                project_id=project_id,
                type_key=entry.type_key,
                direct=entry.direct,
                indirect=entry.indirect,
                include_in_totals=entry.include_in_totals,
            )
            for entry in complete_beneficiaries(entries)
        )
        self._session.flush()

    def _apply(self, project: ProjectSchema, fields: ProjectFields) -> None:
        title = clean_text(fields.name)
        if title is None:
            raise ValidationError("Project name is required.")
        if fields.start and fields.end and fields.end < fields.start:
            raise ValidationError("Project end date cannot be before its start date.")
        project.title = title
        project.code = clean_text(fields.code)
        project.sector = clean_text(fields.sector)
        project.donor = clean_text(fields.donor)
        project.country = clean_text(fields.country)
        project.start_date = fields.start
        project.end_date = fields.end
        project.budget = fields.budget
        project.focal_point = clean_text(fields.focal_point)
        project.goal = clean_text(fields.goal)
        project.objectives = clean_text(fields.objectives)
        project.major_achievements = clean_text(fields.major_achievements)
        project.staff = max(fields.staff, 0)
        project.provinces = [
            ProjectProvinceSchema(province=value) for value in _distinct(fields.provinces)
        ]
        project.districts = [
            ProjectDistrictSchema(district=value) for value in _distinct(fields.districts)
        ]
        project.communities = [
            ProjectCommunitySchema(community=value)
            for value in _distinct(fields.communities)
        ]
        project.clusters = [
            ProjectClusterSchema(cluster=value) for value in _distinct(fields.clusters)
        ]
        project.standard_sectors = [
            ProjectStandardSectorSchema(standard_sector=value)
            for value in _distinct(fields.standard_sectors)
        ]
        if fields.beneficiaries is not None:
            project.beneficiaries = [
                ProjectBeneficiarySchema(
                    type_key=entry.type_key,
                    direct=entry.direct,
                    indirect=entry.indirect,
                    include_in_totals=entry.include_in_totals,
                )
                for entry in complete_beneficiaries(fields.beneficiaries)
            ]
