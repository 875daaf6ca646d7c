"""Project schemas and their location, cluster and beneficiary children."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Boolean, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mis_backend.database.base import (
    BaseSchema,
    created_at_column,
    updated_at_column,
)


class ProjectSchema(BaseSchema):
    """A funded project and the attributes the dashboards aggregate."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str | None] = mapped_column(String(64), index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    donor: Mapped[str | None] = mapped_column(String(255))
    sector: Mapped[str | None] = mapped_column(String(255))
    country: Mapped[str | None] = mapped_column(String(128))
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)
    budget: Mapped[float | None] = mapped_column(Float)
    focal_point: Mapped[str | None] = mapped_column(String(255))
    goal: Mapped[str | None] = mapped_column(Text)
    objectives: Mapped[str | None] = mapped_column(Text)
    major_achievements: Mapped[str | None] = mapped_column(Text)
    staff: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = created_at_column()
    updated_at: Mapped[datetime] = updated_at_column()

    provinces: Mapped[list[ProjectProvinceSchema]] = relationship(
        cascade="all, delete-orphan", order_by="ProjectProvinceSchema.id"
    )
    districts: Mapped[list[ProjectDistrictSchema]] = relationship(
        cascade="all, delete-orphan", order_by="ProjectDistrictSchema.id"
    )
    communities: Mapped[list[ProjectCommunitySchema]] = relationship(
        cascade="all, delete-orphan", order_by="ProjectCommunitySchema.id"
    )
    clusters: Mapped[list[ProjectClusterSchema]] = relationship(
        cascade="all, delete-orphan", order_by="ProjectClusterSchema.id"
    )
    standard_sectors: Mapped[list[ProjectStandardSectorSchema]] = relationship(
        cascade="all, delete-orphan", order_by="ProjectStandardSectorSchema.id"
    )
    beneficiaries: Mapped[list[ProjectBeneficiarySchema]] = relationship(
        cascade="all, delete-orphan", order_by="ProjectBeneficiarySchema.id"
    )


class ProjectProvinceSchema(BaseSchema):
    __tablename__ = "project_provinces"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    province: Mapped[str] = mapped_column(String(255), nullable=False)


class ProjectDistrictSchema(BaseSchema):
    __tablename__ = "project_districts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    district: Mapped[str] = mapped_column(String(255), nullable=False)


class ProjectCommunitySchema(BaseSchema):
    __tablename__ = "project_communities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    community: Mapped[str] = mapped_column(String(255), nullable=False)


class ProjectClusterSchema(BaseSchema):
    __tablename__ = "project_clusters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    cluster: Mapped[str] = mapped_column(String(255), nullable=False)


class ProjectStandardSectorSchema(BaseSchema):
    __tablename__ = "project_standard_sectors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    standard_sector: Mapped[str] = mapped_column(String(255), nullable=False)


class ProjectBeneficiarySchema(BaseSchema):
    """Direct and indirect reach for one beneficiary type of a project."""

    __tablename__ = "project_beneficiaries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type_key: Mapped[str] = mapped_column(String(32), nullable=False)
    direct: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    indirect: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    include_in_totals: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )
