"""Reporting years and configured sector summaries."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mis_backend.database.base import BaseSchema


class ReportingYearSchema(BaseSchema):
    __tablename__ = "reporting_years"

    year: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)


class SectorSchema(BaseSchema):
    """Manually maintained summary for one reporting sector."""

    __tablename__ = "sectors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sector_key: Mapped[str] = mapped_column(
        String(128), unique=True, nullable=False, index=True
    )
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    projects: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)
    field_activity: Mapped[str | None] = mapped_column(Text)
    staff: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    provinces: Mapped[list[SectorProvinceSchema]] = relationship(
        cascade="all, delete-orphan", order_by="SectorProvinceSchema.id"
    )
    beneficiaries: Mapped[list[BeneficiaryStatSchema]] = relationship(
        cascade="all, delete-orphan", order_by="BeneficiaryStatSchema.id"
    )


class SectorProvinceSchema(BaseSchema):
    __tablename__ = "sector_provinces"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sector_id: Mapped[int] = mapped_column(
        ForeignKey("sectors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    province: Mapped[str] = mapped_column(String(255), nullable=False)


class BeneficiaryStatSchema(BaseSchema):
    __tablename__ = "beneficiary_stats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sector_id: Mapped[int] = mapped_column(
        ForeignKey("sectors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type_key: Mapped[str] = mapped_column(String(32), nullable=False)
    direct: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    indirect: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
