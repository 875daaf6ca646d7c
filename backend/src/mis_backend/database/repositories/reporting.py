"""Repositories for reporting years and configured sector summaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from mis_backend.database.schemas import (
    BeneficiaryStatSchema,
    ReportingYearSchema,
    SectorProvinceSchema,
    SectorSchema,
)
from mis_backend.shared import (
    BENEFICIARY_TYPE_KEYS,
    BeneficiaryBreakdown,
    ValidationError,
    clean_text,
)


class ReportingYearRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_years(self, *, descending: bool = False) -> list[int]:
        column = ReportingYearSchema.year
        stmt = select(column).order_by(column.desc() if descending else column)
        return list(self._session.scalars(stmt))

    def add(self, year: int) -> None:
        """Register ``year``; an already known year is left untouched."""
        if self._session.get(ReportingYearSchema, year) is None:
            self._session.add(ReportingYearSchema(year=year))
            self._session.flush()

    def delete(self, year: int) -> None:
        self._session.execute(
            delete(ReportingYearSchema).where(ReportingYearSchema.year == year)
        )
        self._session.flush()


@dataclass(slots=True)
class SectorFields:
    """Editable summary values for one configured sector."""

    projects: int = 0
    start: date | None = None
    end: date | None = None
    field_activity: str | None = None
    staff: int = 0
    provinces: list[str] = field(default_factory=list)
    beneficiaries: BeneficiaryBreakdown = field(default_factory=BeneficiaryBreakdown)


class SectorRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[SectorSchema]:
        stmt = (
            select(SectorSchema)
            .options(
                selectinload(SectorSchema.provinces),
                selectinload(SectorSchema.beneficiaries),
            )
            .order_by(SectorSchema.display_name)
        )
        return list(self._session.scalars(stmt))

    def upsert(self, sector_key: str, fields: SectorFields) -> SectorSchema:
        """Create or overwrite the sector identified by ``sector_key``.

        Provinces and beneficiary counts are replaced as a whole.
        """
        key = clean_text(sector_key)
        if key is None:
            raise ValidationError("Sector key is required.")
        sector = self._session.scalar(
            select(SectorSchema).where(SectorSchema.sector_key == key)
        )
        if sector is None:
            sector = SectorSchema(sector_key=key, display_name=key)
            self._session.add(sector)
        sector.projects = fields.projects
        sector.start_date = fields.start
        sector.end_date = fields.end
        sector.field_activity = fields.field_activity
        sector.staff = fields.staff
        sector.provinces = [
            SectorProvinceSchema(province=province)
            for province in (clean_text(value) for value in fields.provinces)
            if province
        ]
        sector.beneficiaries = [
            BeneficiaryStatSchema(
                type_key=type_key,
                direct=fields.beneficiaries.direct[type_key],
                indirect=fields.beneficiaries.indirect[type_key],
            )
            for type_key in BENEFICIARY_TYPE_KEYS
        ]
        self._session.flush()
        self._session.refresh(sector)
        return sector
