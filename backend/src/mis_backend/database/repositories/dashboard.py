"""Read-only queries used by the dashboard aggregations."""

from __future__ import annotations

from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from mis_backend.database.base import BaseSchema
from mis_backend.database.schemas import ProjectProvinceSchema

RecordT = TypeVar("RecordT", bound=BaseSchema)


class DashboardRepository:
    """Bulk reads over record tables that have no dedicated repository."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_records(self, schema: type[RecordT]) -> list[RecordT]:
        """Return every row of ``schema``, newest first."""
        stmt = select(schema).order_by(schema.id.desc())  # type: ignore[attr-defined]
        return list(self._session.scalars(stmt))

    def list_project_provinces(self) -> list[str]:
        stmt = (
            select(ProjectProvinceSchema.province)
            .distinct()
            .order_by(ProjectProvinceSchema.province)
        )
        return list(self._session.scalars(stmt))
