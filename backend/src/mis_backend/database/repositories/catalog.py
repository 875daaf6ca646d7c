"""Repositories for the name-unique catalogs."""

from __future__ import annotations

from typing import ClassVar

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from mis_backend.database.schemas import (
    ClusterCatalogSchema,
    MainSectorSchema,
    SectorCatalogSchema,
    SubSectorSchema,
)
from mis_backend.shared import (
    DuplicateError,
    NotFoundError,
    ValidationError,
    clean_text,
    parse_identifier,
)

CatalogSchema = ClusterCatalogSchema | SectorCatalogSchema | MainSectorSchema


class CatalogRepository:
    """Create, rename and remove catalog entries whose names are unique.

    Names are compared case-insensitively. Subclasses choose the table and
    the label used in caller-facing messages.
    """

    schema: ClassVar[type[CatalogSchema]]
    label: ClassVar[str]

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_entries(self) -> list[CatalogSchema]:
        stmt = select(self.schema).order_by(func.lower(self.schema.name))
        return list(self._session.scalars(stmt))

    def create(self, *, name: str, description: str | None = None) -> CatalogSchema:
        clean_name = self._require_name(name)
        self._ensure_unique(clean_name)
        entry = self.schema(name=clean_name, description=clean_text(description))
        self._session.add(entry)
        self._session.flush()
        self._session.refresh(entry)
        return entry

    def update(
        self, entry_id: object, *, name: str, description: str | None = None
    ) -> CatalogSchema:
        numeric_id = self._parse_id(entry_id)
        clean_name = self._require_name(name)
        self._ensure_unique(clean_name, exclude_id=numeric_id)
        entry = self._get_existing(numeric_id)
        entry.name = clean_name
        entry.description = clean_text(description)
        self._session.flush()
        self._session.refresh(entry)
        return entry

    def delete(self, entry_id: object) -> None:
        entry = self._get_existing(self._parse_id(entry_id))
        self._session.delete(entry)
        self._session.flush()

    def _parse_id(self, entry_id: object) -> int:
        return parse_identifier(entry_id, f"A valid {self.label} id is required.")

    def _require_name(self, name: str) -> str:
        clean_name = clean_text(name)
        if clean_name is None:
            raise ValidationError(f"{self.label.capitalize()} name is required.")
        return clean_name

    def _get_existing(self, entry_id: int) -> CatalogSchema:
        entry = self._session.get(self.schema, entry_id)
        if entry is None:
            raise NotFoundError(f"{self.label.capitalize()} entry not found.")
        return entry

    def _ensure_unique(self, name: str, *, exclude_id: int | None = None) -> None:
        stmt = select(self.schema.id).where(
            func.lower(self.schema.name) == name.lower()
        )
        if exclude_id is not None:
            stmt = stmt.where(self.schema.id != exclude_id)
        if self._session.scalar(stmt.limit(1)) is not None:
            raise DuplicateError(f"A {self.label} with this name already exists.")


class ClusterCatalogRepository(CatalogRepository):
    schema = ClusterCatalogSchema
    label = "cluster"


class SectorCatalogRepository(CatalogRepository):
    schema = SectorCatalogSchema
    label = "sector"


class MainSectorRepository(CatalogRepository):
    schema = MainSectorSchema
    label = "main sector"

    def delete(self, entry_id: object) -> None:
        entry = self._get_existing(self._parse_id(entry_id))
        self._session.execute(
            delete(SubSectorSchema).where(SubSectorSchema.main_sector_id == entry.id)
        )
        self._session.delete(entry)
        self._session.flush()


class SubSectorRepository:
    """Sub-sectors are unique by name within their main sector."""

    duplicate_message = (
        "A sub-sector with this name already exists for the selected main sector."
    )

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_entries(self) -> list[SubSectorSchema]:
        stmt = select(SubSectorSchema).order_by(
            SubSectorSchema.main_sector_id, func.lower(SubSectorSchema.name)
        )
        return list(self._session.scalars(stmt))

    def create(
        self, *, main_sector_id: object, name: str, description: str | None = None
    ) -> SubSectorSchema:
        parent_id = self._parse_main_sector(main_sector_id)
        clean_name = self._require_name(name)
        self._ensure_unique(parent_id, clean_name)
        entry = SubSectorSchema(
            main_sector_id=parent_id,
            name=clean_name,
            description=clean_text(description),
        )
        self._session.add(entry)
        self._session.flush()
        self._session.refresh(entry)
        return entry

    def update(
        self,
        entry_id: object,
        *,
        main_sector_id: object,
        name: str,
        description: str | None = None,
    ) -> SubSectorSchema:
        numeric_id = parse_identifier(entry_id, "A valid sub-sector id is required.")
        parent_id = self._parse_main_sector(main_sector_id)
        clean_name = self._require_name(name)
        self._ensure_unique(parent_id, clean_name, exclude_id=numeric_id)
        entry = self._get_existing(numeric_id)
        entry.main_sector_id = parent_id
        entry.name = clean_name
        entry.description = clean_text(description)
        self._session.flush()
        self._session.refresh(entry)
        return entry

    def delete(self, entry_id: object) -> None:
        numeric_id = parse_identifier(entry_id, "A valid sub-sector id is required.")
        self._session.delete(self._get_existing(numeric_id))
        self._session.flush()

    def _parse_main_sector(self, main_sector_id: object) -> int:
        parent_id = parse_identifier(
            main_sector_id, "A valid main sector id is required."
        )
        if self._session.get(MainSectorSchema, parent_id) is None:
            raise ValidationError("Selected main sector does not exist.")
        return parent_id

    def _require_name(self, name: str) -> str:
        clean_name = clean_text(name)
        if clean_name is None:
            raise ValidationError("Sub-sector name is required.")
        return clean_name

    def _get_existing(self, entry_id: int) -> SubSectorSchema:
        entry = self._session.get(SubSectorSchema, entry_id)
        if entry is None:
            raise NotFoundError("Sub-sector entry not found.")
        return entry

    def _ensure_unique(
        self, main_sector_id: int, name: str, *, exclude_id: int | None = None
    ) -> None:
        stmt = select(SubSectorSchema.id).where(
            SubSectorSchema.main_sector_id == main_sector_id,
            func.lower(SubSectorSchema.name) == name.lower(),
        )
        if exclude_id is not None:
            stmt = stmt.where(SubSectorSchema.id != exclude_id)
        if self._session.scalar(stmt.limit(1)) is not None:
            raise DuplicateError(self.duplicate_message)
