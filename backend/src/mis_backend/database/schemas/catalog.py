"""Catalog schemas: response clusters, standard sectors, main and sub sectors."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mis_backend.database.base import BaseSchema


class ClusterCatalogSchema(BaseSchema):
    __tablename__ = "cluster_catalog"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)


class SectorCatalogSchema(BaseSchema):
    __tablename__ = "sector_catalog"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)


class MainSectorSchema(BaseSchema):
    __tablename__ = "main_sectors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)


class SubSectorSchema(BaseSchema):
    """Sub-sector names are unique within their parent main sector."""

    __tablename__ = "sub_sectors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    main_sector_id: Mapped[int] = mapped_column(
        ForeignKey("main_sectors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
