"""Declarative base and column helpers for SQLAlchemy models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from sqlalchemy import DateTime, Enum, func
from sqlalchemy.orm import DeclarativeBase, MappedColumn, mapped_column


class BaseSchema(DeclarativeBase):
    """Base class for all SQLAlchemy schemas."""

    pass


def _enum_values(enum_type: type[StrEnum]) -> list[str]:
    return [member.value for member in enum_type]


def enum_type(enum_cls: type[StrEnum], name: str) -> Enum:
    """Build an :class:`Enum` column type persisting member values."""
    return Enum(enum_cls, name=name, values_callable=_enum_values)


def created_at_column() -> MappedColumn[datetime]:
    return mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


def updated_at_column() -> MappedColumn[datetime]:
    return mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
