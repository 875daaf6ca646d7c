"""Accountability schemas: findings and CRM awareness sessions."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mis_backend.database.base import (
    BaseSchema,
    created_at_column,
    enum_type,
    updated_at_column,
)
from mis_backend.shared import FindingSeverity, FindingStatus, FindingType


class FindingSchema(BaseSchema):
    __tablename__ = "findings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int | None] = mapped_column(
        ForeignKey("projects.id", ondelete="SET NULL"), index=True
    )
    finding_type: Mapped[FindingType] = mapped_column(
        enum_type(FindingType, "finding_type"), nullable=False
    )
    category: Mapped[str | None] = mapped_column(String(255))
    severity: Mapped[FindingSeverity] = mapped_column(
        enum_type(FindingSeverity, "finding_severity"), nullable=False
    )
    department: Mapped[str | None] = mapped_column(String(255))
    status: Mapped[FindingStatus] = mapped_column(
        enum_type(FindingStatus, "finding_status"), nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text)
    evidence_url: Mapped[str | None] = mapped_column(String(1024))
    reminder_due_at: Mapped[date | None] = mapped_column(Date)
    last_reminded_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[datetime] = created_at_column()
    updated_at: Mapped[datetime] = updated_at_column()


class CrmAwarenessSchema(BaseSchema):
    __tablename__ = "crm_awareness_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int | None] = mapped_column(
        ForeignKey("projects.id", ondelete="SET NULL"), index=True
    )
    district: Mapped[str | None] = mapped_column(String(255))
    awareness_date: Mapped[date | None] = mapped_column(Date)
    notes: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = created_at_column()
