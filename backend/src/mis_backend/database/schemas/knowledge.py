"""Learning schemas: lessons and post-distribution monitoring records."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mis_backend.database.base import BaseSchema, created_at_column


class LessonSchema(BaseSchema):
    __tablename__ = "lessons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int | None] = mapped_column(
        ForeignKey("projects.id", ondelete="SET NULL"), index=True
    )
    source: Mapped[str | None] = mapped_column(String(255))
    lesson: Mapped[str] = mapped_column(Text, nullable=False)
    department: Mapped[str | None] = mapped_column(String(255))
    theme: Mapped[str | None] = mapped_column(String(255))
    captured_at: Mapped[date | None] = mapped_column(Date)
    created_at: Mapped[datetime] = created_at_column()


class DistributionSchema(BaseSchema):
    __tablename__ = "distribution_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int | None] = mapped_column(
        ForeignKey("projects.id", ondelete="SET NULL"), index=True
    )
    assistance_type: Mapped[str] = mapped_column(String(255), nullable=False)
    distribution_date: Mapped[date | None] = mapped_column(Date)
    location: Mapped[str | None] = mapped_column(String(255))
    target_beneficiaries: Mapped[int | None] = mapped_column(Integer)
    notes: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = created_at_column()


class PdmSurveySchema(BaseSchema):
    __tablename__ = "pdm_surveys"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int | None] = mapped_column(
        ForeignKey("projects.id", ondelete="SET NULL"), index=True
    )
    tool: Mapped[str | None] = mapped_column(String(255))
    quality_score: Mapped[float | None] = mapped_column(Float)
    quantity_score: Mapped[float | None] = mapped_column(Float)
    satisfaction_score: Mapped[float | None] = mapped_column(Float)
    protection_score: Mapped[float | None] = mapped_column(Float)
    completed_at: Mapped[date | None] = mapped_column(Date)
    created_at: Mapped[datetime] = created_at_column()


class PdmReportSchema(BaseSchema):
    __tablename__ = "pdm_reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int | None] = mapped_column(
        ForeignKey("projects.id", ondelete="SET NULL"), index=True
    )
    report_date: Mapped[date | None] = mapped_column(Date)
    summary: Mapped[str | None] = mapped_column(Text)
    recommendations: Mapped[str | None] = mapped_column(Text)
    feedback_to_program: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = created_at_column()
