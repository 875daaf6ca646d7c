"""Monitoring schemas: baseline surveys, enumerators, field visits, monthly reports."""

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
from mis_backend.shared import (
    BaselineSurveyStatus,
    BaselineSurveyTool,
    MonthlyReportStatus,
)


class BaselineSurveySchema(BaseSchema):
    __tablename__ = "baseline_surveys"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    tool: Mapped[BaselineSurveyTool] = mapped_column(
        enum_type(BaselineSurveyTool, "baseline_survey_tool"), nullable=False
    )
    status: Mapped[BaselineSurveyStatus] = mapped_column(
        enum_type(BaselineSurveyStatus, "baseline_survey_status"), nullable=False
    )
    questionnaire_url: Mapped[str | None] = mapped_column(String(1024))
    created_at: Mapped[datetime] = created_at_column()
    updated_at: Mapped[datetime] = updated_at_column()


class EnumeratorSchema(BaseSchema):
    __tablename__ = "enumerators"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(64))
    province: Mapped[str | None] = mapped_column(String(255))


class FieldVisitSchema(BaseSchema):
    __tablename__ = "field_visit_reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    visit_date: Mapped[date] = mapped_column(Date, nullable=False)
    location: Mapped[str | None] = mapped_column(String(255))
    positive_findings: Mapped[str | None] = mapped_column(Text)
    negative_findings: Mapped[str | None] = mapped_column(Text)
    photo_url: Mapped[str | None] = mapped_column(String(1024))
    gps_coordinates: Mapped[str | None] = mapped_column(String(128))
    officer: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = created_at_column()


class MonthlyReportSchema(BaseSchema):
    __tablename__ = "monthly_reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    report_month: Mapped[str] = mapped_column(String(16), nullable=False)
    summary: Mapped[str | None] = mapped_column(Text)
    gaps: Mapped[str | None] = mapped_column(Text)
    recommendations: Mapped[str | None] = mapped_column(Text)
    status: Mapped[MonthlyReportStatus] = mapped_column(
        enum_type(MonthlyReportStatus, "monthly_report_status"), nullable=False
    )
    reviewer: Mapped[str | None] = mapped_column(String(255))
    feedback: Mapped[str | None] = mapped_column(Text)
    submitted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = updated_at_column()
