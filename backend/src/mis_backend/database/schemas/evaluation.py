"""Evaluation and story schemas."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mis_backend.database.base import BaseSchema, created_at_column, enum_type
from mis_backend.shared import EvaluationType, StoryType


class EvaluationSchema(BaseSchema):
    __tablename__ = "evaluations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int | None] = mapped_column(
        ForeignKey("projects.id", ondelete="SET NULL"), index=True
    )
    evaluator_name: Mapped[str | None] = mapped_column(String(255))
    evaluation_type: Mapped[EvaluationType] = mapped_column(
        enum_type(EvaluationType, "evaluation_type"), nullable=False
    )
    report_url: Mapped[str | None] = mapped_column(String(1024))
    findings_summary: Mapped[str | None] = mapped_column(Text)
    completed_at: Mapped[date | None] = mapped_column(Date)
    created_at: Mapped[datetime] = created_at_column()


class StorySchema(BaseSchema):
    __tablename__ = "stories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int | None] = mapped_column(
        ForeignKey("projects.id", ondelete="SET NULL"), index=True
    )
    story_type: Mapped[StoryType] = mapped_column(
        enum_type(StoryType, "story_type"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    quote: Mapped[str | None] = mapped_column(Text)
    summary: Mapped[str | None] = mapped_column(Text)
    photo_url: Mapped[str | None] = mapped_column(String(1024))
    created_at: Mapped[datetime] = created_at_column()
