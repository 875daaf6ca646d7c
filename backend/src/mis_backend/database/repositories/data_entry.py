"""Repository behind the monitoring, evaluation, accountability and learning forms."""

from __future__ import annotations

from datetime import date, datetime
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from mis_backend.database.base import BaseSchema
from mis_backend.database.schemas import (
    BaselineSurveySchema,
    CrmAwarenessSchema,
    DistributionSchema,
    EnumeratorSchema,
    EvaluationSchema,
    FieldVisitSchema,
    FindingSchema,
    LessonSchema,
    MonthlyReportSchema,
    PdmReportSchema,
    PdmSurveySchema,
    ProjectSchema,
    StorySchema,
)
from mis_backend.shared import (
    BaselineSurveyStatus,
    BaselineSurveyTool,
    EvaluationType,
    FindingSeverity,
    FindingStatus,
    FindingType,
    MonthlyReportStatus,
    StoryType,
    ValidationError,
    clean_text,
    coerce_choice,
    parse_identifier,
    parse_optional_identifier,
)

RecordT = TypeVar("RecordT", bound=BaseSchema)

REQUIRED_PROJECT_MESSAGE = "A valid project id is required."
INVALID_PROJECT_MESSAGE = "Project selection is invalid."


class DataEntryRepository:
    """Creates the records captured through the data-entry forms.

    Every ``create_*`` method validates its mandatory fields, maps free-form
    choices onto the known enumerations and returns the stored row.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _store(self, record: RecordT) -> RecordT:
        self._session.add(record)
        self._session.flush()
        self._session.refresh(record)
        return record

    def _project_exists(self, project_id: int) -> bool:
        stmt = select(ProjectSchema.id).where(ProjectSchema.id == project_id)
        return self._session.scalar(stmt) is not None

    def _required_project(self, project_id: object) -> int:
        numeric_id = parse_identifier(project_id, REQUIRED_PROJECT_MESSAGE)
        if not self._project_exists(numeric_id):
            raise ValidationError(INVALID_PROJECT_MESSAGE)
        return numeric_id

    def _optional_project(self, project_id: object) -> int | None:
        numeric_id = parse_optional_identifier(project_id, INVALID_PROJECT_MESSAGE)
        if numeric_id is not None and not self._project_exists(numeric_id):
            raise ValidationError(INVALID_PROJECT_MESSAGE)
        return numeric_id

    # Monitoring

    def create_baseline_survey(
        self,
        *,
        project_id: object,
        title: str | None,
        tool: str | None = None,
        status: str | None = None,
        questionnaire_url: str | None = None,
    ) -> BaselineSurveySchema:
        numeric_id = self._required_project(project_id)
        clean_title = clean_text(title)
        if clean_title is None:
            raise ValidationError("Baseline survey title is required.")
        return self._store(
            BaselineSurveySchema(
                project_id=numeric_id,
                title=clean_title,
                tool=coerce_choice(BaselineSurveyTool, tool, BaselineSurveyTool.MANUAL),
                status=coerce_choice(
                    BaselineSurveyStatus, status, BaselineSurveyStatus.DRAFT
                ),
                questionnaire_url=clean_text(questionnaire_url),
            )
        )

    def create_enumerator(
        self,
        *,
        full_name: str | None,
        email: str | None = None,
        phone: str | None = None,
        province: str | None = None,
    ) -> EnumeratorSchema:
        clean_name = clean_text(full_name)
        if clean_name is None:
            raise ValidationError("Enumerator name is required.")
        return self._store(
            EnumeratorSchema(
                full_name=clean_name,
                email=clean_text(email),
                phone=clean_text(phone),
                province=clean_text(province),
            )
        )

    def create_field_visit(
        self,
        *,
        project_id: object,
        visit_date: date | None,
        location: str | None = None,
        positive_findings: str | None = None,
        negative_findings: str | None = None,
        photo_url: str | None = None,
        gps_coordinates: str | None = None,
        officer: str | None = None,
    ) -> FieldVisitSchema:
        numeric_id = self._required_project(project_id)
        if visit_date is None:
            raise ValidationError("Visit date is required.")
        return self._store(
            FieldVisitSchema(
                project_id=numeric_id,
                visit_date=visit_date,
                location=clean_text(location),
                positive_findings=clean_text(positive_findings),
                negative_findings=clean_text(negative_findings),
                photo_url=clean_text(photo_url),
                gps_coordinates=clean_text(gps_coordinates),
                officer=clean_text(officer),
            )
        )

    def create_monthly_report(
        self,
        *,
        project_id: object,
        report_month: str | None,
        summary: str | None = None,
        gaps: str | None = None,
        recommendations: str | None = None,
        status: str | None = None,
        reviewer: str | None = None,
        feedback: str | None = None,
        submitted_at: datetime | None = None,
    ) -> MonthlyReportSchema:
        numeric_id = self._required_project(project_id)
        month = clean_text(report_month)
        if month is None:
            raise ValidationError("Report month is required.")
        return self._store(
            MonthlyReportSchema(
                project_id=numeric_id,
                report_month=month,
                summary=clean_text(summary),
                gaps=clean_text(gaps),
                recommendations=clean_text(recommendations),
                status=coerce_choice(
                    MonthlyReportStatus, status, MonthlyReportStatus.DRAFT
                ),
                reviewer=clean_text(reviewer),
                feedback=clean_text(feedback),
                submitted_at=submitted_at,
            )
        )

    # Evaluation

    def create_evaluation(
        self,
        *,
        project_id: object,
        evaluation_type: str | None,
        evaluator_name: str | None = None,
        report_url: str | None = None,
        findings_summary: str | None = None,
        completed_at: date | None = None,
    ) -> EvaluationSchema:
        numeric_id = self._required_project(project_id)
        return self._store(
            EvaluationSchema(
                project_id=numeric_id,
                evaluator_name=clean_text(evaluator_name),
                evaluation_type=coerce_choice(
                    EvaluationType, evaluation_type, EvaluationType.SPECIAL
                ),
                report_url=clean_text(report_url),
                findings_summary=clean_text(findings_summary),
                completed_at=completed_at,
            )
        )

    def create_story(
        self,
        *,
        title: str | None,
        story_type: str | None = None,
        project_id: object = None,
        quote: str | None = None,
        summary: str | None = None,
        photo_url: str | None = None,
    ) -> StorySchema:
        numeric_id = self._optional_project(project_id)
        clean_title = clean_text(title)
        if clean_title is None:
            raise ValidationError("Story title is required.")
        return self._store(
            StorySchema(
                project_id=numeric_id,
                story_type=coerce_choice(StoryType, story_type, StoryType.IMPACT),
                title=clean_title,
                quote=clean_text(quote),
                summary=clean_text(summary),
                photo_url=clean_text(photo_url),
            )
        )

    # Accountability

    def create_finding(
        self,
        *,
        project_id: object = None,
        finding_type: str | None = None,
        category: str | None = None,
        severity: str | None = None,
        department: str | None = None,
        status: str | None = None,
        description: str | None = None,
        evidence_url: str | None = None,
        reminder_due_at: date | None = None,
    ) -> FindingSchema:
        numeric_id = self._optional_project(project_id)
        return self._store(
            FindingSchema(
                project_id=numeric_id,
                finding_type=coerce_choice(
                    FindingType, finding_type, FindingType.NEGATIVE
                ),
                category=clean_text(category),
                severity=coerce_choice(
                    FindingSeverity, severity, FindingSeverity.MINOR
                ),
                department=clean_text(department),
                status=coerce_choice(FindingStatus, status, FindingStatus.PENDING),
                description=clean_text(description),
                evidence_url=clean_text(evidence_url),
                reminder_due_at=reminder_due_at,
            )
        )

    def create_crm_awareness(
        self,
        *,
        project_id: object = None,
        district: str | None = None,
        awareness_date: date | None = None,
        notes: str | None = None,
    ) -> CrmAwarenessSchema:
        numeric_id = self._optional_project(project_id)
        return self._store(
            CrmAwarenessSchema(
                project_id=numeric_id,
                district=clean_text(district),
                awareness_date=awareness_date,
                notes=clean_text(notes),
            )
        )

    # Learning

    def create_lesson(
        self,
        *,
        lesson: str | None,
        project_id: object = None,
        source: str | None = None,
        department: str | None = None,
        theme: str | None = None,
        captured_at: date | None = None,
    ) -> LessonSchema:
        numeric_id = self._optional_project(project_id)
        text = clean_text(lesson)
        if text is None:
            raise ValidationError("Lesson description is required.")
        return self._store(
            LessonSchema(
                project_id=numeric_id,
                source=clean_text(source),
                lesson=text,
                department=clean_text(department),
                theme=clean_text(theme),
                captured_at=captured_at,
            )
        )

    def create_distribution(
        self,
        *,
        assistance_type: str | None,
        project_id: object = None,
        distribution_date: date | None = None,
        location: str | None = None,
        target_beneficiaries: int | None = None,
        notes: str | None = None,
    ) -> DistributionSchema:
        numeric_id = self._optional_project(project_id)
        clean_type = clean_text(assistance_type)
        if clean_type is None:
            raise ValidationError("Assistance type is required.")
        return self._store(
            DistributionSchema(
                project_id=numeric_id,
                assistance_type=clean_type,
                distribution_date=distribution_date,
                location=clean_text(location),
                target_beneficiaries=target_beneficiaries,
                notes=clean_text(notes),
            )
        )

    def create_pdm_survey(
        self,
        *,
        project_id: object = None,
        tool: str | None = None,
        quality_score: float | None = None,
        quantity_score: float | None = None,
        satisfaction_score: float | None = None,
        protection_score: float | None = None,
        completed_at: date | None = None,
    ) -> PdmSurveySchema:
        numeric_id = self._optional_project(project_id)
        return self._store(
            PdmSurveySchema(
                project_id=numeric_id,
                tool=clean_text(tool),
                quality_score=quality_score,
                quantity_score=quantity_score,
                satisfaction_score=satisfaction_score,
                protection_score=protection_score,
                completed_at=completed_at,
            )
        )

    def create_pdm_report(
        self,
        *,
        project_id: object = None,
        report_date: date | None = None,
        summary: str | None = None,
        recommendations: str | None = None,
        feedback_to_program: str | None = None,
    ) -> PdmReportSchema:
        numeric_id = self._optional_project(project_id)
        return self._store(
            PdmReportSchema(
                project_id=numeric_id,
                report_date=report_date,
                summary=clean_text(summary),
                recommendations=clean_text(recommendations),
                feedback_to_program=clean_text(feedback_to_program),
            )
        )
