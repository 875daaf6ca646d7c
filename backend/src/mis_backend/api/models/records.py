"""Request and response models for the data-entry forms."""

from __future__ import annotations

from datetime import date, datetime

from mis_backend.api.models.common import (
    OptionalDate,
    OptionalDateTime,
    OptionalFloat,
    OptionalInt,
    RawIdentifier,
    RequestModel,
    ResponseModel,
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
)

# Monitoring


class BaselineSurveyRequest(RequestModel):
    project_id: RawIdentifier = None
    title: str | None = None
    tool: str | None = None
    status: str | None = None
    questionnaire_url: str | None = None


class BaselineSurveyResponse(ResponseModel):
    id: str
    project_id: str
    title: str
    tool: BaselineSurveyTool
    status: BaselineSurveyStatus
    questionnaire_url: str | None = None
    created_at: datetime
    updated_at: datetime


class EnumeratorRequest(RequestModel):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    province: str | None = None


class EnumeratorResponse(ResponseModel):
    id: str
    full_name: str
    email: str | None = None
    phone: str | None = None
    province: str | None = None


class FieldVisitRequest(RequestModel):
    project_id: RawIdentifier = None
    visit_date: OptionalDate = None
    location: str | None = None
    positive_findings: str | None = None
    negative_findings: str | None = None
    photo_url: str | None = None
    gps_coordinates: str | None = None
    officer: str | None = None


class FieldVisitResponse(ResponseModel):
    id: str
    project_id: str
    visit_date: date
    location: str | None = None
    positive_findings: str | None = None
    negative_findings: str | None = None
    photo_url: str | None = None
    gps_coordinates: str | None = None
    officer: str | None = None
    created_at: datetime


class MonthlyReportRequest(RequestModel):
    project_id: RawIdentifier = None
    report_month: str | None = None
    summary: str | None = None
    gaps: str | None = None
    recommendations: str | None = None
    status: str | None = None
    reviewer: str | None = None
    feedback: str | None = None
    submitted_at: OptionalDateTime = None


class MonthlyReportResponse(ResponseModel):
    id: str
    project_id: str
    report_month: str
    summary: str | None = None
    gaps: str | None = None
    recommendations: str | None = None
    status: MonthlyReportStatus
    reviewer: str | None = None
    feedback: str | None = None
    submitted_at: datetime | None = None
    updated_at: datetime


# Evaluation


class EvaluationRequest(RequestModel):
    project_id: RawIdentifier = None
    evaluation_type: str | None = None
    evaluator_name: str | None = None
    report_url: str | None = None
    findings_summary: str | None = None
    completed_at: OptionalDate = None


class EvaluationResponse(ResponseModel):
    id: str
    project_id: str | None = None
    evaluator_name: str | None = None
    evaluation_type: EvaluationType
    report_url: str | None = None
    findings_summary: str | None = None
    completed_at: date | None = None
    created_at: datetime


class StoryRequest(RequestModel):
    project_id: RawIdentifier = None
    story_type: str | None = None
    title: str | None = None
    quote: str | None = None
    summary: str | None = None
    photo_url: str | None = None


class StoryResponse(ResponseModel):
    id: str
    project_id: str | None = None
    story_type: StoryType
    title: str
    quote: str | None = None
    summary: str | None = None
    photo_url: str | None = None
    created_at: datetime


# Accountability


class FindingRequest(RequestModel):
    project_id: RawIdentifier = None
    finding_type: str | None = None
    category: str | None = None
    severity: str | None = None
    department: str | None = None
    status: str | None = None
    description: str | None = None
    evidence_url: str | None = None
    reminder_due_at: OptionalDate = None


class FindingResponse(ResponseModel):
    id: str
    project_id: str | None = None
    finding_type: FindingType
    category: str | None = None
    severity: FindingSeverity
    department: str | None = None
    status: FindingStatus
    description: str | None = None
    evidence_url: str | None = None
    reminder_due_at: date | None = None
    last_reminded_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class CrmAwarenessRequest(RequestModel):
    project_id: RawIdentifier = None
    district: str | None = None
    awareness_date: OptionalDate = None
    notes: str | None = None


class CrmAwarenessResponse(ResponseModel):
    id: str
    project_id: str | None = None
    district: str | None = None
    awareness_date: date | None = None
    notes: str | None = None
    created_at: datetime


# Learning


class LessonRequest(RequestModel):
    project_id: RawIdentifier = None
    source: str | None = None
    lesson: str | None = None
    department: str | None = None
    theme: str | None = None
    captured_at: OptionalDate = None


class LessonResponse(ResponseModel):
    id: str
    project_id: str | None = None
    source: str | None = None
    lesson: str
    department: str | None = None
    theme: str | None = None
    captured_at: date | None = None
    created_at: datetime


class DistributionRequest(RequestModel):
    project_id: RawIdentifier = None
    assistance_type: str | None = None
    distribution_date: OptionalDate = None
    location: str | None = None
    target_beneficiaries: OptionalInt = None
    notes: str | None = None


class DistributionResponse(ResponseModel):
    id: str
    project_id: str | None = None
    assistance_type: str
    distribution_date: date | None = None
    location: str | None = None
    target_beneficiaries: int | None = None
    notes: str | None = None
    created_at: datetime


class PdmSurveyRequest(RequestModel):
    project_id: RawIdentifier = None
    tool: str | None = None
    quality_score: OptionalFloat = None
    quantity_score: OptionalFloat = None
    satisfaction_score: OptionalFloat = None
    protection_score: OptionalFloat = None
    completed_at: OptionalDate = None


class PdmSurveyResponse(ResponseModel):
    id: str
    project_id: str | None = None
    tool: str | None = None
    quality_score: float | None = None
    quantity_score: float | None = None
    satisfaction_score: float | None = None
    protection_score: float | None = None
    completed_at: date | None = None
    created_at: datetime


class PdmReportRequest(RequestModel):
    project_id: RawIdentifier = None
    report_date: OptionalDate = None
    summary: str | None = None
    recommendations: str | None = None
    feedback_to_program: str | None = None


class PdmReportResponse(ResponseModel):
    id: str
    project_id: str | None = None
    report_date: date | None = None
    summary: str | None = None
    recommendations: str | None = None
    feedback_to_program: str | None = None
    created_at: datetime
