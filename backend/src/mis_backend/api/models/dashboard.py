"""Response models for the dashboard state and the v2 reporting endpoints."""

from __future__ import annotations

from pydantic import Field

from mis_backend.api.models.admin import (
    BrandingResponse,
    ComplaintResponse,
    UserResponse,
)
from mis_backend.api.models.catalog import CatalogEntryResponse, SubSectorResponse
from mis_backend.api.models.common import ResponseModel
from mis_backend.api.models.project import ProjectResponse
from mis_backend.api.models.records import (
    BaselineSurveyResponse,
    CrmAwarenessResponse,
    DistributionResponse,
    EnumeratorResponse,
    EvaluationResponse,
    FieldVisitResponse,
    FindingResponse,
    LessonResponse,
    MonthlyReportResponse,
    PdmReportResponse,
    PdmSurveyResponse,
    StoryResponse,
)


class BeneficiaryBreakdownResponse(ResponseModel):
    direct: dict[str, int]
    indirect: dict[str, int]
    include: dict[str, bool]


class SectorDetailsResponse(ResponseModel):
    provinces: list[str]
    beneficiaries: BeneficiaryBreakdownResponse
    projects: int
    start: str = ""
    end: str = ""
    field_activity: str = ""
    staff: int = 0


class SectorListItemResponse(SectorDetailsResponse):
    name: str


class ProjectStatusCountsResponse(ResponseModel):
    active: int = 0
    ongoing: int = 0
    completed: int = 0


class OverviewStatsResponse(ResponseModel):
    total_projects: int
    active_projects: int
    total_beneficiaries: int
    covered_provinces: list[str]
    sectors: dict[str, SectorDetailsResponse]
    project_status_counts: ProjectStatusCountsResponse


class AvailableFiltersResponse(ResponseModel):
    years: list[int]
    provinces: list[str]


class ProjectListItemResponse(ResponseModel):
    id: str
    code: str | None = None
    name: str
    sector: str | None = None
    donor: str | None = None
    country: str | None = None
    start: str = ""
    end: str = ""
    status: str
    provinces: list[str]
    staff: int
    total_beneficiaries: int


class MonitoringOverviewResponse(ResponseModel):
    baseline_surveys: int
    baseline_status_counts: dict[str, int]
    enumerators: int
    field_visits: int
    monthly_reports: int
    monthly_report_status_counts: dict[str, int]
    recent_field_visits: list[FieldVisitResponse]


class EvaluationOverviewResponse(ResponseModel):
    evaluations: int
    evaluation_type_counts: dict[str, int]
    stories: int
    story_type_counts: dict[str, int]
    recent_stories: list[StoryResponse]


class AccountabilityOverviewResponse(ResponseModel):
    findings: int
    open_findings: int
    finding_type_counts: dict[str, int]
    severity_counts: dict[str, int]
    status_counts: dict[str, int]
    crm_awareness_sessions: int
    complaints: int


class PdmScoresResponse(ResponseModel):
    quality: float | None = None
    quantity: float | None = None
    satisfaction: float | None = None
    protection: float | None = None


class KnowledgeOverviewResponse(ResponseModel):
    lessons: int
    distributions: int
    target_beneficiaries: int
    pdm_surveys: int
    pdm_reports: int
    average_scores: PdmScoresResponse
    recent_lessons: list[LessonResponse]


class MonitoringRecordsResponse(ResponseModel):
    baseline_surveys: list[BaselineSurveyResponse] = Field(default_factory=list)
    enumerators: list[EnumeratorResponse] = Field(default_factory=list)
    field_visits: list[FieldVisitResponse] = Field(default_factory=list)
    monthly_reports: list[MonthlyReportResponse] = Field(default_factory=list)


class EvaluationRecordsResponse(ResponseModel):
    evaluations: list[EvaluationResponse] = Field(default_factory=list)
    stories: list[StoryResponse] = Field(default_factory=list)


class AccountabilityRecordsResponse(ResponseModel):
    findings: list[FindingResponse] = Field(default_factory=list)
    crm_awareness: list[CrmAwarenessResponse] = Field(default_factory=list)


class KnowledgeRecordsResponse(ResponseModel):
    lessons: list[LessonResponse] = Field(default_factory=list)
    distributions: list[DistributionResponse] = Field(default_factory=list)
    pdm_surveys: list[PdmSurveyResponse] = Field(default_factory=list)
    pdm_reports: list[PdmReportResponse] = Field(default_factory=list)


class DashboardStateResponse(ResponseModel):
    """Everything the authenticated dashboard needs on first load."""

    sectors: dict[str, SectorDetailsResponse]
    reporting_years: list[int]
    users: list[UserResponse]
    projects: list[ProjectResponse]
    branding: BrandingResponse
    complaints: list[ComplaintResponse]
    cluster_catalog: list[CatalogEntryResponse]
    sector_catalog: list[CatalogEntryResponse]
    main_sectors: list[CatalogEntryResponse]
    sub_sectors: list[SubSectorResponse]
    monitoring: MonitoringRecordsResponse
    evaluation: EvaluationRecordsResponse
    accountability: AccountabilityRecordsResponse
    knowledge: KnowledgeRecordsResponse
