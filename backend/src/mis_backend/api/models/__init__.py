"""Models used for API request and response payloads."""

from mis_backend.api.models.admin import (
    BeneficiaryCountsRequest,
    BrandingResponse,
    BrandingUpdateRequest,
    ComplaintRequest,
    ComplaintResponse,
    ReportingYearRequest,
    SectorUpdateRequest,
    UserRequest,
    UserResponse,
)
from mis_backend.api.models.auth import (
    LoginRequest,
    LoginResponse,
    SessionResponse,
    SessionUserResponse,
)
from mis_backend.api.models.catalog import (
    CatalogEntryRequest,
    CatalogEntryResponse,
    SubSectorRequest,
    SubSectorResponse,
)
from mis_backend.api.models.common import (
    MessageResponse,
    OptionalDate,
    RequestModel,
    ResponseModel,
    SuccessResponse,
    blank_to_none,
)
from mis_backend.api.models.dashboard import (
    AccountabilityOverviewResponse,
    AccountabilityRecordsResponse,
    AvailableFiltersResponse,
    BeneficiaryBreakdownResponse,
    DashboardStateResponse,
    EvaluationOverviewResponse,
    EvaluationRecordsResponse,
    KnowledgeOverviewResponse,
    KnowledgeRecordsResponse,
    MonitoringOverviewResponse,
    MonitoringRecordsResponse,
    OverviewStatsResponse,
    PdmScoresResponse,
    ProjectListItemResponse,
    ProjectStatusCountsResponse,
    SectorDetailsResponse,
    SectorListItemResponse,
)
from mis_backend.api.models.project import (
    BeneficiaryUpdateRequest,
    ProjectBeneficiariesRequest,
    ProjectBeneficiaryResponse,
    ProjectRequest,
    ProjectResponse,
)
from mis_backend.api.models.records import (
    BaselineSurveyRequest,
    BaselineSurveyResponse,
    CrmAwarenessRequest,
    CrmAwarenessResponse,
    DistributionRequest,
    DistributionResponse,
    EnumeratorRequest,
    EnumeratorResponse,
    EvaluationRequest,
    EvaluationResponse,
    FieldVisitRequest,
    FieldVisitResponse,
    FindingRequest,
    FindingResponse,
    LessonRequest,
    LessonResponse,
    MonthlyReportRequest,
    MonthlyReportResponse,
    PdmReportRequest,
    PdmReportResponse,
    PdmSurveyRequest,
    PdmSurveyResponse,
    StoryRequest,
    StoryResponse,
)

__all__ = [
    "AccountabilityOverviewResponse",
    "AccountabilityRecordsResponse",
    "AvailableFiltersResponse",
    "BaselineSurveyRequest",
    "BaselineSurveyResponse",
    "BeneficiaryBreakdownResponse",
    "BeneficiaryCountsRequest",
    "BeneficiaryUpdateRequest",
    "BrandingResponse",
    "BrandingUpdateRequest",
    "CatalogEntryRequest",
    "CatalogEntryResponse",
    "ComplaintRequest",
    "ComplaintResponse",
    "CrmAwarenessRequest",
    "CrmAwarenessResponse",
    "DashboardStateResponse",
    "DistributionRequest",
    "DistributionResponse",
    "EnumeratorRequest",
    "EnumeratorResponse",
    "EvaluationOverviewResponse",
    "EvaluationRecordsResponse",
    "EvaluationRequest",
    "EvaluationResponse",
    "FieldVisitRequest",
    "FieldVisitResponse",
    "FindingRequest",
    "FindingResponse",
    "KnowledgeOverviewResponse",
    "KnowledgeRecordsResponse",
    "LessonRequest",
    "LessonResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "MonitoringOverviewResponse",
    "MonitoringRecordsResponse",
    "MonthlyReportRequest",
    "MonthlyReportResponse",
    "OptionalDate",
    "OverviewStatsResponse",
    "PdmReportRequest",
    "PdmReportResponse",
    "PdmScoresResponse",
    "PdmSurveyRequest",
    "PdmSurveyResponse",
    "ProjectBeneficiariesRequest",
    "ProjectBeneficiaryResponse",
    "ProjectListItemResponse",
    "ProjectRequest",
    "ProjectResponse",
    "ProjectStatusCountsResponse",
    "ReportingYearRequest",
    "RequestModel",
    "ResponseModel",
    "SectorDetailsResponse",
    "SectorListItemResponse",
    "SectorUpdateRequest",
    "SessionResponse",
    "SessionUserResponse",
    "StoryRequest",
    "StoryResponse",
    "SubSectorRequest",
    "SubSectorResponse",
    "SuccessResponse",
    "UserRequest",
    "UserResponse",
    "blank_to_none",
]
