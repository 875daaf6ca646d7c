"""SQLAlchemy schemas for every persisted record."""

from mis_backend.database.schemas.accountability import (
    CrmAwarenessSchema,
    FindingSchema,
)
from mis_backend.database.schemas.branding import (
    BRANDING_ROW_ID,
    DEFAULT_COMPANY_NAME,
    BrandingSchema,
)
from mis_backend.database.schemas.catalog import (
    ClusterCatalogSchema,
    MainSectorSchema,
    SectorCatalogSchema,
    SubSectorSchema,
)
from mis_backend.database.schemas.complaint import ComplaintSchema
from mis_backend.database.schemas.evaluation import EvaluationSchema, StorySchema
from mis_backend.database.schemas.knowledge import (
    DistributionSchema,
    LessonSchema,
    PdmReportSchema,
    PdmSurveySchema,
)
from mis_backend.database.schemas.monitoring import (
    BaselineSurveySchema,
    EnumeratorSchema,
    FieldVisitSchema,
    MonthlyReportSchema,
)
from mis_backend.database.schemas.project import (
    ProjectBeneficiarySchema,
    ProjectClusterSchema,
    ProjectCommunitySchema,
    ProjectDistrictSchema,
    ProjectProvinceSchema,
    ProjectSchema,
    ProjectStandardSectorSchema,
)
from mis_backend.database.schemas.reporting import (
    BeneficiaryStatSchema,
    ReportingYearSchema,
    SectorProvinceSchema,
    SectorSchema,
)
from mis_backend.database.schemas.user import UserSchema, UserSessionSchema

__all__ = [
    "BRANDING_ROW_ID",
    "DEFAULT_COMPANY_NAME",
    "BaselineSurveySchema",
    "BeneficiaryStatSchema",
    "BrandingSchema",
    "ClusterCatalogSchema",
    "ComplaintSchema",
    "CrmAwarenessSchema",
    "DistributionSchema",
    "EnumeratorSchema",
    "EvaluationSchema",
    "FieldVisitSchema",
    "FindingSchema",
    "LessonSchema",
    "MainSectorSchema",
    "MonthlyReportSchema",
    "PdmReportSchema",
    "PdmSurveySchema",
    "ProjectBeneficiarySchema",
    "ProjectClusterSchema",
    "ProjectCommunitySchema",
    "ProjectDistrictSchema",
    "ProjectProvinceSchema",
    "ProjectSchema",
    "ProjectStandardSectorSchema",
    "ReportingYearSchema",
    "SectorCatalogSchema",
    "SectorProvinceSchema",
    "SectorSchema",
    "StorySchema",
    "SubSectorSchema",
    "UserSchema",
    "UserSessionSchema",
]
