"""Dashboard aggregation over projects, sectors and data-entry records.

The module-level functions are pure and operate on :class:`ProjectSnapshot`
values; :class:`DashboardService` loads rows through the repositories and
shapes the results into response models.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

from sqlalchemy.orm import Session

from mis_backend.api.models import (
    AccountabilityOverviewResponse,
    AccountabilityRecordsResponse,
    AvailableFiltersResponse,
    BaselineSurveyResponse,
    BeneficiaryBreakdownResponse,
    BrandingResponse,
    CatalogEntryResponse,
    ComplaintResponse,
    CrmAwarenessResponse,
    DashboardStateResponse,
    DistributionResponse,
    EnumeratorResponse,
    EvaluationOverviewResponse,
    EvaluationRecordsResponse,
    EvaluationResponse,
    FieldVisitResponse,
    FindingResponse,
    KnowledgeOverviewResponse,
    KnowledgeRecordsResponse,
    LessonResponse,
    MonitoringOverviewResponse,
    MonitoringRecordsResponse,
    MonthlyReportResponse,
    OverviewStatsResponse,
    PdmReportResponse,
    PdmScoresResponse,
    PdmSurveyResponse,
    ProjectListItemResponse,
    ProjectResponse,
    ProjectStatusCountsResponse,
    SectorDetailsResponse,
    SectorListItemResponse,
    StoryResponse,
    SubSectorResponse,
    UserResponse,
)
from mis_backend.database.repositories import (
    BeneficiaryEntry,
    BrandingRepository,
    ClusterCatalogRepository,
    ComplaintRepository,
    DashboardRepository,
    MainSectorRepository,
    ProjectRepository,
    ReportingYearRepository,
    SectorCatalogRepository,
    SectorRepository,
    SubSectorRepository,
    UserRepository,
    to_data_url,
)
from mis_backend.database.schemas import (
    DEFAULT_COMPANY_NAME,
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
    SectorSchema,
    StorySchema,
)
from mis_backend.shared import (
    ALL_SECTOR_FIELD_ACTIVITY,
    ALL_SECTOR_KEY,
    BENEFICIARY_TYPE_KEYS,
    BaselineSurveyStatus,
    BeneficiaryBreakdown,
    EvaluationType,
    FindingSeverity,
    FindingStatus,
    FindingType,
    MonthlyReportStatus,
    StoryType,
    as_utc,
)

RECENT_ITEMS_LIMIT = 5


class ProjectStatus(StrEnum):
    COMPLETED = "completed"
    ONGOING = "ongoing"
    ACTIVE = "active"


@dataclass(slots=True, frozen=True)
class DashboardFilters:
    """Optional reporting filters taken from the query string."""

    year: int | None = None
    province: str | None = None
    sector: str | None = None

    @property
    def is_active(self) -> bool:
        return any(value is not None for value in (self.year, self.province, self.sector))


@dataclass(slots=True)
class ProjectSnapshot:
    """The project attributes the aggregations look at."""

    id: int
    name: str = ""
    code: str | None = None
    sector: str | None = None
    donor: str | None = None
    country: str | None = None
    start: date | None = None
    end: date | None = None
    staff: int = 0
    provinces: list[str] = field(default_factory=list)
    standard_sectors: list[str] = field(default_factory=list)
    beneficiaries: list[BeneficiaryEntry] = field(default_factory=list)

    @classmethod
    def from_schema(cls, project: ProjectSchema) -> ProjectSnapshot:
        return cls(
            id=project.id,
            name=project.title,
            code=project.code,
            sector=project.sector,
            donor=project.donor,
            country=project.country,
            start=project.start_date,
            end=project.end_date,
            staff=project.staff or 0,
            provinces=[row.province for row in project.provinces],
            standard_sectors=[row.standard_sector for row in project.standard_sectors],
            beneficiaries=[
                BeneficiaryEntry(
                    type_key=row.type_key,
                    direct=row.direct,
                    indirect=row.indirect,
                    include_in_totals=row.include_in_totals,
                )
                for row in project.beneficiaries
            ],
        )


def _sorted_names(values: Iterable[str]) -> list[str]:
    return sorted(set(values), key=lambda value: (value.casefold(), value))


def _format_date(value: date | None) -> str:
    return value.isoformat() if value else ""


def overlaps_year(project: ProjectSnapshot, year: int) -> bool:
    """Undated projects match every year; open ends are unbounded."""

    if project.start is None and project.end is None:
        return True
    starts_before_year_end = project.start is None or project.start <= date(year, 12, 31)
    ends_after_year_start = project.end is None or project.end >= date(year, 1, 1)
    return starts_before_year_end and ends_after_year_start


def matches_sector(project: ProjectSnapshot, sector: str) -> bool:
    wanted = sector.casefold()
    candidates = [project.sector, *project.standard_sectors]
    return any(value and value.casefold() == wanted for value in candidates)


def matches_filters(project: ProjectSnapshot, filters: DashboardFilters) -> bool:
    if filters.year is not None and not overlaps_year(project, filters.year):
        return False
    if filters.province is not None and filters.province not in project.provinces:
        return False
    if filters.sector is not None and not matches_sector(project, filters.sector):
        return False
    return True


def filter_projects(
    projects: Iterable[ProjectSnapshot], filters: DashboardFilters
) -> list[ProjectSnapshot]:
    return [project for project in projects if matches_filters(project, filters)]


def project_status(project: ProjectSnapshot, today: date) -> ProjectStatus:
    """Completed once the end date has passed; ongoing while inside its dates."""

    if project.end is not None and project.end < today:
        return ProjectStatus.COMPLETED
    if project.start is not None and project.start <= today:
        return ProjectStatus.ONGOING
    return ProjectStatus.ACTIVE


def sector_keys_for(project: ProjectSnapshot, key_map: dict[str, str]) -> list[str]:
    """Configured sector keys matched by the project's sector or standard sectors."""

    keys: list[str] = []
    for value in (project.sector, *project.standard_sectors):
        if not value:
            continue
        key = key_map.get(value.casefold())
        if key is not None and key not in keys:
            keys.append(key)
    return keys


def project_breakdown(project: ProjectSnapshot) -> BeneficiaryBreakdown:
    breakdown = BeneficiaryBreakdown()
    for entry in project.beneficiaries:
        if entry.include_in_totals:
            breakdown.add(entry.type_key, entry.direct, entry.indirect)
    return breakdown


def _merge(target: BeneficiaryBreakdown, source: BeneficiaryBreakdown) -> None:
    for key in BENEFICIARY_TYPE_KEYS:
        if source.include[key]:
            target.add(key, source.direct[key], source.indirect[key])


def _breakdown_response(breakdown: BeneficiaryBreakdown) -> BeneficiaryBreakdownResponse:
    return BeneficiaryBreakdownResponse(
        direct=dict(breakdown.direct),
        indirect=dict(breakdown.indirect),
        include=dict(breakdown.include),
    )


@dataclass(slots=True)
class _SectorTally:
    provinces: set[str] = field(default_factory=set)
    beneficiaries: BeneficiaryBreakdown = field(default_factory=BeneficiaryBreakdown)
    projects: int = 0
    staff: int = 0

    def add(self, project: ProjectSnapshot, breakdown: BeneficiaryBreakdown) -> None:
        self.projects += 1
        self.staff += project.staff
        self.provinces.update(project.provinces)
        _merge(self.beneficiaries, breakdown)

    def to_response(self, *, field_activity: str = "") -> SectorDetailsResponse:
        return SectorDetailsResponse(
            provinces=_sorted_names(self.provinces),
            beneficiaries=_breakdown_response(self.beneficiaries),
            projects=self.projects,
            field_activity=field_activity,
            staff=self.staff,
        )


def aggregate_overview(
    sector_keys: Iterable[str],
    projects: Iterable[ProjectSnapshot],
    filters: DashboardFilters,
    today: date,
) -> OverviewStatsResponse:
    """Per-sector and overall figures for the projects matching ``filters``."""

    ordered_keys = list(sector_keys)
    key_map = {key.casefold(): key for key in ordered_keys}
    tallies = {key: _SectorTally() for key in ordered_keys}
    overall = _SectorTally()
    counts = ProjectStatusCountsResponse()

    for project in filter_projects(projects, filters):
        breakdown = project_breakdown(project)
        overall.add(project, breakdown)
        for key in sector_keys_for(project, key_map):
            tallies[key].add(project, breakdown)

        status = project_status(project, today)
        if status is ProjectStatus.COMPLETED:
            counts.completed += 1
        else:
            counts.active += 1
            if status is ProjectStatus.ONGOING:
                counts.ongoing += 1

    sectors = {key: tally.to_response() for key, tally in tallies.items()}
    sectors[ALL_SECTOR_KEY] = overall.to_response(
        field_activity=ALL_SECTOR_FIELD_ACTIVITY
    )
    return OverviewStatsResponse(
        total_projects=overall.projects,
        active_projects=counts.active,
        total_beneficiaries=overall.beneficiaries.total(),
        covered_provinces=_sorted_names(overall.provinces),
        sectors=sectors,
        project_status_counts=counts,
    )


def summarise_configured_sectors(
    rows: Iterable[SectorSchema],
) -> dict[str, SectorDetailsResponse]:
    """Stored sector summaries plus the derived all-sectors aggregate."""

    sectors: dict[str, SectorDetailsResponse] = {}
    overall = BeneficiaryBreakdown()
    provinces: set[str] = set()
    projects = staff = 0
    for row in rows:
        breakdown = BeneficiaryBreakdown()
        for stat in row.beneficiaries:
            breakdown.add(stat.type_key, stat.direct, stat.indirect)
        row_provinces = [item.province for item in row.provinces]
        sectors[row.sector_key] = SectorDetailsResponse(
            provinces=sorted(row_provinces),
            beneficiaries=_breakdown_response(breakdown),
            projects=row.projects,
            start=_format_date(row.start_date),
            end=_format_date(row.end_date),
            field_activity=row.field_activity or "",
            staff=row.staff,
        )
        _merge(overall, breakdown)
        provinces.update(row_provinces)
        projects += row.projects
        staff += row.staff

    if sectors:
        sectors[ALL_SECTOR_KEY] = SectorDetailsResponse(
            provinces=_sorted_names(provinces),
            beneficiaries=_breakdown_response(overall),
            projects=projects,
            field_activity=ALL_SECTOR_FIELD_ACTIVITY,
            staff=staff,
        )
    return sectors


def _zero_counts(enum_type: type[StrEnum]) -> dict[str, int]:
    return {member.value: 0 for member in enum_type}


def _count_by(values: Iterable[StrEnum], enum_type: type[StrEnum]) -> dict[str, int]:
    counts = _zero_counts(enum_type)
    for value in values:
        counts[value.value] = counts.get(value.value, 0) + 1
    return counts


def _average(values: Iterable[float | None]) -> float | None:
    present = [value for value in values if value is not None]
    if not present:
        return None
    return round(sum(present) / len(present), 2)


class DashboardService:
    """Loads dashboard data for one request-scoped SQLAlchemy session."""

    def __init__(self, session: Session, *, today: date | None = None) -> None:
        self._session = session
        self._today = today or date.today()
        self._records = DashboardRepository(session)

    def _snapshots(self) -> list[ProjectSnapshot]:
        return [
            ProjectSnapshot.from_schema(project)
            for project in ProjectRepository(self._session).list_all()
        ]

    def _scope(self, filters: DashboardFilters) -> set[int] | None:
        """Ids of the projects in scope, or ``None`` when nothing is filtered."""
        if not filters.is_active:
            return None
        return {project.id for project in filter_projects(self._snapshots(), filters)}

    @staticmethod
    def _in_scope(project_id: int | None, scope: set[int] | None) -> bool:
        return scope is None or project_id in scope

    def _scoped(self, schema, scope: set[int] | None) -> list:
        return [
            row
            for row in self._records.list_records(schema)
            if self._in_scope(row.project_id, scope)
        ]

    def fetch_branding(self) -> BrandingResponse:
        branding = BrandingRepository(self._session).get()
        if branding is None:
            return BrandingResponse(company_name=DEFAULT_COMPANY_NAME)
        return BrandingResponse(
            company_name=branding.company_name,
            logo_data_url=to_data_url(branding.logo_data, branding.logo_mime),
            favicon_data_url=to_data_url(branding.favicon_data, branding.favicon_mime),
        )

    def fetch_dashboard_state(self) -> DashboardStateResponse:
        session = self._session
        records = self._records
        return DashboardStateResponse(
            sectors=summarise_configured_sectors(SectorRepository(session).list_all()),
            reporting_years=ReportingYearRepository(session).list_years(),
            users=[
                UserResponse.model_validate(user)
                for user in UserRepository(session).list_all()
            ],
            projects=[
                ProjectResponse.from_schema(project)
                for project in ProjectRepository(session).list_all()
            ],
            branding=self.fetch_branding(),
            complaints=[
                ComplaintResponse.model_validate(row)
                for row in ComplaintRepository(session).list_all()
            ],
            cluster_catalog=[
                CatalogEntryResponse.model_validate(row)
                for row in ClusterCatalogRepository(session).list_entries()
            ],
            sector_catalog=[
                CatalogEntryResponse.model_validate(row)
                for row in SectorCatalogRepository(session).list_entries()
            ],
            main_sectors=[
                CatalogEntryResponse.model_validate(row)
                for row in MainSectorRepository(session).list_entries()
            ],
            sub_sectors=[
                SubSectorResponse.model_validate(row)
                for row in SubSectorRepository(session).list_entries()
            ],
            monitoring=MonitoringRecordsResponse(
                baseline_surveys=[
                    BaselineSurveyResponse.model_validate(row)
                    for row in records.list_records(BaselineSurveySchema)
                ],
                enumerators=[
                    EnumeratorResponse.model_validate(row)
                    for row in records.list_records(EnumeratorSchema)
                ],
                field_visits=[
                    FieldVisitResponse.model_validate(row)
                    for row in records.list_records(FieldVisitSchema)
                ],
                monthly_reports=[
                    MonthlyReportResponse.model_validate(row)
                    for row in records.list_records(MonthlyReportSchema)
                ],
            ),
            evaluation=EvaluationRecordsResponse(
                evaluations=[
                    EvaluationResponse.model_validate(row)
                    for row in records.list_records(EvaluationSchema)
                ],
                stories=[
                    StoryResponse.model_validate(row)
                    for row in records.list_records(StorySchema)
                ],
            ),
            accountability=AccountabilityRecordsResponse(
                findings=[
                    FindingResponse.model_validate(row)
                    for row in records.list_records(FindingSchema)
                ],
                crm_awareness=[
                    CrmAwarenessResponse.model_validate(row)
                    for row in records.list_records(CrmAwarenessSchema)
                ],
            ),
            knowledge=KnowledgeRecordsResponse(
                lessons=[
                    LessonResponse.model_validate(row)
                    for row in records.list_records(LessonSchema)
                ],
                distributions=[
                    DistributionResponse.model_validate(row)
                    for row in records.list_records(DistributionSchema)
                ],
                pdm_surveys=[
                    PdmSurveyResponse.model_validate(row)
                    for row in records.list_records(PdmSurveySchema)
                ],
                pdm_reports=[
                    PdmReportResponse.model_validate(row)
                    for row in records.list_records(PdmReportSchema)
                ],
            ),
        )

    def fetch_overview_stats(self, filters: DashboardFilters) -> OverviewStatsResponse:
        sector_keys = [row.sector_key for row in SectorRepository(self._session).list_all()]
        return aggregate_overview(sector_keys, self._snapshots(), filters, self._today)

    def fetch_sectors_list(self, filters: DashboardFilters) -> list[SectorListItemResponse]:
        stats = self.fetch_overview_stats(filters)
        return [
            SectorListItemResponse(name=key, **details.model_dump())
            for key, details in stats.sectors.items()
            if key != ALL_SECTOR_KEY
        ]

    def fetch_available_filters(self) -> AvailableFiltersResponse:
        return AvailableFiltersResponse(
            years=ReportingYearRepository(self._session).list_years(descending=True),
            provinces=self._records.list_project_provinces(),
        )

    def fetch_projects_list(
        self, filters: DashboardFilters
    ) -> list[ProjectListItemResponse]:
        return [
            ProjectListItemResponse(
                id=str(project.id),
                code=project.code,
                name=project.name,
                sector=project.sector,
                donor=project.donor,
                country=project.country,
                start=_format_date(project.start),
                end=_format_date(project.end),
                status=project_status(project, self._today).value,
                provinces=_sorted_names(project.provinces),
                staff=project.staff,
                total_beneficiaries=project_breakdown(project).total(),
            )
            for project in filter_projects(self._snapshots(), filters)
        ]

    def fetch_monitoring_overview(
        self, filters: DashboardFilters
    ) -> MonitoringOverviewResponse:
        scope = self._scope(filters)
        surveys = self._scoped(BaselineSurveySchema, scope)
        visits = self._scoped(FieldVisitSchema, scope)
        reports = self._scoped(MonthlyReportSchema, scope)
        enumerators = [
            row
            for row in self._records.list_records(EnumeratorSchema)
            if filters.province is None or row.province == filters.province
        ]
        return MonitoringOverviewResponse(
            baseline_surveys=len(surveys),
            baseline_status_counts=_count_by(
                (row.status for row in surveys), BaselineSurveyStatus
            ),
            enumerators=len(enumerators),
            field_visits=len(visits),
            monthly_reports=len(reports),
            monthly_report_status_counts=_count_by(
                (row.status for row in reports), MonthlyReportStatus
            ),
            recent_field_visits=[
                FieldVisitResponse.model_validate(row)
                for row in visits[:RECENT_ITEMS_LIMIT]
            ],
        )

    def fetch_evaluation_overview(
        self, filters: DashboardFilters
    ) -> EvaluationOverviewResponse:
        scope = self._scope(filters)
        evaluations = self._scoped(EvaluationSchema, scope)
        stories = self._scoped(StorySchema, scope)
        return EvaluationOverviewResponse(
            evaluations=len(evaluations),
            evaluation_type_counts=_count_by(
                (row.evaluation_type for row in evaluations), EvaluationType
            ),
            stories=len(stories),
            story_type_counts=_count_by((row.story_type for row in stories), StoryType),
            recent_stories=[
                StoryResponse.model_validate(row)
                for row in stories[:RECENT_ITEMS_LIMIT]
            ],
        )

    def fetch_accountability_overview(
        self, filters: DashboardFilters
    ) -> AccountabilityOverviewResponse:
        scope = self._scope(filters)
        findings = self._scoped(FindingSchema, scope)
        awareness = self._scoped(CrmAwarenessSchema, scope)
        complaints = [
            row
            for row in ComplaintRepository(self._session).list_all()
            if filters.year is None or as_utc(row.submitted_at).year == filters.year
        ]
        return AccountabilityOverviewResponse(
            findings=len(findings),
            open_findings=sum(
                1 for row in findings if row.status is not FindingStatus.SOLVED
            ),
            finding_type_counts=_count_by(
                (row.finding_type for row in findings), FindingType
            ),
            severity_counts=_count_by((row.severity for row in findings), FindingSeverity),
            status_counts=_count_by((row.status for row in findings), FindingStatus),
            crm_awareness_sessions=len(awareness),
            complaints=len(complaints),
        )

    def fetch_knowledge_overview(
        self, filters: DashboardFilters
    ) -> KnowledgeOverviewResponse:
        scope = self._scope(filters)
        lessons = self._scoped(LessonSchema, scope)
        distributions = self._scoped(DistributionSchema, scope)
        surveys = self._scoped(PdmSurveySchema, scope)
        reports = self._scoped(PdmReportSchema, scope)
        return KnowledgeOverviewResponse(
            lessons=len(lessons),
            distributions=len(distributions),
            target_beneficiaries=sum(
                row.target_beneficiaries or 0 for row in distributions
            ),
            pdm_surveys=len(surveys),
            pdm_reports=len(reports),
            average_scores=PdmScoresResponse(
                quality=_average(row.quality_score for row in surveys),
                quantity=_average(row.quantity_score for row in surveys),
                satisfaction=_average(row.satisfaction_score for row in surveys),
                protection=_average(row.protection_score for row in surveys),
            ),
            recent_lessons=[
                LessonResponse.model_validate(row)
                for row in lessons[:RECENT_ITEMS_LIMIT]
            ],
        )
