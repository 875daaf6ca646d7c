"""Data-entry endpoints for monitoring, evaluation, accountability and learning records."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from mis_backend.api.dependencies import DbSession, json_body, require_session
from mis_backend.api.errors import ApiError, translate_errors
from mis_backend.api.models import (
    BaselineSurveyRequest,
    BaselineSurveyResponse,
    BeneficiaryUpdateRequest,
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
    RequestModel,
    ResponseModel,
    StoryRequest,
    StoryResponse,
    SuccessResponse,
)
from mis_backend.database.base import BaseSchema
from mis_backend.database.repositories import (
    BeneficiaryEntry,
    DataEntryRepository,
    ProjectRepository,
)
from mis_backend.shared import BENEFICIARY_TYPE_KEYS, normalize_count, parse_identifier

router = APIRouter(
    prefix="/data-entry", tags=["data-entry"], dependencies=[Depends(require_session)]
)

PROJECT_ID_REQUIRED = "A valid project id is required."


@dataclass(frozen=True, slots=True)
class RecordRoute:
    """One data-entry form: its payload, the repository call and its result."""

    path: str
    request_model: type[RequestModel]
    response_model: type[ResponseModel]
    create: Callable[..., BaseSchema]
    failure_message: str


RECORD_ROUTES: tuple[RecordRoute, ...] = (
    RecordRoute(
        "/monitoring/baseline-surveys",
        BaselineSurveyRequest,
        BaselineSurveyResponse,
        DataEntryRepository.create_baseline_survey,
        "Failed to create baseline survey.",
    ),
    RecordRoute(
        "/monitoring/enumerators",
        EnumeratorRequest,
        EnumeratorResponse,
        DataEntryRepository.create_enumerator,
        "Failed to create enumerator.",
    ),
    RecordRoute(
        "/monitoring/field-visits",
        FieldVisitRequest,
        FieldVisitResponse,
        DataEntryRepository.create_field_visit,
        "Failed to create field visit record.",
    ),
    RecordRoute(
        "/monitoring/monthly-reports",
        MonthlyReportRequest,
        MonthlyReportResponse,
        DataEntryRepository.create_monthly_report,
        "Failed to create monthly report.",
    ),
    RecordRoute(
        "/evaluation/evaluations",
        EvaluationRequest,
        EvaluationResponse,
        DataEntryRepository.create_evaluation,
        "Failed to create evaluation record.",
    ),
    RecordRoute(
        "/evaluation/stories",
        StoryRequest,
        StoryResponse,
        DataEntryRepository.create_story,
        "Failed to create story.",
    ),
    RecordRoute(
        "/accountability/findings",
        FindingRequest,
        FindingResponse,
        DataEntryRepository.create_finding,
        "Failed to create finding record.",
    ),
    RecordRoute(
        "/accountability/crm-awareness",
        CrmAwarenessRequest,
        CrmAwarenessResponse,
        DataEntryRepository.create_crm_awareness,
        "Failed to create CRM awareness record.",
    ),
    RecordRoute(
        "/lesson-learns/lessons",
        LessonRequest,
        LessonResponse,
        DataEntryRepository.create_lesson,
        "Failed to create lesson record.",
    ),
    RecordRoute(
        "/lesson-learns/pdm/distributions",
        DistributionRequest,
        DistributionResponse,
        DataEntryRepository.create_distribution,
        "Failed to create distribution record.",
    ),
    RecordRoute(
        "/lesson-learns/pdm/surveys",
        PdmSurveyRequest,
        PdmSurveyResponse,
        DataEntryRepository.create_pdm_survey,
        "Failed to create PDM survey.",
    ),
    RecordRoute(
        "/lesson-learns/pdm/reports",
        PdmReportRequest,
        PdmReportResponse,
        DataEntryRepository.create_pdm_report,
        "Failed to create PDM report.",
    ),
)


def _register(route: RecordRoute) -> None:
    operation = route.failure_message.removeprefix("Failed to ").rstrip(".")

    # Annotations here are evaluated at definition and close over ``route``.
    def create_record(
        session: DbSession,
        payload: Annotated[BaseModel, Depends(json_body(route.request_model))],
    ) -> Any:
        with translate_errors(operation, failure_message=route.failure_message):
            record = route.create(DataEntryRepository(session), **payload.model_dump())
            return route.response_model.model_validate(record)

    router.add_api_route(
        route.path,
        create_record,
        methods=["POST"],
        response_model=route.response_model,
        status_code=status.HTTP_201_CREATED,
        name=operation.replace(" ", "_"),
    )


for _route in RECORD_ROUTES:
    _register(_route)


def _screen_beneficiaries(raw_entries: list[Any]) -> list[BeneficiaryEntry]:
    """Keep entries with a known type; malformed items are skipped."""

    entries: list[BeneficiaryEntry] = []
    for item in raw_entries:
        if not isinstance(item, dict):
            continue
        type_key = item.get("type")
        if type_key not in BENEFICIARY_TYPE_KEYS:
            continue
        include = item.get("include", True)
        entries.append(
            BeneficiaryEntry(
                type_key=type_key,
                direct=normalize_count(item.get("direct")),
                indirect=normalize_count(item.get("indirect")),
                include_in_totals=include if isinstance(include, bool) else True,
            )
        )
    return entries


@router.post("/beneficiaries", response_model=SuccessResponse)
def upsert_beneficiaries(
    payload: Annotated[
        BeneficiaryUpdateRequest, Depends(json_body(BeneficiaryUpdateRequest))
    ],
    session: DbSession,
) -> SuccessResponse:
    """Replace a project's beneficiary reach; missing types are stored as zero."""

    with translate_errors(
        "upsert beneficiaries", failure_message="Unable to save beneficiary totals."
    ):
        project_id = parse_identifier(payload.project_id, PROJECT_ID_REQUIRED)
        if not isinstance(payload.beneficiaries, list):
            raise ApiError(
                status.HTTP_400_BAD_REQUEST, "Beneficiary payload must be an array."
            )
        entries = _screen_beneficiaries(payload.beneficiaries)
        if not entries:
            raise ApiError(
                status.HTTP_400_BAD_REQUEST,
                "At least one beneficiary entry is required.",
            )
        ProjectRepository(session).replace_beneficiaries(project_id, entries)
    return SuccessResponse()
