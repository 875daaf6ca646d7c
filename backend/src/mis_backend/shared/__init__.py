"""Shared enumerations, errors and value objects for the backend."""

from mis_backend.shared.enums import (
    BaselineSurveyStatus,
    BaselineSurveyTool,
    BeneficiaryType,
    EvaluationType,
    FindingSeverity,
    FindingStatus,
    FindingType,
    MonthlyReportStatus,
    StoryType,
    UserRole,
    coerce_choice,
)
from mis_backend.shared.errors import (
    DuplicateError,
    ErrorKind,
    InternalError,
    MisError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from mis_backend.shared.value_objects import (
    ALL_SECTOR_FIELD_ACTIVITY,
    ALL_SECTOR_KEY,
    BENEFICIARY_TYPE_KEYS,
    BeneficiaryBreakdown,
    as_utc,
    clean_text,
    normalize_count,
    parse_identifier,
    parse_leading_int,
    parse_optional_identifier,
    parse_year,
    parse_year_filter,
)

__all__ = [
    "ALL_SECTOR_FIELD_ACTIVITY",
    "ALL_SECTOR_KEY",
    "BENEFICIARY_TYPE_KEYS",
    "BaselineSurveyStatus",
    "BaselineSurveyTool",
    "BeneficiaryBreakdown",
    "BeneficiaryType",
    "DuplicateError",
    "ErrorKind",
    "EvaluationType",
    "FindingSeverity",
    "FindingStatus",
    "FindingType",
    "InternalError",
    "MisError",
    "MonthlyReportStatus",
    "NotFoundError",
    "StoryType",
    "UnauthorizedError",
    "UserRole",
    "ValidationError",
    "as_utc",
    "clean_text",
    "coerce_choice",
    "normalize_count",
    "parse_identifier",
    "parse_leading_int",
    "parse_optional_identifier",
    "parse_year",
    "parse_year_filter",
]
