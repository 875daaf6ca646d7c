"""Shared enumerations used across the backend."""

from __future__ import annotations

from enum import StrEnum
from typing import TypeVar

EnumT = TypeVar("EnumT", bound=StrEnum)


class UserRole(StrEnum):
    """Access levels available to dashboard users."""

    ADMINISTRATOR = "Administrator"
    EDITOR = "Editor"
    VIEWER = "Viewer"


class BeneficiaryType(StrEnum):
    """Beneficiary categories tracked for sectors and projects."""

    CHILDREN_GIRLS = "childrenGirls"
    CHILDREN_BOYS = "childrenBoys"
    ADULTS_WOMEN = "adultsWomen"
    ADULTS_MEN = "adultsMen"
    HOUSEHOLDS = "households"
    IDPS = "idps"
    RETURNEES = "returnees"
    PWDS = "pwds"


class BaselineSurveyTool(StrEnum):
    KOBO = "kobo"
    MANUAL = "manual"
    OTHER = "other"


class BaselineSurveyStatus(StrEnum):
    DRAFT = "draft"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class MonthlyReportStatus(StrEnum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    FEEDBACK = "feedback"


class EvaluationType(StrEnum):
    BASELINE = "baseline"
    MIDTERM = "midterm"
    ENDLINE = "endline"
    SPECIAL = "special"


class StoryType(StrEnum):
    CASE = "case"
    SUCCESS = "success"
    IMPACT = "impact"


class FindingType(StrEnum):
    NEGATIVE = "negative"
    POSITIVE = "positive"


class FindingSeverity(StrEnum):
    MINOR = "minor"
    MAJOR = "major"
    CRITICAL = "critical"


class FindingStatus(StrEnum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"


def coerce_choice(enum_type: type[EnumT], value: object, default: EnumT) -> EnumT:
    """Map free-form input onto ``enum_type``, falling back to ``default``."""

    if isinstance(value, enum_type):
        return value
    if not isinstance(value, str):
        return default
    normalized = value.strip().lower()
    for member in enum_type:
        if member.value.lower() == normalized:
            return member
    return default
