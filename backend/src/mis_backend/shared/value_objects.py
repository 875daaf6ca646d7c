"""Value objects and input coercion helpers shared across the backend."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from mis_backend.shared.enums import BeneficiaryType
from mis_backend.shared.errors import ValidationError

ALL_SECTOR_KEY = "All Sectors"
ALL_SECTOR_FIELD_ACTIVITY = "Joint multi-sector coordination"
BENEFICIARY_TYPE_KEYS: tuple[str, ...] = tuple(member.value for member in BeneficiaryType)

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")

# Bounds of the INTEGER columns ids and counts are stored in.
MIN_STORED_INTEGER = -(2**31)
MAX_STORED_INTEGER = 2**31 - 1


def _zero_counts() -> dict[str, int]:
    return dict.fromkeys(BENEFICIARY_TYPE_KEYS, 0)


def _no_flags() -> dict[str, bool]:
    return dict.fromkeys(BENEFICIARY_TYPE_KEYS, False)


@dataclass(slots=True)
class BeneficiaryBreakdown:
    """Direct and indirect beneficiary counts keyed by beneficiary type."""

    direct: dict[str, int] = field(default_factory=_zero_counts)
    indirect: dict[str, int] = field(default_factory=_zero_counts)
    include: dict[str, bool] = field(default_factory=_no_flags)

    def add(self, type_key: str, direct: int, indirect: int) -> None:
        """Accumulate counts for ``type_key`` and mark it as included."""
        if type_key not in self.direct:
            return
        self.direct[type_key] += direct
        self.indirect[type_key] += indirect
        self.include[type_key] = True

    def total(self) -> int:
        """Sum direct and indirect counts over the included types."""
        return sum(
            self.direct[key] + self.indirect[key]
            for key in BENEFICIARY_TYPE_KEYS
            if self.include[key]
        )


def _is_storable(number: int) -> bool:
    return MIN_STORED_INTEGER <= number <= MAX_STORED_INTEGER


def _calendar_year(number: int) -> int | None:
    return number if date.min.year <= number <= date.max.year else None


def normalize_count(value: object) -> int:
    """Return a non-negative whole count, treating anything else as zero."""

    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0
    if not math.isfinite(value) or value < 0:
        return 0
    count = math.floor(value)
    return count if _is_storable(count) else 0


def parse_identifier(value: object, message: str) -> int:
    """Parse a numeric record identifier or raise :class:`ValidationError`.

    Numbers that do not fit an INTEGER column are rejected like any other
    malformed id.
    """

    if isinstance(value, bool):
        raise ValidationError(message)
    number: int | None = None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        match = _LEADING_INTEGER.match(value)
        if match:
            number = int(match.group(1))
    if number is None or not _is_storable(number):
        raise ValidationError(message)
    return number


def parse_optional_identifier(value: object, message: str) -> int | None:
    """Like :func:`parse_identifier` but blank input yields ``None``."""

    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_identifier(value, message)


def parse_year(value: object) -> int | None:
    """Return ``value`` as a calendar year, or ``None`` when it is not one."""

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return _calendar_year(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if isinstance(value, float) and math.isfinite(value):
        return _calendar_year(math.floor(value))
    return None


def parse_leading_int(value: str | None) -> int | None:
    """Parse the leading integer of ``value`` the way query strings are read."""

    if not value:
        return None
    match = _LEADING_INTEGER.match(value)
    return int(match.group(1)) if match else None


def parse_year_filter(value: str | None) -> int | None:
    """Leading-integer year from a query string; non-calendar years are ignored."""

    number = parse_leading_int(value)
    return None if number is None else _calendar_year(number)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps read back from the database."""

    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def clean_text(value: str | None) -> str | None:
    """Strip ``value`` and collapse blank strings to ``None``."""

    if value is None:
        return None
    text = value.strip()
    return text or None


__all__ = [
    "ALL_SECTOR_FIELD_ACTIVITY",
    "ALL_SECTOR_KEY",
    "BENEFICIARY_TYPE_KEYS",
    "BeneficiaryBreakdown",
    "as_utc",
    "clean_text",
    "normalize_count",
    "parse_identifier",
    "parse_leading_int",
    "parse_optional_identifier",
    "parse_year",
    "parse_year_filter",
]
