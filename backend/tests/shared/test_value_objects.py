"""Input coercion helpers shared by the API and repositories."""

import math

import pytest

from mis_backend.shared import (
    BeneficiaryBreakdown,
    FindingSeverity,
    ValidationError,
    coerce_choice,
    normalize_count,
    parse_identifier,
    parse_leading_int,
    parse_optional_identifier,
    parse_year,
    parse_year_filter,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(12, 12), (3.9, 3), (-1, 0), (math.inf, 0), (math.nan, 0), (True, 0), ("5", 0), (None, 0)],
)
def test_normalize_count(value: object, expected: int) -> None:
    assert normalize_count(value) == expected


@pytest.mark.parametrize(("value", "expected"), [(7, 7), ("42", 42), (" 15abc", 15)])
def test_parse_identifier_accepts_numeric_prefix(value: object, expected: int) -> None:
    assert parse_identifier(value, "bad id") == expected


@pytest.mark.parametrize("value", [None, True, "", "abc", 4.2, ["1"]])
def test_parse_identifier_rejects_other_values(value: object) -> None:
    with pytest.raises(ValidationError, match="bad id"):
        parse_identifier(value, "bad id")


def test_parse_optional_identifier_allows_blank() -> None:
    assert parse_optional_identifier("  ", "bad id") is None
    assert parse_optional_identifier(None, "bad id") is None
    assert parse_optional_identifier("9", "bad id") == 9


@pytest.mark.parametrize(
    ("value", "expected"),
    [(2024, 2024), ("2023", 2023), ("2022.6", 2022), (2021.2, 2021), ("", None), ("soon", None), (False, None)],
)
def test_parse_year(value: object, expected: int | None) -> None:
    assert parse_year(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"), [("2024", 2024), ("2024abc", 2024), ("abc", None), ("", None), (None, None)]
)
def test_parse_leading_int(value: str | None, expected: int | None) -> None:
    assert parse_leading_int(value) == expected


def test_coerce_choice_is_case_insensitive() -> None:
    assert coerce_choice(FindingSeverity, " MAJOR ", FindingSeverity.MINOR) is FindingSeverity.MAJOR
    assert coerce_choice(FindingSeverity, "huge", FindingSeverity.MINOR) is FindingSeverity.MINOR
    assert coerce_choice(FindingSeverity, 3, FindingSeverity.MINOR) is FindingSeverity.MINOR


def test_breakdown_total_counts_included_types_only() -> None:
    breakdown = BeneficiaryBreakdown()
    breakdown.add("households", 4, 2)
    breakdown.add("unknown", 100, 100)
    breakdown.direct["idps"] = 50

    assert breakdown.total() == 6
    assert breakdown.include["households"] is True
    assert breakdown.include["idps"] is False


@pytest.mark.parametrize("value", [2**31, -(2**31) - 1, "99999999999999999999"])
def test_parse_identifier_rejects_values_beyond_integer_columns(value: object) -> None:
    with pytest.raises(ValidationError, match="bad id"):
        parse_identifier(value, "bad id")


def test_parse_identifier_accepts_integer_column_bounds() -> None:
    assert parse_identifier(2**31 - 1, "bad id") == 2**31 - 1
    assert parse_identifier(str(-(2**31)), "bad id") == -(2**31)


@pytest.mark.parametrize("value", [0, 10000, -3, 1e30, "1e30", "10000"])
def test_parse_year_rejects_non_calendar_years(value: object) -> None:
    assert parse_year(value) is None


@pytest.mark.parametrize(
    ("value", "expected"), [("2024", 2024), ("9999x", 9999), ("0", None), ("10000", None), ("-3", None)]
)
def test_parse_year_filter(value: str, expected: int | None) -> None:
    assert parse_year_filter(value) == expected


def test_oversized_counts_become_zero() -> None:
    assert normalize_count(1e30) == 0
    assert normalize_count(2**31 - 1) == 2**31 - 1
