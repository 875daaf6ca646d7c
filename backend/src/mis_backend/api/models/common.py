"""Base models and field types shared by request and response payloads."""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def blank_to_none(value: Any) -> Any:
    """Treat empty or whitespace-only strings as an absent value."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalDate = Annotated[date | None, BeforeValidator(blank_to_none)]
OptionalDateTime = Annotated[datetime | None, BeforeValidator(blank_to_none)]
OptionalFloat = Annotated[float | None, BeforeValidator(blank_to_none)]
OptionalInt = Annotated[int | None, BeforeValidator(blank_to_none)]
RawIdentifier = Annotated[str | int | None, BeforeValidator(blank_to_none)]


class RequestModel(BaseModel):
    """JSON body fields are read in camelCase; unknown keys are ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseModel(BaseModel):
    """Serialised in camelCase, built straight from ORM rows."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        coerce_numbers_to_str=True,
    )


class MessageResponse(BaseModel):
    message: str


class SuccessResponse(BaseModel):
    success: bool = True
