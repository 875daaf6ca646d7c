"""User administration endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from mis_backend.api.dependencies import (
    DbSession,
    SessionServiceDep,
    json_body,
    require_session,
)
from mis_backend.api.errors import translate_errors
from mis_backend.api.models import MessageResponse, UserRequest
from mis_backend.database import UserRepository
from mis_backend.shared import UserRole, ValidationError, clean_text, parse_identifier

router = APIRouter(
    prefix="/users", tags=["users"], dependencies=[Depends(require_session)]
)

ROLE_CHOICES = ", ".join(role.value for role in UserRole)


def _parse_role(value: str | None) -> UserRole:
    try:
        return UserRole(clean_text(value) or "")
    except ValueError as exc:
        raise ValidationError(f"Role must be one of {ROLE_CHOICES}.") from exc


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def save_user(
    payload: Annotated[UserRequest, Depends(json_body(UserRequest))],
    session: DbSession,
    session_service: SessionServiceDep,
) -> MessageResponse:
    """Create a user or update the one registered under the same e-mail.

    A password is only (re)set when one is supplied.
    """

    with translate_errors("save user", failure_message="Failed to save user"):
        name = clean_text(payload.name)
        if name is None:
            raise ValidationError("Name is required.")
        email = clean_text(payload.email)
        if email is None:
            raise ValidationError("Email is required.")
        role = _parse_role(payload.role)
        password_hash = (
            session_service.hash_password(payload.password) if payload.password else None
        )
        UserRepository(session).upsert(
            name=name,
            email=email,
            role=role,
            organization=clean_text(payload.organization),
            password_hash=password_hash,
        )
    return MessageResponse(message="User saved")


@router.delete("/{user_id}", response_model=MessageResponse)
def remove_user(user_id: str, session: DbSession) -> MessageResponse:
    """Delete a user together with every session they hold."""

    with translate_errors("remove user", failure_message="Failed to remove user"):
        numeric_id = parse_identifier(user_id, "A valid user id is required.")
        UserRepository(session).delete(numeric_id)
    return MessageResponse(message="User removed")
