"""Pydantic models for authentication endpoints."""

from __future__ import annotations

from datetime import datetime

from mis_backend.api.models.common import RequestModel, ResponseModel
from mis_backend.shared import UserRole


class LoginRequest(RequestModel):
    """Credentials posted by the login form."""

    email: str | None = None
    password: str | None = None


class SessionUserResponse(ResponseModel):
    """Public representation of the signed-in user."""

    id: str
    name: str
    email: str
    role: UserRole
    organization: str | None = None


class LoginResponse(ResponseModel):
    message: str
    user: SessionUserResponse


class SessionResponse(ResponseModel):
    """The session attached to the caller's cookie."""

    user: SessionUserResponse
    session_id: str
    expires_at: datetime
