"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Annotated, TypeVar

from fastapi import Depends, Request, Response, status
from fastapi.security import APIKeyCookie
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from mis_backend.api.errors import ApiError, describe_validation_errors, translate_errors
from mis_backend.api.services import SESSION_COOKIE_NAME, SessionInfo, SessionService
from mis_backend.database import get_session
from mis_backend.database.dependencies import SettingsDep
from mis_backend.settings import BackendSettings

ModelT = TypeVar("ModelT", bound=BaseModel)

_session_cookie = APIKeyCookie(name=SESSION_COOKIE_NAME, auto_error=False)

DbSession = Annotated[Session, Depends(get_session)]
SessionToken = Annotated[str | None, Depends(_session_cookie)]


def get_session_service(settings: SettingsDep) -> SessionService:
    """Return a :class:`SessionService` bound to the active settings."""

    return SessionService(settings=settings)


SessionServiceDep = Annotated[SessionService, Depends(get_session_service)]


def require_session(
    token: SessionToken,
    session: DbSession,
    session_service: SessionServiceDep,
) -> SessionInfo:
    """Resolve the caller's session cookie or answer ``401 Unauthorized``.

    Protected routes declare this before anything else so that a missing or
    stale session is rejected before the body is read.
    """

    with translate_errors("resolve session", failure_message="Failed to load session"):
        return session_service.resolve_session(session=session, token=token)


CurrentSession = Annotated[SessionInfo, Depends(require_session)]


def json_body(model: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a dependency that decodes the JSON body into ``model``."""

    async def parse(request: Request) -> ModelT:
        try:
            payload = await request.json()
        except ValueError as exc:
            raise ApiError(
                status.HTTP_400_BAD_REQUEST, "Request body must be valid JSON."
            ) from exc
        if not isinstance(payload, dict):
            raise ApiError(
                status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object."
            )
        try:
            return model.model_validate(payload)
        except PydanticValidationError as exc:
            raise ApiError(
                status.HTTP_400_BAD_REQUEST, describe_validation_errors(exc.errors())
            ) from exc

    return parse


def set_session_cookie(
    response: Response, *, token: str, info: SessionInfo, settings: BackendSettings
) -> None:
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        expires=info.expires_at,
        path="/",
        secure=not settings.is_development,
        httponly=True,
        samesite="lax",
    )


def clear_session_cookie(response: Response, *, settings: BackendSettings) -> None:
    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        path="/",
        secure=not settings.is_development,
        httponly=True,
        samesite="lax",
    )


__all__ = [
    "CurrentSession",
    "DbSession",
    "SessionServiceDep",
    "SessionToken",
    "SettingsDep",
    "clear_session_cookie",
    "get_session_service",
    "json_body",
    "require_session",
    "set_session_cookie",
]
