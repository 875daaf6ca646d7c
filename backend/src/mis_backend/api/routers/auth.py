"""Authentication endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from mis_backend.api.dependencies import (
    DbSession,
    SessionServiceDep,
    SessionToken,
    SettingsDep,
    clear_session_cookie,
    json_body,
    set_session_cookie,
)
from mis_backend.api.errors import ApiError, translate_errors
from mis_backend.api.models import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SessionResponse,
    SessionUserResponse,
)
from mis_backend.api.services import InvalidCredentialsError

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    payload: Annotated[LoginRequest, Depends(json_body(LoginRequest))],
    response: Response,
    session: DbSession,
    session_service: SessionServiceDep,
    settings: SettingsDep,
) -> LoginResponse:
    """Check e-mail and password and start a cookie-backed session."""

    email = (payload.email or "").strip()
    if not email or not payload.password:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST, "Email and password are required."
        )

    with translate_errors("authenticate user", failure_message="Failed to authenticate"):
        try:
            info, token = session_service.authenticate(
                session=session, email=email, password=payload.password
            )
        except InvalidCredentialsError as exc:
            raise ApiError(status.HTTP_401_UNAUTHORIZED, exc.message) from exc

    set_session_cookie(response, token=token, info=info, settings=settings)
    return LoginResponse(
        message="Authenticated",
        user=SessionUserResponse.model_validate(info.user),
    )


@router.post("/logout", response_model=MessageResponse)
def logout(
    token: SessionToken,
    response: Response,
    session: DbSession,
    session_service: SessionServiceDep,
    settings: SettingsDep,
) -> MessageResponse:
    """Forget the current session, whether or not it is still valid."""

    with translate_errors("destroy session", failure_message="Failed to logout"):
        session_service.destroy_session(session=session, token=token)
    clear_session_cookie(response, settings=settings)
    return MessageResponse(message="Signed out")


@router.get("/session", response_model=SessionResponse)
def read_session(
    token: SessionToken,
    session: DbSession,
    session_service: SessionServiceDep,
    settings: SettingsDep,
):
    """Describe the session attached to the caller's cookie.

    A cookie that no longer resolves is cleared on the way out.
    """

    try:
        with translate_errors("lookup session", failure_message="Failed to load session"):
            info = session_service.resolve_session(session=session, token=token)
    except ApiError as exc:
        if exc.status_code != status.HTTP_401_UNAUTHORIZED or not token:
            raise
        rejected = JSONResponse(status_code=exc.status_code, content={"message": exc.message})
        clear_session_cookie(rejected, settings=settings)
        return rejected

    return SessionResponse(
        user=SessionUserResponse.model_validate(info.user),
        session_id=info.session_id,
        expires_at=info.expires_at,
    )
