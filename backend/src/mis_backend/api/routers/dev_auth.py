"""Development-only session bootstrap."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Response, status

from mis_backend.api.dependencies import (
    DbSession,
    SessionServiceDep,
    SettingsDep,
    set_session_cookie,
)
from mis_backend.api.errors import ApiError, translate_errors
from mis_backend.api.models import MessageResponse
from mis_backend.database import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["test-auth"])

SEED_USER_MISSING = "Default admin user not found. Did you seed the database?"


@router.post("/test-auth", response_model=MessageResponse)
def create_test_session(
    response: Response,
    session: DbSession,
    session_service: SessionServiceDep,
    settings: SettingsDep,
) -> MessageResponse:
    """Sign in as the seeded administrator without a password.

    Only reachable when the service runs in the development environment.
    """

    if not settings.is_development:
        raise ApiError(status.HTTP_404_NOT_FOUND, "Not found")

    with translate_errors("create test session", failure_message="Failed to create session"):
        user = UserRepository(session).get_by_email(settings.dev_seed_user_email)
        if user is None:
            logger.error(
                "Seed user %s is missing",
                settings.dev_seed_user_email,
                extra={"operation": "create test session"},
            )
            raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, SEED_USER_MISSING)
        info, token = session_service.create_session(session=session, user=user)

    set_session_cookie(response, token=token, info=info, settings=settings)
    return MessageResponse(message="Session created")
