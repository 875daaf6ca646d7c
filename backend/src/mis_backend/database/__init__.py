"""Database connectivity, schemas and repositories."""

from mis_backend.database.base import BaseSchema
from mis_backend.database.dependencies import (
    dispose_databases,
    get_database,
    get_session,
)
from mis_backend.database.repositories import SessionRepository, UserRepository
from mis_backend.database.schemas import UserSchema, UserSessionSchema
from mis_backend.database.service import DatabaseService
from mis_backend.settings import BackendSettings, get_settings, settings

__all__ = [
    "BackendSettings",
    "BaseSchema",
    "DatabaseService",
    "SessionRepository",
    "UserRepository",
    "UserSchema",
    "UserSessionSchema",
    "dispose_databases",
    "get_database",
    "get_session",
    "get_settings",
    "settings",
]
