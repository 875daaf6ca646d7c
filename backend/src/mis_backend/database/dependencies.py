"""FastAPI dependencies for database access.

One :class:`DatabaseService` is kept per connection string for the lifetime
of the process; :func:`dispose_databases` releases them on shutdown.
"""

import logging
from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from mis_backend.database.service import DatabaseService
from mis_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]

_databases: dict[str, DatabaseService] = {}


def get_database(settings: SettingsDep) -> DatabaseService:
    """Return the shared database service for the configured URL."""
    database = _databases.get(settings.database_url)
    if database is None:
        database = DatabaseService(settings.database_url)
        _databases[settings.database_url] = database
    return database


def dispose_databases() -> None:
    """Close pooled connections of every database service handed out."""
    while _databases:
        _, database = _databases.popitem()
        database.dispose()
        logger.debug("Disposed database engine %s", database.engine.url)


def get_session(
    db: Annotated[DatabaseService, Depends(get_database)],
) -> Iterator[Session]:
    """Yield a request-scoped session; it commits when the handler succeeds."""
    with db.session() as session:
        yield session
