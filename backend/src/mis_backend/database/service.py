"""Database session management utilities."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from mis_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseService:
    """Owns the engine and hands out transactional sessions.

    SQLite URLs (used by the test-suite and local tooling) get foreign key
    enforcement switched on so cascades behave as they do on PostgreSQL.
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        settings: BackendSettings | None = None,
    ) -> None:
        database_url = url or (settings or get_settings()).database_url
        is_sqlite = database_url.startswith("sqlite")
        self._engine = create_engine(
            database_url,
            future=True,
            pool_pre_ping=not is_sqlite,
            connect_args={"check_same_thread": False} if is_sqlite else {},
        )
        if is_sqlite:
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            expire_on_commit=False,
            class_=Session,
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Commit on success, roll back and re-raise on any failure."""

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception as exc:
            session.rollback()
            logger.debug("Rolled back transaction after %s", type(exc).__name__)
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self._engine.dispose()
