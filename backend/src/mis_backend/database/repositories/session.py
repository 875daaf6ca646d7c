"""Repository for persisted login sessions."""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from mis_backend.database.schemas import UserSessionSchema


class SessionRepository:
    """Stores sessions keyed by the SHA-256 hash of their opaque token."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(
        self, *, user_id: int, token_hash: str, expires_at: datetime
    ) -> UserSessionSchema:
        record = UserSessionSchema(
            user_id=user_id, token_hash=token_hash, expires_at=expires_at
        )
        self._session.add(record)
        self._session.flush()
        self._session.refresh(record)
        return record

    def get_by_token_hash(self, token_hash: str) -> UserSessionSchema | None:
        stmt = select(UserSessionSchema).where(
            UserSessionSchema.token_hash == token_hash
        )
        return self._session.scalar(stmt)

    def delete_by_token_hash(self, token_hash: str) -> None:
        self._session.execute(
            delete(UserSessionSchema).where(UserSessionSchema.token_hash == token_hash)
        )
        self._session.flush()

    def purge_expired(self, now: datetime) -> None:
        """Drop every session whose expiry is at or before ``now``."""
        self._session.execute(
            delete(UserSessionSchema).where(UserSessionSchema.expires_at <= now)
        )
        self._session.flush()
