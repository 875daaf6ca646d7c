"""Session authentication domain logic."""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from mis_backend.database import SessionRepository, UserRepository, UserSchema
from mis_backend.settings import BackendSettings, get_settings
from mis_backend.shared import ErrorKind, MisError, UnauthorizedError, UserRole, as_utc

SESSION_COOKIE_NAME = "mis_session"
_PBKDF2_ITERATIONS = 100_000


class InvalidCredentialsError(MisError):
    """Raised when supplied credentials are invalid."""

    kind = ErrorKind.UNAUTHORIZED
    default_message = "Invalid credentials."


@dataclass(slots=True, frozen=True)
class SessionUser:
    """The identity a session acts for."""

    id: str
    name: str
    email: str
    role: UserRole
    organization: str | None = None

    @classmethod
    def from_schema(cls, user: UserSchema) -> SessionUser:
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role,
            organization=user.organization,
        )


@dataclass(slots=True, frozen=True)
class SessionInfo:
    """A resolved, unexpired session."""

    session_id: str
    user: SessionUser
    expires_at: datetime


class SessionService:
    """Handles password hashing and the lifecycle of opaque session tokens.

    Tokens are 32 random bytes rendered as hex and handed to the client once;
    only their SHA-256 digest is persisted.
    """

    def __init__(
        self,
        *,
        session_ttl_minutes: int | None = None,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        ttl = session_ttl_minutes or config.session_ttl_minutes
        self._session_ttl = timedelta(minutes=ttl)

    def hash_password(self, password: str) -> str:
        """Hash a password using PBKDF2 with a random salt."""

        salt = secrets.token_bytes(16)
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS
        )
        return f"{base64.b64encode(salt).decode()}:{base64.b64encode(digest).decode()}"

    def verify_password(self, password: str, password_hash: str | None) -> bool:
        """Validate a password against a stored PBKDF2 hash."""

        if not password_hash:
            return False
        try:
            salt_b64, hash_b64 = password_hash.split(":", 1)
            salt = base64.b64decode(salt_b64.encode())
            expected = base64.b64decode(hash_b64.encode())
        except ValueError:
            return False
        actual = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS
        )
        return hmac.compare_digest(actual, expected)

    @staticmethod
    def hash_token(token: str) -> str:
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def resolve_session(self, *, session: Session, token: str | None) -> SessionInfo:
        """Return the session behind ``token`` or raise :class:`UnauthorizedError`."""

        if not token:
            raise UnauthorizedError("Missing session token")
        record = SessionRepository(session).get_by_token_hash(self.hash_token(token))
        if record is None:
            raise UnauthorizedError("Unknown session")
        expires_at = as_utc(record.expires_at)
        if datetime.now(tz=UTC) >= expires_at:
            raise UnauthorizedError("Session expired")
        return SessionInfo(
            session_id=str(record.id),
            user=SessionUser.from_schema(record.user),
            expires_at=expires_at,
        )

    def create_session(
        self, *, session: Session, user: UserSchema
    ) -> tuple[SessionInfo, str]:
        """Mint a fresh session for ``user`` and return it with its raw token."""

        now = datetime.now(tz=UTC)
        repository = SessionRepository(session)
        repository.purge_expired(now)
        token = secrets.token_hex(32)
        expires_at = now + self._session_ttl
        record = repository.add(
            user_id=user.id, token_hash=self.hash_token(token), expires_at=expires_at
        )
        info = SessionInfo(
            session_id=str(record.id),
            user=SessionUser.from_schema(user),
            expires_at=expires_at,
        )
        return info, token

    def destroy_session(self, *, session: Session, token: str | None) -> None:
        if token:
            SessionRepository(session).delete_by_token_hash(self.hash_token(token))

    def purge_expired_sessions(self, *, session: Session) -> None:
        SessionRepository(session).purge_expired(datetime.now(tz=UTC))

    def authenticate(
        self, *, session: Session, email: str, password: str
    ) -> tuple[SessionInfo, str]:
        """Check credentials and open a session for the matching user."""

        user = UserRepository(session).get_by_email(email)
        if user is None or not self.verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        return self.create_session(session=session, user=user)
