"""Repository helpers for working with users."""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from mis_backend.database.schemas import UserSchema, UserSessionSchema
from mis_backend.shared import UserRole


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: int) -> UserSchema | None:
        """Return user entity by user's ID."""
        return self._session.get(UserSchema, user_id)

    def get_by_email(self, email: str) -> UserSchema | None:
        """Return user entity by (case-insensitive) e-mail address."""
        stmt = select(UserSchema).where(UserSchema.email == email.strip().lower())
        return self._session.scalar(stmt)

    def list_all(self) -> list[UserSchema]:
        stmt = select(UserSchema).order_by(UserSchema.name, UserSchema.id)
        return list(self._session.scalars(stmt))

    def upsert(
        self,
        *,
        name: str,
        email: str,
        role: UserRole,
        organization: str | None = None,
        password_hash: str | None = None,
    ) -> UserSchema:
        """Create the user or update the one already registered under ``email``.

        An existing password hash is kept when ``password_hash`` is omitted.
        """
        user = self.get_by_email(email)
        if user is None:
            user = UserSchema(
                name=name,
                email=email.strip().lower(),
                role=role,
                organization=organization,
                password_hash=password_hash,
            )
            self._session.add(user)
        else:
            user.name = name
            user.role = role
            user.organization = organization
            if password_hash is not None:
                user.password_hash = password_hash
        self._session.flush()
        self._session.refresh(user)
        return user

    def delete(self, user_id: int) -> None:
        """Remove the user and every session bound to it; missing ids are ignored."""
        self._session.execute(
            delete(UserSessionSchema).where(UserSessionSchema.user_id == user_id)
        )
        self._session.execute(delete(UserSchema).where(UserSchema.id == user_id))
        self._session.flush()
