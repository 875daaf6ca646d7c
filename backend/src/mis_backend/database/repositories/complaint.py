"""Repository for complaint submissions."""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from mis_backend.database.schemas import ComplaintSchema
from mis_backend.shared import ValidationError, clean_text


class ComplaintRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[ComplaintSchema]:
        stmt = select(ComplaintSchema).order_by(
            ComplaintSchema.submitted_at.desc(), ComplaintSchema.id.desc()
        )
        return list(self._session.scalars(stmt))

    def add(
        self,
        *,
        full_name: str | None,
        email: str | None,
        message: str | None,
        phone: str | None = None,
    ) -> ComplaintSchema:
        """Record a complaint after checking the mandatory fields."""
        clean_name = clean_text(full_name)
        if clean_name is None:
            raise ValidationError("Full name is required.")
        clean_email = clean_text(email)
        if clean_email is None:
            raise ValidationError("Email is required.")
        clean_message = clean_text(message)
        if clean_message is None:
            raise ValidationError("Complaint message is required.")
        complaint = ComplaintSchema(
            full_name=clean_name,
            email=clean_email,
            phone=clean_text(phone),
            message=clean_message,
        )
        self._session.add(complaint)
        self._session.flush()
        self._session.refresh(complaint)
        return complaint

    def delete(self, complaint_id: int) -> None:
        """Remove a complaint; unknown ids are acknowledged all the same."""
        self._session.execute(
            delete(ComplaintSchema).where(ComplaintSchema.id == complaint_id)
        )
        self._session.flush()
