"""Branding settings schema."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from mis_backend.database.base import BaseSchema, updated_at_column

DEFAULT_COMPANY_NAME = "NSDO"
BRANDING_ROW_ID = 1


class BrandingSchema(BaseSchema):
    """Singleton row holding the organisation name, logo and favicon."""

    __tablename__ = "branding_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=BRANDING_ROW_ID)
    company_name: Mapped[str] = mapped_column(
        String(255), nullable=False, default=DEFAULT_COMPANY_NAME
    )
    logo_data: Mapped[bytes | None] = mapped_column(LargeBinary)
    logo_mime: Mapped[str | None] = mapped_column(String(128))
    favicon_data: Mapped[bytes | None] = mapped_column(LargeBinary)
    favicon_mime: Mapped[str | None] = mapped_column(String(128))
    updated_at: Mapped[datetime] = updated_at_column()
