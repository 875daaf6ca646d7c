"""Repository for the branding singleton."""

from __future__ import annotations

import base64
import binascii
import re

from sqlalchemy.orm import Session

from mis_backend.database.schemas import (
    BRANDING_ROW_ID,
    DEFAULT_COMPANY_NAME,
    BrandingSchema,
)

_DATA_URL = re.compile(r"^data:(?P<mime>[^;,]+);base64,(?P<data>.*)$", re.DOTALL)


def parse_data_url(value: str | None) -> tuple[bytes, str] | None:
    """Decode a base64 ``data:`` URL into ``(payload, mime)``."""

    if not value:
        return None
    match = _DATA_URL.match(value.strip())
    if match is None:
        return None
    try:
        payload = base64.b64decode(match.group("data"), validate=True)
    except binascii.Error:
        return None
    return payload, match.group("mime")


def to_data_url(data: bytes | None, mime: str | None) -> str | None:
    if not data or not mime:
        return None
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


class BrandingRepository:
    """Reads and updates the single branding row."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self) -> BrandingSchema | None:
        return self._session.get(BrandingSchema, BRANDING_ROW_ID)

    def update(
        self,
        *,
        company_name: str | None = None,
        logo_data_url: str | None = None,
        favicon_data_url: str | None = None,
    ) -> BrandingSchema:
        """Apply the supplied values; absent or undecodable images keep the stored ones."""
        branding = self.get()
        if branding is None:
            branding = BrandingSchema(
                id=BRANDING_ROW_ID, company_name=DEFAULT_COMPANY_NAME
            )
            self._session.add(branding)
        if company_name:
            branding.company_name = company_name
        logo = parse_data_url(logo_data_url)
        if logo is not None:
            branding.logo_data, branding.logo_mime = logo
        favicon = parse_data_url(favicon_data_url)
        if favicon is not None:
            branding.favicon_data, branding.favicon_mime = favicon
        self._session.flush()
        self._session.refresh(branding)
        return branding
