"""Pydantic schemas for request bodies and responses.

These models define the JSON contracts of the HTTP surface. Request
fields are optional at the schema level so that absent values surface
as a MISSING_INPUT error naming each field, not a generic validation
failure.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormatWebinarInput(BaseModel):
    """Body sent by the CRM workflow webhook.

    Attributes:
        location_id: CRM sub-account (location) identifier.
        webinar_date: Calendar date, e.g. "2026-12-30".
        webinar_time: Wall-clock time, e.g. "11:00 AM".
        timezone: Optional short code (EST, PDT, ...) or IANA zone name.
    """

    model_config = ConfigDict(extra="ignore")

    location_id: Optional[str] = None
    webinar_date: Optional[str] = None
    webinar_time: Optional[str] = None
    timezone: Optional[str] = Field(default=None, description="Short code or IANA zone")

    @field_validator("location_id", mode="before")
    @classmethod
    def _coerce_location_id(cls, v: Union[str, int, None]):
        # Some workflow builders send numeric ids
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or blank, in request order."""
        return [
            name
            for name in ("location_id", "webinar_date", "webinar_time")
            if not (getattr(self, name) or "").strip()
        ]


class FormatWebinarOutput(BaseModel):
    formatted: str
    success: Optional[bool] = None
    warning: Optional[str] = None


class StatusOutput(BaseModel):
    ok: bool
    message: str
    crm_configured: bool
