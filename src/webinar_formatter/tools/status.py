"""Service status tool function."""

from __future__ import annotations

from ..config import AppConfig
from ..schemas import StatusOutput


def service_status(config: AppConfig) -> StatusOutput:
    """Report liveness and whether CRM forwarding is configured."""

    return StatusOutput(
        ok=True,
        message="Webinar formatter API running",
        crm_configured=config.crm_enabled,
    )
