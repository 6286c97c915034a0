"""Format-webinar tool function.

Validates the webhook body, formats the webinar timing and forwards the
result to the CRM, or returns it with a warning when the CRM is not
configured (dry run).
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import AppConfig
from ..crm import CustomValueClient
from ..errors import MissingInputError
from ..formatter import format_webinar_timing
from ..schemas import FormatWebinarInput, FormatWebinarOutput

logger = logging.getLogger(__name__)

DRY_RUN_WARNING = "GHL_API_KEY or FORMATTED_CV_ID not set yet"


async def format_webinar(
    config: AppConfig,
    client: Optional[CustomValueClient],
    params: FormatWebinarInput,
) -> FormatWebinarOutput:
    """Format the webinar timing and push it to the CRM custom value."""

    missing = params.missing_fields()
    if missing:
        raise MissingInputError(missing)

    formatted = format_webinar_timing(
        params.webinar_date,
        params.webinar_time,
        params.timezone,
        computed_abbreviation=config.display_computed_abbreviation,
    )
    logger.info("Formatting webinar as: %s", formatted)

    if not config.crm_enabled:
        logger.warning("Dry run: %s", DRY_RUN_WARNING)
        return FormatWebinarOutput(formatted=formatted, warning=DRY_RUN_WARNING)

    if client is None:
        client = CustomValueClient(config)
    await client.update(params.location_id.strip(), formatted)
    return FormatWebinarOutput(formatted=formatted, success=True)
