"""Client for the CRM custom-value update API.

A single PUT per call, awaited with a timeout and never retried. The
transport can be swapped (e.g. ``httpx.MockTransport``) for tests.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import AppConfig
from .errors import TimeoutErrorApp, UpstreamError

logger = logging.getLogger(__name__)


class CustomValueClient:
    """Updates one CRM custom value with a formatted string.

    Args:
        config: Application configuration; must have `crm_enabled` set.
        transport: Optional httpx transport override.
    """

    def __init__(
        self, config: AppConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        if not config.crm_enabled:
            raise ValueError(
                "GHL_API_KEY and FORMATTED_CV_ID are required to update custom values. "
                "Set them in your environment or .env file."
            )
        self._config = config
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self._config.ghl_api_base}/v1/custom-values/{self._config.formatted_cv_id}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.ghl_api_key}",
            "Version": self._config.ghl_api_version,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def update(self, location_id: str, value: str) -> None:
        """Write ``value`` to the configured custom value of ``location_id``.

        Raises:
            UpstreamError: The CRM answered with a non-2xx status.
            TimeoutErrorApp: The request did not complete in time.
        """

        payload = {"locationId": location_id, "value": value}
        try:
            async with httpx.AsyncClient(
                timeout=self._config.request_timeout_seconds, transport=self._transport
            ) as client:
                resp = await client.put(self.url, headers=self._headers(), json=payload)
        except httpx.TimeoutException as exc:
            logger.error("CRM request timed out: %s", exc)
            raise TimeoutErrorApp(
                "CRM request timed out",
                {"timeout_seconds": self._config.request_timeout_seconds},
            ) from exc

        if not resp.is_success:
            logger.error("CRM error: %s %s", resp.status_code, resp.text)
            raise UpstreamError(
                "Failed to update CV",
                {"status_code": resp.status_code, "body": resp.text},
            )
        logger.info("Updated custom value %s for location %s", self._config.formatted_cv_id, location_id)
