"""Environment configuration for the webinar formatter service.

Now when you run the server, you can use the following environment
variables to configure it:

```bash
export GHL_API_KEY="pit-..."
export FORMATTED_CV_ID="abc123"
export PORT=3000
```

These are rendered to the AppConfig class and can be accessed like this:

```python
from webinar_formatter.config import load_config
cfg = load_config()
print(cfg.crm_enabled)
```

Leaving GHL_API_KEY or FORMATTED_CV_ID unset runs the service in dry-run
mode: values are formatted and returned, but never sent to the CRM.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _blank_to_none(v: object) -> object:
    """Treat empty or whitespace-only strings as unset."""
    if isinstance(v, str) and not v.strip():
        return None
    return v


class AppConfig(BaseSettings):
    """Application configuration settings loaded from environment variables.

    Variables are unprefixed to match the names used by the hosting
    platform (e.g., GHL_API_KEY, PORT).
    """

    # ---- CRM credentials ----
    ghl_api_key: Optional[str] = Field(
        default=None, description="Bearer token for the CRM API"
    )
    formatted_cv_id: Optional[str] = Field(
        default=None, description="Identifier of the custom value to update"
    )

    # ---- CRM endpoint ----
    ghl_api_base: str = Field(
        default="https://services.leadconnectorhq.com",
        description="Base URL of the CRM API",
    )
    ghl_api_version: str = Field(
        default="2021-07-28", description="Value sent in the Version header"
    )

    # ---- network tuning ----
    request_timeout_seconds: float = Field(
        default=15, gt=0, description="Outbound request timeout in seconds"
    )

    # ---- server ----
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=3000, description="Port to listen on")
    log_level: str = Field(default="INFO", description="Root log level")

    # ---- behavior ----
    display_computed_abbreviation: bool = Field(
        default=False,
        description=(
            "When no timezone label is supplied, display the abbreviation of "
            "the resolved zone on that date (e.g. EDT) instead of 'EST'"
        ),
    )

    # pydantic-settings v2 config
    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=(".env",),  # will read if present
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,  # make settings immutable
    )

    # ---- validators ----
    @field_validator("ghl_api_key", "formatted_cv_id", mode="before")
    @classmethod
    def _strip_blank_credentials(cls, v):
        return _blank_to_none(v)

    @field_validator("ghl_api_base", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper()

    # ---- derived conveniences (no mutation) ----
    @property
    def crm_enabled(self) -> bool:
        """True when both the API key and the custom-value id are set."""
        return bool(self.ghl_api_key and self.formatted_cv_id)


def load_config() -> AppConfig:
    """Load and validate application configuration from environment variables.

    • Missing values fall back to the documented defaults.
    • Blank credentials are treated as unset (dry-run mode).
    """
    return AppConfig()
