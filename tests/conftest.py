"""Shared fixtures for the webinar formatter tests."""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from webinar_formatter.config import AppConfig


def build_config(**overrides) -> AppConfig:
    values = {"ghl_api_key": None, "formatted_cv_id": None}
    values.update(overrides)
    return AppConfig(_env_file=None, **values)


@pytest.fixture
def dry_config() -> AppConfig:
    return build_config()


@pytest.fixture
def live_config() -> AppConfig:
    return build_config(
        ghl_api_key="secret-token",
        formatted_cv_id="cv_42",
        ghl_api_base="https://crm.test/",
    )


class RecordingCRM:
    """httpx handler that records requests and answers with a fixed response."""

    def __init__(self, status_code: int = 200, body: str = '{"ok": true}') -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recording_crm() -> Callable[..., RecordingCRM]:
    return RecordingCRM
