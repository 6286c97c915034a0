"""Unit tests for the tool functions behind the routes."""

from __future__ import annotations

import asyncio

import pytest

from webinar_formatter.errors import InvalidTimestampError, MissingInputError
from webinar_formatter.schemas import FormatWebinarInput
from webinar_formatter.tools import DRY_RUN_WARNING, format_webinar, service_status

from .conftest import build_config


class FakeClient:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    async def update(self, location_id: str, value: str) -> None:
        self.calls.append((location_id, value))


def _params(**overrides) -> FormatWebinarInput:
    values = {"location_id": "loc_1", "webinar_date": "2026-12-30", "webinar_time": "11:00 AM"}
    values.update(overrides)
    return FormatWebinarInput(**values)


def test_dry_run_returns_warning_without_outbound_call(dry_config) -> None:
    client = FakeClient()
    result = asyncio.run(format_webinar(dry_config, client, _params(timezone="EST")))
    assert result.formatted == "Wednesday, December 30th @ 11:00 AM EST"
    assert result.warning == DRY_RUN_WARNING
    assert result.success is None
    assert client.calls == []


def test_live_run_forwards_formatted_value(live_config) -> None:
    client = FakeClient()
    result = asyncio.run(format_webinar(live_config, client, _params(location_id=" loc_9 ", timezone="PST")))
    assert result.success is True
    assert result.warning is None
    assert client.calls == [("loc_9", "Wednesday, December 30th @ 11:00 AM PST")]


def test_missing_fields_are_named(dry_config) -> None:
    with pytest.raises(MissingInputError) as excinfo:
        asyncio.run(format_webinar(dry_config, None, FormatWebinarInput(location_id="loc_1", webinar_time="")))
    assert excinfo.value.details == {"missing": ["webinar_date", "webinar_time"]}


def test_invalid_timestamp_propagates(live_config) -> None:
    client = FakeClient()
    with pytest.raises(InvalidTimestampError):
        asyncio.run(format_webinar(live_config, client, _params(webinar_date="someday")))
    assert client.calls == []


def test_computed_abbreviation_flag_is_honoured() -> None:
    config = build_config(display_computed_abbreviation=True)
    result = asyncio.run(format_webinar(config, None, _params(webinar_date="2026-07-04")))
    assert result.formatted == "Saturday, July 4th @ 11:00 AM EDT"


def test_service_status_reports_crm_configuration(dry_config, live_config) -> None:
    assert service_status(dry_config).crm_configured is False
    status = service_status(live_config)
    assert status.ok is True
    assert status.crm_configured is True
    assert "secret-token" not in status.model_dump_json()


def test_numeric_location_id_is_accepted() -> None:
    assert FormatWebinarInput(location_id=123).location_id == "123"
