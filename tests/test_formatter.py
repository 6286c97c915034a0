"""Unit tests for the webinar display formatter."""

from __future__ import annotations

from datetime import timedelta

import pytest

from webinar_formatter.errors import InvalidTimestampError
from webinar_formatter.formatter import (
    WebinarTiming,
    day_with_suffix,
    format_webinar_timing,
)


def test_formats_reference_example() -> None:
    assert (
        format_webinar_timing("2026-12-30", "11:00 AM", "EST")
        == "Wednesday, December 30th @ 11:00 AM EST"
    )


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (1, "1st"),
        (2, "2nd"),
        (3, "3rd"),
        (4, "4th"),
        (10, "10th"),
        (11, "11th"),
        (12, "12th"),
        (13, "13th"),
        (20, "20th"),
        (21, "21st"),
        (22, "22nd"),
        (23, "23rd"),
        (24, "24th"),
        (30, "30th"),
        (31, "31st"),
    ],
)
def test_day_with_suffix(day: int, expected: str) -> None:
    assert day_with_suffix(day) == expected


@pytest.mark.parametrize(
    ("time_value", "clock"),
    [
        ("00:00", "12:00 AM"),
        ("12:00 AM", "12:00 AM"),
        ("12:00", "12:00 PM"),
        ("12:00 PM", "12:00 PM"),
        ("13:05", "1:05 PM"),
        ("9:07 am", "9:07 AM"),
        ("7:30pm", "7:30 PM"),
        ("9 a.m.", "9:00 AM"),
        ("23:59:59", "11:59 PM"),
    ],
)
def test_twelve_hour_clock(time_value: str, clock: str) -> None:
    assert (
        format_webinar_timing("2026-01-15", time_value, "EST")
        == f"Thursday, January 15th @ {clock} EST"
    )


@pytest.mark.parametrize(
    "date_value",
    ["2026-12-01", "2026/12/01", "12/01/2026", "12-01-2026", "December 1, 2026", "Dec 1 2026", "1 December 2026"],
)
def test_accepts_common_date_shapes(date_value: str) -> None:
    assert format_webinar_timing(date_value, "7:30 PM", "PST") == "Tuesday, December 1st @ 7:30 PM PST"


def test_missing_label_displays_est_and_uses_new_york() -> None:
    timing = WebinarTiming.parse("2026-07-04", "12:00 PM")
    assert timing.zone_name == "America/New_York"
    assert timing.moment.tzinfo.key == "America/New_York"
    assert format_webinar_timing("2026-07-04", "12:00 PM") == "Saturday, July 4th @ 12:00 PM EST"
    assert format_webinar_timing("2026-07-04", "12:00 PM", "  ") == "Saturday, July 4th @ 12:00 PM EST"


def test_computed_abbreviation_follows_daylight_saving() -> None:
    summer = format_webinar_timing("2026-07-04", "12:00 PM", computed_abbreviation=True)
    winter = format_webinar_timing("2026-01-15", "12:00 PM", computed_abbreviation=True)
    assert summer.endswith(" EDT")
    assert winter.endswith(" EST")


def test_supplied_label_wins_over_computed_abbreviation() -> None:
    text = format_webinar_timing("2026-07-04", "12:00 PM", "PST", computed_abbreviation=True)
    assert text.endswith(" PST")


def test_unknown_label_passes_through_verbatim() -> None:
    timing = WebinarTiming.parse("2026-12-30", "11:00 AM", "XYZ")
    assert timing.zone_name == "XYZ"
    assert timing.moment.tzinfo.key == "America/New_York"
    assert format_webinar_timing("2026-12-30", "11:00 AM", "XYZ") == "Wednesday, December 30th @ 11:00 AM XYZ"


def test_iana_label_is_used_as_civil_zone() -> None:
    timing = WebinarTiming.parse("2026-07-04", "9:00 AM", "Europe/London")
    assert timing.moment.tzinfo.key == "Europe/London"
    assert timing.moment.utcoffset() == timedelta(hours=1)
    assert format_webinar_timing("2026-07-04", "9:00 AM", "Europe/London").endswith(
        "9:00 AM Europe/London"
    )


def test_wall_clock_is_read_in_target_zone() -> None:
    # Late evening Pacific must stay on the same civil day.
    timing = WebinarTiming.parse("2026-12-30", "11:30 PM", "PST")
    assert timing.moment.utcoffset() == timedelta(hours=-8)
    assert (timing.moment.day, timing.moment.hour) == (30, 23)
    assert (
        format_webinar_timing("2026-12-30", "11:30 PM", "PST")
        == "Wednesday, December 30th @ 11:30 PM PST"
    )


def test_lowercase_alias_resolves_and_displays_as_given() -> None:
    timing = WebinarTiming.parse("2026-12-30", "11:00 AM", "cst")
    assert timing.zone_name == "America/Chicago"
    assert format_webinar_timing("2026-12-30", "11:00 AM", "cst").endswith(" cst")


@pytest.mark.parametrize(
    ("date_value", "time_value"),
    [("not a date", "11:00 AM"), ("2026-12-30", "later"), ("2026-02-30", "11:00 AM"), ("2026-12-30", "25:00")],
)
def test_unparseable_input_raises_invalid_timestamp(date_value: str, time_value: str) -> None:
    with pytest.raises(InvalidTimestampError) as excinfo:
        format_webinar_timing(date_value, time_value, "CST")
    assert excinfo.value.details == {"raw": f"{date_value} {time_value}", "zone": "America/Chicago"}
    assert excinfo.value.status_code == 400


def test_supplied_label_is_trimmed_before_display() -> None:
    assert format_webinar_timing("2026-12-30", "11:00 AM", " XYZ ") == "Wednesday, December 30th @ 11:00 AM XYZ"


def test_gap_time_is_rejected_by_formatter() -> None:
    with pytest.raises(InvalidTimestampError):
        format_webinar_timing("2026-03-08", "2:30 AM", "EST")
