"""Display formatting for webinar date/time values.

Turns a caller-supplied date, time and timezone label into strings like
``"Thursday, December 30th @ 11:00 AM EST"``. Everything here is pure:
no I/O beyond a warning log for unknown zones, no state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .utils.date_parser import parse_civil_timestamp, resolve_zone_name

WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
DEFAULT_ZONE_DISPLAY = "EST"


@dataclass(frozen=True)
class WebinarTiming:
    """A civil timestamp plus the label the caller used for its zone."""

    moment: datetime
    timezone_label: Optional[str]
    zone_name: str

    @classmethod
    def parse(
        cls, date_value: str, time_value: str, timezone_label: Optional[str] = None
    ) -> "WebinarTiming":
        zone_name = resolve_zone_name(timezone_label)
        label = timezone_label.strip() if timezone_label and timezone_label.strip() else None
        return cls(parse_civil_timestamp(date_value, time_value, zone_name), label, zone_name)


def day_with_suffix(day: int) -> str:
    """Return the day of month with its English ordinal suffix.

    Example:
        >>> [day_with_suffix(d) for d in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23, 31)]
        ['1st', '2nd', '3rd', '4th', '11th', '12th', '13th', '21st', '22nd', '23rd', '31st']
    """

    if 11 <= day % 100 <= 13:
        return f"{day}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_clock(moment: datetime) -> str:
    """Render a 12-hour clock reading such as ``"9:05 PM"``."""
    meridiem = "PM" if moment.hour >= 12 else "AM"
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment.minute:02d} {meridiem}"


def zone_display(timing: WebinarTiming, *, computed: bool = False) -> str:
    """Pick the zone text shown after the clock reading.

    A supplied label is always shown verbatim. Without one the display is
    "EST", or, when ``computed`` is set, the abbreviation the resolved
    zone uses on that date.
    """

    if timing.timezone_label:
        return timing.timezone_label
    if computed:
        return timing.moment.tzname() or DEFAULT_ZONE_DISPLAY
    return DEFAULT_ZONE_DISPLAY


def render_timing(timing: WebinarTiming, *, computed_abbreviation: bool = False) -> str:
    moment = timing.moment
    # isoweekday(): Monday=1 .. Sunday=7
    weekday = WEEKDAYS[moment.isoweekday() % 7]
    month = MONTHS[moment.month - 1]
    zone = zone_display(timing, computed=computed_abbreviation)
    return f"{weekday}, {month} {day_with_suffix(moment.day)} @ {format_clock(moment)} {zone}"


def format_webinar_timing(
    date_value: str,
    time_value: str,
    timezone_label: Optional[str] = None,
    *,
    computed_abbreviation: bool = False,
) -> str:
    """Format a webinar date/time for display.

    Args:
        date_value: Calendar date string.
        time_value: Wall-clock time string.
        timezone_label: Short code (EST, PDT, ...) or IANA zone name.
        computed_abbreviation: Show the resolved zone's abbreviation
            instead of "EST" when no label is given.

    Returns:
        The display string, e.g. "Wednesday, December 30th @ 11:00 AM EST".

    Raises:
        InvalidTimestampError: If the date or time cannot be parsed.
    """

    timing = WebinarTiming.parse(date_value, time_value, timezone_label)
    return render_timing(timing, computed_abbreviation=computed_abbreviation)
