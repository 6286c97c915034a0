"""Date/time parsing helpers.

Resolves timezone labels (short North American codes or IANA names) and
reads caller-supplied date and time strings as a civil timestamp in the
resolved zone. The wall-clock reading is attached to the zone directly;
it is never interpreted as UTC or host-local time first.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timezone
from types import MappingProxyType
from typing import Mapping, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..errors import InvalidTimestampError

logger = logging.getLogger(__name__)

DEFAULT_ZONE = "America/New_York"

TIMEZONE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "EST": "America/New_York",
        "EDT": "America/New_York",
        "CST": "America/Chicago",
        "CDT": "America/Chicago",
        "MST": "America/Denver",
        "MDT": "America/Denver",
        "PST": "America/Los_Angeles",
        "PDT": "America/Los_Angeles",
        "AKST": "America/Anchorage",
        "AKDT": "America/Anchorage",
        "HST": "Pacific/Honolulu",
        "AST": "America/Halifax",
        "ADT": "America/Halifax",
    }
)

_DATE_FORMATS: Tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%B %d, %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)

_TIME_FORMATS: Tuple[str, ...] = (
    "%I:%M %p",
    "%I:%M:%S %p",
    "%I %p",
    "%H:%M",
    "%H:%M:%S",
)

# "11:00AM" -> "11:00 AM", "11 a.m." -> "11 AM"
_MERIDIEM_RE = re.compile(r"\s*([AaPp])\.?\s*[Mm]\.?$")


def resolve_zone_name(label: Optional[str]) -> str:
    """Map a timezone label to a zone identifier.

    Known short codes map through `TIMEZONE_ALIASES` (case-insensitive).
    Unknown labels pass through unchanged; blank or missing labels
    resolve to America/New_York.

    Example:
        >>> resolve_zone_name("pst")
        'America/Los_Angeles'
        >>> resolve_zone_name("Europe/London")
        'Europe/London'
        >>> resolve_zone_name(None)
        'America/New_York'
    """

    if label is None or not label.strip():
        return DEFAULT_ZONE
    cleaned = label.strip()
    return TIMEZONE_ALIASES.get(cleaned.upper(), cleaned)


def load_zone(name: str) -> ZoneInfo:
    """Load an IANA zone, falling back to America/New_York when unknown."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.warning("Unknown timezone %r; using %s civil calendar", name, DEFAULT_ZONE)
        return ZoneInfo(DEFAULT_ZONE)


def _normalize_time(value: str) -> str:
    cleaned = " ".join(value.split())
    return _MERIDIEM_RE.sub(lambda m: f" {m.group(1).upper()}M", cleaned)


def _parse_with(value: str, formats: Tuple[str, ...]) -> Optional[datetime]:
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_date(value: str) -> Optional[date]:
    """Parse a calendar date string, returning None when no format matches."""
    parsed = _parse_with(" ".join(value.split()), _DATE_FORMATS)
    return parsed.date() if parsed else None


def parse_time(value: str) -> Optional[time]:
    """Parse a wall-clock time string, returning None when no format matches."""
    parsed = _parse_with(_normalize_time(value), _TIME_FORMATS)
    return parsed.time() if parsed else None


def parse_civil_timestamp(date_value: str, time_value: str, zone_name: str) -> datetime:
    """Read a date and a time as a civil timestamp in ``zone_name``.

    Args:
        date_value: Calendar date, e.g. "2026-12-30" or "December 30, 2026".
        time_value: Wall-clock time, e.g. "11:00 AM" or "23:15".
        zone_name: Zone identifier as returned by `resolve_zone_name`.

    Returns:
        A timezone-aware datetime whose wall-clock fields equal the input.

    Raises:
        InvalidTimestampError: If either part cannot be parsed, or the
            clock reading does not exist in the zone (spring-forward gap).
    """

    parsed_date = parse_date(date_value)
    parsed_time = parse_time(time_value)
    if parsed_date is None or parsed_time is None:
        raise InvalidTimestampError(f"{date_value} {time_value}", zone_name)
    zone = load_zone(zone_name)
    moment = datetime.combine(parsed_date, parsed_time, tzinfo=zone)
    # clock readings inside a spring-forward gap do not survive a UTC round trip
    if moment.astimezone(timezone.utc).astimezone(zone).replace(tzinfo=None) != moment.replace(tzinfo=None):
        raise InvalidTimestampError(f"{date_value} {time_value}", zone_name)
    return moment
