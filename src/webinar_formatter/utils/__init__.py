"""Utility functions for parsing.

This package includes the timezone alias table and the civil timestamp
parsing used by the formatter.
"""

from .date_parser import (
    DEFAULT_ZONE,
    TIMEZONE_ALIASES,
    parse_civil_timestamp,
    resolve_zone_name,
)

__all__ = [
    "DEFAULT_ZONE",
    "TIMEZONE_ALIASES",
    "parse_civil_timestamp",
    "resolve_zone_name",
]
