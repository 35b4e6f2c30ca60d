"""
Timezone utilities for turning local session times into UTC instants.
"""

import re
from datetime import datetime, time, tzinfo
from typing import Optional

import pytz
from dateutil import parser as date_parser

from models.errors import ParseError


_CANONICAL_OFFSET = re.compile(r"^([+-])(\d{2}):(\d{2})$")
_CLOCK_TIME = re.compile(r"^(\d{1,2}):(\d{2})$")


def offset_to_minutes(offset: str) -> int:
    """
    Convert a canonical ``±HH:MM`` offset to signed minutes east of UTC.

    Raises:
        ParseError: If the offset is not in canonical form
    """
    match = _CANONICAL_OFFSET.match(offset or "")
    if not match:
        raise ParseError(f"Offset is not in ±HH:MM form: {offset!r}")
    sign, hours, minutes = match.groups()
    total = int(hours) * 60 + int(minutes)
    return -total if sign == "-" else total


def fixed_offset_zone(offset: str) -> tzinfo:
    """Build a fixed-offset tzinfo from a canonical offset string."""
    minutes = offset_to_minutes(offset)
    try:
        return pytz.FixedOffset(minutes)
    except ValueError as e:
        # pytz rejects offsets of a full day or more
        raise ParseError(f"Offset out of range: {offset!r}") from e


def parse_clock_time(text: str) -> time:
    """
    Parse a local ``HH:MM`` wall-clock time.

    Raises:
        ParseError: If text is not HH:MM or names an impossible time
    """
    match = _CLOCK_TIME.match((text or "").strip())
    if not match:
        raise ParseError(f"Unparseable start time: {text!r}")
    try:
        return time(int(match.group(1)), int(match.group(2)))
    except ValueError as e:
        raise ParseError(f"Invalid start time: {text!r}") from e


def parse_session_date(text: str, season: Optional[int] = None) -> datetime:
    """
    Parse a day-tab date label such as ``"Fri 23 Feb"`` or ``"23 Feb 2024"``.

    Labels without a year take it from ``season`` (current UTC year if None).

    Raises:
        ParseError: If the label is not a calendar date
    """
    year = season or datetime.utcnow().year
    try:
        return date_parser.parse(
            text,
            default=datetime(year, 1, 1),
            dayfirst=True,
        )
    except (ValueError, OverflowError) as e:
        raise ParseError(f"Unparseable session date: {text!r}") from e


def resolve_session_time(
    date: str,
    start: str,
    offset: str,
    season: Optional[int] = None,
) -> datetime:
    """
    Resolve a local session start into an absolute UTC instant.

    The wall-clock ``"<date>, <start>:00"`` is interpreted in the fixed zone
    given by ``offset`` and converted to UTC. The host timezone is never
    consulted.

    Args:
        date: Single-line date label, e.g. "23 Feb 2024" or "Fri 23 Feb"
        start: Local start time, "HH:MM"
        offset: Canonical UTC offset, e.g. "+05:00"
        season: Year applied to labels that omit one

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ParseError: If date, start or offset is unparseable
    """
    zone = fixed_offset_zone(offset)
    day = parse_session_date(date, season).date()
    wall_clock = datetime.combine(day, parse_clock_time(start))
    return zone.localize(wall_clock).astimezone(pytz.utc)
