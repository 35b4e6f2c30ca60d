"""
Validators package initialization.
"""

from .timezone_utils import (
    offset_to_minutes,
    fixed_offset_zone,
    parse_clock_time,
    parse_session_date,
    resolve_session_time,
)

__all__ = [
    "offset_to_minutes",
    "fixed_offset_zone",
    "parse_clock_time",
    "parse_session_date",
    "resolve_session_time",
]
