"""
Models package initialization.
"""

from .enums import SessionLabel, SessionKey, SESSION_KEY_MAP
from .errors import (
    CalendarScraperError,
    NavigationError,
    ExtractionError,
    ParseError,
    GeocodeError,
    SinkError,
)
from .schema import (
    RawEvent,
    RawSession,
    ScrapedEvent,
    CanonicalEvent,
    CalendarDocument,
    format_utc_instant,
)

__all__ = [
    "SessionLabel",
    "SessionKey",
    "SESSION_KEY_MAP",
    "CalendarScraperError",
    "NavigationError",
    "ExtractionError",
    "ParseError",
    "GeocodeError",
    "SinkError",
    "RawEvent",
    "RawSession",
    "ScrapedEvent",
    "CanonicalEvent",
    "CalendarDocument",
    "format_utc_instant",
]
