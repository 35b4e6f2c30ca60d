"""
Exception types raised by the calendar pipeline.

Every stage raises a subclass of ``CalendarScraperError`` so the CLI can map
failures to an exit status in one place.
"""


class CalendarScraperError(Exception):
    """Base class for all pipeline failures."""


class NavigationError(CalendarScraperError):
    """Page unreachable, navigation timed out, or a clickable selector is missing."""


class ExtractionError(CalendarScraperError):
    """Expected DOM structure is absent from the rendered page."""


class ParseError(CalendarScraperError, ValueError):
    """Date, time or offset text could not be parsed."""


class GeocodeError(CalendarScraperError):
    """Geocoding returned zero or malformed results, or the request failed."""


class SinkError(CalendarScraperError):
    """The output document could not be written."""
