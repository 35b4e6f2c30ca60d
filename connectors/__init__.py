"""
Connectors package initialization.
"""

from .base import CalendarConnector
from .motogp import (
    MotoGPConnector,
    extract_event_list,
    extract_schedule,
    extract_gmt_offset,
    match_session_label,
)

__all__ = [
    "CalendarConnector",
    "MotoGPConnector",
    "extract_event_list",
    "extract_schedule",
    "extract_gmt_offset",
    "match_session_label",
]
