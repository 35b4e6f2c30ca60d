"""
Base connector class for calendar sources.
"""

from abc import ABC, abstractmethod
from typing import List

from browser_client import RenderSession
from models.schema import RawEvent, ScrapedEvent


class CalendarConnector(ABC):
    """
    Abstract base class for browser-driven calendar connectors.

    Each connector is responsible for:
    1. Listing the events shown on a season calendar page
    2. Scraping the raw schedule and UTC offset of a single event

    Connectors drive the caller's RenderSession one step at a time and return
    plain data; they never keep a reference to the session.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable connector name."""
        pass

    @abstractmethod
    async def list_events(self, session: RenderSession) -> List[RawEvent]:
        """
        Load the calendar page and extract one RawEvent per visible entry.

        Raises:
            NavigationError: If the calendar page cannot be loaded
            ExtractionError: If the listing markup is not as expected
        """
        pass

    @abstractmethod
    async def scrape_event(self, session: RenderSession, event: RawEvent) -> ScrapedEvent:
        """
        Load an event detail page and extract its sessions and UTC offset.

        Raises:
            NavigationError: If the page or its controls are unreachable
            ExtractionError: If the schedule markup is not as expected
        """
        pass
