"""
Calendar pipeline orchestrator.

Ties together the rendering session, a calendar connector, the event
enricher and the JSON sink into a single run:

  1. Launch the browser and list events on the calendar page
  2. Scrape each event page in turn (schedule + GMT offset)
  3. Close the browser and enrich all events concurrently
  4. Write the calendar document

Any failure aborts the run; nothing is written unless every event was
scraped and enriched.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from browser_client import BrowserConfig, RenderSession
from config import ScraperConfig
from connectors.base import CalendarConnector
from connectors.motogp import MotoGPConnector
from exporters.json_writer import write_json
from geocoding.client import Geocoder, GoogleGeocoder
from models.schema import CalendarDocument, ScrapedEvent
from normalizer.enricher import EventEnricher

logger = logging.getLogger(__name__)


class CalendarPipeline:
    """
    Main orchestrator for one scrape run.

    Usage:
        pipeline = CalendarPipeline(ScraperConfig.from_env())
        document = await pipeline.run()
    """

    def __init__(
        self,
        config: ScraperConfig,
        browser_config: Optional[BrowserConfig] = None,
        connector: Optional[CalendarConnector] = None,
        geocoder: Optional[Geocoder] = None,
        session_factory: Callable[[BrowserConfig], RenderSession] = RenderSession,
    ):
        self._config = config
        self._browser_config = browser_config or BrowserConfig.from_env()
        self._connector = connector or MotoGPConnector(config)
        self._geocoder = geocoder
        self._session_factory = session_factory

    async def scrape(self) -> List[ScrapedEvent]:
        """List events and scrape each one, strictly one page at a time."""
        scraped: List[ScrapedEvent] = []

        async with self._session_factory(self._browser_config) as session:
            events = await self._connector.list_events(session)
            for event in events:
                logger.info("Scraping --> %s", event.name)
                scraped.append(await self._connector.scrape_event(session, event))

        return scraped

    async def enrich(self, scraped: List[ScrapedEvent]) -> CalendarDocument:
        """Geocode and normalize all scraped events."""
        geocoder = self._geocoder or GoogleGeocoder(
            api_key=self._config.google_api_key,
            timeout=self._config.geocode_timeout,
        )
        enricher = EventEnricher(
            geocoder,
            season=self._config.season,
            concurrency=self._config.geocode_concurrency,
        )

        try:
            races = await enricher.enrich_all(scraped)
        finally:
            if self._geocoder is None:
                await geocoder.aclose()

        return CalendarDocument(races=races)

    async def run(self, write: bool = True) -> CalendarDocument:
        """
        Execute the full pipeline.

        Args:
            write: Write the document to the configured output path

        Raises:
            CalendarScraperError: On the first failure of any stage
        """
        logger.info("Starting scraper...")
        scraped = await self.scrape()
        document = await self.enrich(scraped)

        if write:
            write_json(document, self._config.output_path)

        return document
