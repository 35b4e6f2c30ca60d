"""
Event enrichment: geocoding, slugs and UTC session times.
"""

import asyncio
import logging
from datetime import datetime
from typing import Dict, List, Optional

from geocoding.client import Geocoder
from models.enums import SESSION_KEY_MAP, SessionKey
from models.schema import CanonicalEvent, ScrapedEvent
from validators.timezone_utils import resolve_session_time
from .engine import DateTextNormalizer, NameNormalizer, OffsetNormalizer

logger = logging.getLogger(__name__)


class EventEnricher:
    """
    Turns ScrapedEvents into CanonicalEvents.

    Works only on plain scraped data and a geocoder, so it is safe to run
    for many events at once.
    """

    def __init__(
        self,
        geocoder: Geocoder,
        season: Optional[int] = None,
        concurrency: int = 5,
    ):
        self._geocoder = geocoder
        self._season = season
        self._concurrency = max(1, concurrency)

    def build_sessions(self, scraped: ScrapedEvent) -> Dict[SessionKey, datetime]:
        """
        Resolve every raw session into a UTC start keyed by SessionKey.

        A key seen twice keeps the later session.

        Raises:
            ParseError: If a date, start time or the offset is unparseable
        """
        offset = OffsetNormalizer.normalize(scraped.timezone_offset)
        sessions: Dict[SessionKey, datetime] = {}

        for raw in scraped.sessions:
            key = SESSION_KEY_MAP[raw.race]
            if key in sessions:
                logger.warning(
                    "%s: duplicate %s session, keeping the later one",
                    scraped.event.name, key.value,
                )
            sessions[key] = resolve_session_time(
                DateTextNormalizer.normalize(raw.date),
                raw.start,
                offset,
                season=self._season,
            )

        return sessions

    async def enrich(self, scraped: ScrapedEvent) -> CanonicalEvent:
        """
        Enrich one event.

        Raises:
            GeocodeError: If the track/location has no geocoding result
            ParseError: If session times cannot be resolved
        """
        event = scraped.event
        slug = NameNormalizer.slugify(event.name)
        sessions = self.build_sessions(scraped)
        coords = await self._geocoder.resolve(f"{event.track}, {event.location}")

        return CanonicalEvent(
            name=event.name,
            location=NameNormalizer.capitalise(event.location),
            track=event.track,
            round=event.round,
            sessions=sessions,
            latitude=coords.latitude,
            longitude=coords.longitude,
            slug=slug,
            locale_key=slug,
        )

    async def enrich_all(self, scraped_events: List[ScrapedEvent]) -> List[CanonicalEvent]:
        """
        Enrich all events concurrently, bounded by the configured concurrency.

        Output order follows input order. The first failure propagates.
        """
        semaphore = asyncio.Semaphore(self._concurrency)

        async def bounded(scraped: ScrapedEvent) -> CanonicalEvent:
            async with semaphore:
                return await self.enrich(scraped)

        enriched = await asyncio.gather(*(bounded(s) for s in scraped_events))
        logger.info("Enriched %d events", len(enriched))
        return list(enriched)
