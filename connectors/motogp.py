"""
MotoGP calendar connector.
Renders https://www.motogp.com/en/calendar and each event page with
Playwright, then reads the rendered DOM with BeautifulSoup.
"""
import logging
import re
from functools import partial
from typing import List, Optional, Sequence
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from browser_client import RenderSession
from config import ScraperConfig
from models.enums import SessionLabel
from models.errors import ExtractionError
from models.schema import RawEvent, RawSession, ScrapedEvent
from .base import CalendarConnector

logger = logging.getLogger(__name__)

# Calendar listing
EVENT_CONTAINER_SELECTOR = "div.event_container"
HIDDEN_CLASS = "hidden"
EVENT_NAME_SELECTOR = "a.event_name"
EVENT_LOCATION_SELECTOR = ".location"
ROUND_NAME_DELIMITER = " - "

# Event detail page
LOCAL_TIME_SELECTOR = 'p.c-schedule__time.radio[data-type="local"]'
DAY_DATE_SELECTOR = 'div.c-schedule__date[data-tab="day_{day}"]'
DAY_ROW_SELECTOR = 'div.c-schedule__table-container[data-tab="day_{day}"] div.c-schedule__table-row'
ROW_TIME_SELECTOR = "div.c-schedule__time"
GMT_OFFSET_SELECTOR = "span.gmt_offset"

_TIME_RANGE_SPLIT = re.compile(r"\s*[-–—]\s*")
_OFFSET_TOKEN = re.compile(r"[+-]?\d{1,2}(?::\d{2})?")


# ── DOM helpers ──────────────────────────────────────────────────────

def _flat_text(el: Tag) -> str:
    """Element text on one line with whitespace collapsed."""
    return " ".join(el.get_text(" ", strip=True).split())


def _lines(el: Tag) -> List[str]:
    """Element text split into its rendered lines."""
    return [line for line in el.stripped_strings]


# ── extractors ───────────────────────────────────────────────────────

def extract_event_list(html: str, page_url: str = "") -> List[RawEvent]:
    """
    Extract one RawEvent per visible event container on the calendar page.

    Containers carrying the ``hidden`` class are skipped. ``"Round - Name"``
    and ``track / location`` are split on their delimiters; a missing
    delimiter leaves the second part empty.

    Raises:
        ExtractionError: If a container lacks its name link or location block
    """
    soup = BeautifulSoup(html, "html.parser")
    events: List[RawEvent] = []

    for container in soup.select(EVENT_CONTAINER_SELECTOR):
        if HIDDEN_CLASS in (container.get("class") or []):
            continue

        anchor = container.select_one(EVENT_NAME_SELECTOR)
        location_el = container.select_one(EVENT_LOCATION_SELECTOR)
        if anchor is None or location_el is None:
            raise ExtractionError(
                f"Event container without {EVENT_NAME_SELECTOR!r} or "
                f"{EVENT_LOCATION_SELECTOR!r} on {page_url or 'calendar page'}"
            )

        round_label, _, name = _flat_text(anchor).partition(ROUND_NAME_DELIMITER)

        location_lines = _lines(location_el)
        track = location_lines[0] if location_lines else ""
        location = location_lines[1] if len(location_lines) > 1 else ""

        events.append(
            RawEvent(
                name=name.strip(),
                location=location,
                track=track,
                round=round_label.strip(),
                link=urljoin(page_url, anchor.get("href", "")),
            )
        )

    return events


def match_session_label(
    text: str,
    class_marker: str,
    exclusion_marker: str,
    labels: Sequence[SessionLabel] = tuple(SessionLabel),
) -> Optional[SessionLabel]:
    """
    Return the session label a schedule row belongs to, if any.

    The row must mention the class marker and must not mention the exclusion
    marker; the first label (in declaration order) found in the text wins.
    """
    if class_marker not in text or exclusion_marker in text:
        return None
    for label in labels:
        if label.value in text:
            return label
    return None


def extract_schedule(
    html: str,
    page_url: str = "",
    *,
    class_marker: str = "MotoGP",
    exclusion_marker: str = "Race Press Conference",
    day_tab_count: int = 3,
) -> List[RawSession]:
    """
    Extract RawSessions for one racing class from an event schedule page.

    Day tabs ``day_1`` .. ``day_<day_tab_count>`` are scanned in order. A tab
    without a date label is skipped.

    Raises:
        ExtractionError: If a matched row has no time cell
    """
    soup = BeautifulSoup(html, "html.parser")
    sessions: List[RawSession] = []

    for day in range(1, day_tab_count + 1):
        date_el = soup.select_one(DAY_DATE_SELECTOR.format(day=day))
        if date_el is None:
            logger.debug("No day_%d tab on %s", day, page_url)
            continue
        date_text = "\n".join(_lines(date_el))

        for row in soup.select(DAY_ROW_SELECTOR.format(day=day)):
            label = match_session_label(_flat_text(row), class_marker, exclusion_marker)
            if label is None:
                continue

            time_el = row.select_one(ROW_TIME_SELECTOR)
            if time_el is None:
                raise ExtractionError(
                    f"Schedule row for {label.value!r} on day_{day} has no time cell ({page_url})"
                )
            parts = _TIME_RANGE_SPLIT.split(_flat_text(time_el), maxsplit=1)
            start = parts[0]
            end = parts[1] if len(parts) > 1 else None

            sessions.append(RawSession(race=label, date=date_text, start=start, end=end))

    return sessions


def extract_gmt_offset(html: str, page_url: str = "") -> str:
    """
    Read the event's displayed GMT offset token, e.g. ``"+3"``.

    Raises:
        ExtractionError: If the offset element or its number is missing
    """
    soup = BeautifulSoup(html, "html.parser")
    el = soup.select_one(GMT_OFFSET_SELECTOR)
    if el is None:
        raise ExtractionError(f"No {GMT_OFFSET_SELECTOR!r} on {page_url or 'event page'}")

    text = _flat_text(el)
    match = _OFFSET_TOKEN.search(text)
    if not match:
        raise ExtractionError(f"No offset in {text!r} on {page_url or 'event page'}")
    return match.group(0)


# ── connector ────────────────────────────────────────────────────────

class MotoGPConnector(CalendarConnector):
    """
    Connector for the MotoGP season calendar.
    Uses Playwright rendering; schedule tables are built client-side.
    """

    def __init__(self, config: Optional[ScraperConfig] = None):
        self.config = config or ScraperConfig.from_env()

    @property
    def name(self) -> str:
        return "MotoGP Official Calendar"

    async def list_events(self, session: RenderSession) -> List[RawEvent]:
        await session.navigate(self.config.calendar_url)
        events = await session.evaluate(extract_event_list)
        logger.info("%s: found %d events on %s", self.name, len(events), self.config.calendar_url)
        return events

    async def scrape_event(self, session: RenderSession, event: RawEvent) -> ScrapedEvent:
        await session.navigate(f"{event.link}#schedule")
        await session.click(LOCAL_TIME_SELECTOR)

        sessions = await session.evaluate(
            partial(
                extract_schedule,
                class_marker=self.config.class_marker,
                exclusion_marker=self.config.exclusion_marker,
                day_tab_count=self.config.day_tab_count,
            )
        )
        offset = await session.evaluate(extract_gmt_offset)
        logger.debug("%s: %d sessions, GMT offset %s", event.name, len(sessions), offset)

        return ScrapedEvent(event=event, sessions=sessions, timezone_offset=offset)
