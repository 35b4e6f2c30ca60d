"""
Pydantic data models for the race calendar document.
"""

from datetime import datetime
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, field_serializer, model_validator
import pytz
from .enums import SessionLabel, SessionKey


def format_utc_instant(dt: datetime) -> str:
    """Render an aware datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    utc = dt.astimezone(pytz.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S") + f".{utc.microsecond // 1000:03d}Z"


class RawEvent(BaseModel):
    """One calendar entry as scraped from the listing page."""
    name: str = Field(..., description="Event display name")
    location: str = Field(..., description="Location text as displayed")
    track: str = Field(..., description="Track/circuit name")
    round: str = Field(..., description="Round label, e.g. '1'")
    link: str = Field(..., description="Absolute URL of the event detail page")


class RawSession(BaseModel):
    """One schedule row as scraped from an event page, not yet normalized."""
    race: SessionLabel = Field(..., description="Matched session label")
    date: str = Field(..., description="Day-tab date label, site-native text")
    start: str = Field(..., description="Local start time, HH:MM")
    end: Optional[str] = Field(None, description="Local end time, HH:MM")

    class Config:
        json_schema_extra = {
            "example": {
                "race": "Free Practice Nr. 1",
                "date": "Fri\n23 Feb",
                "start": "09:45",
                "end": "10:30",
            }
        }


class ScrapedEvent(BaseModel):
    """Everything the scraping phase learned about one event.

    Plain data only: this is what crosses from the browser-bound phase into
    enrichment.
    """
    event: RawEvent
    sessions: List[RawSession] = Field(default_factory=list)
    timezone_offset: str = Field(..., description="Raw GMT offset token, e.g. '+3'")


class CanonicalEvent(BaseModel):
    """Enriched calendar entry written to the output document."""
    name: str = Field(..., description="Event display name")
    location: str = Field(..., description="Location, first letter capitalised")
    track: str = Field(..., description="Track/circuit name")
    round: str = Field(..., description="Round label")
    sessions: Dict[SessionKey, datetime] = Field(
        default_factory=dict,
        description="Session key -> UTC start instant",
    )
    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")
    slug: str = Field(..., description="URL-safe event identifier")
    locale_key: str = Field(..., alias="localeKey", description="Translation key, equal to slug")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "name": "Qatar Airways Grand Prix of Qatar",
                "location": "Qatar",
                "track": "Lusail International Circuit",
                "round": "1",
                "sessions": {"fp1": "2024-03-08T09:45:00.000Z"},
                "latitude": 25.49,
                "longitude": 51.45,
                "slug": "qatar-airways-grand-prix-of-qatar",
                "localeKey": "qatar-airways-grand-prix-of-qatar",
            }
        }

    @model_validator(mode='after')
    def validate_locale_key(self) -> 'CanonicalEvent':
        """localeKey is derived from the slug and must match it."""
        if self.slug != self.locale_key:
            raise ValueError(
                f"localeKey {self.locale_key!r} does not match slug {self.slug!r}"
            )
        return self

    @field_serializer('sessions')
    def serialize_sessions(self, sessions: Dict[SessionKey, datetime]) -> Dict[str, str]:
        return {key.value: format_utc_instant(dt) for key, dt in sessions.items()}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export."""
        return self.model_dump(mode='json', by_alias=True)


class CalendarDocument(BaseModel):
    """Top-level output document."""
    races: List[CanonicalEvent] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export."""
        return {"races": [race.to_dict() for race in self.races]}
