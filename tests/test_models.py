"""
Tests for calendar data models.
"""

import pytest
from datetime import datetime
import pytz
from pydantic import ValidationError

from models.enums import SessionLabel, SessionKey, SESSION_KEY_MAP
from models.schema import CanonicalEvent, CalendarDocument, format_utc_instant


def _event(**overrides):
    data = dict(
        name="Grand Prix of Qatar",
        location="Qatar",
        track="Lusail International Circuit",
        round="1",
        sessions={SessionKey.RACE: datetime(2024, 3, 10, 16, 0, tzinfo=pytz.utc)},
        latitude=25.49,
        longitude=51.45,
        slug="grand-prix-of-qatar",
        locale_key="grand-prix-of-qatar",
    )
    data.update(overrides)
    return CanonicalEvent(**data)


def test_session_key_map_total_and_injective():
    assert set(SESSION_KEY_MAP) == set(SessionLabel)
    assert len(set(SESSION_KEY_MAP.values())) == len(SessionLabel)
    assert set(SESSION_KEY_MAP.values()) == set(SessionKey)


def test_session_key_map_values():
    assert SESSION_KEY_MAP[SessionLabel("Free Practice Nr. 3")] == SessionKey.FP3
    assert SESSION_KEY_MAP[SessionLabel("Qualifying Nr. 1")].value == "q1"
    assert SESSION_KEY_MAP[SessionLabel("Race")].value == "race"


def test_locale_key_must_match_slug():
    with pytest.raises(ValidationError):
        _event(locale_key="something-else")


def test_latitude_bounds():
    with pytest.raises(ValidationError):
        _event(latitude=120.0)


def test_to_dict_shape():
    data = _event().to_dict()
    assert data["localeKey"] == data["slug"] == "grand-prix-of-qatar"
    assert "link" not in data
    assert "locale_key" not in data
    assert data["sessions"] == {"race": "2024-03-10T16:00:00.000Z"}


def test_populate_by_alias():
    event = CanonicalEvent.model_validate(_event().to_dict())
    assert event.locale_key == "grand-prix-of-qatar"
    assert event.sessions[SessionKey.RACE] == datetime(2024, 3, 10, 16, 0, tzinfo=pytz.utc)


def test_format_utc_instant_converts_offset():
    dt = pytz.FixedOffset(300).localize(datetime(2024, 2, 23, 14, 0, 0, 250000))
    assert format_utc_instant(dt) == "2024-02-23T09:00:00.250Z"


def test_calendar_document_to_dict():
    doc = CalendarDocument(races=[_event()])
    data = doc.to_dict()
    assert list(data) == ["races"]
    assert data["races"][0]["name"] == "Grand Prix of Qatar"
