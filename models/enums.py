"""
Enumerations for calendar data models.
"""

from enum import Enum


class SessionLabel(str, Enum):
    """Session name as displayed on the schedule page.

    Declaration order is the matching order used by the schedule extractor.
    """
    FP1 = "Free Practice Nr. 1"
    FP2 = "Free Practice Nr. 2"
    FP3 = "Free Practice Nr. 3"
    FP4 = "Free Practice Nr. 4"
    Q1 = "Qualifying Nr. 1"
    Q2 = "Qualifying Nr. 2"
    RACE = "Race"


class SessionKey(str, Enum):
    """Canonical short code for a session."""
    FP1 = "fp1"
    FP2 = "fp2"
    FP3 = "fp3"
    FP4 = "fp4"
    Q1 = "q1"
    Q2 = "q2"
    RACE = "race"


SESSION_KEY_MAP = {
    SessionLabel.FP1: SessionKey.FP1,
    SessionLabel.FP2: SessionKey.FP2,
    SessionLabel.FP3: SessionKey.FP3,
    SessionLabel.FP4: SessionKey.FP4,
    SessionLabel.Q1: SessionKey.Q1,
    SessionLabel.Q2: SessionKey.Q2,
    SessionLabel.RACE: SessionKey.RACE,
}
