"""
Scraper configuration.

Values come from environment variables (a ``.env`` file is loaded by the
CLI) and can be overridden by command-line flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


DEFAULT_CALENDAR_URL = "https://www.motogp.com/en/calendar"


def _current_year() -> int:
    return datetime.utcnow().year


@dataclass
class ScraperConfig:
    """Calendar scraper configuration."""

    calendar_url: str = DEFAULT_CALENDAR_URL

    # Site layout assumptions
    class_marker: str = "MotoGP"
    exclusion_marker: str = "Race Press Conference"
    day_tab_count: int = 3

    # Year applied to schedule dates shown without one
    season: int = field(default_factory=_current_year)

    google_api_key: Optional[str] = None
    geocode_concurrency: int = 5
    geocode_timeout: float = 30.0

    output_path: str = "data.json"

    @classmethod
    def from_env(cls) -> ScraperConfig:
        """Load configuration from environment variables."""
        season = os.getenv("MOTOGP_SEASON")
        return cls(
            calendar_url=os.getenv("MOTOGP_CALENDAR_URL", DEFAULT_CALENDAR_URL),
            class_marker=os.getenv("MOTOGP_CLASS_MARKER", "MotoGP"),
            exclusion_marker=os.getenv("MOTOGP_EXCLUSION_MARKER", "Race Press Conference"),
            day_tab_count=int(os.getenv("MOTOGP_DAY_TABS", "3")),
            season=int(season) if season else _current_year(),
            google_api_key=os.getenv("GOOGLE_API_KEY"),
            geocode_concurrency=int(os.getenv("GEOCODE_CONCURRENCY", "5")),
            geocode_timeout=float(os.getenv("GEOCODE_TIMEOUT", "30")),
            output_path=os.getenv("OUTPUT_PATH", "data.json"),
        )
