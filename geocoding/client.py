"""
Geocoder ABC and provider implementations.

Supports:
  - Google Geocoding API

The API key is passed in by the caller; clients never read it from the
environment themselves.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import httpx

from models.errors import GeocodeError

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Data classes
# ------------------------------------------------------------------

@dataclass(frozen=True)
class Coordinates:
    """Resolved position of an address."""

    latitude: float
    longitude: float


# ------------------------------------------------------------------
# Abstract client
# ------------------------------------------------------------------

class Geocoder(ABC):
    """Abstract geocoding interface."""

    @abstractmethod
    async def resolve(self, address: str) -> Coordinates:
        """
        Resolve an address to coordinates.

        Raises:
            GeocodeError: If the address has no result or the lookup fails
        """
        ...

    async def aclose(self):
        """Release any held connections."""

    async def __aenter__(self) -> Geocoder:
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()


# ------------------------------------------------------------------
# Google Geocoding API provider
# ------------------------------------------------------------------

class GoogleGeocoder(Geocoder):
    """Geocode via the Google Geocoding API (first result wins)."""

    API_URL = "https://maps.googleapis.com/maps/api/geocode/json"

    def __init__(
        self,
        api_key: Optional[str],
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._api_key = api_key or ""
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()

    async def resolve(self, address: str) -> Coordinates:
        params = {"address": address, "key": self._api_key}

        try:
            resp = await self._client.get(self.API_URL, params=params)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise GeocodeError(f"Geocoding request for {address!r} failed: {e}") from e
        except ValueError as e:
            raise GeocodeError(f"Geocoding response for {address!r} is not JSON") from e

        status = data.get("status", "")
        results = data.get("results") or []
        if status == "ZERO_RESULTS" or (status == "OK" and not results):
            raise GeocodeError(f"No geocoding results for {address!r}")
        if status != "OK":
            detail = data.get("error_message") or "no detail"
            raise GeocodeError(f"Geocoding {address!r} failed with status {status}: {detail}")

        try:
            location = results[0]["geometry"]["location"]
            coords = Coordinates(latitude=float(location["lat"]), longitude=float(location["lng"]))
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodeError(f"Malformed geocoding result for {address!r}") from e

        logger.debug("Geocoded %r -> %s, %s", address, coords.latitude, coords.longitude)
        return coords
