"""
Geocoding package initialization.
"""

from .client import Coordinates, Geocoder, GoogleGeocoder

__all__ = [
    "Coordinates",
    "Geocoder",
    "GoogleGeocoder",
]
