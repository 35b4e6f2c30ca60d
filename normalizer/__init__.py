"""
Normalizer package initialization.
"""

from .engine import OffsetNormalizer, DateTextNormalizer, NameNormalizer
from .enricher import EventEnricher

__all__ = [
    "OffsetNormalizer",
    "DateTextNormalizer",
    "NameNormalizer",
    "EventEnricher",
]
