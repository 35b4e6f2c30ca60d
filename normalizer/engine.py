"""
Text normalization for scraped calendar data.
"""

import re
import unicodedata

from models.errors import ParseError


class OffsetNormalizer:
    """Turns a displayed GMT offset such as ``+2`` or ``-5`` into ``±HH:MM``."""

    # sign, hours, optional minutes ("+5:30" / "+5.30")
    PATTERN = re.compile(r"^\s*([+-]?)\s*(\d{1,2})(?:[:.](\d{2}))?\s*$")

    @classmethod
    def normalize(cls, offset: str) -> str:
        """
        Normalize an offset token.

        Missing sign means positive, hours are zero-padded to two digits and
        minutes default to ``00``. Out-of-range hours are passed through.

        Args:
            offset: Raw offset text, e.g. "5", "-5", "+11"

        Returns:
            Canonical offset, e.g. "+05:00"

        Raises:
            ParseError: If the text carries no hour digits
        """
        match = cls.PATTERN.match(offset or "")
        if not match:
            raise ParseError(f"Unrecognised UTC offset: {offset!r}")

        sign, hours, minutes = match.groups()
        return f"{sign or '+'}{hours.zfill(2)}:{minutes or '00'}"


class DateTextNormalizer:
    """Collapses a multi-line day-tab date label onto one line."""

    _LINE_BREAK = re.compile(r"\r?\n")

    @classmethod
    def normalize(cls, text: str) -> str:
        # one space per line break: "Fri\n23 Feb" -> "Fri 23 Feb"
        return cls._LINE_BREAK.sub(" ", text)


class NameNormalizer:
    """Normalizes names and text fields."""

    @staticmethod
    def slugify(name: str) -> str:
        """
        Build a URL slug from an event name.

        Lowercases, transliterates accented letters to ASCII, drops anything
        that is not a letter, digit, space or hyphen, then joins words with
        single hyphens.

        Args:
            name: Event display name

        Returns:
            Slug, e.g. "gran-premio-ditalia"
        """
        ascii_name = (
            unicodedata.normalize("NFKD", name)
            .encode("ascii", "ignore")
            .decode("ascii")
            .lower()
        )
        cleaned = re.sub(r"[^a-z0-9\s-]", "", ascii_name)
        slug = "-".join(cleaned.split())
        return re.sub(r"-{2,}", "-", slug).strip("-")

    @staticmethod
    def capitalise(text: str) -> str:
        """Lowercase everything, then uppercase the first character only."""
        lowered = text.lower()
        return lowered[:1].upper() + lowered[1:]
