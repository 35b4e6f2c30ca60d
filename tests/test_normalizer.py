"""
Tests for text normalizers.
"""

import pytest
from models.errors import ParseError
from normalizer.engine import OffsetNormalizer, DateTextNormalizer, NameNormalizer


def test_offset_normalizer_pads_and_signs():
    """Missing sign means positive; hours padded to two digits."""
    assert OffsetNormalizer.normalize("5") == "+05:00"
    assert OffsetNormalizer.normalize("-5") == "-05:00"
    assert OffsetNormalizer.normalize("+11") == "+11:00"
    assert OffsetNormalizer.normalize("+0") == "+00:00"


def test_offset_normalizer_keeps_minutes():
    assert OffsetNormalizer.normalize("+5:30") == "+05:30"
    assert OffsetNormalizer.normalize("-3.30") == "-03:30"


def test_offset_normalizer_does_not_bound_hours():
    """Out-of-range hours pass through uncorrected."""
    assert OffsetNormalizer.normalize("+15") == "+15:00"
    assert OffsetNormalizer.normalize("-99") == "-99:00"


@pytest.mark.parametrize("raw", ["", "GMT", "+", "+123"])
def test_offset_normalizer_rejects_non_numeric(raw):
    with pytest.raises(ParseError):
        OffsetNormalizer.normalize(raw)


def test_date_text_normalizer():
    """Line breaks collapse to a single space."""
    assert DateTextNormalizer.normalize("Fri\n23 Feb") == "Fri 23 Feb"
    assert DateTextNormalizer.normalize("Fri\r\n23 Feb") == "Fri 23 Feb"
    assert DateTextNormalizer.normalize("23 Feb 2024") == "23 Feb 2024"


def test_date_text_normalizer_one_space_per_break():
    """Surrounding text is left as is; each break becomes one space."""
    assert DateTextNormalizer.normalize("Fri\n\n23 Feb") == "Fri  23 Feb"
    assert DateTextNormalizer.normalize("Fri \n 23 Feb") == "Fri   23 Feb"


@pytest.mark.parametrize("text", ["Fri\n23 Feb", "Sat\n\n24 Feb", "24 Feb", "", "\n"])
def test_date_text_normalizer_idempotent(text):
    once = DateTextNormalizer.normalize(text)
    assert DateTextNormalizer.normalize(once) == once


def test_slugify_basic():
    assert NameNormalizer.slugify("Grand Prix of Qatar") == "grand-prix-of-qatar"
    assert NameNormalizer.slugify("  Grand   Prix  ") == "grand-prix"


def test_slugify_strips_non_alphanumeric():
    """Accents are transliterated, punctuation dropped."""
    assert NameNormalizer.slugify("Gran Premio d'Italia") == "gran-premio-ditalia"
    assert NameNormalizer.slugify("Grande Prémio de Portugal") == "grande-premio-de-portugal"
    assert NameNormalizer.slugify("Motul Grand Prix of Japan - Motegi") == "motul-grand-prix-of-japan-motegi"


def test_capitalise_first_character_only():
    assert NameNormalizer.capitalise("QATAR") == "Qatar"
    assert NameNormalizer.capitalise("UNITED STATES") == "United states"
    assert NameNormalizer.capitalise("") == ""
