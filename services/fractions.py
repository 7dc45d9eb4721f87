"""
Fraction Service

Recognizes fraction notation in free text (unicode glyphs, ASCII fractions,
mixed numbers), rewrites it to decimals, and renders decimals back into
readable fractions.
"""

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal

from constants import (
    EPSILON,
    UNICODE_FRACTIONS,
    FRACTION_STRINGS,
    MIXED_UNICODE_PATTERN,
    MIXED_NUMBER_PATTERN,
    MIXED_NUMBER_EXACT,
    SIMPLE_FRACTION_EXACT,
    FRACTION_STRING_PATTERNS,
    TRAILING_DIGITS,
    TRAILING_DIGITS_AND_SPACE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedFraction:
    """A fraction found in text and its decimal value."""
    value: float
    original: str
    normalized: str


# Python pads exponents ("1e-07"); JavaScript does not ("1e-7")
_EXPONENT_PADDING = re.compile(r'e([+-])0+(?=[0-9])')


def format_decimal(value):
    """
    Render a number the way it appears in normalized text ("3", "0.5", "1.333").

    Follows JavaScript number formatting: integral values carry no ".0",
    fixed notation is used from 1e-6 up to 1e21 and exponent notation
    outside that range, non-finite values render as "Infinity" or "NaN".
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'

    magnitude = abs(value)
    if magnitude >= 1e21 or 0 < magnitude < 1e-6:
        return _EXPONENT_PADDING.sub(r'e\1', repr(float(value)))
    if value == int(value):
        return str(int(value))
    return format(Decimal(repr(float(value))), 'f')


def round_half_up(value):
    """Round halves up (2.5 -> 3, -2.5 -> -2). Non-finite values pass through."""
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def _parsed(value, original):
    return ParsedFraction(value=value, original=original, normalized=format_decimal(value))


def parse_fraction(fraction_str):
    """
    Parse a single fraction token into a ParsedFraction.

    Accepts a unicode glyph ("½"), a common fraction string ("1/2"),
    a mixed number whose fraction is a common one ("1 1/2"), or any
    plain "n/d" ratio ("3/7"). Returns None for anything else,
    including a zero denominator.
    """
    if not fraction_str:
        return None
    trimmed = fraction_str.strip()

    if trimmed in UNICODE_FRACTIONS:
        return _parsed(UNICODE_FRACTIONS[trimmed], trimmed)

    if trimmed in FRACTION_STRINGS:
        return _parsed(FRACTION_STRINGS[trimmed], trimmed)

    mixed_match = MIXED_NUMBER_EXACT.match(trimmed)
    if mixed_match:
        whole, fraction = mixed_match.groups()
        fraction_value = FRACTION_STRINGS.get(fraction)
        if fraction_value is not None:
            return _parsed(int(whole) + fraction_value, trimmed)

    frac_match = SIMPLE_FRACTION_EXACT.match(trimmed)
    if frac_match:
        num = int(frac_match.group(1))
        den = int(frac_match.group(2))
        if den != 0:
            return _parsed(num / den, trimmed)

    return None


def _replace_mixed_unicode(match):
    whole, glyph = match.groups()
    fraction_value = UNICODE_FRACTIONS.get(glyph)
    if fraction_value is None:
        return match.group(0)
    return format_decimal(int(whole) + fraction_value)


def _replace_mixed_number(match):
    whole, fraction = match.groups()
    fraction_value = FRACTION_STRINGS.get(fraction)
    if fraction_value is None:
        return match.group(0)
    return format_decimal(int(whole) + fraction_value)


def normalize_fractions(text):
    """
    Replace every fraction notation in text with its decimal equivalent.

    Passes run in a fixed order: mixed unicode ("1½"), mixed ASCII
    ("1 1/2"), standalone glyphs, then standalone ASCII fractions.
    Unrecognized notation is left as it was.
    """
    if not text:
        return text

    normalized = MIXED_UNICODE_PATTERN.sub(_replace_mixed_unicode, text)
    normalized = MIXED_NUMBER_PATTERN.sub(_replace_mixed_number, normalized)

    for glyph, value in UNICODE_FRACTIONS.items():
        if glyph in normalized:
            normalized = normalized.replace(glyph, format_decimal(value))

    for fraction, value, pattern in FRACTION_STRING_PATTERNS:
        normalized = pattern.sub(format_decimal(value), normalized)

    if normalized != text:
        logger.debug("Normalized fractions: %r -> %r", text, normalized)
    return normalized


def extract_fractions(text):
    """
    Find all fractions in text without rewriting it.

    Results come back in recognition order: mixed unicode numbers,
    mixed ASCII numbers, standalone glyphs, standalone ASCII fractions.
    A standalone glyph or fraction right after a number is treated as
    part of a mixed number and skipped. Entries are unique by their
    matched text, so a fraction written twice is reported once.
    """
    if not text:
        return []

    fractions = []

    for match in MIXED_UNICODE_PATTERN.finditer(text):
        whole, glyph = match.groups()
        fractions.append(_parsed(int(whole) + UNICODE_FRACTIONS[glyph], match.group(0)))

    for match in MIXED_NUMBER_PATTERN.finditer(text):
        whole, fraction = match.groups()
        fraction_value = FRACTION_STRINGS.get(fraction)
        if fraction_value is not None:
            fractions.append(_parsed(int(whole) + fraction_value, match.group(0)))

    for glyph, value in UNICODE_FRACTIONS.items():
        start = text.find(glyph)
        while start != -1:
            if not TRAILING_DIGITS.search(text[:start]):
                fractions.append(_parsed(value, glyph))
            start = text.find(glyph, start + 1)

    for fraction, value, pattern in FRACTION_STRING_PATTERNS:
        for match in pattern.finditer(text):
            if TRAILING_DIGITS_AND_SPACE.search(text[:match.start()]):
                continue
            fractions.append(_parsed(value, fraction))

    seen = set()
    unique = []
    for fraction in fractions:
        if fraction.original in seen:
            continue
        seen.add(fraction.original)
        unique.append(fraction)
    return unique


def contains_fractions(text):
    """Check whether text holds any recognizable fraction."""
    if not text:
        return False

    if any(glyph in text for glyph in UNICODE_FRACTIONS):
        return True

    if any(pattern.search(text) for _, _, pattern in FRACTION_STRING_PATTERNS):
        return True

    return MIXED_NUMBER_PATTERN.search(text) is not None


def decimal_to_readable_fraction(value):
    """Convert a decimal to the most readable fraction, mixed number or short decimal."""
    if not math.isfinite(value):
        return format_decimal(value)

    nearest = round_half_up(value)
    if abs(value - nearest) < EPSILON:
        return format_decimal(nearest)

    for fraction, fraction_value in FRACTION_STRINGS.items():
        if abs(value - fraction_value) < EPSILON:
            return fraction

    for glyph, glyph_value in UNICODE_FRACTIONS.items():
        if abs(value - glyph_value) < EPSILON:
            return glyph

    # Check for mixed numbers
    whole = math.floor(value)
    decimal = value - whole
    for fraction, fraction_value in FRACTION_STRINGS.items():
        if abs(decimal - fraction_value) < EPSILON:
            return f"{whole} {fraction}"

    # Fall back to decimal
    return f"{value:.2f}".rstrip('0').rstrip('.')
