"""
Fraction Constants

Lookup tables for unicode fraction glyphs and common ASCII fraction strings,
plus the regex patterns built from them. Repeating fractions are stored
rounded to three decimal places and are never recomputed at call time.
"""

import re
from types import MappingProxyType

# Shared tolerance for every float comparison against the tables below
EPSILON = 0.001

# Unicode fraction characters mapping (lookup order matters)
UNICODE_FRACTIONS = MappingProxyType({
    '½': 0.5,
    '⅓': 0.333,
    '⅔': 0.667,
    '¼': 0.25,
    '¾': 0.75,
    '⅕': 0.2,
    '⅖': 0.4,
    '⅗': 0.6,
    '⅘': 0.8,
    '⅙': 0.167,
    '⅚': 0.833,
    '⅐': 0.143,
    '⅛': 0.125,
    '⅜': 0.375,
    '⅝': 0.625,
    '⅞': 0.875,
    '⅑': 0.111,
    '⅒': 0.1,
})

# Common fraction strings (lookup order matters)
FRACTION_STRINGS = MappingProxyType({
    '1/2': 0.5,
    '1/3': 0.333,
    '2/3': 0.667,
    '1/4': 0.25,
    '3/4': 0.75,
    '1/5': 0.2,
    '2/5': 0.4,
    '3/5': 0.6,
    '4/5': 0.8,
    '1/6': 0.167,
    '5/6': 0.833,
    '1/8': 0.125,
    '3/8': 0.375,
    '5/8': 0.625,
    '7/8': 0.875,
    '1/10': 0.1,
    '3/10': 0.3,
    '7/10': 0.7,
    '9/10': 0.9,
})

_GLYPH_CLASS = '[' + ''.join(UNICODE_FRACTIONS) + ']'

# Digits and word boundaries are ASCII-only; \s also covers unicode
# whitespace such as the no-break space in "1 1/2"
_WORD_CHAR = 'A-Za-z0-9_'

# "1½", "2¾" - digits immediately followed by a glyph
MIXED_UNICODE_PATTERN = re.compile(r'([0-9]+)(' + _GLYPH_CLASS + ')')

# "1 1/2", "2 3/4"
MIXED_NUMBER_PATTERN = re.compile(r'([0-9]+)\s+([0-9]+/[0-9]+)')

# Whole-string forms accepted by parse_fraction
MIXED_NUMBER_EXACT = re.compile(r'^([0-9]+)\s+([0-9]+/[0-9]+)$')
SIMPLE_FRACTION_EXACT = re.compile(r'^([0-9]+)/([0-9]+)$')

# One word-bounded pattern per ASCII fraction, in table order
FRACTION_STRING_PATTERNS = tuple(
    (fraction, value,
     re.compile('(?<![' + _WORD_CHAR + '])' + re.escape(fraction) + '(?![' + _WORD_CHAR + '])'))
    for fraction, value in FRACTION_STRINGS.items()
)

# Lookbehind checks used to skip glyphs/fractions already part of a mixed number
TRAILING_DIGITS = re.compile(r'[0-9]+\Z')
TRAILING_DIGITS_AND_SPACE = re.compile(r'[0-9]+\s*\Z')
