"""
Parsing Service

Splits an ingredient line into quantity, unit and description.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .fractions import normalize_fractions

# Order matters! Decimals first, then any number, then whole numbers
QUANTITY_PATTERNS = (
    re.compile(r'^([0-9]+\.[0-9]+)\s*(\w+)?\s*(.*)'),
    re.compile(r'^([0-9]*\.?[0-9]+)\s*(\w+)?\s*(.*)'),
    re.compile(r'^([0-9]+)\s*(\w+)?\s*(.*)'),
)


@dataclass(frozen=True)
class ParsedIngredient:
    """Ingredient line split into its parts. quantity is None when the line has no amount."""
    quantity: Optional[float]
    unit: Optional[str]
    description: str
    original_text: str


def parse_ingredient(text):
    """
    Parse ingredient text like '1 1/2 cups flour' into its parts.

    Fractions are normalized to decimals before matching, so
    '1 1/2 cups flour' gives quantity 1.5, unit 'cups' and
    description 'flour'. Lines without a leading number
    ('Salt to taste') come back with no quantity or unit.
    """
    original = (text or '').strip()
    normalized = normalize_fractions(original)

    for pattern in QUANTITY_PATTERNS:
        match = pattern.match(normalized)
        if match:
            quantity_str, unit, description = match.groups()
            return ParsedIngredient(
                quantity=float(quantity_str),
                unit=unit or None,
                description=description.strip(),
                original_text=original,
            )

    return ParsedIngredient(
        quantity=None,
        unit=None,
        description=original,
        original_text=original,
    )
