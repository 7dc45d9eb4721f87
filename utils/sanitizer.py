"""
Input Sanitization Module

Cleans text received through the API before it is stored or processed:
control characters go, whitespace is trimmed and length is capped. Text is
stored as written and served as JSON, so HTML escaping is left to whatever
renders it.
"""

import re

from constants import MAX_LENGTHS

CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize free text such as a description, tag or instruction step.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Control characters become spaces so words stay apart
    text = CONTROL_CHARS.sub(' ', text).strip()

    # Truncate if too long
    if len(text) > max_length:
        text = text[:max_length - 3] + '...'

    return text


def sanitize_recipe_title(title, max_length=MAX_LENGTHS['title']):
    """
    Sanitize a recipe title for storage and display.

    Args:
        title: The recipe title to sanitize
        max_length: Maximum allowed length

    Returns:
        Sanitized recipe title
    """
    if not title:
        return 'Untitled Recipe'

    if not isinstance(title, str):
        title = str(title)

    # Remove control characters and null bytes
    title = CONTROL_CHARS.sub('', title.strip())

    # Collapse multiple spaces
    title = re.sub(r'\s+', ' ', title)

    # Truncate if too long
    if len(title) > max_length:
        title = title[:max_length-3] + '...'

    return title or 'Untitled Recipe'


def slugify(text, max_length=MAX_LENGTHS['slug']):
    """Build a URL slug: 'Mom's Pancakes!' -> 'mom-s-pancakes'."""
    slug = re.sub(r'[^a-z0-9]+', '-', (text or '').lower()).strip('-')
    return slug[:max_length].rstrip('-') or 'recipe'


def sanitize_ingredient_text(text, max_length=MAX_LENGTHS['ingredient_text']):
    """
    Sanitize an ingredient line for storage.

    Fraction glyphs, digits and the no-break spaces of scraped text are
    kept so the line still parses and scales the same way.

    Args:
        text: Single ingredient line
        max_length: Maximum length

    Returns:
        Sanitized ingredient text
    """
    if not text:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters
    text = CONTROL_CHARS.sub('', text.strip())

    # Truncate
    if len(text) > max_length:
        text = text[:max_length]

    return text


def clean_query(text, max_length=MAX_LENGTHS['ingredient_text']):
    """Strip control characters and excess length from transient input."""
    if not text:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = CONTROL_CHARS.sub(' ', text).strip()
    return text[:max_length]
