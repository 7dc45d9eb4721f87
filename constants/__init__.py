"""
Constants Package

Lookup tables and limits shared by the services and the app.
"""

from .fractions import (
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

from .scaling import (
    DEFAULT_SERVINGS,
    BASE_SERVING_OPTIONS,
    SERVING_MULTIPLIERS,
    MAX_SERVING_OPTION,
    TIME_SCALE_UP_WEIGHT,
    TIME_SCALE_DOWN_FLOOR,
    TIME_SCALE_DOWN_WEIGHT,
    COOKING_TIME_PATTERN,
    ADJUST_TO_TASTE_SUFFIX,
    MIN_COMFORTABLE_FACTOR,
    MAX_COMFORTABLE_FACTOR,
    WARNING_NOT_POSITIVE,
    WARNING_NOT_FINITE,
    WARNING_SMALL_PORTIONS,
    WARNING_LARGE_BATCHES,
)

from .validation import (
    VALID_DIFFICULTIES,
    MAX_LENGTHS,
    MIN_RECOMMENDED_INGREDIENTS,
    MIN_RECOMMENDED_INSTRUCTIONS,
    MAX_SERVINGS,
)

from .search import (
    SEARCH_FIELD_WEIGHTS,
    DEFAULT_SEARCH_THRESHOLD,
    MIN_MATCH_CHARS,
    DEFAULT_SUGGESTION_LIMIT,
)
