"""
Services Package

Business logic modules for the recipe application.
"""

from .fractions import (
    ParsedFraction,
    format_decimal,
    parse_fraction,
    normalize_fractions,
    extract_fractions,
    contains_fractions,
    decimal_to_readable_fraction,
)

from .parsing import (
    ParsedIngredient,
    parse_ingredient,
)

from .records import RecipeRecord

from .scaling import (
    ScaledRecipe,
    ScalingValidation,
    scale_ingredient,
    scale_recipe,
    adjust_cooking_time,
    get_serving_size_options,
    validate_scaling_factor,
)

from .search import (
    SearchResult,
    IngredientSuggestion,
    search_recipes,
    get_ingredient_suggestions,
)

from .validation import (
    ValidationIssue,
    ValidationResult,
    validate_recipe,
    format_issues,
)

__all__ = [
    # Fractions
    'ParsedFraction',
    'format_decimal',
    'parse_fraction',
    'normalize_fractions',
    'extract_fractions',
    'contains_fractions',
    'decimal_to_readable_fraction',
    # Parsing
    'ParsedIngredient',
    'parse_ingredient',
    # Records
    'RecipeRecord',
    # Scaling
    'ScaledRecipe',
    'ScalingValidation',
    'scale_ingredient',
    'scale_recipe',
    'adjust_cooking_time',
    'get_serving_size_options',
    'validate_scaling_factor',
    # Search
    'SearchResult',
    'IngredientSuggestion',
    'search_recipes',
    'get_ingredient_suggestions',
    # Validation
    'ValidationIssue',
    'ValidationResult',
    'validate_recipe',
    'format_issues',
]
