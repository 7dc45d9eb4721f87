"""
Scaling Service

Functions for scaling recipes to a new number of servings, including the
cooking-time adjustment and serving size options shown next to a recipe.
"""

import logging
import math
from dataclasses import dataclass, fields
from typing import Optional

from constants import (
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
from .fractions import decimal_to_readable_fraction, format_decimal, round_half_up
from .parsing import parse_ingredient
from .records import RecipeRecord

logger = logging.getLogger(__name__)


@dataclass
class ScaledRecipe(RecipeRecord):
    """Recipe with scaled ingredients and adjusted times."""
    original_servings: int = DEFAULT_SERVINGS
    scaled_servings: int = DEFAULT_SERVINGS
    scaling_factor: float = 1.0


@dataclass(frozen=True)
class ScalingValidation:
    is_valid: bool
    warning: Optional[str] = None


def scale_ingredient(ingredient, factor):
    """Scale the leading quantity of an ingredient line by factor."""
    parsed = parse_ingredient(ingredient)

    if parsed.quantity is None:
        return f"{parsed.description}{ADJUST_TO_TASTE_SUFFIX}"

    scaled_qty = decimal_to_readable_fraction(parsed.quantity * factor)

    if parsed.unit:
        return f"{scaled_qty} {parsed.unit} {parsed.description}".strip()
    return f"{scaled_qty} {parsed.description}".strip()


def scale_recipe(recipe, new_servings):
    """
    Scale a recipe to a new number of servings.

    Recipes without servings are treated as serving DEFAULT_SERVINGS.
    Every ingredient line is scaled and the prep and cook times are
    adjusted with adjust_cooking_time.

    Args:
        recipe: RecipeRecord to scale
        new_servings: Target number of servings

    Returns:
        ScaledRecipe
    """
    original_servings = recipe.servings or DEFAULT_SERVINGS
    scaling_factor = new_servings / original_servings

    base = {f.name: getattr(recipe, f.name) for f in fields(RecipeRecord)}
    base.update(
        ingredients=[scale_ingredient(line, scaling_factor) for line in recipe.ingredients],
        servings=new_servings,
        prep_time=adjust_cooking_time(recipe.prep_time, scaling_factor),
        cook_time=adjust_cooking_time(recipe.cook_time, scaling_factor),
    )

    logger.debug("Scaled %r from %s to %s servings (factor %.3f)",
                 recipe.title, original_servings, new_servings, scaling_factor)

    return ScaledRecipe(
        **base,
        original_servings=original_servings,
        scaled_servings=new_servings,
        scaling_factor=scaling_factor,
    )


def adjust_cooking_time(original_time, scaling_factor):
    """
    Adjust a cooking time string like '30 minutes' or '1-2 hours' for a scaled recipe.

    Time does not grow or shrink in proportion to quantity: scaling up adds
    30% of the increase, scaling down never goes below 70% of the original.
    Strings without a recognizable time come back unchanged.
    """
    if not original_time:
        return None

    match = COOKING_TIME_PATTERN.search(original_time)
    if not match:
        return original_time

    min_time, max_time, unit = match.groups()
    unit = unit.lower()
    is_hours = 'hour' in unit or 'hr' in unit

    adjusted_min = float(min_time)
    adjusted_max = float(max_time) if max_time else None

    multiplier = None
    if scaling_factor > 1:
        multiplier = 1 + (scaling_factor - 1) * TIME_SCALE_UP_WEIGHT
    elif scaling_factor < 1:
        multiplier = TIME_SCALE_DOWN_FLOOR + scaling_factor * TIME_SCALE_DOWN_WEIGHT

    if multiplier is not None:
        adjusted_min = round_half_up(adjusted_min * multiplier)
        if adjusted_max:
            adjusted_max = round_half_up(adjusted_max * multiplier)

    if is_hours:
        unit_name = 'hour' if adjusted_min == 1 else 'hours'
    else:
        unit_name = 'minutes'

    if adjusted_max and adjusted_max != adjusted_min:
        return f"{format_decimal(adjusted_min)}-{format_decimal(adjusted_max)} {unit_name}"
    return f"{format_decimal(adjusted_min)} {unit_name}"


def get_serving_size_options(original_servings):
    """Get serving sizes to offer for a recipe, sorted ascending."""
    options = set(BASE_SERVING_OPTIONS)
    options.add(original_servings)

    for multiplier in SERVING_MULTIPLIERS:
        servings = round_half_up(original_servings * multiplier)
        if 0 < servings <= MAX_SERVING_OPTION:
            options.add(servings)

    return sorted(options)


def validate_scaling_factor(factor):
    """Check a scaling factor. Invalid factors must not be applied; warnings are advisory."""
    if factor <= 0:
        return ScalingValidation(is_valid=False, warning=WARNING_NOT_POSITIVE)

    if not math.isfinite(factor):
        return ScalingValidation(is_valid=False, warning=WARNING_NOT_FINITE)

    if factor < MIN_COMFORTABLE_FACTOR:
        return ScalingValidation(is_valid=True, warning=WARNING_SMALL_PORTIONS)

    if factor > MAX_COMFORTABLE_FACTOR:
        return ScalingValidation(is_valid=True, warning=WARNING_LARGE_BATCHES)

    return ScalingValidation(is_valid=True)
