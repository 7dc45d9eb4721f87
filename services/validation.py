"""
Validation Service

Checks recipe records submitted through the API. Errors block saving the
recipe; warnings are advisory and returned alongside the saved record.
"""

import re
from dataclasses import dataclass, field
from typing import Any, List, Optional

from constants import (
    UNICODE_FRACTIONS,
    VALID_DIFFICULTIES,
    MAX_LENGTHS,
    MIN_RECOMMENDED_INGREDIENTS,
    MIN_RECOMMENDED_INSTRUCTIONS,
    MAX_SERVINGS,
)

# Ingredient lines should open with a quantity or a name
INGREDIENT_START = re.compile(r'^([0-9]|[a-zA-Z]|[' + ''.join(UNICODE_FRACTIONS) + '])')


@dataclass
class ValidationIssue:
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    is_valid: bool = False
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)


def _check_length(errors, name, value, limit_key):
    if isinstance(value, str) and len(value) > MAX_LENGTHS[limit_key]:
        errors.append(ValidationIssue(name, f'must be at most {MAX_LENGTHS[limit_key]} characters'))


def validate_recipe(data):
    """
    Validate a recipe dict before it is stored.

    Args:
        data: Recipe fields as received (title, ingredients, servings, ...)

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()
    if not isinstance(data, dict):
        result.errors.append(ValidationIssue('recipe', 'must be an object'))
        return result

    errors = result.errors
    warnings = result.warnings

    title = data.get('title')
    if not isinstance(title, str) or not title.strip():
        errors.append(ValidationIssue('title', 'is required'))
    else:
        _check_length(errors, 'title', title, 'title')

    for name, limit_key in (('slug', 'slug'), ('description', 'description'),
                            ('category', 'category'), ('prep_time', 'time'),
                            ('cook_time', 'time')):
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            errors.append(ValidationIssue(name, 'must be a string', value))
        else:
            _check_length(errors, name, value, limit_key)

    ingredients = data.get('ingredients')
    if not isinstance(ingredients, list) or not ingredients:
        errors.append(ValidationIssue('ingredients', 'must be a non-empty list'))
        ingredients = []
    for index, ingredient in enumerate(ingredients):
        name = f'ingredients[{index}]'
        if not isinstance(ingredient, str) or not ingredient.strip():
            errors.append(ValidationIssue(name, 'must be a non-empty string', ingredient))
            continue
        _check_length(errors, name, ingredient, 'ingredient_text')
        if not INGREDIENT_START.match(ingredient.strip()):
            warnings.append(ValidationIssue(name, 'Ingredient should start with quantity or name', ingredient))

    instructions = data.get('instructions') or []
    if not isinstance(instructions, list) or not all(isinstance(i, str) for i in instructions):
        errors.append(ValidationIssue('instructions', 'must be a list of strings'))
        instructions = []
    for index, instruction in enumerate(instructions):
        _check_length(errors, f'instructions[{index}]', instruction, 'instruction')

    tags = data.get('tags') or []
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        errors.append(ValidationIssue('tags', 'must be a list of strings'))
        tags = []

    servings = data.get('servings')
    if servings is not None:
        if isinstance(servings, bool) or not isinstance(servings, int) or not 1 <= servings <= MAX_SERVINGS:
            errors.append(ValidationIssue('servings', f'must be a whole number between 1 and {MAX_SERVINGS}', servings))

    difficulty = data.get('difficulty')
    if difficulty is not None and difficulty not in VALID_DIFFICULTIES:
        errors.append(ValidationIssue('difficulty', f"must be one of {', '.join(sorted(VALID_DIFFICULTIES))}", difficulty))

    # Advisory warnings
    description = data.get('description')
    if not isinstance(description, str) or not description.strip():
        warnings.append(ValidationIssue('description', 'Description is recommended for better SEO and user experience'))
    if not data.get('prep_time') and not data.get('cook_time'):
        warnings.append(ValidationIssue('timing', 'Preparation or cooking time is recommended for user planning'))
    if not servings:
        warnings.append(ValidationIssue('servings', 'Number of servings is recommended for meal planning'))
    if not difficulty:
        warnings.append(ValidationIssue('difficulty', 'Difficulty level helps users choose appropriate recipes'))
    if not tags:
        warnings.append(ValidationIssue('tags', 'Tags help with recipe discovery and filtering'))
    if ingredients and len(ingredients) < MIN_RECOMMENDED_INGREDIENTS:
        warnings.append(ValidationIssue('ingredients', 'Most recipes have at least 2 ingredients'))
    if len(instructions) < MIN_RECOMMENDED_INSTRUCTIONS:
        warnings.append(ValidationIssue('instructions', 'Most recipes have at least 2 instruction steps'))

    result.is_valid = not errors
    return result


def format_issues(issues):
    """Format validation issues one per line for display."""
    return '\n'.join(f'{issue.field}: {issue.message}' for issue in issues)
