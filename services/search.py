"""
Search Service

Fraction-aware fuzzy recipe search and ingredient suggestions. Queries are
normalized with normalize_fractions first, so "1/2 cup" finds recipes whose
ingredients read "½ cup" or "0.5 cup".
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from rapidfuzz import fuzz, process, utils

from constants import (
    SEARCH_FIELD_WEIGHTS,
    DEFAULT_SEARCH_THRESHOLD,
    MIN_MATCH_CHARS,
    DEFAULT_SUGGESTION_LIMIT,
)
from .fractions import normalize_fractions
from .records import RecipeRecord

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    recipe: RecipeRecord
    score: Optional[float] = None
    matches: List[str] = field(default_factory=list)


@dataclass
class IngredientSuggestion:
    ingredient: str
    count: int
    recipes: List[RecipeRecord] = field(default_factory=list)


def _main_ingredient(line):
    """'Butter, softened (room temp)' -> 'Butter, softened' -> 'Butter'."""
    return line.split(',')[0].split('(')[0].strip()


def _field_score(query, values):
    """Best partial match score of query against one field (string or list of strings)."""
    if not values:
        return 0.0
    if isinstance(values, str):
        return fuzz.partial_ratio(query, values, processor=utils.default_process)
    best = process.extractOne(query, values, scorer=fuzz.partial_ratio,
                              processor=utils.default_process)
    return best[1] if best else 0.0


def _filter_recipes(recipes, category=None, difficulty=None, tags=None):
    filtered = list(recipes)
    if category:
        filtered = [r for r in filtered if (r.category or '').lower() == category.lower()]
    if difficulty:
        filtered = [r for r in filtered if r.difficulty == difficulty]
    if tags:
        filtered = [r for r in filtered if any(tag in (r.tags or []) for tag in tags)]
    return filtered


def search_recipes(recipes, query, category=None, difficulty=None, tags=None, threshold=None):
    """
    Search recipes by title, description, ingredients and tags.

    Category, difficulty and tags are hard filters applied first. Without
    a query every filtered recipe is returned unscored, in input order.
    Otherwise a recipe matches when any field scores at least threshold;
    matches are ranked by the weighted sum of their field scores.

    Args:
        recipes: Iterable of RecipeRecord
        query: Free-text search term
        category: Only recipes in this category (case-insensitive)
        difficulty: Only recipes with this difficulty
        tags: Only recipes carrying any of these tags
        threshold: Minimum field score (0-100), defaults to DEFAULT_SEARCH_THRESHOLD

    Returns:
        List of SearchResult, best match first
    """
    filtered = _filter_recipes(recipes, category, difficulty, tags)

    if not query or not query.strip():
        return [SearchResult(recipe=r) for r in filtered]

    normalized_query = normalize_fractions(query.strip())
    if len(normalized_query) < MIN_MATCH_CHARS:
        return []

    if threshold is None:
        threshold = DEFAULT_SEARCH_THRESHOLD

    results = []
    for recipe in filtered:
        field_scores = {
            'title': _field_score(normalized_query, recipe.title),
            'description': _field_score(normalized_query, recipe.description),
            'ingredients': _field_score(
                normalized_query, [normalize_fractions(i) for i in recipe.ingredients]),
            'tags': _field_score(normalized_query, recipe.tags),
        }
        matches = [name for name, score in field_scores.items() if score >= threshold]
        if not matches:
            continue
        score = sum(SEARCH_FIELD_WEIGHTS[name] * s for name, s in field_scores.items())
        results.append(SearchResult(recipe=recipe, score=round(score, 2), matches=matches))

    results.sort(key=lambda r: r.score, reverse=True)
    logger.debug("Search %r (normalized %r): %d of %d recipes matched",
                 query, normalized_query, len(results), len(filtered))
    return results


def get_ingredient_suggestions(recipes, search_term, limit=DEFAULT_SUGGESTION_LIMIT):
    """
    Suggest ingredients containing the search term, most common first.

    Each ingredient line is compared both as written and with fractions
    normalized, and grouped by its main name (text before any comma or
    parenthesis).
    """
    if not search_term:
        return []

    search_lower = search_term.lower()
    normalized_term = normalize_fractions(search_term).lower()
    suggestions = {}

    for recipe in recipes:
        for ingredient in recipe.ingredients:
            ingredient_lower = ingredient.lower()
            normalized_ingredient = normalize_fractions(ingredient).lower()
            if search_lower not in ingredient_lower and normalized_term not in normalized_ingredient:
                continue

            key = _main_ingredient(ingredient).lower()
            entry = suggestions.setdefault(key, IngredientSuggestion(ingredient=key, count=0))
            entry.count += 1
            if all(r is not recipe for r in entry.recipes):
                entry.recipes.append(recipe)

    ranked = sorted(suggestions.values(), key=lambda s: s.count, reverse=True)
    return ranked[:limit]
