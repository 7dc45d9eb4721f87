# Utility modules for the recipe scaling service
from .sanitizer import (
    sanitize_text, sanitize_recipe_title, sanitize_ingredient_text,
    slugify, clean_query
)
