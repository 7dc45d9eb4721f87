"""
Validation Constants

Contains whitelist values and limits for validating recipe records
accepted through the API.
"""

# Valid difficulty levels
VALID_DIFFICULTIES = {'Easy', 'Medium', 'Hard'}

# Maximum field lengths for security
MAX_LENGTHS = {
    'title': 200,
    'slug': 200,
    'description': 2000,
    'category': 50,
    'tag': 50,
    'time': 50,
    'instruction': 5000,
    'ingredient_text': 500,
}

# Recipes with fewer entries than this get a warning
MIN_RECOMMENDED_INGREDIENTS = 2
MIN_RECOMMENDED_INSTRUCTIONS = 2

# Upper bound accepted for servings on create and scale
MAX_SERVINGS = 100
