"""
Search Constants

Field weights and cutoffs for fuzzy recipe search.
"""

# Relative importance of each field when ranking matches
SEARCH_FIELD_WEIGHTS = {
    'title': 0.4,
    'description': 0.3,
    'ingredients': 0.2,
    'tags': 0.1,
}

# Minimum rapidfuzz score (0-100) for a field to count as a match
DEFAULT_SEARCH_THRESHOLD = 60

# Queries shorter than this return no matches
MIN_MATCH_CHARS = 2

DEFAULT_SUGGESTION_LIMIT = 10
