"""
Scaling Constants

Serving-size defaults, cooking-time adjustment weights and the
warning messages returned by scaling factor validation.
"""

import re

# Servings assumed when a recipe does not specify any
DEFAULT_SERVINGS = 4

# Serving sizes always offered to the user
BASE_SERVING_OPTIONS = (1, 2, 4, 6, 8, 12, 16, 24)

# Multiples of the original servings added to the options
SERVING_MULTIPLIERS = (0.5, 1.5, 2, 3)
MAX_SERVING_OPTION = 50

# Only part of a quantity change carries over into cooking time
TIME_SCALE_UP_WEIGHT = 0.3
TIME_SCALE_DOWN_FLOOR = 0.7
TIME_SCALE_DOWN_WEIGHT = 0.3

# "30 minutes", "1-2 hours", "45 mins", "2 hrs"
COOKING_TIME_PATTERN = re.compile(
    r'([0-9]+)(?:-([0-9]+))?\s*(minutes?|mins?|hours?|hrs?)',
    re.IGNORECASE,
)

# Appended to ingredients that have no quantity to scale
ADJUST_TO_TASTE_SUFFIX = ' (adjust to taste)'

# Scaling factor validation
MIN_COMFORTABLE_FACTOR = 0.25
MAX_COMFORTABLE_FACTOR = 10
WARNING_NOT_POSITIVE = 'Scaling factor must be positive'
WARNING_NOT_FINITE = 'Scaling factor must be a finite number'
WARNING_SMALL_PORTIONS = 'Very small portions may be difficult to measure accurately'
WARNING_LARGE_BATCHES = 'Large batches may require cooking time and equipment adjustments'
